import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .client import RegistryClient
from ..config import DEFAULT_REGISTRY_URL, DEFAULT_TIMEOUT
from ..domain.errors import RegistryHTTPError, RegistryTransportError, RegistryDecodeError

logger = logging.getLogger(__name__)

class CdnjsRegistry(RegistryClient):
    def __init__(
        self,
        base_url: str = DEFAULT_REGISTRY_URL,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def library_url(self, package_name: str) -> str:
        return f"{self.base_url}/libraries/{quote(package_name, safe='')}"

    def get_library(self, package_name: str) -> Any:
        """
        fetch the library document for a package.

        args:
            package_name: cdnjs library name

        returns:
            the decoded JSON body, or None for an empty body
        """
        url = self.library_url(package_name)
        logger.debug(f"fetching {url}")

        try:
            response = self.client.get(url, follow_redirects=True)
        except httpx.HTTPError as e:
            raise RegistryTransportError(package_name, f"Request to {url} failed: {e}") from e

        if response.is_error:
            raise RegistryHTTPError(package_name, response.status_code, url)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise RegistryDecodeError(
                package_name, f"Invalid JSON from {url}: {e}", status_code=response.status_code
            ) from e

    def close(self):
        # only close clients we created ourselves
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
