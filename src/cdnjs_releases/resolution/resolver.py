import logging
from typing import Optional

from pydantic import ValidationError

from ..config import get_registry_url, get_timeout
from ..domain.errors import DatasourceFailure, ErrorKind, classify_error
from ..domain.models import LookupRequest, RegistryResponse, Release, ReleaseResult
from ..registry.cdnjs import CdnjsRegistry
from ..registry.client import RegistryClient

class ReleaseResolver:
    """looks up which versions of a cdnjs library ship a given file."""

    def __init__(self, registry: RegistryClient, logger: Optional[logging.Logger] = None):
        self.registry = registry
        self.logger = logger or logging.getLogger(__name__)

    def get_pkg_releases(self, lookup_name: Optional[str] = None) -> Optional[ReleaseResult]:
        """
        resolve the releases of a library that contain the requested asset.

        args:
            lookup_name: `<package>` or `<package>/<asset path>`

        returns:
            a ReleaseResult, or None when the lookup yields nothing usable

        raises:
            DatasourceFailure: the registry answered 429 or 5xx
        """
        if not lookup_name:
            self.logger.warning(
                "CDNJS lookup failure: empty lookupName",
                extra={"error_kind": ErrorKind.MISSING_INPUT.value},
            )
            return None

        request = LookupRequest.parse(lookup_name)
        package_name = request.package_name

        try:
            body = self.registry.get_library(package_name)
        except Exception as e:
            # RegistryError carries a status code, anything else is an unknown failure
            return self._handle_error(lookup_name, package_name, e)

        try:
            response = RegistryResponse.model_validate(body) if isinstance(body, dict) else None
        except ValidationError as e:
            self.logger.warning(
                f"Invalid CDNJS response for {package_name}: {e}",
                extra={"dep_name": package_name, "error_kind": ErrorKind.INVALID_RESPONSE_SHAPE.value},
            )
            return None

        if response is None or response.assets is None:
            self.logger.warning(
                f"Invalid CDNJS response for {package_name}",
                extra={"dep_name": package_name, "error_kind": ErrorKind.INVALID_RESPONSE_SHAPE.value},
            )
            return None

        # exact match on the file name, order follows the registry
        releases = [
            Release(version=asset.version)
            for asset in response.assets
            if request.asset_path in asset.files
        ]

        result = ReleaseResult(releases=releases)
        if response.homepage:
            result.homepage = response.homepage
        if response.repository and response.repository.url:
            result.source_url = response.repository.url
        return result

    resolve = get_pkg_releases

    def _handle_error(self, lookup_name: str, package_name: str, error: Exception) -> None:
        kind = classify_error(error)
        status_code = getattr(error, "status_code", None)
        context = {"dep_name": package_name, "error_kind": kind.value, "status_code": status_code}

        if kind is ErrorKind.TRANSIENT_UPSTREAM:
            self.logger.warning(f"Cdnjs registry failure for {lookup_name}: {error}", extra=context)
            raise DatasourceFailure(package_name, status_code) from error

        if kind is ErrorKind.AUTH_ERROR:
            self.logger.debug(f"Authorization error for {package_name}: {error}", extra=context)
        elif kind is ErrorKind.NOT_FOUND:
            self.logger.debug(f"Package lookup error for {package_name}: {error}", extra=context)
        else:
            self.logger.warning(f"Cdnjs lookup failure: Unknown error for {package_name}: {error}", extra=context)
        return None

def get_pkg_releases(
    lookup_name: Optional[str] = None,
    registry: Optional[RegistryClient] = None,
    logger: Optional[logging.Logger] = None,
) -> Optional[ReleaseResult]:
    """one-off lookup; builds a configured CdnjsRegistry when none is given."""
    if registry is not None:
        return ReleaseResolver(registry, logger).get_pkg_releases(lookup_name)

    with CdnjsRegistry(get_registry_url(), timeout=get_timeout()) as cdnjs:
        return ReleaseResolver(cdnjs, logger).get_pkg_releases(lookup_name)
