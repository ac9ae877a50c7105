from enum import Enum
from typing import Optional

class ErrorKind(str, Enum):
    """how a failed lookup is reported to the caller."""
    MISSING_INPUT = "missing-input"
    INVALID_RESPONSE_SHAPE = "invalid-response-shape"
    TRANSIENT_UPSTREAM = "transient-upstream"
    AUTH_ERROR = "auth-error"
    NOT_FOUND = "not-found"
    UNKNOWN_FAILURE = "unknown-failure"

class ReleasesError(Exception):
    """base class for exceptions in cdnjs-releases."""
    pass

class RegistryError(ReleasesError):
    """raised by registry clients when a library can't be fetched or decoded."""
    def __init__(self, package_name: str, message: str, status_code: Optional[int] = None):
        self.package_name = package_name
        self.status_code = status_code
        super().__init__(message)

class RegistryHTTPError(RegistryError):
    """raised when the registry answers with a non-success status."""
    def __init__(self, package_name: str, status_code: int, url: str):
        self.url = url
        super().__init__(package_name, f"Registry returned HTTP {status_code} for {url}", status_code=status_code)

class RegistryTransportError(RegistryError):
    """raised when the request never produced a response."""
    pass

class RegistryDecodeError(RegistryError):
    """raised when the response body is not valid JSON."""
    pass

class DatasourceFailure(ReleasesError):
    """raised when the registry is temporarily unhealthy (429 or 5xx).

    callers are expected to back off, retry or abort the wider run.
    """
    def __init__(self, package_name: str, status_code: Optional[int] = None):
        self.package_name = package_name
        self.status_code = status_code
        super().__init__(f"Registry failure while looking up '{package_name}' (HTTP {status_code})")

def classify_status(status_code: Optional[int]) -> ErrorKind:
    if status_code is None:
        return ErrorKind.UNKNOWN_FAILURE
    if status_code == 429 or 500 <= status_code < 600:
        return ErrorKind.TRANSIENT_UPSTREAM
    if status_code == 401:
        return ErrorKind.AUTH_ERROR
    if status_code == 404:
        return ErrorKind.NOT_FOUND
    return ErrorKind.UNKNOWN_FAILURE

def classify_error(error: Exception) -> ErrorKind:
    """map a fetch failure onto an ErrorKind using its explicit status code."""
    if isinstance(error, RegistryError):
        return classify_status(error.status_code)
    return ErrorKind.UNKNOWN_FAILURE
