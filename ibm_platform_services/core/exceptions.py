"""Exceptions raised by platform service clients."""
from __future__ import annotations

from typing import Iterable, Optional


class PlatformServicesError(Exception):
    """Base exception for all platform service operations."""
    pass


class ConfigurationError(PlatformServicesError):
    """Service could not be configured (bad URL, no usable authenticator)."""
    pass


class MissingParametersError(PlatformServicesError, ValueError):
    """One or more required operation parameters were not supplied.

    Attributes:
        missing: Names of the missing parameters, in declaration order
    """

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required parameters: {', '.join(self.missing)}")


class TemplateError(PlatformServicesError):
    """A path placeholder had no matching parameter.

    Attributes:
        path: URL template being expanded
        placeholder: Placeholder that could not be resolved
    """

    def __init__(self, path: str, placeholder: str):
        self.path = path
        self.placeholder = placeholder
        super().__init__(f"Unresolved placeholder '{{{placeholder}}}' in path {path}")


class TransportError(PlatformServicesError):
    """The request could not be completed by the transport."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(f"{url}: {message}" if url else message)


class ApiError(TransportError):
    """HTTP error returned by a platform service.

    Attributes:
        status_code: HTTP status code
        message: Error message extracted from the response
        url: Request URL that failed
        http_response: The underlying requests.Response
    """

    def __init__(self, status_code: int, message: str, url: str, http_response=None):
        self.status_code = status_code
        self.message = message
        self.url = url
        self.http_response = http_response
        PlatformServicesError.__init__(self, f"[{status_code}] {url}: {message}")
