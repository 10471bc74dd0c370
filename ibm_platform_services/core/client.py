"""HTTP transport for platform service clients.

Executes RequestDescriptors built by the façades: applies the
authenticator, sends the request with ``requests`` on a worker thread, and
maps error responses to exceptions in one place.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Optional

import requests
from ibm_cloud_sdk_core.authenticators import Authenticator
from requests.structures import CaseInsensitiveDict

from ..config.settings import ClientSettings
from .builder import RequestDescriptor
from .descriptors import MULTIPART_FORM_DATA
from .exceptions import ApiError, ConfigurationError, TransportError

logger = logging.getLogger(__name__)


@dataclass
class DetailedResponse:
    """Result of a successful service call."""

    result: Any
    status_code: int
    status_text: str = ""
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)

    def get_result(self) -> Any:
        return self.result

    def get_status_code(self) -> int:
        return self.status_code

    def get_headers(self) -> CaseInsensitiveDict:
        return self.headers


def normalize_service_url(url: Optional[str]) -> str:
    if not url:
        raise ConfigurationError("The service URL must not be empty")
    return url.rstrip("/")


class ServiceClient:
    """Transport collaborator shared by nothing but the façade that owns it.

    Usage:
        client = ServiceClient("https://iam.cloud.ibm.com", authenticator)
        future = client.send(request)
        response = future.result()
    """

    def __init__(
        self,
        service_url: str,
        authenticator: Authenticator,
        settings: Optional[ClientSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the transport.

        Args:
            service_url: Base URL every request path is appended to
            authenticator: Authenticator applied to each outgoing request
            settings: Timeouts, pool size and TLS options
            session: Optional pre-configured requests session
        """
        self.service_url = normalize_service_url(service_url)
        self.authenticator = authenticator
        self.settings = settings or ClientSettings()
        self.session = session or requests.Session()
        self._executor = ThreadPoolExecutor(
            max_workers=self.settings.max_workers,
            thread_name_prefix="platform-services",
        )

    def set_service_url(self, service_url: str) -> None:
        self.service_url = normalize_service_url(service_url)

    def send(self, request: RequestDescriptor) -> "Future[DetailedResponse]":
        """Submit a request; the returned future resolves to a DetailedResponse.

        Failures (network errors, error status codes, undecodable bodies)
        are set on the future as TransportError / ApiError.
        """
        return self._executor.submit(self.perform, request)

    def perform(self, request: RequestDescriptor) -> DetailedResponse:
        """Execute a request synchronously in the calling thread."""
        url = f"{self.service_url}{request.url}"
        headers = CaseInsensitiveDict(request.headers)
        self.authenticator.authenticate({"method": request.method, "url": url, "headers": headers})

        files = None
        if request.files is not None:
            # requests generates the multipart boundary only when Content-Type is unset.
            if headers.get("Content-Type", "").strip().lower() == MULTIPART_FORM_DATA:
                del headers["Content-Type"]
            files = {
                name: (part.filename, part.data, part.content_type)
                for name, part in request.files.items()
            }

        logger.debug("%s %s %s", request.operation_id, request.method, url)
        try:
            resp = self.session.request(
                request.method,
                url,
                params=request.params or None,
                json=request.json,
                files=files,
                headers=dict(headers),
                timeout=self.settings.timeout,
                verify=self.settings.verify,
            )
        except requests.RequestException as e:
            raise TransportError(str(e), url) from e

        self._handle_error(resp)
        return DetailedResponse(
            result=self._decode(resp),
            status_code=resp.status_code,
            status_text=resp.reason or "",
            headers=CaseInsensitiveDict(resp.headers),
        )

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        self.session.close()

    def _decode(self, resp: requests.Response) -> Any:
        if not resp.content:
            return None
        content_type = resp.headers.get("Content-Type", "").lower()
        if "json" in content_type:
            try:
                return resp.json()
            except ValueError as e:
                raise TransportError(f"Could not decode JSON response: {e}", resp.url) from e
        if content_type.startswith("text/"):
            return resp.text
        return resp.content

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Raises:
            ApiError: If response status indicates error
        """
        if resp.status_code >= 400:
            logger.debug("%s returned %s", resp.url, resp.status_code)
            raise ApiError(resp.status_code, _error_message(resp), resp.url, http_response=resp)


def _error_message(resp: requests.Response) -> str:
    try:
        payload = resp.json()
    except ValueError:
        return resp.text or resp.reason or "Unknown error"
    if isinstance(payload, dict):
        errors = payload.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict) and errors[0].get("message"):
            return errors[0]["message"]
        for key in ("error", "message", "errorMessage"):
            if isinstance(payload.get(key), str):
                return payload[key]
    return resp.text or resp.reason or "Unknown error"
