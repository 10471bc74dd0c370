"""Service façade plumbing: construction, configuration and operation dispatch.

A façade owns a ``ServiceClient`` (transport) and a ``RequestBuilder``; its
operation methods only name an OperationDescriptor and pass the caller's
parameters to ``call_operation``.
"""
from __future__ import annotations

import copy
from concurrent.futures import Future
from typing import Any, Dict, Iterable, Mapping, Optional

from ibm_cloud_sdk_core.authenticators import Authenticator

from ..config.settings import ClientSettings, load_settings, resolve_authenticator
from .builder import RequestBuilder
from .client import DetailedResponse, ServiceClient
from .descriptors import OperationDescriptor
from .exceptions import ConfigurationError, MissingParametersError, TemplateError
from .validators import validate_required


def _private_value(value: Any) -> Any:
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error):
        # Open files, sockets and the like cannot be cloned.
        return value


def copy_params(
    params: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    by_reference: Iterable[str] = (),
) -> Dict[str, Any]:
    """Return a private copy of the caller's parameters.

    Keyword overrides win over the positional mapping. Values are
    deep-copied, nested lists and dicts and the ``headers`` mapping
    included, so the caller may mutate its objects once the call returns
    without changing a request still waiting for a worker. Names in
    ``by_reference`` (upload content such as file objects) and values that
    cannot be copied are passed through as-is.
    """
    merged = dict(params or {})
    merged.update(overrides or {})
    keep = set(by_reference)
    return {
        name: value if name in keep else _private_value(value)
        for name, value in merged.items()
    }


def failed_future(error: BaseException) -> "Future[DetailedResponse]":
    future: Future = Future()
    future.set_exception(error)
    return future


def call_operation(
    client: ServiceClient,
    builder: RequestBuilder,
    op: OperationDescriptor,
    params: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> "Future[DetailedResponse]":
    """Validate, build and send one operation.

    Validation and building run in the calling thread; a failure there
    yields an already-failed future and nothing is sent. Whatever the
    transport returns is handed back unchanged.
    """
    params = copy_params(params, overrides, by_reference=op.content_params)
    try:
        validate_required(params, op.required)
        request = builder.build(op, params)
    except (MissingParametersError, TemplateError) as e:
        return failed_future(e)
    return client.send(request)


class ServiceFacade:
    """Common construction and configuration for generated service classes.

    Subclasses set DEFAULT_SERVICE_URL, DEFAULT_SERVICE_NAME and
    SERVICE_VERSION and define one method per endpoint.
    """

    DEFAULT_SERVICE_URL: str = ""
    DEFAULT_SERVICE_NAME: str = ""
    SERVICE_VERSION: str = ""

    @classmethod
    def new_instance(
        cls,
        service_name: Optional[str] = None,
        authenticator: Optional[Authenticator] = None,
        service_url: Optional[str] = None,
        settings: Optional[ClientSettings] = None,
    ):
        """Construct an independent instance using external configuration.

        Args:
            service_name: Name used to look up configuration (defaults to
                DEFAULT_SERVICE_NAME)
            authenticator: Explicit authenticator; resolved from the
                environment when omitted
            service_url: Explicit service URL; DEFAULT_SERVICE_URL otherwise
            settings: Transport settings; loaded from the environment when omitted

        Raises:
            ConfigurationError: If no authenticator can be resolved
        """
        service_name = service_name or cls.DEFAULT_SERVICE_NAME
        if authenticator is None:
            authenticator = resolve_authenticator(service_name)
        if settings is None:
            settings = load_settings(service_name)
        return cls(
            authenticator=authenticator,
            service_url=service_url,
            service_name=service_name,
            settings=settings,
        )

    def __init__(
        self,
        authenticator: Authenticator,
        service_url: Optional[str] = None,
        service_name: Optional[str] = None,
        settings: Optional[ClientSettings] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        client: Optional[ServiceClient] = None,
    ):
        if authenticator is None:
            raise ConfigurationError("authenticator must be provided")
        try:
            authenticator.validate()
        except ValueError as e:
            raise ConfigurationError(f"Invalid authenticator: {e}") from e

        self.service_name = service_name or self.DEFAULT_SERVICE_NAME
        self.client = client or ServiceClient(
            service_url or self.DEFAULT_SERVICE_URL,
            authenticator,
            settings=settings,
        )
        if client is not None and service_url:
            self.client.set_service_url(service_url)
        # SDK headers always identify the service by its canonical name.
        self.builder = RequestBuilder(self.DEFAULT_SERVICE_NAME, self.SERVICE_VERSION, default_headers)

    @property
    def service_url(self) -> str:
        return self.client.service_url

    def set_service_url(self, service_url: str) -> None:
        self.client.set_service_url(service_url)

    def get_authenticator(self) -> Authenticator:
        return self.client.authenticator

    def set_default_headers(self, headers: Mapping[str, str]) -> None:
        """Set headers sent with every request (lowest precedence)."""
        self.builder.default_headers = dict(headers or {})

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _call(self, op: OperationDescriptor, params: Optional[Mapping[str, Any]], kwargs: Mapping[str, Any]):
        return call_operation(self.client, self.builder, op, params, kwargs)
