"""Python client library for IBM Cloud platform services.

Usage:
    from ibm_platform_services import IamIdentityV1

    with IamIdentityV1.new_instance() as iam:
        response = iam.list_api_keys(account_id="abc").result()
    print(response.get_result())

Each service runs requests on its own worker threads; use it as a context
manager or call close() when done.
"""
from .version import __version__
from .core.exceptions import (
    PlatformServicesError,
    ConfigurationError,
    MissingParametersError,
    TemplateError,
    TransportError,
    ApiError,
)
from .config import ClientSettings, load_settings, resolve_authenticator
from .core.client import DetailedResponse, ServiceClient
from .iam_identity_v1 import IamIdentityV1
from .case_management_v1 import CaseManagementV1
from .resource_manager_v2 import ResourceManagerV2

__all__ = [
    "__version__",

    # Exceptions
    "PlatformServicesError",
    "ConfigurationError",
    "MissingParametersError",
    "TemplateError",
    "TransportError",
    "ApiError",

    # Configuration
    "ClientSettings",
    "load_settings",
    "resolve_authenticator",

    # Transport
    "DetailedResponse",
    "ServiceClient",

    # Services
    "IamIdentityV1",
    "CaseManagementV1",
    "ResourceManagerV2",
]
