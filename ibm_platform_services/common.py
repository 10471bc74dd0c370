"""SDK identification headers attached to every request."""
from __future__ import annotations

import platform
from typing import Dict

from .version import __version__

HEADER_NAME_USER_AGENT = "User-Agent"
HEADER_NAME_SDK_ANALYTICS = "X-IBMCloud-SDK-Analytics"
SDK_NAME = "platform-services-python-sdk"


def get_user_agent() -> str:
    system_info = (
        f"lang=python; lang.version={platform.python_version()}; "
        f"os.name={platform.system()}; os.version={platform.release()}"
    )
    return f"{SDK_NAME}/{__version__} ({system_info})"


def get_sdk_headers(service_name: str, service_version: str, operation_id: str) -> Dict[str, str]:
    """Return the headers that identify the calling SDK, service and operation.

    The headers only feed diagnostics on the server side; requests are valid
    without them.

    Args:
        service_name: Service name, e.g. "iam_identity_services"
        service_version: API version, e.g. "v1"
        operation_id: Operation name, e.g. "get_api_key"

    Returns:
        Header dictionary
    """
    return {
        HEADER_NAME_USER_AGENT: get_user_agent(),
        HEADER_NAME_SDK_ANALYTICS: (
            f"service_name={service_name};service_version={service_version};operation_id={operation_id}"
        ),
    }
