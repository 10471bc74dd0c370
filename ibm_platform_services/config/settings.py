"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ibm_cloud_sdk_core import get_authenticator_from_environment
from ibm_cloud_sdk_core.authenticators import Authenticator, IAMAuthenticator

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_WORKERS = 4


def env_prefix(service_name: str) -> str:
    """Environment variable prefix for a service, e.g. IAM_IDENTITY_SERVICES."""
    return service_name.upper().replace("-", "_")


def _load_secret_from_file(secret_name: str) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Environment variables are not consulted here; ibm-cloud-sdk-core already
    reads ``{PREFIX}_APIKEY`` and friends.

    Args:
        secret_name: Name of the secret file in /run/secrets

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)
        else:
            if secret_value:
                logger.info("Loaded %s from /run/secrets", secret_name)
                return secret_value

    return None


@dataclass
class ClientSettings:
    """Transport configuration for one service client."""
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS
    verify: bool = True


def _env_number(var_name: str, default, cast):
    raw = os.environ.get(var_name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigurationError(f"Environment variable {var_name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"Environment variable {var_name} must be positive, got {raw!r}")
    return value


def load_settings(service_name: str) -> ClientSettings:
    """Load transport settings for a service from the environment.

    Reads ``{PREFIX}_TIMEOUT``, ``{PREFIX}_MAX_WORKERS`` and
    ``{PREFIX}_DISABLE_SSL`` where PREFIX is the upper-cased service name.
    The service URL is never taken from the environment.

    Raises:
        ConfigurationError: If a numeric variable is malformed
    """
    prefix = env_prefix(service_name)
    return ClientSettings(
        timeout=_env_number(f"{prefix}_TIMEOUT", DEFAULT_TIMEOUT, float),
        max_workers=_env_number(f"{prefix}_MAX_WORKERS", DEFAULT_MAX_WORKERS, int),
        verify=os.environ.get(f"{prefix}_DISABLE_SSL", "false").lower() != "true",
    )


def resolve_authenticator(service_name: str) -> Authenticator:
    """Build the authenticator for a service from external configuration.

    Priority:
    1. ibm-cloud-sdk-core external configuration ({PREFIX}_AUTH_TYPE,
       {PREFIX}_APIKEY, credentials file, VCAP_SERVICES)
    2. Docker secret /run/secrets/{service_name}_apikey, used as an IAM API key

    Raises:
        ConfigurationError: If no valid authenticator can be built
    """
    try:
        authenticator = get_authenticator_from_environment(service_name)
    except ValueError as e:
        raise ConfigurationError(f"Invalid authentication configuration for {service_name}: {e}") from e
    if authenticator is not None:
        return authenticator

    apikey = _load_secret_from_file(f"{service_name}_apikey")
    if apikey:
        try:
            return IAMAuthenticator(apikey)
        except ValueError as e:
            raise ConfigurationError(f"Invalid API key secret for {service_name}: {e}") from e

    raise ConfigurationError(
        f"No authenticator configured for {service_name}. "
        f"Pass an authenticator or set {env_prefix(service_name)}_AUTH_TYPE and its credentials."
    )
