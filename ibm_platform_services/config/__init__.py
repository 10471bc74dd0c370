"""Configuration for platform service clients."""
from .settings import ClientSettings, load_settings, resolve_authenticator

__all__ = ["ClientSettings", "load_settings", "resolve_authenticator"]
