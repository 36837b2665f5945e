"""Interactive command flows."""

from .auth import AuthCredential, AuthProvider, PROVIDERS, models_auth_add_command

__all__ = ["AuthCredential", "AuthProvider", "PROVIDERS", "models_auth_add_command"]
