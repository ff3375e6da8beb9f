"""Provider-agnostic exceptions raised by the compute adapter."""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for all cloud provider failures."""


class ProviderAPIError(ProviderError):
    """Remote API call was rejected by the provider.

    Parameters
    ----------
    message : str
        Human readable error description
    error_code : str | None
        Provider error code (e.g. ``IncorrectInstanceState``)
    """

    def __init__(self, message: str, error_code: str | None = None) -> None:
        super().__init__(message)
        self.error_code = error_code


class ProviderCredentialsError(ProviderError):
    """Credentials are missing or were refused by the provider."""


class ProviderConnectionError(ProviderError):
    """Provider endpoint could not be reached."""


class ProviderConfigurationError(ProviderError):
    """Client could not be configured (no region, unknown profile)."""


class ProviderContractViolation(ProviderError):
    """Provider response lacks a field that is assumed to always be present."""
