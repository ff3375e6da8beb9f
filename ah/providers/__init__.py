"""Cloud provider adapters and their shared exceptions."""

from __future__ import annotations

from ah.providers.exceptions import (
    ProviderAPIError,
    ProviderConfigurationError,
    ProviderConnectionError,
    ProviderContractViolation,
    ProviderCredentialsError,
    ProviderError,
)

__all__ = [
    "ProviderError",
    "ProviderAPIError",
    "ProviderCredentialsError",
    "ProviderConnectionError",
    "ProviderConfigurationError",
    "ProviderContractViolation",
]
