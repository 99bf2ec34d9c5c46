"""Live statistics providers."""

from .espn import ESPNClient, ProviderError

__all__ = ["ESPNClient", "ProviderError"]
