from __future__ import annotations


class RoutingConfigurationError(ValueError):
    """Locale-keyed routing data is incomplete or ambiguous."""
