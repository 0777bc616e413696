from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Caller supplied a request that cannot be normalized."""

    def __init__(self, reason: str) -> None:
        super().__init__("Invalid configuration: " + reason)
        self.reason = reason


class JurisdictionNotFound(LookupError):
    """No country record exists for the requested code."""

    def __init__(self, country_code: str) -> None:
        self.country_code = country_code
        self.reason = f"country_not_found:{country_code}"
        super().__init__("No policy data available: " + self.reason)


NotFound = JurisdictionNotFound
