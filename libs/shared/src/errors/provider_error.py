"""Price Provider Error"""

from libs.shared.src.errors.domain_error import DomainError


class ProviderError(DomainError):
    """Price history fetch failed for one ticker

    Raised when the upstream call errors, times out, or returns no
    recognizable close-price field.
    """

    def __init__(self, ticker: str, reason: str | None = None) -> None:
        message = f"Unable to fetch price history for {ticker}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="PROVIDER_ERROR")
        self.ticker = ticker
        self.reason = reason
