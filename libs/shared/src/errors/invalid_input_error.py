"""Invalid Input Error"""

from libs.shared.src.errors.domain_error import DomainError


class InvalidInputError(DomainError):
    """Malformed or insufficient ticker list

    Raised before any I/O happens. Never retried.
    """

    def __init__(self, message: str, tickers: list[str] | None = None) -> None:
        super().__init__(message, code="INVALID_INPUT")
        self.tickers = list(tickers or [])
