"""Correlation Compute Error"""

from libs.shared.src.errors.domain_error import DomainError


class ComputeError(DomainError):
    """Numerical failure while correlating two series"""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="COMPUTE_ERROR")
