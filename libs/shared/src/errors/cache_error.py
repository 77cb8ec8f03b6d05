"""Result Cache Error"""

from libs.shared.src.errors.domain_error import DomainError


class CacheError(DomainError):
    """Cache store read or write failed (network, permission, bad payload)"""

    def __init__(self, key: str, reason: str | None = None) -> None:
        message = f"Cache operation failed for {key}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="CACHE_ERROR")
        self.key = key
        self.reason = reason
