"""Custom Error Base Class"""


class DomainError(Exception):
    """Domain error base class

    Base class for all business logic errors. ``code`` is the stable
    machine-readable identifier surfaced to callers.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def to_dict(self) -> dict[str, str]:
        """Error payload for driving adapters"""
        return {"code": self.code, "message": self.message}
