from starlette.exceptions import HTTPException


class ConfigurationError(ValueError):
    """Raised when the gate is built with an unusable configuration."""


class AuthenticationError(HTTPException):
    """Rejection of a request, raised to the caller of the gate."""

    def __init__(self, message: str, status_code: int = 401) -> None:
        super().__init__(status_code=status_code, detail=message)

    @property
    def message(self) -> str:
        return self.detail


class MalformedAuthorizationHeader(ValueError):
    pass


class JWKSError(Exception):
    pass


class SigningKeyNotFoundError(JWKSError):
    pass
