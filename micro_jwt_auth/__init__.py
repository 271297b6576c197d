from micro_jwt_auth.exceptions import AuthenticationError, ConfigurationError
from micro_jwt_auth.middlewares.jwt_auth import JWTAuthGate, jwt_auth
from micro_jwt_auth.models.outcome import Failure, FailureKind, Success
from micro_jwt_auth.models.types import AuthConfig, FailureMode, JWKSConfig, JWTDecodeConfig

__all__ = [
    "AuthConfig",
    "AuthenticationError",
    "ConfigurationError",
    "Failure",
    "FailureKind",
    "FailureMode",
    "JWKSConfig",
    "JWTAuthGate",
    "JWTDecodeConfig",
    "Success",
    "jwt_auth",
]
