from micro_jwt_auth.validators.config_validator import validate_config
from micro_jwt_auth.validators.jwks_client import JWKSClient
from micro_jwt_auth.validators.token_verifier import (
    JWKSVerifier,
    SecretVerifier,
    TokenVerifier,
    build_verifier,
)

__all__ = [
    "JWKSClient",
    "JWKSVerifier",
    "SecretVerifier",
    "TokenVerifier",
    "build_verifier",
    "validate_config",
]
