from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from micro_jwt_auth.exceptions import ConfigurationError
from micro_jwt_auth.models.types import AuthConfig

KEY_SOURCE_REQUIRED = (
    "micro-jwt-jwks-rsa-auth must be initialized passing either a public key "
    "from jwks (secret) or jwks-rsa configuration (jwksRsaConfig) configuration "
    "option to decode incoming JWT token"
)
KEY_SOURCE_AMBIGUOUS = (
    "micro-jwt-jwks-rsa-auth accepts either a secret or a jwks-rsa configuration "
    "(jwksRsaConfig), not both"
)

_KEY_SOURCE_FIELDS = ("secret", "jwks_config", "jwksConfig", "jwksRsaConfig")


def validate_config(config: AuthConfig | Mapping[str, Any] | None) -> AuthConfig:
    """Check that exactly one key source is configured.

    Mappings are validated into an :class:`AuthConfig`; both the snake_case
    field names and the camelCase aliases are accepted.
    """
    if config is None:
        raise ConfigurationError(KEY_SOURCE_REQUIRED)

    if not isinstance(config, AuthConfig):
        if not any(config.get(name) for name in _KEY_SOURCE_FIELDS):
            raise ConfigurationError(KEY_SOURCE_REQUIRED)
        try:
            config = AuthConfig.model_validate(config)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    has_secret = bool(config.secret)
    has_jwks = config.jwks_config is not None
    if not (has_secret or has_jwks):
        raise ConfigurationError(KEY_SOURCE_REQUIRED)
    if has_secret and has_jwks:
        raise ConfigurationError(KEY_SOURCE_AMBIGUOUS)
    return config
