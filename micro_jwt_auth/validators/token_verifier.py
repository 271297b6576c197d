import abc
from typing import Any

import jwt
import structlog
from pydantic import ValidationError

from micro_jwt_auth.models.outcome import Failure, FailureKind, Outcome, Success
from micro_jwt_auth.models.types import AuthConfig, JWTHeader
from micro_jwt_auth.validators.jwks_client import JWKSClient

log = structlog.get_logger()

HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]


class TokenVerifier(abc.ABC):
    """Turns a raw token into decoded claims or an invalid-token failure."""

    def __init__(self, config: AuthConfig):
        self.config = config

    @abc.abstractmethod
    async def verify(self, token: str) -> Outcome: ...

    def _decode(self, token: str, key: Any, algorithms: list[str]) -> dict[str, Any]:
        decode_config = self.config.decode_config
        options = dict(decode_config.options or {})
        if decode_config.audience is None:
            options.setdefault("verify_aud", False)
        return jwt.decode(
            token,
            key=key,
            algorithms=decode_config.algorithms or algorithms,
            audience=decode_config.audience,
            issuer=decode_config.issuer,
            leeway=decode_config.leeway or 0,
            options=options,
        )

    def _invalid(self) -> Failure:
        return Failure(
            FailureKind.INVALID_TOKEN,
            self.config.message_for(FailureKind.INVALID_TOKEN),
        )


class SecretVerifier(TokenVerifier):
    async def verify(self, token: str) -> Outcome:
        try:
            claims = self._decode(token, self.config.secret, HMAC_ALGORITHMS)
        except jwt.PyJWTError as e:
            log.info("jwt_invalid", strategy="secret", reason=str(e))
            return self._invalid()
        return Success(claims)


class JWKSVerifier(TokenVerifier):
    def __init__(self, config: AuthConfig, jwks_client: JWKSClient | None = None):
        super().__init__(config)
        self.jwks_client = jwks_client or JWKSClient(config.jwks_config)

    async def verify(self, token: str) -> Outcome:
        try:
            kid = JWTHeader.model_validate(jwt.get_unverified_header(token)).kid
        except (jwt.PyJWTError, ValidationError) as e:
            log.info("jwt_invalid", strategy="jwks", reason=str(e))
            return self._invalid()

        try:
            signing_key = await self.jwks_client.get_signing_key(kid)
        except Exception as e:
            log.warning("jwks_key_unresolved", kid=kid, reason=str(e))
            return self._invalid()

        try:
            claims = self._decode(token, signing_key.key, [signing_key.algorithm_name])
        except jwt.PyJWTError as e:
            log.info("jwt_invalid", strategy="jwks", kid=kid, reason=str(e))
            return self._invalid()
        return Success(claims)


def build_verifier(
    config: AuthConfig, jwks_client: JWKSClient | None = None
) -> TokenVerifier:
    if config.secret:
        return SecretVerifier(config)
    return JWKSVerifier(config, jwks_client)
