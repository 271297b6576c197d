import enum
from datetime import timedelta
from typing import Annotated, Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from micro_jwt_auth.models.outcome import FailureKind

DEFAULT_MISSING_TOKEN_MESSAGE = "Missing Authorization header"
DEFAULT_INVALID_TOKEN_MESSAGE = "Invalid token in Authorization header"


class FailureMode(str, enum.Enum):
    RAISE = "raise"
    RESPOND = "respond"


class JWTDecodeConfig(BaseModel):
    algorithms: list[str] | None = None
    audience: list[str] | None = None
    issuer: str | None = None
    leeway: float | timedelta | None = None
    options: dict[str, Any] | None = None


class JWKSConfig(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    url: str
    ca_cert_path: str | None = None
    timeout: float = 30.0
    cache_keys: bool = True
    cache_max_age: Annotated[
        float, Field(description="Seconds a fetched key set stays valid", ge=0)
    ] = 600.0


class AuthConfig(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, populate_by_name=True
    )

    secret: str | None = None
    jwks_config: Annotated[
        JWKSConfig | None,
        Field(validation_alias=AliasChoices("jwks_config", "jwksConfig", "jwksRsaConfig")),
    ] = None
    whitelist: frozenset[str] = frozenset()
    missing_token_message: Annotated[
        str | None,
        Field(
            validation_alias=AliasChoices(
                "missing_token_message", "missingTokenMessage", "resAuthMissing"
            )
        ),
    ] = None
    invalid_token_message: Annotated[
        str | None,
        Field(
            validation_alias=AliasChoices(
                "invalid_token_message", "invalidTokenMessage", "resAuthInvalid"
            )
        ),
    ] = None
    decode_config: JWTDecodeConfig = JWTDecodeConfig()
    auth_header: str = "authorization"
    auth_scheme: str = "Bearer"
    failure_mode: FailureMode | None = None

    def message_for(self, kind: FailureKind) -> str:
        if kind is FailureKind.MISSING_TOKEN:
            return self.missing_token_message or DEFAULT_MISSING_TOKEN_MESSAGE
        return self.invalid_token_message or DEFAULT_INVALID_TOKEN_MESSAGE


class JWK(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra="allow")

    kty: Annotated[str, Field(description="Key type", examples=["RSA", "oct"])]
    use: Annotated[str | None, Field(description="Public key use")] = None
    kid: Annotated[str | None, Field(description="Key ID")] = None
    alg: Annotated[str | None, Field(description="Algorithm")] = None
    n: Annotated[str | None, Field(description="RSA modulus")] = None
    e: Annotated[str | None, Field(description="RSA public exponent")] = None
    k: Annotated[str | None, Field(description="Symmetric key value")] = None
    x5c: Annotated[list[str] | None, Field(description="X.509 Certificate Chain")] = (
        None
    )
    x5t: Annotated[
        str | None, Field(description="X.509 Certificate SHA-1 Thumbprint")
    ] = None


class JWKS(BaseModel):
    keys: list[JWK]


class JWTHeader(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra="allow")

    alg: Annotated[str | None, Field(description="Algorithm used for signing")] = None
    typ: Annotated[
        str | None,
        Field(description="Type of token", examples=["JWT"]),
    ] = None
    cty: Annotated[str | None, Field(description="Content type")] = None
    kid: Annotated[str | None, Field(description="Key ID")] = None
