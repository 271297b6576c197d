import time

import httpx
import jwt
import structlog

from micro_jwt_auth.exceptions import SigningKeyNotFoundError
from micro_jwt_auth.models.types import JWK, JWKS, JWKSConfig

log = structlog.get_logger()


class JWKSClient:
    """Fetches a JSON Web Key Set and resolves signing keys from it.

    The fetched set is kept for ``cache_max_age`` seconds when caching is on.
    A kid that is not in the cached set triggers a single refetch, so keys
    rotated in at the provider are picked up without waiting for expiry.
    """

    def __init__(self, jwks_config: JWKSConfig):
        self.jwks_config = jwks_config
        self._cached: JWKS | None = None
        self._fetched_at = 0.0

    async def jwks_data(self) -> JWKS:
        log.debug("jwks_fetch", url=self.jwks_config.url)
        async with httpx.AsyncClient(
            verify=self.jwks_config.ca_cert_path or True,
            timeout=self.jwks_config.timeout,
        ) as client:
            response = await client.get(self.jwks_config.url)
            response.raise_for_status()
            return JWKS.model_validate(response.json())

    def _cache_is_fresh(self) -> bool:
        if not self.jwks_config.cache_keys or self._cached is None:
            return False
        return time.monotonic() - self._fetched_at < self.jwks_config.cache_max_age

    async def _load(self) -> JWKS:
        jwks = await self.jwks_data()
        if self.jwks_config.cache_keys:
            self._cached = jwks
            self._fetched_at = time.monotonic()
        return jwks

    async def signing_keys(self, refresh: bool = False) -> list[JWK]:
        if not refresh and self._cache_is_fresh():
            jwks = self._cached
        else:
            jwks = await self._load()
        return [key for key in jwks.keys if key.use in (None, "sig")]

    @staticmethod
    def _select(keys: list[JWK], kid: str | None) -> JWK | None:
        if kid is None:
            if len(keys) > 1:
                raise SigningKeyNotFoundError(
                    "No KID specified and JWKS endpoint returned more than 1 key"
                )
            return keys[0] if keys else None
        return next((key for key in keys if key.kid == kid), None)

    async def get_signing_key(self, kid: str | None) -> jwt.PyJWK:
        from_cache = self._cache_is_fresh()
        key = self._select(await self.signing_keys(), kid)
        if key is None and from_cache:
            key = self._select(await self.signing_keys(refresh=True), kid)
        if key is None:
            raise SigningKeyNotFoundError(f"Unable to find a signing key that matches '{kid}'")
        return jwt.PyJWK(key.model_dump(exclude_none=True))
