import inspect
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import structlog

from micro_jwt_auth.exceptions import MalformedAuthorizationHeader
from micro_jwt_auth.middlewares.failure_dispatcher import build_dispatcher
from micro_jwt_auth.middlewares.path_whitelist import PathWhitelist
from micro_jwt_auth.middlewares.token_extractor import extract_token
from micro_jwt_auth.models.outcome import Failure, FailureKind, Outcome, Success
from micro_jwt_auth.models.types import AuthConfig
from micro_jwt_auth.validators.config_validator import validate_config
from micro_jwt_auth.validators.jwks_client import JWKSClient
from micro_jwt_auth.validators.token_verifier import build_verifier

log = structlog.get_logger()

NextHandler = Callable[[Any, Any], Any]


class JWTAuthGate:
    """Bearer-token gate placed in front of a ``(request, response)`` handler.

    The configuration is validated once, here. Per request the gate checks the
    path whitelist, extracts the token and verifies it. On success the decoded
    claims are set on ``request.jwt`` before the next handler runs.

    Rejected requests are reported through the configured dispatcher. With the
    secret strategy the default is to raise
    :class:`~micro_jwt_auth.exceptions.AuthenticationError`. With the JWKS
    strategy the default is to write a 401 to the response and return
    ``None``. Whitelisted paths are never rejected: a failed verification just
    leaves ``request.jwt`` unset.
    """

    def __init__(
        self,
        config: AuthConfig | Mapping[str, Any] | None,
        jwks_client: JWKSClient | None = None,
    ):
        self.config = validate_config(config)
        self.whitelist = PathWhitelist(self.config.whitelist)
        self.verifier = build_verifier(self.config, jwks_client)
        self.dispatcher = build_dispatcher(self.config)

    def _failure(self, kind: FailureKind) -> Failure:
        return Failure(kind, self.config.message_for(kind))

    async def authenticate(self, headers: Mapping[str, str], url: Any) -> Outcome | None:
        """Decide on a request without touching it.

        Returns ``Success`` with the claims, ``Failure`` when the request has to
        be rejected, or ``None`` when a whitelisted request goes on without
        claims.
        """
        whitelisted = self.whitelist.contains(url)
        try:
            token = extract_token(
                headers, self.config.auth_header, self.config.auth_scheme
            )
        except MalformedAuthorizationHeader as e:
            log.info("jwt_header_malformed", reason=str(e))
            outcome: Outcome = self._failure(FailureKind.INVALID_TOKEN)
        else:
            if token is None:
                outcome = self._failure(FailureKind.MISSING_TOKEN)
            else:
                outcome = await self.verifier.verify(token)

        if isinstance(outcome, Failure) and whitelisted:
            log.debug("jwt_skipped_whitelisted", url=str(url), kind=outcome.kind.value)
            return None
        return outcome

    async def handle(self, next_handler: NextHandler | None, request: Any, response: Any) -> Any:
        outcome = await self.authenticate(request.headers, request.url)
        if isinstance(outcome, Failure):
            log.info("jwt_rejected", kind=outcome.kind.value, url=str(request.url))
            return self.dispatcher.dispatch(outcome, response)

        if isinstance(outcome, Success):
            request.jwt = outcome.claims

        result = next_handler(request, response)
        if inspect.isawaitable(result):
            result = await result
        return result

    def __call__(
        self, next_handler: NextHandler | None = None
    ) -> Callable[[Any, Any], Awaitable[Any]]:
        async def handler(request: Any, response: Any) -> Any:
            return await self.handle(next_handler, request, response)

        return handler


def jwt_auth(
    config: AuthConfig | Mapping[str, Any] | None,
    jwks_client: JWKSClient | None = None,
) -> JWTAuthGate:
    """Build a gate; ``jwt_auth(config)(next_handler)(request, response)``."""
    return JWTAuthGate(config, jwks_client)
