import sys
from typing import final

from fastapi import Request
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.security.http import HTTPBase

from micro_jwt_auth.exceptions import AuthenticationError
from micro_jwt_auth.middlewares.jwt_auth import JWTAuthGate
from micro_jwt_auth.models.outcome import Failure, Success

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override  # pyright: ignore[reportUnreachable]


@final
class JWTAuth(HTTPBase):
    """FastAPI security dependency that raises on rejected requests.

    Claims are stored on ``request.state.jwt``. Whitelisted requests without
    a valid token get ``None`` credentials instead of an error.
    """

    def __init__(self, gate: JWTAuthGate, scheme_name: str | None = None):
        self.gate = gate
        super().__init__(
            scheme=gate.config.auth_scheme.lower(),
            scheme_name=scheme_name,
            auto_error=False,
        )

    @override
    async def __call__(self, request: Request) -> HTTPAuthorizationCredentials | None:
        outcome = await self.gate.authenticate(request.headers, request.url)
        if isinstance(outcome, Failure):
            raise AuthenticationError(outcome.message)
        if not isinstance(outcome, Success):
            return None

        request.state.jwt = outcome.claims
        scheme, _, token = request.headers[self.gate.config.auth_header].partition(" ")
        return HTTPAuthorizationCredentials(scheme=scheme, credentials=token)
