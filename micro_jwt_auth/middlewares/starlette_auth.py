from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse
from starlette.types import ASGIApp

from micro_jwt_auth.middlewares.jwt_auth import JWTAuthGate
from micro_jwt_auth.models.outcome import Failure, Success


class JWTAuthMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, gate: JWTAuthGate) -> None:
        super().__init__(app)
        self.gate = gate

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        outcome = await self.gate.authenticate(request.headers, request.url)
        if isinstance(outcome, Failure):
            return JSONResponse(
                status_code=401,
                content={"detail": outcome.message},
            )
        if isinstance(outcome, Success):
            request.state.jwt = outcome.claims
        return await call_next(request)
