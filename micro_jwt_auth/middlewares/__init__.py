from micro_jwt_auth.middlewares.failure_dispatcher import (
    FailureDispatcher,
    RaisingDispatcher,
    ResponseDispatcher,
)
from micro_jwt_auth.middlewares.jwt_auth import JWTAuthGate, jwt_auth
from micro_jwt_auth.middlewares.path_whitelist import PathWhitelist
from micro_jwt_auth.middlewares.starlette_auth import JWTAuthMiddleware
from micro_jwt_auth.middlewares.token_extractor import extract_token

__all__ = [
    "FailureDispatcher",
    "JWTAuthGate",
    "JWTAuthMiddleware",
    "PathWhitelist",
    "RaisingDispatcher",
    "ResponseDispatcher",
    "extract_token",
    "jwt_auth",
]
