from micro_jwt_auth.dependencies.jwt_auth import JWTAuth

__all__ = ["JWTAuth"]
