from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from starlette.requests import Request
from starlette.testclient import TestClient

from micro_jwt_auth import jwt_auth
from micro_jwt_auth.middlewares.starlette_auth import JWTAuthMiddleware


def build_app(config) -> FastAPI:
    test_app = FastAPI()

    @test_app.get("/public")
    def public_route(request: Request):
        return {"jwt": getattr(request.state, "jwt", None)}

    @test_app.get("/protected")
    def protected_route(request: Request):
        return request.state.jwt

    test_app.add_middleware(JWTAuthMiddleware, gate=jwt_auth(config))
    return test_app


@pytest.fixture()
def client() -> TestClient:
    return TestClient(build_app({"secret": "mySecret", "whitelist": ["/public"]}))


def test_protected_route_with_token(client, valid_header, jwt_content):
    response = client.get("/protected", headers={"Authorization": valid_header})
    assert response.status_code == 200
    assert response.json() == jwt_content


def test_missing_auth_header(client):
    response = client.get("/protected")
    assert response.status_code == 401
    assert response.json()["detail"] == "Missing Authorization header"


def test_invalid_token(client, invalid_header):
    response = client.get("/protected", headers={"Authorization": invalid_header})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token in Authorization header"


def test_whitelisted_route(client, valid_header, invalid_header, jwt_content):
    response = client.get("/public")
    assert response.status_code == 200
    assert response.json() == {"jwt": None}

    response = client.get("/public", headers={"Authorization": invalid_header})
    assert response.status_code == 200
    assert response.json() == {"jwt": None}

    response = client.get("/public", headers={"Authorization": valid_header})
    assert response.json() == {"jwt": jwt_content}


def test_jwks_strategy(secret_jwks, valid_header, jwt_content):
    with patch(
        "micro_jwt_auth.validators.jwks_client.JWKSClient.jwks_data",
        new_callable=AsyncMock,
        return_value=secret_jwks,
    ):
        client = TestClient(
            build_app({"jwksRsaConfig": {"url": "http://my-fake-jwks-url/my-fake-endpoint"}})
        )
        response = client.get("/protected", headers={"Authorization": valid_header})
        assert response.status_code == 200
        assert response.json() == jwt_content

        response = client.get("/protected")
        assert response.status_code == 401
