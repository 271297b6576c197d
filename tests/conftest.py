import base64
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from micro_jwt_auth.models.types import JWKS

RESOURCE_URL = "https://api.cabq.gov/domain/resources/1"


@pytest.fixture()
def valid_header() -> str:
    return (
        "Bearer eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
        ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IldhbHRlciBXaGl0ZSIsImFkbWluIjp0cnVlfQ"
        ".YyF_yOQsTSQghvM08WBp7VhsHRv-4Ir4eMQvsEycY1A"
    )


@pytest.fixture()
def invalid_header() -> str:
    return (
        "Bearer wrong"
        ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IldhbHRlciBXaGl0ZSIsImFkbWluIjp0cnVlfQ"
        ".YyF_yOQsTSQghvM08WBp7VhsHRv-4Ir4eMQvsEycY1A"
    )


@pytest.fixture()
def jwt_content() -> dict:
    return {"sub": "1234567890", "name": "Walter White", "admin": True}


@pytest.fixture()
def secret_jwks() -> JWKS:
    """Key set publishing the ``mySecret`` HMAC key the sample token is signed with."""
    key = base64.urlsafe_b64encode(b"mySecret").rstrip(b"=").decode()
    return JWKS.model_validate(
        {"keys": [{"kty": "oct", "use": "sig", "alg": "HS256", "k": key}]}
    )


@pytest.fixture()
def make_request():
    def factory(authorization: str | None = None, url: str = RESOURCE_URL):
        headers = {} if authorization is None else {"authorization": authorization}
        return SimpleNamespace(headers=headers, url=url)

    return factory


@pytest.fixture()
def response() -> MagicMock:
    return MagicMock(spec=["write_head", "end"])
