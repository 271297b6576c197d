import re
from collections.abc import Mapping

from micro_jwt_auth.exceptions import MalformedAuthorizationHeader


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def extract_token(
    headers: Mapping[str, str],
    header_name: str = "authorization",
    scheme: str = "Bearer",
) -> str | None:
    """Return the raw token, or ``None`` when the header is absent.

    The header has to read ``<scheme> <token>``; anything else raises
    :class:`MalformedAuthorizationHeader`. The token itself is not inspected.
    """
    authorization = get_header(headers, header_name)
    if authorization is None:
        return None

    match = re.fullmatch(rf"{re.escape(scheme)} (?P<token>.+)", authorization)
    if match is None:
        raise MalformedAuthorizationHeader(
            f"Expected '{scheme} <token>' in {header_name} header"
        )
    return match.group("token")
