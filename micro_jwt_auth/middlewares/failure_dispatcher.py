import abc
from typing import Any, Protocol

from micro_jwt_auth.exceptions import AuthenticationError
from micro_jwt_auth.models.outcome import Failure
from micro_jwt_auth.models.types import AuthConfig, FailureMode


class WritableResponse(Protocol):
    def write_head(self, status_code: int) -> Any: ...

    def end(self, body: str) -> Any: ...


class FailureDispatcher(abc.ABC):
    status_code = 401

    @abc.abstractmethod
    def dispatch(self, failure: Failure, response: WritableResponse) -> None: ...


class RaisingDispatcher(FailureDispatcher):
    """Raises the failure to whoever awaited the gate; the response is untouched."""

    def dispatch(self, failure: Failure, response: WritableResponse) -> None:
        raise AuthenticationError(failure.message, status_code=self.status_code)


class ResponseDispatcher(FailureDispatcher):
    """Writes the 401 straight to the response and returns nothing."""

    def dispatch(self, failure: Failure, response: WritableResponse) -> None:
        response.write_head(self.status_code)
        response.end(failure.message)


def build_dispatcher(config: AuthConfig) -> FailureDispatcher:
    # Secret callers have always received an exception, JWKS callers a
    # written response. An explicit failure_mode overrides either.
    mode = config.failure_mode
    if mode is None:
        mode = FailureMode.RAISE if config.secret else FailureMode.RESPOND
    if mode is FailureMode.RAISE:
        return RaisingDispatcher()
    return ResponseDispatcher()
