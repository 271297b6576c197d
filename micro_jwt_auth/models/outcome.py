import enum
from dataclasses import dataclass
from typing import Any


class FailureKind(enum.Enum):
    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"


@dataclass(frozen=True)
class Success:
    claims: dict[str, Any]


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str


Outcome = Success | Failure
