from collections.abc import Iterable

from starlette.datastructures import URL


class PathWhitelist:
    """Exact-match set of request paths that do not require a token."""

    def __init__(self, paths: Iterable[str] = ()):
        self.paths = frozenset(paths)

    def contains(self, url: str | URL) -> bool:
        if not self.paths:
            return False
        return URL(str(url)).path in self.paths

