from __future__ import annotations

import re
from threading import Lock

_NUMERIC_SEGMENT = re.compile(r"/[0-9]+(?=/|$)")


def normalize_path(path: str) -> str:
    """Bucket numeric path segments, e.g. ``/api/menu/7`` -> ``/api/menu/:id``."""
    return _NUMERIC_SEGMENT.sub("/:id", path)


def endpoint_key(method: str, path: str) -> str:
    return f"{method.upper()} {normalize_path(path)}"


class HitCounter:
    """Per-endpoint request counts, process-local (resets on restart)."""

    def __init__(self) -> None:
        self._lock = Lock()
        # dict keeps first-seen order, which breaks ties in snapshot().
        self._hits: dict[str, int] = {}

    def observe_request(self, method: str, path: str) -> str:
        key = endpoint_key(method, path)
        with self._lock:
            self._hits[key] = self._hits.get(key, 0) + 1
        return key

    def snapshot(self) -> list[dict[str, int | str]]:
        with self._lock:
            ranked = sorted(self._hits.items(), key=lambda pair: -pair[1])
        return [{"endpoint": endpoint, "count": count} for endpoint, count in ranked]

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()
