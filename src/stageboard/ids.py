"""Session-unique identifier generation."""

import itertools
import secrets
import time
from typing import Iterator


class IdGenerator:
    """Produce identifiers that never repeat within a process.

    Each id joins the current millisecond, a per-generator counter and a
    short random suffix: ``card-1718000000000-7-3fa9``. The counter keeps
    ids distinct when several are made within the same millisecond.
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix
        self._counter = itertools.count(1)

    def next(self) -> str:
        millis = time.time_ns() // 1_000_000
        body = f"{millis}-{next(self._counter)}-{secrets.token_hex(2)}"
        return f"{self.prefix}-{body}" if self.prefix else body

    def __iter__(self) -> Iterator[str]:
        while True:
            yield self.next()

    def __repr__(self) -> str:
        return f"<IdGenerator {self.prefix or '(no prefix)'}>"
