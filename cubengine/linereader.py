"""Splitting a text stream into lines without their newline characters."""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import Protocol


class _Readable(Protocol):
    def read(self, size: int = ..., /) -> str: ...


def read_lines(stream: _Readable) -> Iterator[str]:
    """Yield each line of ``stream`` with its trailing newline removed.

    The text after the last newline is always yielded as a final line, even
    when it is empty, so an empty stream yields a single empty string and
    ``"\\n".join(read_lines(s))`` gives back the whole stream.
    """
    pending = ""
    while chunk := stream.read(io.DEFAULT_BUFFER_SIZE):
        pending += chunk
        *complete, pending = pending.split("\n")
        yield from complete
    yield pending