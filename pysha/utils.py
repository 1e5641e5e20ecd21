# utils.py
# Byte source protocol and the exceptions raised by the package

from __future__ import annotations

import typing_extensions as te


@te.runtime_checkable
class ByteSource(te.Protocol):
    """Anything read sequentially: binary files, io.BytesIO, socket files.

    `read(size)` returns at most `size` bytes, fewer only at end-of-data,
    and `b""` once the source is exhausted."""

    def read(self, size: int = -1, /) -> bytes: ...


class HashError(Exception):
    """Base class for failures caused by the input rather than by a bug."""


class UnsupportedAlgorithmError(HashError, NotImplementedError):
    def __init__(self, algorithm: object) -> None:
        self.algorithm = algorithm
        super().__init__(f"Support for {algorithm} is not yet implemented.")


class InputTooLargeError(HashError, OverflowError):
    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Input of {length} bytes exceeds the {limit} byte limit")


class SourceReadError(HashError, OSError): ...


class InternalConsistencyError(RuntimeError):
    """A broken internal contract: buffer sizes, cursors, hasher lifecycle.

    Never raised for bad input; if you see one, it is a bug."""


__all__: list = [
    "ByteSource",
    "HashError",
    "UnsupportedAlgorithmError",
    "InputTooLargeError",
    "SourceReadError",
    "InternalConsistencyError",
]
