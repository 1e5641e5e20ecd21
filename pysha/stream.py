# stream.py
# Block-by-block driver: buffering, compression and final padding

from __future__ import annotations

import enum
import logging

import typing_extensions as te

from .constants import MAX_INPUT_LENGTH, AlgorithmFamily
from .padding import PaddingResult, pad
from .utils import (
    ByteSource,
    InputTooLargeError,
    InternalConsistencyError,
    SourceReadError,
)

logger = logging.getLogger(__name__)


class CompressionCore(te.Protocol):
    """What a compression module (`pysha.sha1_core`, `pysha.sha256_core`) provides."""

    NAME: str
    FAMILY: AlgorithmFamily
    DIGEST_SIZE: int
    INITIAL_HASH_VALUES: tuple

    def compress(self, H: list[int], block: bytes, /) -> None: ...


class HasherState(enum.Enum):
    READING = "reading"
    FINALIZING = "finalizing"


class StreamingHasher(object):
    """Feeds a message through one compression core, one block at a time.

    Data arrives through `update` (in-memory buffers) or `read_from`
    (sequential byte sources). Every time the block fills up it is
    compressed into the hash state. `finalize` pads the partial block,
    compresses it (twice when the length field spills into an extra
    block) and moves the hasher into its terminal state.
    """

    __slots__: tuple = (
        "core",
        "family",
        "H",
        "state",
        "processed_blocks",
        "_block",
        "_fill",
    )

    def __init__(self, core: CompressionCore) -> None:
        self.core: CompressionCore = core
        self.family: AlgorithmFamily = core.FAMILY
        self.H: list[int] = list(core.INITIAL_HASH_VALUES)
        self.state: HasherState = HasherState.READING
        self.processed_blocks: int = 0

        self._block: bytearray = bytearray(self.family.block_size)
        self._fill: int = 0

    @property
    def length(self) -> int:
        """Number of message bytes taken in so far."""
        return self.processed_blocks * self.family.block_size + self._fill

    def copy(self) -> te.Self:
        clone = self.__class__.__new__(self.__class__)
        clone.core = self.core
        clone.family = self.family
        clone.H = self.H[:]
        clone.state = self.state
        clone.processed_blocks = self.processed_blocks
        clone._block = self._block[:]
        clone._fill = self._fill
        return clone

    def _ensure_reading(self) -> None:
        if self.state is not HasherState.READING:
            raise InternalConsistencyError(
                f"{self.core.NAME} hasher was already finalized"
            )

    def _absorb(self, data: memoryview) -> None:
        if self.length + len(data) >= MAX_INPUT_LENGTH:
            raise InputTooLargeError(self.length + len(data), MAX_INPUT_LENGTH)

        block_size = self.family.block_size
        offset = 0
        while offset < len(data):
            take = min(block_size - self._fill, len(data) - offset)
            self._block[self._fill : self._fill + take] = data[offset : offset + take]
            self._fill += take
            offset += take

            if self._fill == block_size:
                self.core.compress(self.H, self._block)
                self.processed_blocks += 1
                self._fill = 0

    def update(self, data: te.Buffer, /) -> None:
        self._ensure_reading()
        self._absorb(memoryview(data).cast("B"))

    def read_from(self, source: ByteSource) -> te.Self:
        """Consume `source` until it reports end-of-data."""
        self._ensure_reading()
        start = self.length

        while True:
            wanted = self.family.block_size - self._fill
            try:
                chunk = source.read(wanted)
            except (OSError, ValueError) as exc:
                raise SourceReadError(f"Could not read from {source!r}: {exc}") from exc

            if chunk is None:
                raise InternalConsistencyError(
                    f"{source!r} has no data ready; only blocking sources are supported"
                )
            if not chunk:
                break
            if len(chunk) > wanted:
                raise InternalConsistencyError(
                    f"Source returned {len(chunk)} bytes, {wanted} were requested"
                )
            self._absorb(memoryview(chunk))

        logger.debug("%s: read %d bytes from %r", self.core.NAME, self.length - start, source)
        return self

    def finalize(self) -> list[int]:
        """Pad and compress the final block(s). Returns the final state."""
        self._ensure_reading()
        self.state = HasherState.FINALIZING

        # Computed once; the spill-over block carries the same length.
        total_bits = self.length * 8
        result = pad(self._block, self._fill, total_bits, self.family, separator=True)

        match result:
            case PaddingResult.COMPLETE:
                self.core.compress(self.H, self._block)
            case PaddingResult.SEPARATOR_ONLY:
                self.core.compress(self.H, self._block)
                self._pad_fresh_block(total_bits, separator=False)
            case PaddingResult.NO_ROOM:
                self.core.compress(self.H, self._block)
                self._pad_fresh_block(total_bits, separator=True)
            case _:
                te.assert_never(result)

        logger.debug(
            "%s: finalized %d bytes in %d blocks (%s)",
            self.core.NAME,
            total_bits // 8,
            self.processed_blocks,
            result.name,
        )
        return self.H

    def _pad_fresh_block(self, total_bits: int, separator: bool) -> None:
        result = pad(self._block, 0, total_bits, self.family, separator=separator)
        if result is not PaddingResult.COMPLETE:
            raise InternalConsistencyError(f"Extra padding block ended with {result.name}")
        self.core.compress(self.H, self._block)

    def digest(self) -> bytes:
        if self.state is HasherState.READING:
            self.finalize()
        return b"".join(h.to_bytes(4, "big") for h in self.H)[: self.core.DIGEST_SIZE]

    def hexdigest(self) -> str:
        if self.state is HasherState.READING:
            self.finalize()
        return "".join(f"{h:08x}" for h in self.H)[: self.core.DIGEST_SIZE * 2]


__all__: list = ["CompressionCore", "HasherState", "StreamingHasher"]
