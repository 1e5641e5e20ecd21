# padding.py
# Message padding, see definition in NIST FIPS 180-4, Section 5.1

from __future__ import annotations

import enum

from .constants import AlgorithmFamily
from .utils import InternalConsistencyError


class PaddingResult(enum.Enum):
    """Outcome of one `pad` call."""

    # The block was already full; nothing was written.
    NO_ROOM = 0
    # The separator went in, the length field did not fit. Compress this
    # block, then pad an empty one with `separator=False`.
    SEPARATOR_ONLY = 1
    COMPLETE = 2


def pad(
    buffer: bytearray,
    occupied: int,
    bit_length: int,
    family: AlgorithmFamily,
    separator: bool = True,
) -> PaddingResult:
    """Write the padding of a message into its final block, in place.

    The first `occupied` bytes of `buffer` hold the tail of the message.
    The padding is the separator byte `0x80`, zero fill, and `bit_length`
    as a big-endian integer in the trailing `family.length_size` bytes, so
    that the padded message is a multiple of `family.block_size`.
    """
    if len(buffer) != family.block_size:
        raise InternalConsistencyError(
            f"Padding buffer is {len(buffer)} bytes, expected {family.block_size}"
        )
    if not 0 <= occupied <= len(buffer):
        raise InternalConsistencyError(
            f"Occupied size {occupied} outside of a {len(buffer)} byte buffer"
        )
    if not 0 <= bit_length < 1 << (8 * family.length_size):
        raise InternalConsistencyError(
            f"Bit length {bit_length} does not fit in {family.length_size} bytes"
        )

    if occupied == len(buffer):
        return PaddingResult.NO_ROOM

    cursor = occupied
    if separator:
        buffer[cursor] = 0x80
        cursor += 1

        if len(buffer) - cursor < family.length_size:
            buffer[cursor:] = bytes(len(buffer) - cursor)
            return PaddingResult.SEPARATOR_ONLY

    length_start = len(buffer) - family.length_size
    if cursor > length_start:
        raise InternalConsistencyError(
            f"No room for the length field after {cursor} occupied bytes"
        )
    buffer[cursor:length_start] = bytes(length_start - cursor)
    buffer[length_start:] = bit_length.to_bytes(family.length_size, "big")
    return PaddingResult.COMPLETE


__all__: list = ["PaddingResult", "pad"]
