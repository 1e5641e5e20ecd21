# sha1_core.py
# SHA-1 compression, see definition in NIST FIPS 180-4, Sections 4.1.1, 4.2.1, 5.3.1 and 6.1

from __future__ import annotations

from .constants import FAMILY_512, MASK32
from .functions import ch, maj, parity, rotl
from .utils import InternalConsistencyError

NAME: str = "sha1"
FAMILY = FAMILY_512
DIGEST_SIZE: int = 20
SCHEDULE_SIZE: int = 80

INITIAL_HASH_VALUES: tuple = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
    0xC3D2E1F0,
)

# One constant per 20-round range
K: tuple = (
    0x5A827999,
    0x6ED9EBA1,
    0x8F1BBCDC,
    0xCA62C1D6,
)


def schedule(block: bytes) -> list[int]:
    W: list = [int.from_bytes(block[t * 4 : (t + 1) * 4], "big") for t in range(16)]

    for t in range(16, SCHEDULE_SIZE):
        W.append(rotl(W[t - 3] ^ W[t - 8] ^ W[t - 14] ^ W[t - 16], 1))

    return W


def compress(H: list[int], block: bytes) -> None:
    """Run the 80 rounds over `block` and fold the result into `H` in place."""
    if len(block) != FAMILY.block_size or len(H) != len(INITIAL_HASH_VALUES):
        raise InternalConsistencyError("SHA-1 compresses 64 byte blocks into 5 words")

    W = schedule(block)
    a, b, c, d, e = H

    for t in range(SCHEDULE_SIZE):
        if t <= 19:
            f, k = ch(b, c, d), K[0]
        elif t <= 39:
            f, k = parity(b, c, d), K[1]
        elif t <= 59:
            f, k = maj(b, c, d), K[2]
        else:
            f, k = parity(b, c, d), K[3]

        temp = (rotl(a, 5) + f + e + k + W[t]) & MASK32
        a, b, c, d, e = temp, a, rotl(b, 30), c, d

    H[:] = [(x + y) & MASK32 for x, y in zip(H, (a, b, c, d, e))]
