# sha256_core.py
# SHA-256 compression, see definition in NIST FIPS 180-4, Sections 4.1.2, 4.2.2, 5.3.3 and 6.2

from __future__ import annotations

from .constants import FAMILY_512, MASK32
from .functions import big_sigma0, big_sigma1, ch, maj, sigma0, sigma1
from .utils import InternalConsistencyError

NAME: str = "sha256"
FAMILY = FAMILY_512
DIGEST_SIZE: int = 32
SCHEDULE_SIZE: int = 64

# First 32 bits of the fractional parts of the square roots of the first 8 primes
INITIAL_HASH_VALUES: tuple = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

# First 32 bits of the fractional parts of the cube roots of the first 64 primes
K: tuple = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def schedule(block: bytes) -> list[int]:
    W: list[int] = [int.from_bytes(block[t * 4 : (t * 4) + 4], "big") for t in range(16)]

    for t in range(16, SCHEDULE_SIZE):
        W.append((sigma1(W[t - 2]) + W[t - 7] + sigma0(W[t - 15]) + W[t - 16]) & MASK32)

    return W


def compress(H: list[int], block: bytes) -> None:
    if len(block) != FAMILY.block_size or len(H) != len(INITIAL_HASH_VALUES):
        raise InternalConsistencyError("SHA-256 compresses 64 byte blocks into 8 words")

    W = schedule(block)
    a, b, c, d, e, f, g, h = H

    for t in range(SCHEDULE_SIZE):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + K[t] + W[t]) & MASK32
        t2 = (big_sigma0(a) + maj(a, b, c)) & MASK32

        h, g, f = g, f, e
        e = (d + t1) & MASK32
        d, c, b = c, b, a
        a = (t1 + t2) & MASK32

    H[:] = [(x + y) & MASK32 for x, y in zip(H, (a, b, c, d, e, f, g, h))]
