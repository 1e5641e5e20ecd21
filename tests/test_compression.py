# test_compression.py
# Unit test

import hashlib
import math
import struct
import unittest

from pysha import sha1_core
from pysha import sha256_core
from pysha.constants import FAMILY_512, compute_constants, nprimes, root_fraction
from pysha.functions import ch, maj, parity, rotl, rotr
from pysha.padding import pad
from pysha.utils import InternalConsistencyError


def single_block(message: bytes) -> bytearray:
    block = bytearray(64)
    block[: len(message)] = message
    pad(block, len(message), len(message) * 8, FAMILY_512)
    return block


class ConstantsTest(unittest.TestCase):
    def test_nprimes(self):
        self.assertEqual(nprimes(8), [2, 3, 5, 7, 11, 13, 17, 19])
        self.assertEqual(len(nprimes(64)), 64)
        self.assertEqual(nprimes(64)[-1], 311)

    def test_sha256_constants_match_prime_roots(self):
        self.assertEqual(root_fraction(2, 2), 0x6A09E667)
        self.assertEqual(sha256_core.INITIAL_HASH_VALUES, compute_constants(2, 8))
        self.assertEqual(sha256_core.K, compute_constants(3, 64))

    def test_sha1_constants(self):
        # ⌊2³⁰·√n⌋ for n = 2, 3, 5, 10
        self.assertEqual(sha1_core.K, tuple(math.isqrt(n << 60) for n in (2, 3, 5, 10)))


class FunctionsTest(unittest.TestCase):
    def test_rotations(self):
        self.assertEqual(rotr(1, 1), 0x80000000)
        self.assertEqual(rotl(0x80000000, 1), 1)
        self.assertEqual(rotl(0x12345678, 8), 0x34567812)
        self.assertEqual(rotr(rotl(0xDEADBEEF, 13), 13), 0xDEADBEEF)

    def test_boolean_functions(self):
        x, y, z = 0xFF00FF00, 0xF0F0F0F0, 0xCCCCCCCC
        self.assertEqual(ch(x, y, z), 0xF0CCF0CC)
        self.assertEqual(parity(x, y, z), x ^ y ^ z)
        self.assertEqual(maj(x, y, z), 0xFCC0FCC0)
        self.assertEqual(ch(0, 0, 0xFFFFFFFF), 0xFFFFFFFF)
        self.assertEqual(ch(0xFFFFFFFF, 0, 0xFFFFFFFF), 0)


class CompressionTest(unittest.TestCase):
    def setUp(self):
        self.block = bytes(range(64))

    def test_sha1_schedule(self):
        W = sha1_core.schedule(self.block)
        self.assertEqual(len(W), 80)
        self.assertEqual(tuple(W[:16]), struct.unpack(">16L", self.block))
        self.assertEqual(W[16], rotl(W[13] ^ W[8] ^ W[2] ^ W[0], 1))

    def test_sha256_schedule(self):
        W = sha256_core.schedule(self.block)
        self.assertEqual(len(W), 64)
        self.assertEqual(tuple(W[:16]), struct.unpack(">16L", self.block))
        self.assertTrue(all(0 <= w <= 0xFFFFFFFF for w in W))

    def test_single_block_sha1(self):
        H = list(sha1_core.INITIAL_HASH_VALUES)
        sha1_core.compress(H, single_block(b"abc"))
        self.assertEqual(
            b"".join(h.to_bytes(4, "big") for h in H), hashlib.sha1(b"abc").digest()
        )

    def test_single_block_sha256(self):
        H = list(sha256_core.INITIAL_HASH_VALUES)
        sha256_core.compress(H, single_block(b"abc"))
        self.assertEqual(
            b"".join(h.to_bytes(4, "big") for h in H), hashlib.sha256(b"abc").digest()
        )

    def test_compress_updates_state_in_place(self):
        H = list(sha256_core.INITIAL_HASH_VALUES)
        same = H
        sha256_core.compress(H, self.block)
        self.assertIs(H, same)
        self.assertNotEqual(H, list(sha256_core.INITIAL_HASH_VALUES))

    def test_wrong_block_size(self):
        for core in (sha1_core, sha256_core):
            with self.subTest(core=core.NAME):
                with self.assertRaises(InternalConsistencyError):
                    core.compress(list(core.INITIAL_HASH_VALUES), bytes(63))
                with self.assertRaises(InternalConsistencyError):
                    core.compress([0] * 4, bytes(64))


if __name__ == "__main__":
    unittest.main()
