# functions.py
# Operations on 32-bit words, see definition in NIST FIPS 180-4, Sections 2.2.2, 3.2 and 4.1

from __future__ import annotations

from .constants import MASK32


def rotr(x: int, n: int) -> int:
    '''Rotate Right (circular right shift) operation'''
    return ((x >> n) | (x << (32 - n))) & MASK32

def rotl(x: int, n: int) -> int:
    '''Rotate Left (circular left shift) operation'''
    return ((x << n) | (x >> (32 - n))) & MASK32


def shr(x: int, n: int) -> int:
    '''Right Shift operation'''
    return x >> n


def ch(x: int, y: int, z: int) -> int:
    '''Choice
    _
    SHA-1 -> 0 <= t <= 19, SHA-256 -> every round'''
    return ((x & y) ^ (~x & z)) & MASK32

def parity(x: int, y: int, z: int) -> int:
    '''Parity
    _
    SHA-1 -> 20 <= t <= 39 and 60 <= t <= 79'''
    return x ^ y ^ z

def maj(x: int, y: int, z: int) -> int:
    '''Majority
    _
    SHA-1 -> 40 <= t <= 59, SHA-256 -> every round'''
    return (x & y) ^ (x & z) ^ (y & z)


# SHA-256 sigma functions, Section 4.1.2
def big_sigma0(x: int) -> int:
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)

def big_sigma1(x: int) -> int:
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)

def sigma0(x: int) -> int:
    return rotr(x, 7) ^ rotr(x, 18) ^ shr(x, 3)

def sigma1(x: int) -> int:
    return rotr(x, 17) ^ rotr(x, 19) ^ shr(x, 10)



__all__: list = [var for var in globals().keys() if not var.startswith('_') and var not in ('annotations', 'MASK32')]
