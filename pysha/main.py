# main.py
# A naive Python implementation of the secure hash standard (NIST FIPS 180-4).

from __future__ import annotations

import enum
import hmac
import io
import logging
import typing as t
import warnings

from functools import wraps

import typing_extensions as te

from . import sha1_core
from . import sha256_core
from .constants import FAMILY_512, FAMILY_1024, MAX_INPUT_LENGTH, AlgorithmFamily
from .stream import CompressionCore, StreamingHasher
from .utils import ByteSource, InputTooLargeError, UnsupportedAlgorithmError

logger = logging.getLogger(__name__)


class Algorithm(enum.Enum):
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA512_224 = "sha512_224"
    SHA512_256 = "sha512_256"

    @classmethod
    def from_name(cls, name: t.Union[str, Algorithm]) -> Algorithm:
        """Accepts "sha256", "SHA-256", "sha512/224", "SHA512_224" and so on."""
        if isinstance(name, cls):
            return name

        key = name.strip().lower().replace("-", "").replace("/", "_")
        try:
            return cls(key)
        except ValueError:  # unknown algorithm name
            raise ValueError(f"Unsupported algorithm: {name!r}") from None

    @property
    def family(self) -> AlgorithmFamily:
        if self in (Algorithm.SHA1, Algorithm.SHA224, Algorithm.SHA256):
            return FAMILY_512
        return FAMILY_1024

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self]

    def __str__(self) -> str:
        return "SHA-" + self.value[3:].replace("_", "/")


_DIGEST_SIZES: dict[Algorithm, int] = {
    Algorithm.SHA1: 20,
    Algorithm.SHA224: 28,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
    Algorithm.SHA512_224: 28,
    Algorithm.SHA512_256: 32,
}

# Algorithms with a compression core. Everything else is reserved.
_CORES: dict[Algorithm, CompressionCore] = {
    Algorithm.SHA1: sha1_core,
    Algorithm.SHA256: sha256_core,
}


def core_for(algorithm: Algorithm) -> CompressionCore:
    try:
        return _CORES[algorithm]
    except KeyError:
        raise UnsupportedAlgorithmError(algorithm) from None


def hash_stream(
    source: ByteSource, algorithm: t.Union[Algorithm, str] = Algorithm.SHA256
) -> str:
    """Hash everything `source` yields and return the hex digest."""
    algorithm = Algorithm.from_name(algorithm)
    hasher = StreamingHasher(core_for(algorithm))
    logger.debug("Hashing %r with %s", source, algorithm)
    return hasher.read_from(source).hexdigest()


def hash_message(
    message: t.Union[str, te.Buffer], algorithm: t.Union[Algorithm, str] = Algorithm.SHA256
) -> str:
    """Return the hex digest of `message`. Strings are hashed as UTF-8."""
    if isinstance(message, str):
        message = message.encode("utf-8")

    length = memoryview(message).nbytes
    if length >= MAX_INPUT_LENGTH:
        raise InputTooLargeError(length, MAX_INPUT_LENGTH)

    algorithm = Algorithm.from_name(algorithm)
    core = core_for(algorithm)
    logger.debug("Hashing %d byte message with %s", length, algorithm)
    return StreamingHasher(core).read_from(io.BytesIO(message)).hexdigest()


class HASH(object):
    """hashlib-style wrapper around a `StreamingHasher`."""

    __slots__: tuple = (
        "_hasher",
        "algorithm",
        "digest_size",
        "block_size",
        "name",
    )

    def __new__(cls, algorithm: Algorithm, *, usedforsecurity: bool = True) -> HASH:
        if algorithm is Algorithm.SHA1 and usedforsecurity:
            warnings.warn(
                "SHA-1 is not considered secure for cryptographic purposes.",
                UserWarning,
                stacklevel=3,
            )
        return super().__new__(cls)

    def __init__(self, algorithm: Algorithm, *, usedforsecurity: bool = True) -> None:
        core = core_for(algorithm)

        self._hasher: StreamingHasher = StreamingHasher(core)
        self.algorithm: Algorithm = algorithm
        self.digest_size: int = core.DIGEST_SIZE
        self.block_size: int = core.FAMILY.block_size
        self.name: str = algorithm.value

    def __repr__(self) -> str:
        return f"<{self.name} HASH object @ {hex(id(self))}>"

    def copy(self) -> HASH:
        clone = object.__new__(self.__class__)
        clone._hasher = self._hasher.copy()
        clone.algorithm = self.algorithm
        clone.digest_size = self.digest_size
        clone.block_size = self.block_size
        clone.name = self.name
        return clone

    def digest(self) -> bytes:
        # Finalize a copy so the object stays usable.
        return self._hasher.copy().digest()

    def hexdigest(self) -> str:
        return self._hasher.copy().hexdigest()

    def update(self, obj: te.Buffer, /) -> None:
        if isinstance(obj, str):
            raise TypeError("Strings must be encoded before hashing")
        self._hasher.update(obj)


"""
NOTE: The `usedforsecurity` parameter in the following functions is primarily advisory.
In most cases, it has no effect.  However,  for insecure algorithms like SHA-1, setting
`usedforsecurity=True` raises a UserWarning.
"""


def _shadef(
    algorithm: Algorithm,
) -> t.Callable[[t.Callable[..., HASH]], t.Callable[..., HASH]]:

    def decorator(func: t.Callable[..., HASH]) -> t.Callable[..., HASH]:

        @wraps(func)
        def wrapper(string: te.Buffer = b"", *, usedforsecurity: bool = True) -> HASH:

            if isinstance(string, str):
                raise TypeError("Strings must be encoded before hashing")

            h = HASH(algorithm, usedforsecurity=usedforsecurity)

            if string:
                h.update(string)
            return h

        wrapper.digest_size = algorithm.digest_size
        wrapper.block_size = algorithm.family.block_size
        wrapper.name = algorithm.value
        return wrapper

    return decorator


@_shadef(Algorithm.SHA1)
def sha1(string: te.Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(Algorithm.SHA224)
def sha224(string: te.Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(Algorithm.SHA256)
def sha256(string: te.Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(Algorithm.SHA384)
def sha384(string: te.Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(Algorithm.SHA512)
def sha512(string: te.Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(Algorithm.SHA512_224)
def sha512_224(string: te.Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(Algorithm.SHA512_256)
def sha512_256(string: te.Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


def new(
    name: t.Union[str, Algorithm],
    string: te.Buffer = b"",
    *,
    usedforsecurity: bool = True,
) -> HASH:
    h = HASH(Algorithm.from_name(name), usedforsecurity=usedforsecurity)
    if string:
        h.update(string)
    return h


@t.overload
def compare_digest(a: te.Buffer, b: te.Buffer, /) -> bool: ...
@t.overload
def compare_digest(a: str, b: str, /) -> bool: ...
def compare_digest(a, b, /):
    """Compare two digests (or two ASCII hex digests) without short-circuiting."""
    return hmac.compare_digest(a, b)


__all__: list = [
    "Algorithm",
    "HASH",
    "core_for",
    "hash_message",
    "hash_stream",
    "new",
    "compare_digest",
    "sha1",
    "sha224",
    "sha256",
    "sha384",
    "sha512",
    "sha512_224",
    "sha512_256",
]
