# pysha
# A naive Python implementation of the secure hash standard (NIST FIPS 180-4).

from .main import (
    HASH,
    Algorithm,
    compare_digest,
    hash_message,
    hash_stream,
    new,
    sha1,
    sha224,
    sha256,
    sha384,
    sha512,
    sha512_224,
    sha512_256,
)
from .utils import (
    HashError,
    InputTooLargeError,
    InternalConsistencyError,
    SourceReadError,
    UnsupportedAlgorithmError,
)

__version__ = "0.2.0"
