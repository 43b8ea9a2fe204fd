import hashlib
import logging
import pathlib

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1 << 16

DEFAULT_HASH_ALGORITHM = 'sha256'

# Name -> digest size in bytes
HASH_ALGORITHMS = {
    'sha256': 32,
    'sha512': 64,
    'sha3_256': 32,
    'blake2b': 64,
}


def digest_length(algorithm: str) -> int:
    """Length of the hexadecimal digest produced by ``algorithm``."""
    try:
        return HASH_ALGORITHMS[algorithm] * 2
    except KeyError:
        raise ValueError(f"Unknown hash algorithm: {algorithm}") from None


def compute_digest(path: pathlib.Path, algorithm: str = DEFAULT_HASH_ALGORITHM,
                   chunk_size: int = CHUNK_SIZE) -> str:
    """Hash the full content of a file and return the uppercase hex digest.

    The file is read in chunks of ``chunk_size`` bytes until end of input, so
    large files are never loaded into memory at once.

    Raises:
        OSError: the file cannot be opened or read to completion
        ValueError: ``algorithm`` is not one of HASH_ALGORITHMS
    """
    if algorithm not in HASH_ALGORITHMS:
        raise ValueError(f"Unknown hash algorithm: {algorithm}")

    logger.info(f"Starting hash computation for: {path}")
    h = hashlib.new(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b''):
            h.update(chunk)
    digest = h.hexdigest().upper()
    logger.info(f"Completed hash computation for: {path}")
    return digest
