"""NSEC3 hash function and salt parsing."""

import base64
import hashlib
import logging
import re

logger = logging.getLogger(__name__)

_HEX_SALT_PATTERN = re.compile(r"^(?:[0-9a-fA-F]{2})*\Z")


def parse_salt(salt: str) -> bytes:
    """
    Decode a hex salt string into raw bytes.

    An empty string means "no salt". Text that is not well-formed hex
    (odd length or non-hex characters) is used as-is, encoded as UTF-8,
    after logging a warning.

    Returns:
        Raw salt bytes (possibly empty).
    """
    if not salt:
        return b""

    if _HEX_SALT_PATTERN.match(salt):
        return bytes.fromhex(salt)

    logger.warning(f"Invalid hex salt {salt!r}, using as-is")
    return salt.encode("utf-8")


def nsec3_digest(fqdn: str, salt: bytes, iterations: int) -> bytes:
    """
    Compute the raw iterated, salted SHA-1 digest of a name.

    The name is lower-cased and hashed as plain text bytes
    (not DNS wire format):

        digest = SHA1(name || salt)
        repeat `iterations` times: digest = SHA1(digest || salt)

    Returns:
        20-byte digest.
    """
    digest = hashlib.sha1(fqdn.lower().encode("utf-8") + salt).digest()
    for _ in range(iterations):
        digest = hashlib.sha1(digest + salt).digest()
    return digest


def encode_digest(digest: bytes) -> str:
    """Lower-case unpadded RFC 4648 base-32 of a digest."""
    return base64.b32encode(digest).decode("ascii").rstrip("=").lower()


def nsec3_hash(fqdn: str, salt: bytes = b"", iterations: int = 0) -> str:
    """
    Calculate the NSEC3 hash for a fully-qualified domain name.

    Pure and thread-safe. `iterations=0` performs exactly one SHA-1.

    Returns:
        32-character lower-case base-32 string.
    """
    return encode_digest(nsec3_digest(fqdn, salt, iterations))


def build_fqdn(label: str, domain: str) -> str:
    """Join a candidate label onto the zone apex."""
    return f"{label}.{domain}"
