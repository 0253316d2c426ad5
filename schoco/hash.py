"""
Challenge hash for SchoCo.

    Hash(x) = ScalarFromDigest( SHA-256(x) )

Every challenge binds three fields in a fixed order:

    h = Hash( encode(R) ‖ m ‖ encode(Y) )

with ``R`` the commitment point, ``m`` the message and ``Y`` the public
key the signature is checked against.  Signing, aggregation and chain
verification all go through :func:`hash_challenge`; a different field
order would produce chains that no other implementation accepts.

An optional BIP-340 style domain tag (``SchemeConfig.hash_tag``) turns
the digest into  H( H(tag) ‖ H(tag) ‖ x ).
"""

from __future__ import annotations

import hashlib
from typing import Any, Optional, Union

from .config import DEFAULT_CONFIG, SchemeConfig

Message = Union[str, bytes]


def _hasher(name: str, tag: Optional[bytes]) -> Any:
    """Return a digest context, pre-loaded with the tag prefix if any."""
    h = hashlib.new(name)
    if tag is not None:
        tag_hash = hashlib.new(name, tag).digest()
        h.update(tag_hash)
        h.update(tag_hash)
    return h


def encode_message(message: Message) -> bytes:
    """Messages travel as UTF-8 when given as ``str``."""
    if isinstance(message, bytes):
        return message
    if isinstance(message, str):
        return message.encode("utf-8")
    raise TypeError(f"message must be str or bytes, not {type(message).__name__}")


def hash_to_scalar(data: Message, config: SchemeConfig = DEFAULT_CONFIG) -> Any:
    """Map an arbitrary byte string (or UTF-8 text) to a field scalar."""
    h = _hasher(config.hash_name, config.hash_tag)
    h.update(encode_message(data))
    return config.group.scalar_from_digest(h.digest())


def hash_challenge(
    R: Any,
    message: Message,
    Y: Any,
    config: SchemeConfig = DEFAULT_CONFIG,
) -> Any:
    r"""
    Schnorr challenge  h = Hash(R ‖ m ‖ Y).

    Points are fed in their canonical fixed-length encoding, so the
    concatenation is unambiguous without length prefixes.
    """
    return hash_to_scalar(
        R.to_bytes() + encode_message(message) + Y.to_bytes(),
        config,
    )
