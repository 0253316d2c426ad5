"""
Key derivation.

A key pair is either bound to an identifier (``secret = Hash(id)``),
which makes keys reproducible across processes, or drawn from the
secure random source for ephemeral participants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .config import DEFAULT_CONFIG, SchemeConfig
from .hash import hash_to_scalar


@dataclass(frozen=True)
class KeyPair:
    """Key pair  (x, Y = x·G)."""

    secret: Any
    public: Any

    def __repr__(self) -> str:
        # keep the secret out of logs and tracebacks
        return f"KeyPair(public={self.public!r})"


def derive_keypair(
    identifier: Optional[str] = None,
    config: SchemeConfig = DEFAULT_CONFIG,
) -> KeyPair:
    """
    Derive a key pair from *identifier*, or at random when it is ``None``.

    Parameters
    ----------
    identifier : str or None
        Identity string hashed to the secret scalar.
    config : SchemeConfig
        Group and hash parameters.
    """
    if identifier is None:
        secret = config.group.random_scalar()
    else:
        secret = hash_to_scalar(identifier, config)
    return KeyPair(secret=secret, public=secret * config.group.base)


def id_keypair(identifier: str, config: SchemeConfig = DEFAULT_CONFIG) -> KeyPair:
    return derive_keypair(identifier, config)


def random_keypair(config: SchemeConfig = DEFAULT_CONFIG) -> KeyPair:
    return derive_keypair(None, config)
