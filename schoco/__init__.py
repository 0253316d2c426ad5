"""
SchoCo: Schnorr signature concatenation.

A sequence of messages, each signed by the holder of the previous
signature, is compressed into one bundle verified against a single
root public key:

- a standard Schnorr signature  (R, S)  exposes  S  as an
  **aggregation key** for the next signer;
- each **aggregate** step keeps the old  R  as a *partial signature*
  and produces a fresh full signature;
- **verification** telescopes through the partial signatures to the
  last signer's public key and runs one Schnorr check.

Quick start
-----------
::

    from schoco import derive_keypair, sign, aggregate, verify_chain

    root = derive_keypair("root")
    s1 = sign("m1", root.secret)
    p1, s2 = aggregate("m2", s1)
    p2, s3 = aggregate("m3", s2)

    # newest first
    assert verify_chain(root.public, ["m3", "m2", "m1"], [p2, p1], s3)

Or, with the ordering handled for you::

    from schoco import build_chain

    chain = build_chain(root.secret, ["m1", "m2", "m3"])
    assert chain.verify()
"""

__version__ = "0.1.0"

# ── group backend ───────────────────────────────────────────────────────
from .curve import Scalar, Point, G, ORDER, Secp256k1Group
from .group import Group

# ── configuration & errors ──────────────────────────────────────────────
from .config import (
    SchemeConfig,
    LogConfig,
    DEFAULT_CONFIG,
    get_group,
    setup_logging,
)
from .errors import SchocoError, DecodeError, MalformedChainError

# ── hashing & keys ──────────────────────────────────────────────────────
from .hash import hash_to_scalar, hash_challenge
from .keys import KeyPair, derive_keypair, id_keypair, random_keypair

# ── signatures ──────────────────────────────────────────────────────────
from .schnorr import Signature, sign, verify
from .chain import (
    Chain,
    aggregate,
    build_chain,
    check_chain_shape,
    recover_public_key,
    verify_chain,
)

__all__ = [
    # version
    "__version__",
    # group
    "Scalar", "Point", "G", "ORDER", "Secp256k1Group", "Group",
    # config & errors
    "SchemeConfig", "LogConfig", "DEFAULT_CONFIG", "get_group",
    "setup_logging",
    "SchocoError", "DecodeError", "MalformedChainError",
    # hashing & keys
    "hash_to_scalar", "hash_challenge",
    "KeyPair", "derive_keypair", "id_keypair", "random_keypair",
    # signatures
    "Signature", "sign", "verify",
    "Chain", "aggregate", "build_chain", "check_chain_shape",
    "recover_public_key", "verify_chain",
]
