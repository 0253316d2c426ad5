"""
Single-message Schnorr signatures.

    k ←$ Z_q
    R = k·G
    h = Hash(R ‖ m ‖ x·G)
    S = k − h·x

Verification accepts iff  S·G == R − h·Y.

The response ``S`` is what makes a signature continuable: it is a
valid private key for the point  S·G, which anyone can compute from
public data as  R − h·Y.  ``schoco.chain`` builds on exactly this.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from .config import DEFAULT_CONFIG, SchemeConfig
from .errors import DecodeError
from .hash import Message, hash_challenge


@dataclass(frozen=True)
class Signature:
    """Schnorr signature  (R, S)."""

    R: Any
    S: Any

    def extract_agg_key(self) -> Tuple[Any, Any]:
        """
        Split into  (aggregation key, partial signature)  =  (S, R).

        Signing a new message with the aggregation key continues the
        chain; ``R`` is what stays behind in the concatenated signature.
        """
        return self.S, self.R

    def aggregation_public_key(self, config: SchemeConfig = DEFAULT_CONFIG) -> Any:
        """Public key  S·G  of the next chain link."""
        return self.S * config.group.base

    def to_bytes(self) -> bytes:
        """Serialise as  encode(R) ‖ encode(S)."""
        return self.R.to_bytes() + self.S.to_bytes()

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        config: SchemeConfig = DEFAULT_CONFIG,
    ) -> Signature:
        group = config.group
        expected = group.point_bytes + group.scalar_bytes
        if len(data) != expected:
            raise DecodeError(
                f"signature needs {expected} bytes, got {len(data)}"
            )
        R = group.decode_point(data[:group.point_bytes])
        S = group.decode_scalar(data[group.point_bytes:])
        return cls(R=R, S=S)

    def __str__(self) -> str:
        return f"(R={self.R.to_bytes().hex()}, S={self.S.to_bytes().hex()})"


def sign(
    message: Message,
    secret: Any,
    config: SchemeConfig = DEFAULT_CONFIG,
) -> Signature:
    """
    Sign *message* with private scalar *secret*.

    Consumes one nonce from the secure random source.
    """
    group = config.group
    k = group.random_scalar()
    R = k * group.base
    h = hash_challenge(R, message, secret * group.base, config)
    return Signature(R=R, S=k - h * secret)


def verify(
    message: Message,
    signature: Signature,
    public_key: Any,
    config: SchemeConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Standard Schnorr verification:  S·G  ==  R − h·Y.

    Returns ``False`` on any mismatch; never raises for well-typed input.
    """
    h = hash_challenge(signature.R, message, public_key, config)
    lhs = signature.S * config.group.base
    rhs = signature.R - (h * public_key)
    return lhs == rhs
