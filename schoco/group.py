"""
Group arithmetic interface consumed by the signing and chain code.

The protocol layer never touches curve internals.  It needs a base
point, a secure scalar source, a digest-to-scalar map and strict
decoders; everything else happens through the operators of the scalar
and point objects the group hands out:

    s + t,  s - t,  s * t        (scalar field)
    s * P,  P + Q,  P - Q,  ==   (group)
    x.to_bytes()                 (canonical fixed-length encoding)

``schoco.curve.Secp256k1Group`` is the production backend; the test
suite drives the same protocol code through a toy group.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Group(Protocol):
    """Prime-order group together with its scalar field."""

    name: str
    order: int
    scalar_bytes: int
    point_bytes: int

    @property
    def base(self) -> Any:
        """Distinguished generator *G*."""
        ...

    def random_scalar(self) -> Any:
        """Uniform non-zero scalar from a cryptographically secure source."""
        ...

    def scalar_from_digest(self, digest: bytes) -> Any:
        """Deterministic scalar from a hash digest (reduced mod order)."""
        ...

    def decode_scalar(self, data: bytes) -> Any:
        """Strict inverse of ``Scalar.to_bytes``; raises ``DecodeError``."""
        ...

    def decode_point(self, data: bytes) -> Any:
        """Strict inverse of ``Point.to_bytes``; raises ``DecodeError``."""
        ...
