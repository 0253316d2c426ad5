"""
secp256k1 group backend on top of libsecp256k1.

Scalar multiplication and point addition are delegated to ``coincurve``,
which wraps Bitcoin Core's libsecp256k1; scalar-field arithmetic is
plain Python integers modulo the group order.

Install
-------
    pip install coincurve>=18.0.0

Encodings
---------
- Scalar: 32 bytes big-endian, strictly below ``ORDER``.
- Point:  33 bytes SEC 1 compressed (``0x02``/``0x03`` ‖ x).

References
----------
- SEC 1 v2 §2.3.3   elliptic-curve point to octet string
- SEC 2 v2 §2.4.1   secp256k1 domain parameters
"""

from __future__ import annotations

import secrets
from typing import Optional

from coincurve import PrivateKey as _SK, PublicKey as _PK

from .errors import DecodeError

# ── secp256k1 constants ─────────────────────────────────────────────────
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SCALAR_BYTES = 32
COMPRESSED_BYTES = 33


# ── Scalar  (Z_q arithmetic) ────────────────────────────────────────────
class Scalar:
    """Element of the scalar field  Z_q  where *q* = ``ORDER``."""

    __slots__ = ("_v",)

    def __init__(self, value: int) -> None:
        self._v = value % ORDER

    @classmethod
    def random(cls) -> Scalar:
        """Uniform in [1, q-1] via rejection sampling."""
        while True:
            c = int.from_bytes(secrets.token_bytes(SCALAR_BYTES), "big")
            if 0 < c < ORDER:
                return cls(c)

    @classmethod
    def from_bytes(cls, data: bytes) -> Scalar:
        """Strict decode: exactly 32 bytes, value below the group order."""
        if len(data) != SCALAR_BYTES:
            raise DecodeError(
                f"scalar needs {SCALAR_BYTES} bytes, got {len(data)}"
            )
        v = int.from_bytes(data, "big")
        if v >= ORDER:
            raise DecodeError("scalar out of range")
        return cls(v)

    @classmethod
    def from_bytes_reduce(cls, data: bytes) -> Scalar:
        """Hash-output safe: reduce arbitrary length modulo *q*."""
        return cls(int.from_bytes(data, "big"))

    def to_bytes(self) -> bytes:
        return self._v.to_bytes(SCALAR_BYTES, "big")

    @property
    def value(self) -> int:
        return self._v

    def is_zero(self) -> bool:
        return self._v == 0

    # arithmetic -------------------------------------------------------------
    def __add__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        return Scalar(self._v + o._v)

    def __sub__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        return Scalar(self._v - o._v)

    def __mul__(self, o):
        if isinstance(o, Scalar):
            return Scalar(self._v * o._v)
        if isinstance(o, Point):
            return o._smul(self)
        return NotImplemented

    def __neg__(self) -> Scalar:
        return Scalar(-self._v)

    def __eq__(self, o: object) -> bool:
        if isinstance(o, Scalar):
            return self._v == o._v
        return False

    def __hash__(self) -> int:
        return hash(self._v)

    def __repr__(self) -> str:
        h = hex(self._v)
        return f"Scalar(0x{h[2:10]}…)" if len(h) > 14 else f"Scalar({h})"


# ── Point  (secp256k1 group element via libsecp256k1) ───────────────────
class Point:
    """
    Point on secp256k1.

    The identity (point at infinity) is represented by a flag rather than
    a ``coincurve.PublicKey``, which cannot hold it.  It only arises from
    arithmetic; ``from_bytes`` never produces it.
    """

    __slots__ = ("_pk", "_inf")

    def __init__(self, *, pk: Optional[_PK] = None, infinity: bool = False):
        self._pk: Optional[_PK] = pk
        self._inf: bool = infinity

    @classmethod
    def generator(cls) -> Point:
        """Standard base point *G*."""
        return cls(pk=_SK(b"\x00" * 31 + b"\x01").public_key)

    @classmethod
    def identity(cls) -> Point:
        return cls(infinity=True)

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """Strict decode of a 33-byte SEC 1 compressed point."""
        if len(data) != COMPRESSED_BYTES:
            raise DecodeError(
                f"point needs {COMPRESSED_BYTES} bytes, got {len(data)}"
            )
        if data[0] not in (0x02, 0x03):
            raise DecodeError(f"bad point prefix 0x{data[0]:02x}")
        try:
            return cls(pk=_PK(bytes(data)))
        except ValueError as exc:
            raise DecodeError("bytes are not a point on secp256k1") from exc

    def to_bytes(self) -> bytes:
        # the identity has no SEC 1 compressed form; zeros keep hashing total
        if self._inf:
            return b"\x00" * COMPRESSED_BYTES
        return self._pk.format(compressed=True)  # type: ignore[union-attr]

    def is_inf(self) -> bool:
        return self._inf

    # group operations -------------------------------------------------------
    def _smul(self, s: Scalar) -> Point:
        """Scalar multiplication  s · self  (C speed)."""
        if self._inf or s.is_zero():
            return Point.identity()
        copy = _PK(self._pk.format())  # type: ignore[union-attr]
        return Point(pk=copy.multiply(s.to_bytes()))

    def __neg__(self) -> Point:
        if self._inf:
            return self
        raw = bytearray(self._pk.format(compressed=True))  # type: ignore
        raw[0] ^= 0x01            # 0x02 ↔ 0x03 flip parity
        return Point(pk=_PK(bytes(raw)))

    def __add__(self, o: Point) -> Point:
        if not isinstance(o, Point):
            return NotImplemented
        if self._inf:
            return o
        if o._inf:
            return self
        # P + (-P) = O, which libsecp256k1 refuses to combine
        if self._pk.format() == (-o)._pk.format():  # type: ignore
            return Point.identity()
        return Point(pk=_PK.combine_keys(
            [self._pk, o._pk]))  # type: ignore[list-item]

    def __sub__(self, o: Point) -> Point:
        if not isinstance(o, Point):
            return NotImplemented
        return self + (-o)

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return False
        if self._inf or o._inf:
            return self._inf and o._inf
        return self._pk.format() == o._pk.format()  # type: ignore

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        if self._inf:
            return "Point(∞)"
        return f"Point(0x{self.to_bytes().hex()[:16]}…)"


G = Point.generator()


# ── group adapter ───────────────────────────────────────────────────────
class Secp256k1Group:
    """``Group`` implementation backed by :class:`Scalar` and :class:`Point`."""

    name = "secp256k1"
    order = ORDER
    scalar_bytes = SCALAR_BYTES
    point_bytes = COMPRESSED_BYTES

    @property
    def base(self) -> Point:
        return G

    def random_scalar(self) -> Scalar:
        return Scalar.random()

    def scalar_from_digest(self, digest: bytes) -> Scalar:
        return Scalar.from_bytes_reduce(digest)

    def decode_scalar(self, data: bytes) -> Scalar:
        return Scalar.from_bytes(data)

    def decode_point(self, data: bytes) -> Point:
        return Point.from_bytes(data)

    def __eq__(self, o: object) -> bool:
        return isinstance(o, Secp256k1Group)

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return "Secp256k1Group()"
