"""
SchoCo Test Fixtures
"""

import secrets

import pytest

from schoco.config import SchemeConfig
from schoco.errors import DecodeError
from schoco.keys import KeyPair, derive_keypair


# ── toy group ───────────────────────────────────────────────────────────
# Additive group Z_q with generator 7.  Discrete log is trivial, but the
# algebra is the same as on a curve, so the protocol code runs unchanged.
# Every arithmetic call bumps ``group.ops``.

TOY_ORDER = 2**61 - 1
TOY_BYTES = 8


class ToyScalar:
    __slots__ = ("group", "v")

    def __init__(self, group, v):
        self.group = group
        self.v = v % TOY_ORDER

    def to_bytes(self):
        return self.v.to_bytes(TOY_BYTES, "big")

    def __add__(self, o):
        self.group.ops += 1
        return ToyScalar(self.group, self.v + o.v)

    def __sub__(self, o):
        self.group.ops += 1
        return ToyScalar(self.group, self.v - o.v)

    def __mul__(self, o):
        self.group.ops += 1
        if isinstance(o, ToyPoint):
            return ToyPoint(self.group, self.v * o.v)
        return ToyScalar(self.group, self.v * o.v)

    def __eq__(self, o):
        return isinstance(o, ToyScalar) and self.v == o.v

    def __hash__(self):
        return hash(self.v)


class ToyPoint:
    __slots__ = ("group", "v")

    def __init__(self, group, v):
        self.group = group
        self.v = v % TOY_ORDER

    def to_bytes(self):
        return self.v.to_bytes(TOY_BYTES, "big")

    def __add__(self, o):
        self.group.ops += 1
        return ToyPoint(self.group, self.v + o.v)

    def __sub__(self, o):
        self.group.ops += 1
        return ToyPoint(self.group, self.v - o.v)

    def __eq__(self, o):
        return isinstance(o, ToyPoint) and self.v == o.v

    def __hash__(self):
        return hash(self.v)


class CountingToyGroup:
    """``Group`` over Z_q that counts scalar, point and hash operations."""

    name = "toy"
    order = TOY_ORDER
    scalar_bytes = TOY_BYTES
    point_bytes = TOY_BYTES

    def __init__(self):
        self.ops = 0

    @property
    def base(self):
        return ToyPoint(self, 7)

    def random_scalar(self):
        self.ops += 1
        return ToyScalar(self, secrets.randbelow(TOY_ORDER - 1) + 1)

    def scalar_from_digest(self, digest):
        self.ops += 1
        return ToyScalar(self, int.from_bytes(digest, "big"))

    def decode_scalar(self, data):
        if len(data) != TOY_BYTES:
            raise DecodeError("bad toy scalar length")
        v = int.from_bytes(data, "big")
        if v >= TOY_ORDER:
            raise DecodeError("toy scalar out of range")
        return ToyScalar(self, v)

    def decode_point(self, data):
        if len(data) != TOY_BYTES:
            raise DecodeError("bad toy point length")
        v = int.from_bytes(data, "big")
        if v >= TOY_ORDER:
            raise DecodeError("toy point out of range")
        return ToyPoint(self, v)


# ── fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def root_keypair() -> KeyPair:
    """Deterministic root key pair, x = Hash("root")."""
    return derive_keypair("root")


@pytest.fixture
def other_keypair() -> KeyPair:
    return derive_keypair("someone else")


@pytest.fixture
def toy_group() -> CountingToyGroup:
    return CountingToyGroup()


@pytest.fixture
def toy_config(toy_group) -> SchemeConfig:
    """Scheme parameters on the counting toy group."""
    return SchemeConfig(group=toy_group)


@pytest.fixture
def messages():
    """Five messages in signing order (oldest first)."""
    return ["first message", "second message", "third message",
            "fourth message", "fifth message"]
