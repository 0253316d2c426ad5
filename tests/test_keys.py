"""
SchoCo Key Derivation Tests
"""

from schoco.curve import G
from schoco.hash import hash_to_scalar
from schoco.keys import KeyPair, derive_keypair, id_keypair, random_keypair


class TestDeriveKeypair:
    """Tests for derive_keypair."""

    def test_identifier_keypair(self):
        """secret = Hash(identifier), public = secret·G."""
        kp = derive_keypair("root")
        assert kp.secret == hash_to_scalar("root")
        assert kp.public == kp.secret * G

    def test_identifier_is_deterministic(self):
        assert derive_keypair("alice") == derive_keypair("alice")
        assert derive_keypair("alice") != derive_keypair("bob")

    def test_random_keypair(self):
        kp = derive_keypair()
        assert kp.public == kp.secret * G
        assert derive_keypair() != kp

    def test_convenience_forms(self):
        assert id_keypair("root") == derive_keypair("root")
        kp = random_keypair()
        assert kp.public == kp.secret * G

    def test_repr_hides_secret(self):
        kp = derive_keypair("root")
        assert "secret" not in repr(kp)
        assert isinstance(kp, KeyPair)

    def test_toy_group(self, toy_config):
        kp = derive_keypair("root", toy_config)
        assert kp.public == kp.secret * toy_config.group.base
