"""Unit tests for password hashing."""

from argon2 import PasswordHasher

from chatter.util.password import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_is_salted(self):
        """Hashing the same password twice gives different hashes."""
        assert hash_password("secret1") != hash_password("secret1")

    def test_verify_correct_password(self):
        is_valid, new_hash = verify_password("secret1", hash_password("secret1"))

        assert is_valid
        assert new_hash is None

    def test_verify_wrong_password(self):
        is_valid, new_hash = verify_password("wrong", hash_password("secret1"))

        assert not is_valid
        assert new_hash is None

    def test_verify_garbage_hash(self):
        assert verify_password("secret1", "not-a-hash") == (False, None)

    def test_outdated_parameters_trigger_rehash(self):
        """Hashes made with weaker parameters are upgraded on login."""
        weak_hash = PasswordHasher(time_cost=1, memory_cost=8192).hash("secret1")

        is_valid, new_hash = verify_password("secret1", weak_hash)

        assert is_valid
        assert new_hash is not None
        assert verify_password("secret1", new_hash) == (True, None)
