"""Tests for password hashing."""

from domain_privileges.features.users.repositories import hash_password, verify_password


def test_hash_and_verify():
    encoded = hash_password("secret-password", 1000)

    assert verify_password("secret-password", encoded)
    assert not verify_password("wrong-password", encoded)


def test_salt_differs_between_hashes():
    assert hash_password("same", 1000) != hash_password("same", 1000)


def test_malformed_encoding_does_not_verify():
    assert not verify_password("x", "not-a-hash")
    assert not verify_password("x", "md5$1$abc$def")
    assert not verify_password("x", "pbkdf2_sha256$nan$abc$def")
