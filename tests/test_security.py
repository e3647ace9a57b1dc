"""Tests for password hashing"""
from signup_api.core.security import get_password_hash, verify_password


def test_hash_is_not_plaintext():
    hashed = get_password_hash("P4ssword")
    assert hashed != "P4ssword"
    assert hashed.startswith("$2")


def test_hash_is_salted():
    assert get_password_hash("P4ssword") != get_password_hash("P4ssword")


def test_verify_password():
    hashed = get_password_hash("P4ssword")
    assert verify_password("P4ssword", hashed)
    assert not verify_password("p4ssword", hashed)


def test_long_password_is_accepted():
    password = "Aa1" + "x" * 100
    assert verify_password(password, get_password_hash(password))
