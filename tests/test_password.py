"""Tests for password hashing."""

from task_manager.services.password import hash_password, verify_dummy, verify_password


def test_hash_is_salted_and_verifies():
    first = hash_password("hunter2")
    second = hash_password("hunter2")

    assert first != second
    assert verify_password("hunter2", first)
    assert verify_password("hunter2", second)


def test_hash_never_contains_plaintext():
    hashed = hash_password("hunter2")
    assert hashed != "hunter2"
    assert "hunter2" not in hashed


def test_wrong_password_does_not_verify():
    assert not verify_password("hunter3", hash_password("hunter2"))


def test_unrecognised_hash_does_not_verify():
    assert not verify_password("hunter2", "hunter2")


def test_dummy_verification_never_matches():
    assert verify_dummy("not-a-real-password") is False


def test_every_byte_of_a_long_password_counts():
    hashed = hash_password("a" * 72 + "correct")
    assert verify_password("a" * 72 + "correct", hashed)
    assert not verify_password("a" * 72 + "WRONG", hashed)


def test_nul_bytes_are_hashed_not_rejected():
    hashed = hash_password("x\x00y")
    assert verify_password("x\x00y", hashed)
    assert not verify_password("x", hashed)


def test_dummy_verification_accepts_any_password():
    assert verify_dummy("x\x00y") is False
    assert verify_dummy("a" * 500) is False
