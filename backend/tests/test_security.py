from app.core.security import get_password_hash, verify_password


def test_password_hash_is_salted_and_verifies():
    first = get_password_hash("s3cret")
    second = get_password_hash("s3cret")
    assert first != "s3cret"
    assert first != second
    assert verify_password("s3cret", first)
    assert verify_password("s3cret", second)
    assert not verify_password("wrong", first)
