"""
Unit tests for password hashing and tokens
"""
from datetime import timedelta

import jwt
import pytest

from app.core.exceptions import Unauthorized
from app.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_roundtrip():
    hashed = get_password_hash('s3cret-pass')

    assert hashed != 's3cret-pass'
    assert verify_password('s3cret-pass', hashed)
    assert not verify_password('wrong-pass', hashed)


def test_malformed_hash_does_not_verify():
    assert not verify_password('anything', 'not-a-bcrypt-hash')


def test_token_carries_claims():
    token = create_access_token({'sub': 7, 'username': 'admin', 'role': 'admin'})

    payload = decode_access_token(token)

    assert payload['sub'] == '7'
    assert payload['username'] == 'admin'
    assert payload['exp'] > payload['iat']


def test_expired_token_rejected():
    token = create_access_token({'sub': 1}, expires_delta=timedelta(seconds=-10))

    with pytest.raises(Unauthorized) as exc_info:
        decode_access_token(token)

    assert exc_info.value.message == 'Token expired'


def test_token_signed_with_other_key_rejected():
    token = jwt.encode({'sub': '1', 'iat': 0, 'exp': 4102444800}, 'some-other-key', algorithm='HS256')

    with pytest.raises(Unauthorized) as exc_info:
        decode_access_token(token)

    assert exc_info.value.message == 'Invalid token'


def test_token_without_subject_rejected():
    token = create_access_token({'username': 'admin'})

    with pytest.raises(Unauthorized):
        decode_access_token(token)
