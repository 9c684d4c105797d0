import time

from wishlist_api.app.core.security import _b64_url_encode, create_access_token, decode_access_token

SECRET = "s3cret"


def test_round_trip_claims():
    token = create_access_token({"email": "a@x.com"}, SECRET, expires_delta=60)
    payload = decode_access_token(token, SECRET)
    assert payload["email"] == "a@x.com"
    assert payload["exp"] > time.time()


def test_token_without_exp_is_accepted():
    token = create_access_token({"email": "a@x.com"}, SECRET)
    assert decode_access_token(token, SECRET) == {"email": "a@x.com"}


def test_expired_token_is_rejected():
    token = create_access_token({"email": "a@x.com"}, SECRET, expires_delta=-10)
    assert decode_access_token(token, SECRET) is None


def test_wrong_secret_is_rejected():
    token = create_access_token({"email": "a@x.com"}, SECRET)
    assert decode_access_token(token, "other") is None


def test_tampered_payload_is_rejected():
    header, _, signature = create_access_token({"email": "a@x.com"}, SECRET).split(".")
    forged = _b64_url_encode(b'{"email":"admin@x.com"}')
    assert decode_access_token(f"{header}.{forged}.{signature}", SECRET) is None


def test_unsupported_algorithm_is_rejected():
    _, payload, signature = create_access_token({"email": "a@x.com"}, SECRET).split(".")
    none_header = _b64_url_encode(b'{"alg":"none","typ":"JWT"}')
    assert decode_access_token(f"{none_header}.{payload}.{signature}", SECRET) is None


def test_garbage_is_rejected():
    assert decode_access_token("a.b.c", SECRET) is None
    assert decode_access_token("only-one-part", SECRET) is None
    assert decode_access_token("", SECRET) is None
