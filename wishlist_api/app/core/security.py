"""
Bearer token authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens are
issued by an external service and signed with a shared secret; the
handler only verifies them and reads the caller's identity from a
claim (``email`` by default).

``create_access_token`` exists for tooling and tests (see
``manage.py create-token``); the API itself never issues tokens.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings
from .errors import InvalidTokenError, UnauthenticatedError


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    data: Dict[str, Any],
    secret: str,
    expires_delta: Optional[int] = None,
) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field representing the
    expiration time as a UNIX timestamp when ``expires_delta`` is
    given.  A standard header with algorithm HS256 is used.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. {"email": "user@example.com"}).
    secret : str
        Shared signing secret.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  ``None`` issues a token
        without an expiry claim.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    if expires_delta is not None:
        to_encode["exp"] = int(time.time()) + expires_delta
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, secret))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str, secret: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Splits the token into header, payload and signature, checks that
    the header names HS256, verifies the HMAC signature and, when the
    payload carries an ``exp`` claim, checks it has not passed.  If
    validation succeeds, returns the payload dictionary; otherwise
    returns ``None``.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
        if not isinstance(header, dict) or header.get("alg") != "HS256":
            return None
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, secret)
        actual_sig = _b64_url_decode(signature_b64)
        # Constant‑time comparison
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if not isinstance(data, dict):
            return None
        if "exp" in data and int(data["exp"]) < int(time.time()):
            return None
        return data
    except (ValueError, TypeError):
        # Malformed base64, JSON or ``exp`` value.
        return None


security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> str:
    """Dependency that resolves the caller's identity from the bearer token.

    Raises ``UnauthenticatedError`` when no bearer credential is
    present and ``InvalidTokenError`` when the token fails verification
    or lacks the identity claim.  Runs before any body parsing or store
    access in the handlers that depend on it.
    """
    if credentials is None:
        raise UnauthenticatedError()
    payload = decode_access_token(credentials.credentials, settings.jwt_secret)
    if not payload:
        raise InvalidTokenError()
    identity = payload.get(settings.identity_claim)
    if not identity or not isinstance(identity, str):
        raise InvalidTokenError(f"Token is missing the '{settings.identity_claim}' claim")
    return identity
