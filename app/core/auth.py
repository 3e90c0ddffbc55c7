"""Bearer JWT authentication for FastAPI.

Tokens are issued by the hosted identity provider and verified here against
its JWKS endpoint. Handlers receive an explicit UserSession through
dependency injection.
"""

from dataclasses import dataclass
from functools import lru_cache

import jwt as pyjwt
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import PyJWKClient
from jwt.exceptions import PyJWKClientConnectionError, PyJWKClientError

from app.core.config import get_settings

_bearer_scheme = HTTPBearer(auto_error=False)

# User IDs already provisioned in this process; skips a DB round trip per request
_provisioned_cache: set[str] = set()


@lru_cache
def get_jwks_client() -> PyJWKClient:
    """Create a cached JWKS client for the configured endpoint."""
    settings = get_settings()
    if not settings.auth_jwks_url:
        raise RuntimeError("AUTH_JWKS_URL is not configured")
    return PyJWKClient(settings.auth_jwks_url, cache_keys=True, lifespan=300)


@dataclass(frozen=True)
class UserSession:
    """Authenticated user extracted from a verified JWT."""

    user_id: str
    claims: dict

    @property
    def email(self) -> str | None:
        return self.claims.get("email")


def decode_session_jwt(token: str) -> UserSession:
    """Verify and decode a session JWT.

    Raises ``HTTPException(401)`` on any validation failure and
    ``HTTPException(503)`` when the signing keys cannot be fetched.
    """
    settings = get_settings()
    try:
        client = get_jwks_client()
    except RuntimeError as exc:
        raise HTTPException(status_code=503, detail=f"Authentication unavailable: {exc}")

    try:
        signing_key = client.get_signing_key_from_jwt(token)

        payload = pyjwt.decode(
            token,
            signing_key.key,
            algorithms=settings.auth_algorithms,
            options={
                "verify_exp": True,
                "verify_iat": True,
                # aud is checked separately, only when configured
                "verify_aud": False,
                "require": ["sub", "exp", "iat"],
            },
        )
    except pyjwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except pyjwt.ImmatureSignatureError:
        raise HTTPException(status_code=401, detail="Token not yet valid (immature)")
    except pyjwt.MissingRequiredClaimError as exc:
        raise HTTPException(status_code=401, detail=f"Missing required claim: {exc}")
    except pyjwt.InvalidTokenError as exc:
        raise HTTPException(status_code=401, detail=f"Invalid token: {exc}")
    except PyJWKClientConnectionError as exc:
        raise HTTPException(status_code=503, detail=f"Signing keys unavailable: {exc}")
    except PyJWKClientError as exc:
        # Unknown kid or no usable key in the set
        raise HTTPException(status_code=401, detail=f"Invalid token: {exc}")

    sub = payload.get("sub")
    if not sub:
        raise HTTPException(status_code=401, detail="Token missing sub claim")

    return UserSession(user_id=sub, claims=payload)


def _validate_audience_claim(aud_claim: object, allowed_audiences: list[str]) -> None:
    """Validate aud claim against configured allowed audiences."""
    if aud_claim is None:
        raise HTTPException(status_code=401, detail="Missing aud claim")

    if isinstance(aud_claim, str):
        audiences = {aud_claim}
    elif isinstance(aud_claim, list) and all(isinstance(v, str) for v in aud_claim):
        audiences = set(aud_claim)
    else:
        raise HTTPException(status_code=401, detail="Invalid aud claim format")

    if not audiences.intersection(allowed_audiences):
        raise HTTPException(status_code=401, detail="Unauthorized audience (aud mismatch)")


async def require_auth(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> UserSession:
    """FastAPI dependency that validates the bearer token.

    Provisions the user's profile and preferences on first sight.

    Usage::

        @router.get("/protected")
        async def protected(user: UserSession = Depends(require_auth)):
            ...
    """
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing authorization header")

    user = decode_session_jwt(credentials.credentials)

    settings = get_settings()

    if settings.auth_issuer and user.claims.get("iss") != settings.auth_issuer:
        raise HTTPException(status_code=401, detail="Invalid issuer (iss mismatch)")

    if settings.auth_allowed_audiences:
        _validate_audience_claim(user.claims.get("aud"), settings.auth_allowed_audiences)

    if user.user_id not in _provisioned_cache:
        from app.core.provisioning import provision_user_on_first_login

        await provision_user_on_first_login(user.user_id)
        _provisioned_cache.add(user.user_id)

    # Used by error handlers and audit logging
    request.state.user_id = user.user_id

    return user
