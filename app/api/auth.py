from __future__ import annotations

import secrets

from fastapi import Header, HTTPException

from app.shared.config import get_settings


def require_bearer_token(authorization: str = Header(...)) -> str:
    expected = get_settings().api_token
    if not expected:
        raise HTTPException(status_code=500, detail="API_TOKEN is required.")
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid token.")
    token = authorization.replace("Bearer ", "", 1).strip()
    if not token or not secrets.compare_digest(token.encode(), expected.encode()):
        raise HTTPException(status_code=401, detail="Invalid token.")
    return token
