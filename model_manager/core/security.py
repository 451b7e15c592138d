# model_manager/core/security.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt  # PyJWT

from .config import get_settings

# ---- Caller identity ----
@dataclass(frozen=True)
class Caller:
    """Who is calling, and the tenant/organization/project they act within."""
    subject: str
    tenant_id: str
    organization_id: str
    project_id: str

# ---- JWT helpers ----
def create_jwt(sub: str, tenant_id: str, organization_id: str, project_id: str) -> str:
    s = get_settings()
    now = datetime.now(timezone.utc)
    exp = now + timedelta(hours=int(s.JWT_EXPIRE_HOURS))
    claims: Dict[str, Any] = {
        "sub": sub,
        "tenant_id": tenant_id,
        "organization_id": organization_id,
        "project_id": project_id,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
        "iss": s.JWT_ISSUER,
        "aud": s.JWT_AUDIENCE,
    }
    return jwt.encode(claims, s.JWT_SECRET, algorithm="HS256")


def decode_jwt(token: str) -> Dict[str, Any]:
    s = get_settings()
    return jwt.decode(
        token,
        s.JWT_SECRET,
        algorithms=["HS256"],
        audience=s.JWT_AUDIENCE,
        issuer=s.JWT_ISSUER,
        options={"require": ["sub", "exp", "tenant_id", "project_id"]},
    )


def caller_from_claims(claims: Dict[str, Any]) -> Caller:
    return Caller(
        subject=str(claims["sub"]),
        tenant_id=str(claims["tenant_id"]),
        organization_id=str(claims.get("organization_id") or ""),
        project_id=str(claims["project_id"]),
    )
