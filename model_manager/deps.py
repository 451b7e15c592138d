# model_manager/deps.py
from __future__ import annotations

from fastapi import Depends, HTTPException, Header
from loguru import logger

from sqlalchemy.engine import Engine

from .core import database
from .core.security import Caller, caller_from_claims, decode_jwt
from .domain import hf_repos, repos


def get_engine() -> Engine:
    return database.get_engine()

def get_model_repo() -> repos.ModelRepo:
    return repos.get_model_repo()

def get_hf_repo_registrar() -> hf_repos.HFRepoRegistrar:
    return hf_repos.get_hf_repo_registrar()

def auth_header(authorization: str | None = Header(default=None)):
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail="Missing bearer token")
    return authorization.split(" ", 1)[1]

def get_caller(token: str = Depends(auth_header)) -> Caller:
    """Resolve the bearer token into the caller's tenant/organization/project scope."""
    try:
        claims = decode_jwt(token)
    except Exception as e:
        logger.debug(f"Rejected token: {e}")
        raise HTTPException(status_code=401, detail="Invalid token")
    return caller_from_claims(claims)
