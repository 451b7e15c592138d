# model_manager/api/v1/health.py
import time
from fastapi import APIRouter, Depends
from loguru import logger
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ... import deps

router = APIRouter()
_started = time.time()

class Health(BaseModel):
    uptime_s: float
    database: str

@router.get("", response_model=Health)
def health(engine: Engine = Depends(deps.get_engine)):
    """Liveness probe; reports whether the database answers a trivial query."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db = "ok"
    except SQLAlchemyError as e:
        logger.warning(f"Health check database ping failed: {e}")
        db = "unavailable"
    return Health(uptime_s=time.time() - _started, database=db)
