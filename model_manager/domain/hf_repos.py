# model_manager/domain/hf_repos.py
from typing import List

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from ..core.database import get_session_local, session_scope
from .db_models import HFModelRepoRecord
from .errors import NotFoundError, translate_db_errors
from .models import HFModelRepo

_KIND = "hf model repo"


def get_hf_repo_registrar() -> "HFRepoRegistrar":
    return HFRepoRegistrar(get_session_local())


class HFRepoRegistrar:
    """
    Records which external model repositories a tenant has registered.

    A name is registered at most once per tenant: a second create raises
    AlreadyExistsError from the unique index rather than upserting, so the
    usual flow is get, then create on NotFoundError.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create_hf_model_repo(self, name: str, tenant_id: str, organization_id: str = "", project_id: str = "") -> HFModelRepo:
        rec = HFModelRepoRecord(
            name=name,
            tenant_id=tenant_id,
            organization_id=organization_id,
            project_id=project_id,
        )
        with translate_db_errors(_KIND, name), session_scope(self._session_factory) as s:
            s.add(rec)
            s.flush()
            r = rec.to_domain()
        logger.info(f"Registered HF model repo {name} (tenant={tenant_id}, project={project_id})")
        return r

    def get_hf_model_repo(self, name: str, tenant_id: str) -> HFModelRepo:
        q = select(HFModelRepoRecord).where(
            HFModelRepoRecord.name == name,
            HFModelRepoRecord.tenant_id == tenant_id,
            HFModelRepoRecord.deleted_at.is_(None),
        )
        with translate_db_errors(_KIND, name), session_scope(self._session_factory) as s:
            rec = s.execute(q).scalars().first()
            if rec is None:
                logger.debug(f"HF model repo {name} not found (tenant={tenant_id})")
                raise NotFoundError(_KIND, name)
            return rec.to_domain()

    def list_hf_model_repos(self, tenant_id: str) -> List[HFModelRepo]:
        q = (
            select(HFModelRepoRecord)
            .where(HFModelRepoRecord.tenant_id == tenant_id, HFModelRepoRecord.deleted_at.is_(None))
            .order_by(HFModelRepoRecord.name)
        )
        with translate_db_errors(_KIND, "*"), session_scope(self._session_factory) as s:
            return [r.to_domain() for r in s.execute(q).scalars().all()]
