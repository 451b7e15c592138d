# model_manager/domain/repos.py
from typing import List, Optional, Tuple

from loguru import logger
from sqlalchemy import delete, select, update
from sqlalchemy.orm import sessionmaker

from ..core.database import get_session_local, session_scope
from .db_models import ModelRecord, utcnow
from .errors import NotFoundError, translate_db_errors
from .models import Model, ModelSpec

_KIND = "model"


def get_model_repo() -> "ModelRepo":
    return ModelRepo(get_session_local())


def _live():
    return select(ModelRecord).where(ModelRecord.deleted_at.is_(None))


class ModelRepo:
    """
    Model registry store. Stateless apart from the session factory: every
    method is one transaction against the database.

    The get/list variants encode three access levels and the caller picks one:
    get_model_by_model_id is unscoped (internal use), the *_project_id methods
    are tenant-scoped, and the published-only ones without a project serve the
    cross-tenant catalog. Soft-deleted rows are invisible everywhere except
    delete_model.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create_model(self, spec: ModelSpec) -> Model:
        rec = ModelRecord(
            model_id=spec.model_id,
            tenant_id=spec.tenant_id,
            organization_id=spec.organization_id,
            project_id=spec.project_id,
            path=spec.path,
            is_published=spec.is_published,
        )
        with translate_db_errors(_KIND, spec.model_id), session_scope(self._session_factory) as s:
            s.add(rec)
            s.flush()
            m = rec.to_domain()
        logger.info(f"Created model {m.model_id} (project={m.project_id}, published={m.is_published})")
        return m

    def get_model_by_model_id(self, model_id: str) -> Model:
        return self._take(model_id, _live().where(ModelRecord.model_id == model_id))

    def get_published_model_by_model_id(self, model_id: str) -> Model:
        q = _live().where(
            ModelRecord.model_id == model_id,
            ModelRecord.is_published.is_(True),
        )
        return self._take(model_id, q)

    def get_published_model_by_model_id_and_project_id(self, model_id: str, project_id: str) -> Model:
        q = _live().where(
            ModelRecord.model_id == model_id,
            ModelRecord.project_id == project_id,
            ModelRecord.is_published.is_(True),
        )
        return self._take(model_id, q)

    def list_models_by_project_id(self, project_id: str, only_published: bool) -> List[Model]:
        q = _live().where(ModelRecord.project_id == project_id)
        if only_published:
            q = q.where(ModelRecord.is_published.is_(True))
        return self._find(project_id, q)

    def list_models_by_project_id_with_pagination(
        self, project_id: str, only_published: bool, after: Optional[str], limit: int
    ) -> Tuple[List[Model], bool]:
        """
        Return up to `limit` models of the project in insertion order, starting
        after the model whose model_id is `after`, plus whether more remain.
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        with translate_db_errors(_KIND, after or project_id), session_scope(self._session_factory) as s:
            q = _live().where(ModelRecord.project_id == project_id)
            if only_published:
                q = q.where(ModelRecord.is_published.is_(True))
            if after:
                cursor = s.execute(
                    select(ModelRecord.id).where(
                        ModelRecord.model_id == after,
                        ModelRecord.project_id == project_id,
                        ModelRecord.deleted_at.is_(None),
                    )
                ).scalar_one_or_none()
                if cursor is None:
                    raise NotFoundError(_KIND, after)
                q = q.where(ModelRecord.id > cursor)
            rows = s.execute(q.order_by(ModelRecord.id).limit(limit + 1)).scalars().all()
            ms = [r.to_domain() for r in rows[:limit]]
        return ms, len(rows) > limit

    def list_all_published_models(self) -> List[Model]:
        return self._find("*", _live().where(ModelRecord.is_published.is_(True)))

    def update_model(self, model_id: str, is_published: bool) -> None:
        """Set the publish flag. No scoping here; authorize before calling."""
        stmt = (
            update(ModelRecord)
            .where(ModelRecord.model_id == model_id, ModelRecord.deleted_at.is_(None))
            .values(is_published=is_published, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        with translate_db_errors(_KIND, model_id), session_scope(self._session_factory) as s:
            if s.execute(stmt).rowcount == 0:
                raise NotFoundError(_KIND, model_id)
        logger.info(f"Updated model {model_id}: published={is_published}")

    def delete_model(self, model_id: str, project_id: str) -> None:
        """Hard delete, soft-deleted rows included."""
        stmt = (
            delete(ModelRecord)
            .where(ModelRecord.model_id == model_id, ModelRecord.project_id == project_id)
            .execution_options(synchronize_session=False)
        )
        with translate_db_errors(_KIND, model_id), session_scope(self._session_factory) as s:
            if s.execute(stmt).rowcount == 0:
                raise NotFoundError(_KIND, model_id)
        logger.info(f"Deleted model {model_id} (project={project_id})")

    def _take(self, model_id: str, q) -> Model:
        with translate_db_errors(_KIND, model_id), session_scope(self._session_factory) as s:
            rec = s.execute(q.limit(1)).scalars().first()
            if rec is None:
                logger.debug(f"Model {model_id} not found")
                raise NotFoundError(_KIND, model_id)
            return rec.to_domain()

    def _find(self, key: str, q) -> List[Model]:
        with translate_db_errors(_KIND, key), session_scope(self._session_factory) as s:
            return [r.to_domain() for r in s.execute(q).scalars().all()]
