# model_manager/domain/db_models.py
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Index
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class LifecycleMixin:
    """Timestamps and soft-delete marker carried by every persisted entity."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)


class ModelRecord(LifecycleMixin, Base):
    __tablename__ = "models"

    # Globally unique, soft-deleted rows included
    model_id = Column(String, nullable=False, unique=True)

    tenant_id = Column(String, nullable=False, index=True)
    organization_id = Column(String, nullable=False, default="")
    project_id = Column(String, nullable=False, index=True)

    path = Column(String, nullable=False, default="")
    is_published = Column(Boolean, nullable=False, default=False)

    def to_domain(self):
        """Convert database model to domain Model"""
        from .models import Model
        return Model(
            model_id=self.model_id,
            tenant_id=self.tenant_id,
            organization_id=self.organization_id,
            project_id=self.project_id,
            path=self.path,
            is_published=self.is_published,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
            deleted_at=as_utc(self.deleted_at),
        )


class HFModelRepoRecord(LifecycleMixin, Base):
    __tablename__ = "hf_model_repos"

    name = Column(String, nullable=False)
    tenant_id = Column(String, nullable=False)
    organization_id = Column(String, nullable=False, default="")
    project_id = Column(String, nullable=False, default="", index=True)

    __table_args__ = (
        Index("idx_hf_model_repo_name_tenant_id", "name", "tenant_id", unique=True),
    )

    def to_domain(self):
        """Convert database model to domain HFModelRepo"""
        from .models import HFModelRepo
        return HFModelRepo(
            name=self.name,
            tenant_id=self.tenant_id,
            organization_id=self.organization_id,
            project_id=self.project_id,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
            deleted_at=as_utc(self.deleted_at),
        )
