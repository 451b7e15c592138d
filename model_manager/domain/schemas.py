# model_manager/domain/schemas.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List

from .models import HFModelRepo, Model

class ModelCreate(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str = Field(min_length=1)
    path: str
    is_published: bool = False

class ModelUpdate(BaseModel):
    is_published: bool

class ModelDetail(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    tenant_id: str
    organization_id: str
    project_id: str
    path: str
    is_published: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, m: Model) -> "ModelDetail":
        return cls(
            model_id=m.model_id, tenant_id=m.tenant_id,
            organization_id=m.organization_id, project_id=m.project_id,
            path=m.path, is_published=m.is_published,
            created_at=m.created_at, updated_at=m.updated_at,
        )

class ModelList(BaseModel):
    items: List[ModelDetail]
    has_more: bool = False

class HFModelRepoCreate(BaseModel):
    name: str = Field(min_length=1)

class HFModelRepoDetail(BaseModel):
    name: str
    tenant_id: str
    organization_id: str
    project_id: str
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, r: HFModelRepo) -> "HFModelRepoDetail":
        return cls(
            name=r.name, tenant_id=r.tenant_id,
            organization_id=r.organization_id, project_id=r.project_id,
            created_at=r.created_at,
        )

class HFModelRepoList(BaseModel):
    items: List[HFModelRepoDetail]
