# model_manager/domain/models.py
from dataclasses import dataclass
from datetime import datetime

@dataclass
class ModelSpec:
    """Everything needed to register a model; passed to ModelRepo.create_model."""
    model_id: str
    tenant_id: str
    organization_id: str
    project_id: str
    path: str
    is_published: bool = False

@dataclass
class Model:
    model_id: str
    tenant_id: str
    organization_id: str
    project_id: str
    path: str
    is_published: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

@dataclass
class HFModelRepo:
    name: str
    tenant_id: str
    organization_id: str = ""
    project_id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
