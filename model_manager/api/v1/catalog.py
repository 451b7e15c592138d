# model_manager/api/v1/catalog.py
from fastapi import APIRouter, Depends, Query
from ...core.security import Caller
from ...domain import repos, schemas
from ...domain.errors import StoreError
from ... import deps
from .errors import to_http

router = APIRouter()


@router.get("/models", response_model=schemas.ModelList)
def list_published_models(repo: repos.ModelRepo = Depends(deps.get_model_repo),
                          caller: Caller = Depends(deps.get_caller)):
    """Published models of every project, for platform-wide catalog views."""
    try:
        ms = repo.list_all_published_models()
    except StoreError as e:
        raise to_http(e) from None
    return schemas.ModelList(items=[schemas.ModelDetail.from_domain(m) for m in ms])


@router.get("/models/{model_id:path}", response_model=schemas.ModelDetail)
def get_published_model(model_id: str,
                        project_id: str | None = Query(None, description="restrict the lookup to one project"),
                        repo: repos.ModelRepo = Depends(deps.get_model_repo),
                        caller: Caller = Depends(deps.get_caller)):
    try:
        if project_id:
            m = repo.get_published_model_by_model_id_and_project_id(model_id, project_id)
        else:
            m = repo.get_published_model_by_model_id(model_id)
    except StoreError as e:
        raise to_http(e) from None
    return schemas.ModelDetail.from_domain(m)
