# model_manager/api/v1/models.py
from fastapi import APIRouter, Depends, Query, Response
from ...core.config import get_settings
from ...core.security import Caller
from ...domain import repos, schemas
from ...domain.errors import NotFoundError, StoreError
from ...domain.models import Model, ModelSpec
from ... import deps
from .errors import to_http

router = APIRouter()


def _get_in_project(repo: repos.ModelRepo, model_id: str, caller: Caller) -> Model:
    # A model in another project looks exactly like a missing one
    try:
        m = repo.get_model_by_model_id(model_id)
    except StoreError as e:
        raise to_http(e) from None
    if m.project_id != caller.project_id:
        raise to_http(NotFoundError("model", model_id))
    return m


@router.post("", response_model=schemas.ModelDetail, status_code=201)
def create_model(body: schemas.ModelCreate,
                 repo: repos.ModelRepo = Depends(deps.get_model_repo),
                 caller: Caller = Depends(deps.get_caller)):
    spec = ModelSpec(
        model_id=body.model_id, tenant_id=caller.tenant_id,
        organization_id=caller.organization_id, project_id=caller.project_id,
        path=body.path, is_published=body.is_published,
    )
    try:
        m = repo.create_model(spec)
    except StoreError as e:
        raise to_http(e) from None
    return schemas.ModelDetail.from_domain(m)


@router.get("", response_model=schemas.ModelList)
def list_models(only_published: bool = False,
                after: str | None = Query(None, description="model_id of the last item of the previous page"),
                limit: int | None = Query(None, ge=1),
                repo: repos.ModelRepo = Depends(deps.get_model_repo),
                caller: Caller = Depends(deps.get_caller)):
    s = get_settings()
    limit = min(limit or s.DEFAULT_PAGE_SIZE, s.MAX_PAGE_SIZE)
    try:
        ms, has_more = repo.list_models_by_project_id_with_pagination(
            caller.project_id, only_published, after, limit)
    except StoreError as e:
        raise to_http(e) from None
    return schemas.ModelList(items=[schemas.ModelDetail.from_domain(m) for m in ms], has_more=has_more)


@router.get("/{model_id:path}", response_model=schemas.ModelDetail)
def get_model(model_id: str,
              repo: repos.ModelRepo = Depends(deps.get_model_repo),
              caller: Caller = Depends(deps.get_caller)):
    return schemas.ModelDetail.from_domain(_get_in_project(repo, model_id, caller))


@router.patch("/{model_id:path}", response_model=schemas.ModelDetail)
def update_model(model_id: str, body: schemas.ModelUpdate,
                 repo: repos.ModelRepo = Depends(deps.get_model_repo),
                 caller: Caller = Depends(deps.get_caller)):
    _get_in_project(repo, model_id, caller)
    try:
        repo.update_model(model_id, body.is_published)
        m = repo.get_model_by_model_id(model_id)
    except StoreError as e:
        raise to_http(e) from None
    return schemas.ModelDetail.from_domain(m)


@router.delete("/{model_id:path}", status_code=204)
def delete_model(model_id: str,
                 repo: repos.ModelRepo = Depends(deps.get_model_repo),
                 caller: Caller = Depends(deps.get_caller)):
    try:
        repo.delete_model(model_id, caller.project_id)
    except StoreError as e:
        raise to_http(e) from None
    return Response(status_code=204)
