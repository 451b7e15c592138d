# model_manager/api/v1/hf_model_repos.py
from fastapi import APIRouter, Depends
from ...core.security import Caller
from ...domain import hf_repos, schemas
from ...domain.errors import StoreError
from ... import deps
from .errors import to_http

router = APIRouter()


@router.post("", response_model=schemas.HFModelRepoDetail, status_code=201)
def create_hf_model_repo(body: schemas.HFModelRepoCreate,
                         registrar: hf_repos.HFRepoRegistrar = Depends(deps.get_hf_repo_registrar),
                         caller: Caller = Depends(deps.get_caller)):
    try:
        r = registrar.create_hf_model_repo(
            body.name, caller.tenant_id, caller.organization_id, caller.project_id)
    except StoreError as e:
        raise to_http(e) from None
    return schemas.HFModelRepoDetail.from_domain(r)


@router.get("", response_model=schemas.HFModelRepoList)
def list_hf_model_repos(registrar: hf_repos.HFRepoRegistrar = Depends(deps.get_hf_repo_registrar),
                        caller: Caller = Depends(deps.get_caller)):
    try:
        rs = registrar.list_hf_model_repos(caller.tenant_id)
    except StoreError as e:
        raise to_http(e) from None
    return schemas.HFModelRepoList(items=[schemas.HFModelRepoDetail.from_domain(r) for r in rs])


# Repo names look like "org/repo", hence the path converter
@router.get("/{name:path}", response_model=schemas.HFModelRepoDetail)
def get_hf_model_repo(name: str,
                      registrar: hf_repos.HFRepoRegistrar = Depends(deps.get_hf_repo_registrar),
                      caller: Caller = Depends(deps.get_caller)):
    try:
        r = registrar.get_hf_model_repo(name, caller.tenant_id)
    except StoreError as e:
        raise to_http(e) from None
    return schemas.HFModelRepoDetail.from_domain(r)
