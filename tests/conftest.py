"""Shared fixtures: an in-memory database per test, stores bound to it, and an app wired to those stores."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from model_manager import deps
from model_manager.core.database import create_db_engine, init_db, make_session_factory
from model_manager.core.security import create_jwt
from model_manager.domain.hf_repos import HFRepoRegistrar
from model_manager.domain.models import ModelSpec
from model_manager.domain.repos import ModelRepo
from model_manager.main import create_app


@pytest.fixture
def engine():
    eng = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def model_repo(session_factory):
    return ModelRepo(session_factory)


@pytest.fixture
def registrar(session_factory):
    return HFRepoRegistrar(session_factory)


@pytest.fixture
def app(engine, model_repo, registrar):
    app = create_app(init_database=False)
    app.dependency_overrides[deps.get_model_repo] = lambda: model_repo
    app.dependency_overrides[deps.get_hf_repo_registrar] = lambda: registrar
    app.dependency_overrides[deps.get_engine] = lambda: engine
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Build Authorization headers for a caller in the given scope."""

    def make(project_id="p0", tenant_id="t0", organization_id="o0", sub="user0"):
        token = create_jwt(sub, tenant_id, organization_id, project_id)
        return {"Authorization": f"Bearer {token}"}

    return make


def make_spec(model_id, project_id="p0", tenant_id="t0", is_published=False, path=None):
    return ModelSpec(
        model_id=model_id,
        tenant_id=tenant_id,
        organization_id="o0",
        project_id=project_id,
        path=path or f"models/{model_id}",
        is_published=is_published,
    )
