import pytest
from fastapi.testclient import TestClient

from marketplace.common.config import Settings
from marketplace.common.db import Base, create_db_engine
from marketplace.auth_service.main import create_app as create_auth_app
from marketplace.vendor_service.main import create_app as create_vendor_app


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        PASSWORD_HASH_ROUNDS=1000,
        AUTH_SERVICE_URL="http://auth-service",
        VENDOR_SERVICE_URL="http://vendor-service",
        VENDOR_PORTAL_URL="http://portal.test",
        LOG_DIR=None,
    )


@pytest.fixture
def engine(settings):
    # Both services share one schema, as they do in deployment
    engine = create_db_engine(settings.DATABASE_URL)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def auth_app(settings, engine):
    return create_auth_app(settings, engine)


@pytest.fixture
def vendor_app(settings, engine):
    return create_vendor_app(settings, engine)


@pytest.fixture
def auth_client(auth_app):
    with TestClient(auth_app, base_url="http://auth-service") as c:
        yield c


@pytest.fixture
def vendor_client(vendor_app):
    with TestClient(vendor_app, base_url="http://vendor-service") as c:
        yield c

