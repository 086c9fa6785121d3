from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from buku_api.config import Settings
from buku_api.context import AppContext
from buku_api.database import Base, build_engine, build_session_factory
from buku_api.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite:///:memory:",
        create_schema=False,
        log_format="plain",
    )


@pytest.fixture
def db_engine() -> Iterator[Engine]:
    engine = build_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def session_factory(db_engine: Engine) -> sessionmaker[Session]:
    return build_session_factory(db_engine)


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app_context(
    test_settings: Settings, db_engine: Engine, session_factory: sessionmaker[Session]
) -> AppContext:
    return AppContext(settings=test_settings, engine=db_engine, session_factory=session_factory)


@pytest.fixture
def app(app_context: AppContext) -> FastAPI:
    return create_app(context=app_context)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
