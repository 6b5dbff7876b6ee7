import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from entitykit.api import CrudController, build_crud_router
from entitykit.app import create_app
from entitykit.config import Settings
from entitykit.database import Base, get_db
from entitykit.dependencies import controller_provider, service_factory
from entitykit.repositories import BaseRepository
from entitykit.services import CrudService
from tests.resources.basic import (
    BasicTestEntity,
    BasicTestInput,
    BasicTestMapper,
    BasicTestOutput,
    ValidatedBasicTestService,
)
from tests.resources.embedded import (
    EmbeddedTestEntity,
    EmbeddedTestInput,
    EmbeddedTestMapper,
    EmbeddedTestOutput,
)


@pytest.fixture
def engine():
    """In-memory database shared by every connection of one test"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database session for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def basic_repository(db_session):
    return BaseRepository(db_session, BasicTestEntity)


@pytest.fixture
def basic_mapper():
    return BasicTestMapper()


@pytest.fixture
def basic_service(basic_repository, basic_mapper):
    return CrudService(basic_repository, basic_mapper)


@pytest.fixture
def validated_service(basic_repository, basic_mapper):
    return ValidatedBasicTestService(basic_repository, basic_mapper)


@pytest.fixture
def basic_controller(basic_service, basic_mapper):
    return CrudController(basic_service, basic_mapper)


@pytest.fixture
def embedded_mapper():
    return EmbeddedTestMapper()


@pytest.fixture
def embedded_service(db_session, embedded_mapper):
    return CrudService(BaseRepository(db_session, EmbeddedTestEntity), embedded_mapper)


@pytest.fixture
def client(engine):
    """HTTP client for an app serving both sample resources"""
    basic_router = build_crud_router(
        controller_provider(service_factory(BasicTestEntity, BasicTestMapper(), ValidatedBasicTestService)),
        id_type=int,
        input_dto=BasicTestInput,
        output_dto=BasicTestOutput,
        prefix="/basic",
        tags=["basic"],
    )
    embedded_router = build_crud_router(
        controller_provider(service_factory(EmbeddedTestEntity, EmbeddedTestMapper())),
        id_type=int,
        input_dto=EmbeddedTestInput,
        output_dto=EmbeddedTestOutput,
        prefix="/embedded",
    )
    app = create_app(basic_router, embedded_router, settings=Settings(database_url='sqlite://'), bind=engine)

    SessionLocal = sessionmaker(bind=engine)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
