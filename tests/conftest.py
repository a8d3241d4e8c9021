import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENV", "production")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from moodgarden.main import app
from moodgarden.models.database import Base, get_db
from moodgarden.services.wellness_prompt_service import WellnessPromptGenerator, get_prompt_generator
from moodgarden.utils.errors import ExternalServiceError
from moodgarden.utils.rate_limit_utils import limiter


class StubTextFn:
    """Stands in for the AI endpoint: records prompts, replies or fails on demand."""

    def __init__(self, reply="Take three slow breaths and notice one thing you can see."):
        self.reply = reply
        self.fail = False
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise ExternalServiceError("space unreachable")
        return self.reply


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def file_session_factory(tmp_path):
    # File database so every session gets its own connection
    engine = create_engine(
        f"sqlite:///{tmp_path / 'garden.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def ai():
    return StubTextFn()


@pytest.fixture
def client(session_factory, ai):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_prompt_generator] = lambda: WellnessPromptGenerator(text_fn=ai)
    limiter.reset()

    yield TestClient(app)

    app.dependency_overrides.clear()
