"""
Shared test fixtures and configuration for entire test suite.

Provides: scripted text generator, in-memory SQLite session factory,
sample project context, JSON payload helper
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

import json
import threading
import uuid
from collections.abc import Callable

import pytest

from archdraft.core.diagrams.diagram_schema import ProjectContext


class ScriptedTextGenerator:
    """
    TextGenerator fake replaying a fixed script of replies.

    Each script item is a reply string, an exception instance (raised), or a
    callable taking the prompt and returning the reply. Every prompt is
    recorded in ``prompts``.
    """

    def __init__(self, *script: str | Exception | Callable[[str], str]) -> None:
        self._script = list(script)
        self._lock = threading.Lock()
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        with self._lock:
            self.prompts.append(prompt)
            if not self._script:
                raise AssertionError(f"Unexpected prompt #{len(self.prompts)}: {prompt[:80]}")
            item = self._script.pop(0)
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item(prompt)
        return item

    @property
    def remaining(self) -> int:
        return len(self._script)


def payload_json(name: str, diagram: str) -> str:
    """Render a two-field generation reply."""
    return json.dumps({"name": name, "diagram": diagram})


@pytest.fixture
def project() -> ProjectContext:
    """Provide sample project context."""
    return ProjectContext(
        id=uuid.uuid4(),
        name="Todo App",
        description="A simple task tracker with lists and reminders",
    )


@pytest.fixture
def session_factory():
    """
    Create in-memory SQLite session factory for testing.

    StaticPool keeps one connection so every session (including those
    opened from worker threads) sees the same database.

    Yields:
        sessionmaker: Factory bound to a fresh schema
    """
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool

    from archdraft.boundary.db import create_tables

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)

    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    """Provide a database session bound to the in-memory schema."""
    with session_factory() as session:
        yield session
