"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators
(model client, orchestrator, conversation engine, speech synthesizer) are
built lazily once per process; database sessions are per request.

Builders run under one re-entrant lock, so concurrent first requests
share a single instance of each collaborator.

Dependencies: archdraft.configs, archdraft.application, archdraft.boundary, archdraft.core
System role: DI container for service injection
"""

import threading

from fastapi import Depends
from sqlalchemy.orm import Session

from archdraft.application.services import ChatService, DiagramService, ProjectService
from archdraft.boundary.db import get_db
from archdraft.configs import get_settings
from archdraft.core.conversation.conversation_engine import ConversationEngine
from archdraft.core.diagrams.orchestrator import DiagramOrchestrator
from archdraft.core.diagrams.requirement_extractor import RequirementExtractor

_UNSET = object()


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        # Builders nest (orchestrator -> validator -> text_generator)
        self._lock = threading.RLock()
        self._text_generator = None
        self._validator = None
        self._project_store = None
        self._diagram_store = None
        self._orchestrator = None
        self._requirement_extractor = None
        self._conversation_engine = None
        self._speech_synthesizer = _UNSET

    @property
    def text_generator(self):
        """Get cached LangChain text generator."""
        if self._text_generator is None:
            with self._lock:
                if self._text_generator is None:
                    from archdraft.boundary.llm import create_text_generator

                    self._text_generator = create_text_generator(get_settings().llm)
        return self._text_generator

    @property
    def validator(self):
        """Get cached diagram validator."""
        if self._validator is None:
            with self._lock:
                if self._validator is None:
                    from archdraft.core.diagrams.validator import DiagramValidator

                    self._validator = DiagramValidator(
                        self.text_generator,
                        policy=get_settings().llm.validation_policy,
                    )
        return self._validator

    @property
    def project_store(self):
        """Get cached SQL project store."""
        if self._project_store is None:
            with self._lock:
                if self._project_store is None:
                    from archdraft.boundary.db import SqlProjectStore, get_session_factory

                    self._project_store = SqlProjectStore(get_session_factory())
        return self._project_store

    @property
    def diagram_store(self):
        """Get cached SQL diagram store."""
        if self._diagram_store is None:
            with self._lock:
                if self._diagram_store is None:
                    from archdraft.boundary.db import SqlDiagramStore, get_session_factory

                    self._diagram_store = SqlDiagramStore(get_session_factory())
        return self._diagram_store

    @property
    def orchestrator(self):
        """Get cached diagram orchestrator."""
        if self._orchestrator is None:
            with self._lock:
                if self._orchestrator is None:
                    from archdraft.core.diagrams.orchestrator import create_orchestrator

                    self._orchestrator = create_orchestrator(
                        text_generator=self.text_generator,
                        validator=self.validator,
                        diagram_store=self.diagram_store,
                        max_attempts=get_settings().llm.max_retries,
                    )
        return self._orchestrator

    @property
    def requirement_extractor(self):
        """Get cached requirement extractor."""
        if self._requirement_extractor is None:
            with self._lock:
                if self._requirement_extractor is None:
                    self._requirement_extractor = RequirementExtractor(self.text_generator)
        return self._requirement_extractor

    @property
    def conversation_engine(self):
        """Get cached conversation engine with its session store."""
        if self._conversation_engine is None:
            with self._lock:
                if self._conversation_engine is None:
                    from archdraft.core.conversation import session_store

                    self._conversation_engine = ConversationEngine(
                        text_generator=self.text_generator,
                        orchestrator=self.orchestrator,
                        project_store=self.project_store,
                        session_store=session_store.SessionStore(
                            get_settings().conversation.max_sessions
                        ),
                    )
        return self._conversation_engine

    @property
    def speech_synthesizer(self):
        """Get cached speech synthesizer; None while SPEECH_ENABLED is off."""
        if self._speech_synthesizer is _UNSET:
            with self._lock:
                if self._speech_synthesizer is _UNSET:
                    from archdraft.boundary.speech import create_speech_synthesizer

                    self._speech_synthesizer = create_speech_synthesizer(get_settings().speech)
        return self._speech_synthesizer

    def clear(self) -> None:
        """Clear all cached instances."""
        with self._lock:
            self._text_generator = None
            self._validator = None
            self._project_store = None
            self._diagram_store = None
            self._orchestrator = None
            self._requirement_extractor = None
            self._conversation_engine = None
            self._speech_synthesizer = _UNSET


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_orchestrator() -> DiagramOrchestrator:
    return get_service_cache().orchestrator


def get_requirement_extractor() -> RequirementExtractor:
    return get_service_cache().requirement_extractor


def get_conversation_engine() -> ConversationEngine:
    return get_service_cache().conversation_engine


def get_chat_service(
    engine: ConversationEngine = Depends(get_conversation_engine),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        engine: Shared conversation engine (injected via Depends)

    Returns:
        ChatService: Chat service, voicing replies when a synthesizer is configured
    """
    return ChatService(engine=engine, synthesizer=get_service_cache().speech_synthesizer)


def get_project_service(
    db: Session = Depends(get_db),
    orchestrator: DiagramOrchestrator = Depends(get_orchestrator),
    requirement_extractor: RequirementExtractor = Depends(get_requirement_extractor),
) -> ProjectService:
    """
    Get project service instance.

    Args:
        db: Database session (injected via Depends)
        orchestrator: Diagram orchestrator
        requirement_extractor: Requirement extractor

    Returns:
        ProjectService: Project service instance
    """
    return ProjectService(
        db=db,
        orchestrator=orchestrator,
        requirement_extractor=requirement_extractor,
    )


def get_diagram_service(
    db: Session = Depends(get_db),
    orchestrator: DiagramOrchestrator = Depends(get_orchestrator),
) -> DiagramService:
    """
    Get diagram service instance.

    Args:
        db: Database session (injected via Depends)
        orchestrator: Diagram orchestrator

    Returns:
        DiagramService: Diagram service instance
    """
    return DiagramService(db=db, orchestrator=orchestrator)
