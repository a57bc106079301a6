"""
Conversation state schemas.

Defines the phase machine, the per-user ConversationState held by the
session store, and the TurnResult returned for each processed utterance.

Dependencies: dataclasses, threading, archdraft.core.diagrams.diagram_schema
System role: Data schemas for requirement-gathering conversations
"""

import threading
from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID

from archdraft.core.diagrams.diagram_schema import ProjectContext


class Phase(str, Enum):
    """Conversation phases. Transitions only move forward."""

    NAMING = "naming"
    GATHERING = "gathering"
    # transient; a turn only ends here when project creation failed
    GENERATING = "generating"
    DONE = "done"


@dataclass
class ConversationState:
    """Mutable per-user conversation state.

    Every mutation happens while ``lock`` is held by the conversation
    engine, for the whole turn.
    """

    user_id: str
    history: list[str] = field(default_factory=list)
    phase: Phase = Phase.NAMING
    project_name: str | None = None
    project_description: str | None = None
    project: ProjectContext | None = None
    auth_token: str | None = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def requirements_gathered(self) -> bool:
        return self.phase in (Phase.GENERATING, Phase.DONE)

    @property
    def project_id(self) -> UUID | None:
        return self.project.id if self.project else None

    def transcript(self) -> str:
        return "\n".join(self.history)


@dataclass(frozen=True)
class TurnResult:
    """Reply produced for one user utterance."""

    reply: str
    phase: Phase
    requirements_gathered: bool
    project_id: UUID | None = None
