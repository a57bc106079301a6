"""
Requirement-gathering conversation engine.

Drives the per-user phase machine:
NAMING → GATHERING → GENERATING → DONE

- NAMING: derive a project name from the first utterance, ask about core
  functionality
- GATHERING: judge the full transcript SUFFICIENT/INSUFFICIENT; ask a
  clarifying question or synthesise the project description
- GENERATING: create the project, generate the best-fitting diagram
  (diagram failures are logged, not raised), confirm
- DONE: canned acknowledgement without model calls

The state lock is held for the whole turn so concurrent turns for one user
are serialised. A turn that raises leaves no trace in the transcript; a
turn that fails while creating the project resumes GENERATING next time.

Dependencies: archdraft.core.conversation, archdraft.core.diagrams, archdraft.boundary.llm
System role: Conversational requirement gathering and diagram kickoff
"""

import logging
import re

from archdraft.boundary.llm.text_generator import TextGenerator
from archdraft.core.conversation.conversation_prompt import (
    CLARIFYING_PROMPT,
    CONFIRMATION_PROMPT,
    DESCRIPTION_PROMPT,
    DONE_REPLY,
    NAMING_FOLLOW_UP_PROMPT,
    PROJECT_NAME_PROMPT,
    SUFFICIENCY_PROMPT,
)
from archdraft.core.conversation.conversation_schema import (
    ConversationState,
    Phase,
    TurnResult,
)
from archdraft.core.conversation.session_store import SessionStore
from archdraft.core.diagrams.orchestrator import DiagramOrchestrator
from archdraft.core.diagrams.stores import ProjectStore

logger = logging.getLogger(__name__)

MAX_PROJECT_NAME_LENGTH = 50
DEFAULT_PROJECT_NAME = "Untitled Project"
SUFFICIENT_TOKEN = "SUFFICIENT"

_LEADING_WORD = re.compile(r"^\W*(\w+)")
_NAME_STRIP_CHARS = " \t\r\n\"'`"


def clean_project_name(raw: str | None) -> str:
    """Strip quotes and whitespace, cap the length, fall back when blank."""
    name = (raw or "").strip().strip(_NAME_STRIP_CHARS)
    name = name[:MAX_PROJECT_NAME_LENGTH].strip()
    return name or DEFAULT_PROJECT_NAME


def is_sufficient(assessment: str | None) -> bool:
    """True when the assessment's leading token is exactly SUFFICIENT."""
    match = _LEADING_WORD.match(assessment or "")
    return bool(match) and match.group(1) == SUFFICIENT_TOKEN


class ConversationEngine:
    """Per-user requirement-gathering state machine."""

    def __init__(
        self,
        text_generator: TextGenerator,
        orchestrator: DiagramOrchestrator,
        project_store: ProjectStore,
        session_store: SessionStore | None = None,
    ) -> None:
        """
        Initialize engine.

        Args:
            text_generator: Capability for naming, questions and summaries
            orchestrator: Diagram orchestrator used once requirements are gathered
            project_store: Project creation boundary
            session_store: Shared session registry (a fresh unbounded one by default)
        """
        self._llm = text_generator
        self._orchestrator = orchestrator
        self._projects = project_store
        self.sessions = session_store if session_store is not None else SessionStore()

    def process_turn(
        self,
        user_id: str,
        utterance: str,
        auth_token: str | None = None,
    ) -> TurnResult:
        """
        Process one user utterance.

        Args:
            user_id: Resolved caller identity
            utterance: User message text
            auth_token: Caller credential, kept for project creation

        Returns:
            TurnResult: Reply text plus phase and project information

        Raises:
            GenerationCapabilityError: If a conversational model call fails
            PersistenceError: If project creation fails
        """
        while True:
            with self.sessions.checkout(user_id) as state, state.lock:
                # A reset while this turn waited leaves state orphaned
                if not self.sessions.is_current(user_id, state):
                    logger.info(
                        f"{__name__}:process_turn - Session for user_id={user_id} was reset, "
                        f"retrying on the new session"
                    )
                    continue
                return self._run_turn(state, user_id, utterance, auth_token)

    def _run_turn(
        self,
        state: ConversationState,
        user_id: str,
        utterance: str,
        auth_token: str | None,
    ) -> TurnResult:
        logger.info(
            f"{__name__}:process_turn - START user_id={user_id}, phase={state.phase.value}"
        )
        if auth_token:
            state.auth_token = auth_token

        history_len = len(state.history)
        state.history.append(f"User: {utterance}")
        try:
            reply = self._dispatch(state, utterance)
        except Exception:
            del state.history[history_len:]
            logger.error(
                f"{__name__}:process_turn - Turn failed for user_id={user_id} "
                f"in phase={state.phase.value}",
                exc_info=True,
            )
            raise
        state.history.append(f"AI: {reply}")

        logger.info(
            f"{__name__}:process_turn - END user_id={user_id}, phase={state.phase.value}"
        )
        return TurnResult(
            reply=reply,
            phase=state.phase,
            requirements_gathered=state.requirements_gathered,
            project_id=state.project_id,
        )

    def reset(self, user_id: str) -> bool:
        """
        Forget the user's conversation; the next turn starts at NAMING.

        Waits for a running turn to finish before the state is dropped.
        """
        state = self.sessions.get(user_id)
        if state is None:
            removed = False
        else:
            with state.lock:
                removed = self.sessions.discard(user_id, expected=state)
        logger.info(f"{__name__}:reset - user_id={user_id}, removed={removed}")
        return removed

    def get_state(self, user_id: str) -> ConversationState | None:
        return self.sessions.get(user_id)

    def _dispatch(self, state: ConversationState, utterance: str) -> str:
        if state.phase is Phase.NAMING:
            return self._handle_naming(state, utterance)
        if state.phase is Phase.GATHERING:
            return self._handle_gathering(state)
        if state.phase is Phase.GENERATING:
            return self._handle_generating(state)
        return DONE_REPLY

    def _handle_naming(self, state: ConversationState, utterance: str) -> str:
        raw_name = self._llm.generate(PROJECT_NAME_PROMPT.format(message=utterance))
        project_name = clean_project_name(raw_name)
        reply = self._llm.generate(
            NAMING_FOLLOW_UP_PROMPT.format(project_name=project_name, message=utterance)
        )

        state.project_name = project_name
        state.phase = Phase.GATHERING
        logger.info(f"{__name__}:_handle_naming - Project name '{project_name}'")
        return reply

    def _handle_gathering(self, state: ConversationState) -> str:
        conversation = state.transcript()
        assessment = self._llm.generate(
            SUFFICIENCY_PROMPT.format(project_name=state.project_name, conversation=conversation)
        )

        if not is_sufficient(assessment):
            logger.info(
                f"{__name__}:_handle_gathering - Insufficient detail: {(assessment or '')[:120]}"
            )
            return self._llm.generate(
                CLARIFYING_PROMPT.format(
                    project_name=state.project_name, conversation=conversation
                )
            )

        description = self._llm.generate(
            DESCRIPTION_PROMPT.format(project_name=state.project_name, conversation=conversation)
        )
        state.project_description = (description or "").strip()
        state.phase = Phase.GENERATING
        logger.info(
            f"{__name__}:_handle_gathering - Requirements gathered, "
            f"description_len={len(state.project_description)}"
        )
        return self._handle_generating(state)

    def _handle_generating(self, state: ConversationState) -> str:
        if state.project is None:
            state.project = self._projects.create_project(
                user_id=state.user_id,
                name=state.project_name or DEFAULT_PROJECT_NAME,
                description=state.project_description or "",
            )
            logger.info(
                f"{__name__}:_handle_generating - Created project {state.project.id}"
            )

        self._generate_optimal_diagram(state)
        state.phase = Phase.DONE

        return self._llm.generate(
            CONFIRMATION_PROMPT.format(
                project_name=state.project_name,
                project_description=state.project_description,
            )
        )

    def _generate_optimal_diagram(self, state: ConversationState) -> None:
        project = state.project
        if not state.project_description:
            logger.warning(
                f"{__name__}:_generate_optimal_diagram - Empty description for project "
                f"{project.id}, skipping diagram generation"
            )
            return

        try:
            saved = self._orchestrator.generate_optimal(project, state.project_description)
            logger.info(
                f"{__name__}:_generate_optimal_diagram - Saved {saved.kind_label} "
                f"{saved.id} for project {project.id}"
            )
        except Exception as e:
            logger.error(
                f"{__name__}:_generate_optimal_diagram - Error determining or generating "
                f"optimal diagram for project {project.id}: {type(e).__name__}: {e}",
                exc_info=True,
            )
