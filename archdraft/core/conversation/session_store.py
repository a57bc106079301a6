"""
In-process conversation session registry.

Maps user ids to ConversationState. Lookup-or-insert is atomic, so two
concurrent first turns for the same user share one state. Sessions live
for the process lifetime unless a max_sessions bound is configured, in
which case the least recently used session is evicted.

A turn checks its session out for its whole duration. Checked-out
sessions are pinned and never evicted; the registry may exceed its bound
while every session is pinned and shrinks back once they are released.
Releasing a session marks it as most recently used.

Dependencies: threading, collections, contextlib
System role: Shared conversation state registry
"""

import logging
import threading
from collections import OrderedDict
from contextlib import contextmanager
from typing import Iterator

from archdraft.core.conversation.conversation_schema import ConversationState

logger = logging.getLogger(__name__)


class SessionStore:
    """Thread-safe registry of per-user conversation state."""

    def __init__(self, max_sessions: int | None = None) -> None:
        if max_sessions is not None and max_sessions < 1:
            raise ValueError("max_sessions must be positive or None")
        self.max_sessions = max_sessions
        self._lock = threading.Lock()
        self._sessions: "OrderedDict[str, ConversationState]" = OrderedDict()
        self._pins: dict[str, int] = {}

    def _get_or_create_unlocked(self, key: str) -> ConversationState:
        state = self._sessions.get(key)
        if state is None:
            state = ConversationState(user_id=key)
            self._sessions[key] = state
            logger.debug(f"{__name__}:get_or_create - New session for user {key}")
        else:
            self._sessions.move_to_end(key)
        return state

    def _evict_unlocked(self, keep: str | None = None) -> None:
        if self.max_sessions is None:
            return
        excess = len(self._sessions) - self.max_sessions
        if excess <= 0:
            return
        candidates = [
            user_id
            for user_id in self._sessions
            if user_id != keep and user_id not in self._pins
        ]
        for user_id in candidates[:excess]:
            del self._sessions[user_id]
            logger.info(f"{__name__}:_evict_unlocked - Evicted session for user {user_id}")
        if excess > len(candidates):
            logger.debug(
                f"{__name__}:_evict_unlocked - {excess - len(candidates)} pinned sessions "
                f"over the bound of {self.max_sessions}"
            )

    def get_or_create(self, user_id: str) -> ConversationState:
        """Return the user's state, creating a fresh NAMING state if absent."""
        key = str(user_id)
        with self._lock:
            state = self._get_or_create_unlocked(key)
            self._evict_unlocked(keep=key)
            return state

    @contextmanager
    def checkout(self, user_id: str) -> Iterator[ConversationState]:
        """
        Get or create the user's state and pin it for the duration of the block.

        Yields:
            ConversationState: The user's current state
        """
        key = str(user_id)
        with self._lock:
            state = self._get_or_create_unlocked(key)
            self._pins[key] = self._pins.get(key, 0) + 1
            self._evict_unlocked()
        try:
            yield state
        finally:
            with self._lock:
                remaining = self._pins[key] - 1
                if remaining:
                    self._pins[key] = remaining
                else:
                    del self._pins[key]
                if key in self._sessions:
                    self._sessions.move_to_end(key)
                self._evict_unlocked()

    def is_current(self, user_id: str, state: ConversationState) -> bool:
        """True while state is the registered state for user_id."""
        with self._lock:
            return self._sessions.get(str(user_id)) is state

    def get(self, user_id: str) -> ConversationState | None:
        with self._lock:
            return self._sessions.get(str(user_id))

    def discard(self, user_id: str, expected: ConversationState | None = None) -> bool:
        """
        Drop the user's state.

        Args:
            user_id: User whose state is dropped
            expected: Only drop when this exact state is still registered

        Returns:
            bool: True when a state was removed
        """
        key = str(user_id)
        with self._lock:
            state = self._sessions.get(key)
            if state is None or (expected is not None and state is not expected):
                return False
            del self._sessions[key]
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
