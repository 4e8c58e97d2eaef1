"""
Session Manager - Creates and tracks named transducers.

LIFECYCLE:
1. Caller submits a list of rules
2. Rules are validated and folded into a fresh graph
3. The finished graph is registered under a new session id
4. Parse requests read the graph; nothing ever writes to it again
5. Ending the session drops it from memory

PERSISTENCE RULES:
- In-memory only
- Graphs are rebuilt from rules, never serialized
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable
import logging
import threading
import time
import uuid

from ..engine_core import TransitionGraph, ParseResult
from ..fst import compile_rules, parse, parse_batch, stats, FSTStats
from ..rule_spec import Rule, RawRuleItem

logger = logging.getLogger(__name__)


@dataclass
class TransducerSession:
    """
    A compiled transducer held by the service.

    The graph is complete when the session is created and is only read
    afterwards, so parse calls need no locking.
    """
    session_id: str
    graph: TransitionGraph
    rules: list[list[RawRuleItem]]
    created_at: float
    name: str | None = None
    parse_count: int = 0

    def parse(self, text: str) -> ParseResult:
        self.parse_count += 1
        return parse(self.graph, text)

    def parse_batch(self, inputs: list[str]) -> list[ParseResult]:
        self.parse_count += len(inputs)
        return parse_batch(self.graph, inputs)

    def stats(self) -> FSTStats:
        return stats(self.graph)


class SessionManager:
    """
    Manages transducer sessions.

    Responsibilities:
    - Build transducers from rules
    - Track active sessions
    - Drop ended sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, TransducerSession] = {}
        self._lock = threading.Lock()

    def create_session(
        self,
        rules: Iterable[Rule | Iterable[RawRuleItem]],
        name: str | None = None,
    ) -> TransducerSession:
        """
        Build a transducer from rules and register it.

        Raises RuleValidationError if any rule is malformed; nothing is
        registered in that case.
        """
        raw_rules = [
            r.to_raw() if isinstance(r, Rule) else r if isinstance(r, str) else list(r)
            for r in rules
        ]
        graph = compile_rules(raw_rules)

        session = TransducerSession(
            session_id=str(uuid.uuid4()),
            graph=graph,
            rules=raw_rules,
            created_at=time.time(),
            name=name,
        )

        with self._lock:
            self._sessions[session.session_id] = session

        logger.debug(
            "created transducer %s (%d rules, %d edges)",
            session.session_id,
            len(raw_rules),
            graph.edge_count,
        )
        return session

    def get_session(self, session_id: str) -> TransducerSession | None:
        """Get a session by ID."""
        with self._lock:
            return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """
        Remove a session from memory.

        Returns False if the session did not exist.
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False

        logger.debug("ended transducer %s", session_id)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of registered sessions, in creation order."""
        with self._lock:
            return list(self._sessions)
