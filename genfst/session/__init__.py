"""
Session Module - Holds compiled transducers for the service layer.

A session is one named transducer:
- Created from a list of rules
- Holds the finished transition graph
- Serves parse requests
- Dropped when ended

Sessions are EPHEMERAL: nothing is persisted, graphs are rebuilt
from rules.
"""

from .manager import SessionManager, TransducerSession

__all__ = [
    "SessionManager",
    "TransducerSession",
]
