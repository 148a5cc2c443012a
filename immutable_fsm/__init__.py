"""immutable_fsm: persistent (copy-on-write) finite state machine

Every operation on a machine returns a new snapshot and leaves the original
untouched, which makes snapshots safe to store, share between tasks, and
compare.

Responsibilities:
    - Persistent transition table with order-independent equality
    - Exit/enter hooks that may replace the carried data
    - Transparent chaining through transient states
    - Value equality and hashing of whole machines

Logging:
    Every module logs through ``logging.getLogger(__name__)`` at DEBUG level.
    No handlers are installed.
"""

from .core.errors import ChainLimitExceededError, FSMError, InvalidResponseError, NoTransitionError
from .core.responses import EnterResponse, ExitResponse, emit_data, emit_event
from .core.results import NotTransitioned, Transitioned, TransitionResult
from .core.state_machine import DEFAULT_MAX_CHAIN_LENGTH, FiniteStateMachine
from .core.states import State
from .core.transitions import EventMap, TransitionTable
from .interfaces.protocols import StateHandler

__version__ = "0.1.0"

__all__ = [
    # Machine
    "FiniteStateMachine",
    "DEFAULT_MAX_CHAIN_LENGTH",
    "TransitionTable",
    "EventMap",
    # States and hook responses
    "State",
    "StateHandler",
    "EnterResponse",
    "ExitResponse",
    "emit_data",
    "emit_event",
    # Results
    "Transitioned",
    "NotTransitioned",
    "TransitionResult",
    # Errors
    "FSMError",
    "NoTransitionError",
    "ChainLimitExceededError",
    "InvalidResponseError",
]
