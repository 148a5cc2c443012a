# immutable_fsm/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Optional, Protocol, runtime_checkable

from immutable_fsm.core.responses import EnterResponse, ExitResponse


@runtime_checkable
class StateHandler(Protocol):
    """
    Capability every state may implement to take part in a transition.

    Methods:
        on_enter(data): Called when the machine moves into the state.
        on_exit(data): Called when the machine moves out of the state.

    Runtime Invariants:
    - States are hashable and compare by value; they are used as table keys.
    - The initial state of a machine never receives ``on_enter``, but does
      receive ``on_exit`` on its first outward transition.

    Error Handling:
    - Exceptions raised by a hook propagate to the caller of
      ``try_transition``; no new machine is produced.
    """

    async def on_enter(self, data: Optional[Any]) -> Optional[EnterResponse]:
        """
        Return ``None`` to keep the incoming data, or an ``EnterResponse``
        to replace it and/or chain into another event.
        """
        ...

    async def on_exit(self, data: Optional[Any]) -> Optional[ExitResponse]:
        """Return ``None`` to keep the incoming data, or an ``ExitResponse``."""
        ...
