# immutable_fsm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, List, Optional

from immutable_fsm.core.errors import ChainLimitExceededError, NoTransitionError
from immutable_fsm.core.results import NotTransitioned, Transitioned, TransitionResult
from immutable_fsm.core.transitions import EMPTY, TransitionTable
from immutable_fsm.interfaces.types import EventKey, StateKey
from immutable_fsm.runtime.hooks import invoke_on_enter, invoke_on_exit

logger = logging.getLogger(__name__)

DEFAULT_MAX_CHAIN_LENGTH: Optional[int] = None


class FiniteStateMachine:
    """
    An immutable finite state machine.

    A machine is a snapshot of (state, data, transition table). Adding a
    transition or performing one never changes the machine it is called on;
    a new machine is returned instead, so snapshots can be stored and
    compared freely.

    Data is carried through transitions and may be replaced by the exit hook
    of the state being left and by the enter hook of the state being
    entered. An enter hook may also emit an event, in which case the machine
    keeps transitioning before ``try_transition`` returns; only the settled
    machine is ever returned.
    """

    __slots__ = ("_state", "_data", "_transitions", "_max_chain_length")

    def __init__(
        self,
        initial_state: StateKey,
        data: Optional[Any] = None,
        *,
        max_chain_length: Optional[int] = DEFAULT_MAX_CHAIN_LENGTH,
    ) -> None:
        """
        :param initial_state: The state the machine starts in. It does not
            receive ``on_enter``, but receives ``on_exit`` when left.
        :param data: Optional initial carried data.
        :param max_chain_length: Maximum number of chained transitions a
            single ``try_transition`` call may follow. None means unbounded.
        """
        if max_chain_length is not None and max_chain_length < 0:
            raise ValueError("max_chain_length must be >= 0 or None")
        self._init(initial_state, data, EMPTY, max_chain_length)

    def _init(
        self,
        state: StateKey,
        data: Optional[Any],
        transitions: TransitionTable,
        max_chain_length: Optional[int],
    ) -> None:
        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_transitions", transitions)
        object.__setattr__(self, "_max_chain_length", max_chain_length)

    def _derive(self, state: StateKey, data: Optional[Any], transitions: TransitionTable) -> "FiniteStateMachine":
        machine = FiniteStateMachine.__new__(FiniteStateMachine)
        machine._init(state, data, transitions, self._max_chain_length)
        return machine

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def state(self) -> StateKey:
        """The current state."""
        return self._state

    @property
    def data(self) -> Optional[Any]:
        """The current carried data, or None."""
        return self._data

    @property
    def transitions(self) -> TransitionTable:
        """The transition table."""
        return self._transitions

    @property
    def max_chain_length(self) -> Optional[int]:
        return self._max_chain_length

    def add_transition(self, from_state: StateKey, to_state: StateKey, event: EventKey) -> "FiniteStateMachine":
        """
        Register a transition from ``from_state`` to ``to_state`` on ``event``.

        A later registration for the same (``from_state``, ``event``) pair
        replaces the earlier one.

        :return: A machine with the same state and data and the extended table.
        """
        return self._derive(self._state, self._data, self._transitions.add(from_state, to_state, event))

    async def attempt_transition(self, event: EventKey, data: Optional[Any] = None) -> TransitionResult:
        """
        Like ``try_transition``, but reports a missing transition as a
        NotTransitioned result instead of raising NoTransitionError.

        Exceptions raised by hooks, and ChainLimitExceededError, still
        propagate.
        """
        machine = self
        carried = self._data if data is None else data
        chained = 0
        while True:
            source = machine._state
            target = machine._transitions.lookup(source, event)
            if target is None:
                logger.debug("No transition from %r on %r", source, event)
                return NotTransitioned(NoTransitionError(source, event))

            logger.debug("Transition %r --%r--> %r", source, event, target)
            carried = await invoke_on_exit(source, carried)
            entered = await invoke_on_enter(target, carried)
            carried = entered.data
            machine = machine._derive(target, carried, machine._transitions)

            if entered.event is None:
                return Transitioned(machine)

            chained += 1
            if self._max_chain_length is not None and chained > self._max_chain_length:
                raise ChainLimitExceededError(self._max_chain_length, target, entered.event)
            logger.debug("%r chained into %r", target, entered.event)
            event = entered.event

    async def try_transition(self, event: EventKey, data: Optional[Any] = None) -> "FiniteStateMachine":
        """
        Transition on ``event`` and return the resulting machine.

        1. The data passed in is ``data`` if given, else the stored data.
        2. The current state's ``on_exit`` may replace it.
        3. The target state's ``on_enter`` may replace it again and may emit
           an event, which is then handled the same way from the target
           state before this call returns.

        :param event: The triggering event.
        :param data: Optional data that overrides the stored data.
        :return: The settled machine.
        :raises NoTransitionError: If no transition is defined for the event
            in the current state, or for an event emitted while chaining.
        :raises ChainLimitExceededError: If ``max_chain_length`` is exceeded.
        """
        result = await self.attempt_transition(event, data)
        if isinstance(result, NotTransitioned):
            raise result.error
        return result.machine

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, FiniteStateMachine):
            return NotImplemented
        return (
            self._state == other._state
            and self._data == other._data
            and self._transitions == other._transitions
        )

    def __hash__(self) -> int:
        try:
            return hash((self._state, self._data, self._transitions))
        except TypeError:
            # Data such as a dict cannot be hashed and is left out.
            return hash((self._state, self._transitions))

    def __repr__(self) -> str:
        return f"FiniteStateMachine(state={self._state!r}, data={self._data!r})"

    def debug_description(self) -> str:
        """
        Multi-line description of the current state, data and every
        registered transition, for debugging.
        """
        lines: List[str] = [
            "FiniteStateMachine",
            f"    state: {self._state!r}",
            f"    data: {self._data!r}",
            "Transitions:",
        ]
        for state, events in self._transitions.items():
            lines.append(f"    {state!r}:")
            for event, target in events.items():
                lines.append(f"        on {event!r} -> {target!r}")
        return "\n".join(lines) + "\n"
