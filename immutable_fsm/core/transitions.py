# immutable_fsm/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from immutable_fsm.interfaces.types import EventKey, StateKey, TransitionTriple

logger = logging.getLogger(__name__)


class _FrozenMapping(Mapping):
    """
    Read-only mapping over a private dict that is never mutated after
    construction. Equality is structural and the hash is computed once.
    """

    __slots__ = ("_entries", "_hash")

    def __init__(self, entries: Dict[Any, Any]) -> None:
        self._entries = entries
        self._hash: Optional[int] = None

    def __getitem__(self, key: Any) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, _FrozenMapping):
            return NotImplemented
        if len(self) != len(other) or hash(self) != hash(other):
            return False
        return self._entries == other._entries

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._entries.items()))
        return self._hash


class EventMap(_FrozenMapping):
    """
    The outgoing transitions of a single state: event -> target state.
    """

    __slots__ = ()

    def with_target(self, event: EventKey, target: StateKey) -> "EventMap":
        """
        Return a copy in which ``event`` leads to ``target``, replacing any
        previous target for that event.
        """
        entries = dict(self._entries)
        entries[event] = target
        return EventMap(entries)

    def __repr__(self) -> str:
        return f"EventMap({self._entries!r})"


_EMPTY_EVENTS = EventMap({})


class TransitionTable(_FrozenMapping):
    """
    Persistent mapping of state -> EventMap.

    Every ``add`` returns a new table and leaves the receiver untouched. The
    new table shares the EventMap of every state other than the one being
    changed with the table it was derived from.
    """

    __slots__ = ()

    def add(self, from_state: StateKey, to_state: StateKey, event: EventKey) -> "TransitionTable":
        """
        Return a table in which ``event`` takes ``from_state`` to ``to_state``.

        If the pair (``from_state``, ``event``) is already present its target
        is replaced.

        :param from_state: Source state.
        :param to_state: Target state.
        :param event: Triggering event.
        :return: A new TransitionTable.
        """
        events: EventMap = self._entries.get(from_state, _EMPTY_EVENTS)
        previous = events.get(event)
        if previous is not None and previous != to_state:
            logger.debug("Replacing transition %r --%r--> %r with %r", from_state, event, previous, to_state)

        entries = dict(self._entries)
        entries[from_state] = events.with_target(event, to_state)
        return TransitionTable(entries)

    def lookup(self, state: StateKey, event: EventKey) -> Optional[StateKey]:
        """
        Return the target state for ``event`` in ``state``, or None if the
        table has no such transition.
        """
        events = self._entries.get(state)
        if events is None:
            return None
        return events.get(event)

    def events_for(self, state: StateKey) -> EventMap:
        """Return the outgoing transitions of ``state`` (empty if none)."""
        return self._entries.get(state, _EMPTY_EVENTS)

    def triples(self) -> Iterator[TransitionTriple]:
        """Yield every transition as a (from_state, event, to_state) tuple."""
        for state, events in self._entries.items():
            for event, target in events.items():
                yield state, event, target

    def __repr__(self) -> str:
        return f"TransitionTable({dict(self._entries)!r})"


EMPTY = TransitionTable({})
