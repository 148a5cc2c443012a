# immutable_fsm/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import dataclasses
from typing import Any, Optional, Tuple

from immutable_fsm.core.responses import EnterResponse, ExitResponse


class State:
    """
    Base class for user-defined states. Provides no-op ``on_enter`` and
    ``on_exit`` hooks and value semantics suitable for use as table keys.

    Two states are equal when they are instances of the same class and their
    fields are equal: the compared dataclass fields for dataclasses, every
    instance attribute otherwise. Field values must be hashable.
    Subclasses declared as dataclasses should pass ``eq=False`` so that this
    comparison and its hash are kept; a generated ``__hash__`` leaves the
    class out.

    Example:
        class Locked(State):
            pass

        @dataclass(frozen=True, eq=False)
        class Waiting(State):
            seconds: int
    """

    async def on_enter(self, data: Optional[Any]) -> Optional[EnterResponse]:
        """Called when the machine transitions into this state."""
        return None

    async def on_exit(self, data: Optional[Any]) -> Optional[ExitResponse]:
        """Called when the machine transitions out of this state."""
        return None

    def _identity(self) -> Tuple[type, Tuple[Tuple[str, Any], ...]]:
        if dataclasses.is_dataclass(self):
            values = tuple((f.name, getattr(self, f.name)) for f in dataclasses.fields(self) if f.compare)
        else:
            values = tuple(sorted(getattr(self, "__dict__", {}).items()))
        return type(self), values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        cls, values = self._identity()
        return hash((cls.__module__, cls.__qualname__, values))

    def __repr__(self) -> str:
        _, values = self._identity()
        return f"{type(self).__name__}({', '.join(f'{name}={value!r}' for name, value in values)})"
