# immutable_fsm/core/results.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from immutable_fsm.core.errors import NoTransitionError

if TYPE_CHECKING:
    from immutable_fsm.core.state_machine import FiniteStateMachine


@dataclass(frozen=True)
class Transitioned:
    """The transition settled; ``machine`` is the resulting snapshot."""

    machine: "FiniteStateMachine"

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class NotTransitioned:
    """No transition was defined; the source machine is unchanged."""

    error: NoTransitionError

    @property
    def ok(self) -> bool:
        return False


TransitionResult = Union[Transitioned, NotTransitioned]
