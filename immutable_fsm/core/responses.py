# immutable_fsm/core/responses.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Values returned by state hooks to steer a transition."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ExitResponse:
    """
    Returned from ``on_exit`` to replace the data carried into the next state.

    A ``data`` of ``None`` means nothing was emitted and the incoming data
    flows forward unchanged.
    """

    data: Optional[Any] = None


@dataclass(frozen=True)
class EnterResponse(ExitResponse):
    """
    Returned from ``on_enter``. In addition to replacing the carried data, an
    enter hook may request an immediate follow-up transition with ``event``.
    """

    event: Optional[Any] = None

    @property
    def chains(self) -> bool:
        """True when this response requests a chained transition."""
        return self.event is not None


def emit_data(data: Any) -> EnterResponse:
    """
    Build a response that only replaces the carried data. The result is
    accepted by both ``on_enter`` and ``on_exit``.
    """
    return EnterResponse(data=data)


def emit_event(event: Any, data: Optional[Any] = None) -> EnterResponse:
    """Build an ``on_enter`` response that chains into ``event``."""
    return EnterResponse(data=data, event=event)
