# immutable_fsm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Optional


class FSMError(Exception):
    """
    Base exception class for errors within the immutable state machine library.
    """


class NoTransitionError(FSMError):
    """
    Raised when the current state has no transition registered for an event.
    The machine the transition was attempted on is left unchanged.
    """

    def __init__(self, state: Any, event: Any) -> None:
        """
        :param state: The state the machine was in.
        :param event: The event that has no transition from that state.
        """
        super().__init__(f"No transition from {state!r} on {event!r}")
        self.state = state
        self.event = event


class ChainLimitExceededError(FSMError):
    """
    Raised when a single transition follows more chained events than the
    machine's ``max_chain_length`` allows.
    """

    def __init__(self, limit: int, state: Any, event: Any) -> None:
        super().__init__(f"Chain limit of {limit} exceeded in {state!r} on {event!r}")
        self.limit = limit
        self.state = state
        self.event = event


class InvalidResponseError(FSMError):
    """
    Raised when a hook returns a value the engine cannot interpret for the
    phase it was called in.
    """

    def __init__(self, state: Any, hook: str, response: Optional[Any]) -> None:
        super().__init__(f"{hook} of {state!r} returned an invalid response: {response!r}")
        self.state = state
        self.hook = hook
        self.response = response
