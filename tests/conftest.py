# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import enum

import pytest

from immutable_fsm import FiniteStateMachine, State


class StateA(State):
    pass


class StateB(State):
    pass


class SampleEvent(enum.Enum):
    GO_TO_A = "go_to_a"
    GO_TO_B = "go_to_b"
    GO_TO_C = "go_to_c"


@pytest.fixture
def state_a():
    return StateA()


@pytest.fixture
def state_b():
    return StateB()


@pytest.fixture
def events():
    """The event enum shared by the unit tests."""
    return SampleEvent


@pytest.fixture
def two_state_machine(state_a, state_b):
    """A machine in A that can go A -> B and B -> A."""
    return (
        FiniteStateMachine(initial_state=state_a, data="")
        .add_transition(state_a, state_b, SampleEvent.GO_TO_B)
        .add_transition(state_b, state_a, SampleEvent.GO_TO_A)
    )
