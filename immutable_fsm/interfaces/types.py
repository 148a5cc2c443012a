# immutable_fsm/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Hashable, Tuple

StateKey = Hashable
EventKey = Hashable

# (from_state, event, to_state)
TransitionTriple = Tuple[StateKey, EventKey, StateKey]
