# immutable_fsm/runtime/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import inspect
from typing import Any, Optional

from immutable_fsm.core.errors import InvalidResponseError
from immutable_fsm.core.responses import EnterResponse, ExitResponse


async def _call_hook(state: Any, name: str, data: Optional[Any]) -> Optional[Any]:
    """
    Call ``state.<name>(data)`` if the state defines it, awaiting the result
    when the hook is a coroutine function or returns an awaitable.
    """
    hook = getattr(state, name, None)
    if hook is None:
        return None
    result = hook(data)
    if inspect.isawaitable(result):
        result = await result
    return result


async def invoke_on_exit(state: Any, data: Optional[Any]) -> Optional[Any]:
    """
    Run the exit hook of ``state`` and return the data to carry forward.

    :param state: The state being left.
    :param data: The data the transition started with.
    :return: The emitted data, or ``data`` if the hook emitted nothing.
    :raises InvalidResponseError: If the hook returned something that is not
        an ExitResponse, or a response that requests a chained event.
    """
    response = await _call_hook(state, "on_exit", data)
    if response is None:
        return data
    if not isinstance(response, ExitResponse):
        raise InvalidResponseError(state, "on_exit", response)
    if isinstance(response, EnterResponse) and response.chains:
        raise InvalidResponseError(state, "on_exit", response)
    return data if response.data is None else response.data


async def invoke_on_enter(state: Any, data: Optional[Any]) -> EnterResponse:
    """
    Run the enter hook of ``state``.

    :return: An EnterResponse whose ``data`` is always the data to store (the
        emitted data, or ``data`` if nothing was emitted) and whose ``event``
        is the chained event, if any.
    :raises InvalidResponseError: If the hook returned something that is not
        an ExitResponse or EnterResponse.
    """
    response = await _call_hook(state, "on_enter", data)
    if response is None:
        return EnterResponse(data=data)
    if not isinstance(response, ExitResponse):
        raise InvalidResponseError(state, "on_enter", response)
    event = response.event if isinstance(response, EnterResponse) else None
    return EnterResponse(data=data if response.data is None else response.data, event=event)
