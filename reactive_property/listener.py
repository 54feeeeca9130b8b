"""
Listeners wrap the callbacks that are subscribed to a property and
take care of calling them with the arguments they accept.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from .errors import WrongNumberOfArgumentsError

T = TypeVar("T")
ListenerCallback = Union[
    Callable[[], Any], Callable[[T], Any], Callable[[T, Optional[T]], Any]
]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def number_of_arguments(callback: Callable) -> int:
    """
    Returns how many of ``(new, old)`` should be passed to the callback.
    Callbacks that accept both (also through defaults or ``*args``) get
    both. Raises WrongNumberOfArgumentsError for callbacks that require
    more than two arguments.
    """
    try:
        sig = inspect.signature(callback)
    except (TypeError, ValueError):
        # Some builtins don't expose a signature
        return 2

    positional = 0
    required = 0
    for param in sig.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            positional = 2
        elif param.kind in _POSITIONAL:
            positional += 1
            if param.default is param.empty:
                required += 1
        elif param.kind == inspect.Parameter.KEYWORD_ONLY:
            if param.default is param.empty:
                raise WrongNumberOfArgumentsError(
                    f"Listener requires keyword-only argument '{param.name}'"
                )

    if required > 2:
        raise WrongNumberOfArgumentsError(
            "Please use 0, 1 or 2 arguments for listeners"
        )
    return min(positional, 2)


def callback_fqn(callback: Callable) -> str:
    module = getattr(callback, "__module__", None)
    name = getattr(callback, "__qualname__", None) or repr(callback)
    return f"{module}.{name}" if module else name


class Listener(Generic[T]):
    __slots__ = ("callback", "number_of_args")

    def __init__(self, callback: ListenerCallback[T]) -> None:
        self.callback = callback
        self.number_of_args = number_of_arguments(callback)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.callback_fqn}>"

    def matches(self, callback: Any) -> bool:
        # Every attribute access creates a new bound method, so
        # those are compared by their __self__ and __func__
        return self.callback is callback or (
            inspect.ismethod(callback) and self.callback == callback
        )

    def notify(self, new: T, old: Optional[T]) -> None:
        if self.number_of_args == 2:
            self.callback(new, old)
        elif self.number_of_args == 1:
            self.callback(new)
        else:
            self.callback()

    @property
    def callback_fqn(self) -> str:
        return callback_fqn(self.callback)
