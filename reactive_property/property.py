"""
A reactive property holds a single value, can be read and written through
one callable interface and synchronously notifies its listeners whenever
the value is written.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import InvalidArgumentError, NoDefaultError
from .listener import Listener, callback_fqn

T = TypeVar("T")
C = TypeVar("C", bound=Callable)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<unset>"


# Marks both "never set" and "constructed without default", so
# that None remains an ordinary value
MISSING: Any = _Missing()


def reject_keywords(kwargs: dict) -> None:
    if kwargs:
        raise InvalidArgumentError(
            f"Unexpected keyword arguments: {', '.join(sorted(kwargs))}"
        )


class ReactiveProperty(Generic[T]):
    """
    Container for a single value with change notification.

    Calling the property without arguments returns the current value,
    calling it with one argument sets the value and returns the property
    itself so that calls can be chained::

        prop(1)(2).on(callback)

    Listeners are called synchronously, in the order in which they were
    subscribed, with ``(new_value, old_value)`` (or fewer arguments if the
    listener accepts fewer). A property is not thread-safe: sharing one
    between threads requires external locking.
    """

    __slots__ = ("__weakref__", "_alive", "_default", "_listeners", "_value")

    def __init__(self, *args: T, **kwargs) -> None:
        reject_keywords(kwargs)
        if len(args) > 1:
            raise InvalidArgumentError(
                f"Expected at most 1 argument (the default value), got {len(args)}"
            )
        self._default = args[0] if args else MISSING
        self._value = self._default
        self._listeners: list[Listener[T]] = []
        self._alive = True

    def __call__(self, *args: T, **kwargs):
        reject_keywords(kwargs)
        if len(args) == 0:
            return self.get()
        if len(args) == 1:
            return self.set(args[0])
        raise InvalidArgumentError(
            f"Expected 0 arguments (get) or 1 argument (set), got {len(args)}"
        )

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} value={self._value!r}"
            f" listeners={len(self._listeners)}"
            f"{'' if self._alive else ' destroyed'}>"
        )

    def get(self) -> Optional[T]:
        """
        Returns the current value, or None when no value was ever set.
        """
        return None if self._value is MISSING else self._value

    def set(self, value: T) -> ReactiveProperty[T]:
        old_value = self.get()
        self._value = value
        if self._alive and self._listeners:
            # Listeners added or removed by a listener only take
            # effect from the next write onwards
            for listener in tuple(self._listeners):
                listener.notify(value, old_value)
        return self

    value = property(get, set)

    @property
    def has_value(self) -> bool:
        return self._value is not MISSING

    @property
    def has_default(self) -> bool:
        return self._default is not MISSING

    @property
    def default(self) -> Callable[[], T]:
        """
        Accessor for the default value that was passed on construction.
        The attribute does not exist when no default was given, so
        `hasattr(prop, "default")` tells whether there is one.
        """
        if self._default is MISSING:
            raise NoDefaultError(f"{type(self).__name__} has no default value")
        default = self._default
        return lambda: default

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def listeners(self) -> tuple[Callable, ...]:
        return tuple(listener.callback for listener in self._listeners)

    def on(self, *args: C, **kwargs) -> C:
        """
        Subscribes a callback to changes of the value. When the property
        already holds a value, the callback is immediately called with
        ``(value, None)``. Returns the given callback so that it can be
        passed to `off` later.
        """
        reject_keywords(kwargs)
        if len(args) != 1:
            raise InvalidArgumentError(
                f"Expected exactly 1 argument (the listener), got {len(args)}"
            )
        callback = args[0]
        if not callable(callback):
            raise InvalidArgumentError(
                f"Listener must be callable, got {type(callback).__name__}"
            )
        if not self._alive:
            warnings.warn(
                f"Listener {callback_fqn(callback)} was added to a"
                " destroyed property and will never be called",
                RuntimeWarning,
                stacklevel=2,
            )
            return callback

        listener = Listener(callback)
        self._listeners.append(listener)
        if self._value is not MISSING:
            try:
                listener.notify(self._value, None)
            except Exception:
                self._listeners = [
                    other for other in self._listeners if other is not listener
                ]
                raise
        return callback

    def off(self, callback: Callable) -> None:
        """
        Unsubscribes every registration of the given callback. Unknown
        callbacks are ignored.
        """
        if self._listeners:
            self._listeners = [
                listener
                for listener in self._listeners
                if not listener.matches(callback)
            ]

    def destroy(self) -> None:
        """
        Removes all listeners and stops any further notifications. The
        value itself can still be read and written.
        """
        self._listeners = []
        self._alive = False


def reactive_property(*args: T) -> ReactiveProperty[T]:
    """
    Creates a new reactive property. The optional single argument is
    used as both the default and the initial value.
    """
    return ReactiveProperty(*args)
