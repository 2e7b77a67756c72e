"""
Reactive Signal System

Signals are the reactive fields behind every data object and view-model.
A Signal holds a value and notifies its subscribers when the value changes.
A Computed derives its value from other signals; the signals it reads while
evaluating become its dependencies, and it recomputes whenever one of them
changes.

The rest of the package only talks to signals through a ReactiveBackend
(create / read / write / derive), so any other observable implementation can
be plugged in.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)

Subscriber = Callable[[Any, Any], None]

# Computeds currently evaluating, innermost last
_tracking: List["Computed"] = []


class Signal:
    """
    A holder of a current value that notifies dependents on write.

    Reading inside a Computed registers the signal as one of its dependencies.
    Writing an equal value is a no-op.
    """

    def __init__(self, value: Any = None, name: Optional[str] = None):
        self._value = value
        self.name = name
        self._subscribers: List[Subscriber] = []

    def get(self) -> Any:
        if _tracking:
            _tracking[-1]._track(self)
        return self._value

    def set(self, value: Any) -> None:
        old_value = self._value
        if old_value == value and type(old_value) is type(value):
            return
        self._value = value
        self._notify(value, old_value)

    @property
    def value(self) -> Any:
        return self.get()

    @value.setter
    def value(self, value: Any) -> None:
        self.set(value)

    def peek(self) -> Any:
        """Current value without dependency tracking."""
        return self._value

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Call `callback(new_value, old_value)` after every change.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _notify(self, new_value: Any, old_value: Any) -> None:
        # Copy: callbacks may subscribe or unsubscribe while we iterate
        for callback in list(self._subscribers):
            try:
                callback(new_value, old_value)
            except Exception as e:
                logger.error(f"Signal callback error on {self!r}: {e}")

    def __call__(self) -> Any:
        return self.get()

    def __repr__(self):
        label = f"{self.name}=" if self.name else ""
        return f"{self.__class__.__name__}({label}{self._value!r})"


class Computed(Signal):
    """
    Read-only signal derived from other signals.

    The value is computed eagerly on construction and again whenever one of
    the signals read during the last evaluation changes.
    """

    def __init__(self, compute_func: Callable[[], Any], name: Optional[str] = None):
        super().__init__(None, name)
        self.compute_func = compute_func
        self._dependencies: List[Signal] = []
        self._value = self._evaluate()

    @property
    def dependencies(self) -> tuple:
        return tuple(self._dependencies)

    def set(self, value: Any) -> None:
        raise AttributeError(f"{self!r} is computed and cannot be written")

    def _track(self, signal: Signal) -> None:
        if signal is self or any(dep is signal for dep in self._dependencies):
            return
        self._dependencies.append(signal)
        signal.subscribe(self._on_dependency_change)

    def _evaluate(self) -> Any:
        for dep in self._dependencies:
            dep.unsubscribe(self._on_dependency_change)
        self._dependencies = []

        _tracking.append(self)
        try:
            return self.compute_func()
        finally:
            _tracking.pop()

    def _on_dependency_change(self, new_value: Any, old_value: Any) -> None:
        self.recompute()

    def dispose(self) -> None:
        """Stop following dependencies. The last value stays readable."""
        for dep in self._dependencies:
            dep.unsubscribe(self._on_dependency_change)
        self._dependencies = []

    def recompute(self) -> None:
        old_value = self._value
        new_value = self._evaluate()
        if old_value == new_value and type(old_value) is type(new_value):
            return
        self._value = new_value
        self._notify(new_value, old_value)


class ReactiveBackend(ABC):
    """The four reactive operations the core depends on."""

    @abstractmethod
    def create(self, default: Any, name: Optional[str] = None) -> Any:
        """Create a writable cell holding `default`."""
        pass

    @abstractmethod
    def read(self, cell: Any) -> Any:
        """Read the current value of a cell."""
        pass

    @abstractmethod
    def write(self, cell: Any, value: Any) -> None:
        """Write a cell and trigger dependent recomputation."""
        pass

    @abstractmethod
    def derive(self, compute_func: Callable[[], Any], name: Optional[str] = None) -> Any:
        """Create a read-only cell computed from other cells."""
        pass


class SignalBackend(ReactiveBackend):
    """Default backend built on Signal and Computed."""

    def create(self, default: Any, name: Optional[str] = None) -> Signal:
        return Signal(default, name=name)

    def read(self, cell: Signal) -> Any:
        return cell.get()

    def write(self, cell: Signal, value: Any) -> None:
        cell.set(value)

    def derive(self, compute_func: Callable[[], Any], name: Optional[str] = None) -> Computed:
        return Computed(compute_func, name=name)


default_backend = SignalBackend()


def computed(compute_func: Callable[[], Any]) -> Computed:
    """Shorthand for `default_backend.derive(compute_func)`."""
    return default_backend.derive(compute_func, name=getattr(compute_func, "__name__", None))
