"""
View Models and declared dependencies.

A view-model is a UI-facing aggregation of references into one or more data
objects plus computed values. It never fetches anything; it only declares
which data objects it reads so the orchestrator can load them.

Class form:

    class OutletQuickStats(ViewModel):
        uses = ("outlet",)

        def __init__(self, models):
            self.name = models.outlet.name
            self.circulation = computed(lambda: f"{int(models.outlet.circulation()):,}")

Function form:

    @uses("contact")
    def contact_name(models):
        return SimpleNamespace(name=models.contact.name)
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Tuple

from .signals import Signal


@dataclass(frozen=True)
class DependencyInfo:
    """Dependency metadata stored on a factory by the @uses decorator."""
    names: Tuple[str, ...]


def _unique(names: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(names))


def uses(*names: str):
    """
    Declare the data objects a view-model factory reads.

    Only stores metadata; the orchestrator resolves the names against its
    registry when the factory is bound.
    """
    def decorator(factory):
        factory._uses_info = DependencyInfo(names=_unique(names))
        return factory
    return decorator


def declared_dependencies(factory: Callable) -> Tuple[str, ...]:
    """Names a factory declares through `@uses` or a `uses` class attribute."""
    info = getattr(factory, "_uses_info", None)
    if isinstance(info, DependencyInfo):
        return info.names
    names = getattr(factory, "uses", None)
    if names is None or callable(names):
        return ()
    if isinstance(names, str):
        names = (names,)
    return _unique(names)


class ViewModel:
    """Base class for view-models bound by the orchestrator."""

    uses: Tuple[str, ...] = ()

    def __init__(self, models: Any = None):
        self.models = models

    def signals(self) -> Dict[str, Signal]:
        return view_model_signals(self)


def view_model_signals(view_model: Any) -> Dict[str, Signal]:
    """Public reactive attributes of a view-model, in assignment order."""
    return {
        key: value
        for key, value in vars(view_model).items()
        if not key.startswith("_") and isinstance(value, Signal)
    }
