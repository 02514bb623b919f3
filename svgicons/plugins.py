"""Keyed registration of framework strategies.

Framework strategies register themselves under their identifier with a
class decorator, and callers look them up by that identifier::

    framework_registry = StrategyRegistry("framework")

    @framework_registry.register("vue")
    class VueStrategy(FrameworkStrategy):
        ...

    strategy = framework_registry.get("vue")

Strategies hold no state, so :meth:`StrategyRegistry.get` hands out one
shared instance per key.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Type, TypeVar

T = TypeVar("T")


class StrategyRegistry:
    """Map identifier strings to strategy classes."""

    def __init__(self, name: str = "strategy") -> None:
        self._name = name
        self._classes: Dict[str, Type[Any]] = {}
        self._instances: Dict[str, Any] = {}

    def register(self, key: str) -> Callable[[Type[T]], Type[T]]:
        """Class decorator registering the class under ``key``.

        Raises:
            ValueError: If ``key`` is already taken.
        """
        def decorator(cls: Type[T]) -> Type[T]:
            if key in self._classes:
                raise ValueError(
                    f"{self._name}: key '{key}' already registered "
                    f"to {self._classes[key].__name__}"
                )
            self._classes[key] = cls
            return cls
        return decorator

    def _check(self, key: str) -> None:
        if key not in self._classes:
            available = ", ".join(sorted(self._classes))
            raise KeyError(
                f"{self._name}: unknown key '{key}'. "
                f"Available: {available}"
            )

    def get(self, key: str) -> Any:
        """Return the shared instance registered under ``key``.

        Raises:
            KeyError: If ``key`` is not registered.
        """
        self._check(key)
        if key not in self._instances:
            self._instances[key] = self._classes[key]()
        return self._instances[key]

    def keys(self) -> List[str]:
        """Registered keys in registration order (for argparse choices)."""
        return list(self._classes)

    def __contains__(self, key: str) -> bool:
        return key in self._classes

    def __iter__(self) -> Iterator[str]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)
