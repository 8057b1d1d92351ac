"""Name-keyed plugin registry.

Validators (and any future pluggable component) are registered under a short
name so that pipelines can be assembled from configuration or the command
line, e.g. ``--validator required --validator known_value``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Registry of implementation classes keyed by name.

    Subclasses provide ``_registry``, ``_base_type``, ``_default_type`` and
    ``_entity_name`` and register their built-in implementations in
    ``_ensure_defaults_registered``. Names are matched case-insensitively.
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _base_type: ClassVar[type[Any]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Register the built-in implementations if they are missing."""
        ...

    @staticmethod
    def _normalize(name: str) -> str:
        return name.strip().lower()

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register impl_class under name, replacing any previous entry.

        Raises:
            TypeError: If impl_class does not implement the base type.
        """
        if not (isinstance(impl_class, type) and issubclass(impl_class, cls._base_type)):
            raise TypeError(
                f"{cls._entity_name} {name!r} must subclass {cls._base_type.__name__}"
            )
        cls._ensure_defaults_registered()
        cls._registry[cls._normalize(name)] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._registry.pop(cls._normalize(name), None)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        cls._ensure_defaults_registered()
        return cls._normalize(name) in cls._registry

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Instantiate the implementation registered under name.

        Args:
            name: Registered name; the default type when None.
            **kwargs: Constructor arguments.

        Raises:
            ValueError: If nothing is registered under name.
        """
        cls._ensure_defaults_registered()
        type_name = cls._normalize(name if name is not None else cls._default_type)

        impl_class = cls._registry.get(type_name)
        if impl_class is None:
            raise ValueError(
                f"Unknown {cls._entity_name} type: {type_name}. "
                f"Available types: {', '.join(cls.available_types())}"
            )
        return impl_class(**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Registered names, sorted."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry)
