"""Registry of output formats.

Renderers register themselves under the format id a caller selects
(``preview``, ``html``, ``md``, ``word``).  Looking a format up by key
replaces a chain of ``if format == ...`` branches, and adding a format
only means adding a decorated class::

    @renderer_registry.register("md")
    class MarkdownRenderer(EndpointRenderer):
        ...

    renderer = renderer_registry.create("md", title="Orders API")
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Type, TypeVar

from .errors import UnknownFormatError

T = TypeVar("T")


class Registry:
    """Map format ids to the classes that produce them.

    ``name`` only appears in error messages.
    """

    def __init__(self, name: str = "registry") -> None:
        self._name = name
        self._items: Dict[str, Type[Any]] = {}

    def register(self, key: str) -> Callable[[Type[T]], Type[T]]:
        """Class decorator filing the class under ``key``.

        The decorated class gets ``format_id = key``.  A key can be taken
        only once; a second registration raises ``ValueError``.
        """
        def decorator(cls: Type[T]) -> Type[T]:
            if key in self._items:
                raise ValueError(
                    f"{self._name}: format '{key}' is taken by {self._items[key].__name__}"
                )
            self._items[key] = cls
            setattr(cls, "format_id", key)
            return cls
        return decorator

    def get(self, key: str) -> Type[Any]:
        """Look up the class for ``key``, raising UnknownFormatError if absent."""
        try:
            return self._items[key]
        except KeyError:
            available = ", ".join(sorted(self._items))
            raise UnknownFormatError(
                f"{self._name}: unknown format '{key}'. Available: {available}"
            ) from None

    def create(self, key: str, **kwargs: Any) -> Any:
        return self.get(key)(**kwargs)

    def keys(self) -> List[str]:
        """Format ids in registration order, e.g. for argparse ``choices``."""
        return list(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
