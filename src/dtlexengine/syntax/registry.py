"""Directive registry: one vocabulary's directives plus its escape convention.

Architecture:
    - DirectiveRegistry: Immutable, ordered directive -> renderer mapping
    - Carries a name (used in diagnostics and logs) and an escape recognizer
    - Hashes by identity, so tokenizer caches can key on the instance

Example:
    >>> registry = DirectiveRegistry(
    ...     "demo",
    ...     {"M": month_number, "MM": month_padded},
    ...     escape=BracketEscape(),
    ... )
    >>> "MM" in registry
    True
    >>> list(registry)
    ['M', 'MM']

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from dtlexengine.core.value_types import DirectiveRenderer

from .escapes import EscapeRecognizer, no_escape
from .segments import EscapeSpan

__all__ = ["DirectiveRegistry"]


class DirectiveRegistry:
    """Immutable mapping of directive strings to rendering functions.

    Supports read-only dict-like introspection:
        - __contains__: Check if a directive exists ('in' operator)
        - __getitem__: Look up a directive's renderer
        - __iter__: Iterate directives in declaration order
        - __len__: Count directives

    Declaration order matters: the tokenizer breaks ties between directives
    of equal length in favour of the one declared first.

    Memory Optimization:
        Uses __slots__ for memory efficiency (avoids per-instance __dict__).
    """

    __slots__ = ("__weakref__", "_directives", "_escape", "_name")

    def __init__(
        self,
        name: str,
        directives: Mapping[str, DirectiveRenderer],
        *,
        escape: EscapeRecognizer | None = None,
    ) -> None:
        """Create a registry.

        Args:
            name: Vocabulary name (e.g. "moment")
            directives: Directive string -> renderer, in declaration order
            escape: Escape recognizer (default: no escape convention)

        Raises:
            ValueError: If name or any directive string is empty
        """
        if not name:
            msg = "Registry name must be non-empty"
            raise ValueError(msg)
        if "" in directives:
            msg = f"Registry '{name}' contains an empty directive string"
            raise ValueError(msg)

        self._name = name
        self._directives: Mapping[str, DirectiveRenderer] = MappingProxyType(dict(directives))
        self._escape: EscapeRecognizer = escape if escape is not None else no_escape

    @property
    def name(self) -> str:
        """Vocabulary name."""
        return self._name

    @property
    def directives(self) -> tuple[str, ...]:
        """Directive strings in declaration order."""
        return tuple(self._directives)

    def escape_span(self, pattern: str, offset: int) -> EscapeSpan | None:
        """Ask the escape recognizer whether ``offset`` opens a literal region.

        Raises:
            MalformedEscapeError: If an escape opens but never closes
        """
        return self._escape(pattern, offset)

    def renderer(self, directive: str) -> DirectiveRenderer:
        """Get the renderer bound to ``directive``.

        Raises:
            KeyError: If the directive is not registered
        """
        return self._directives[directive]

    def __contains__(self, directive: object) -> bool:
        return directive in self._directives

    def __getitem__(self, directive: str) -> DirectiveRenderer:
        return self._directives[directive]

    def __iter__(self) -> Iterator[str]:
        return iter(self._directives)

    def __len__(self) -> int:
        return len(self._directives)

    def __repr__(self) -> str:
        return f"DirectiveRegistry(name={self._name!r}, directives={len(self._directives)})"
