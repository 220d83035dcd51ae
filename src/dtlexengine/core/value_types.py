"""Core value types for directive rendering.

Defines the types shared by the tokenizer (which binds renderers to
segments) and the runtime (which calls them):
    - Unsupported: Tagged result for recognized-but-unimplemented directives
    - DirectiveResult: Union of everything a renderer may return
    - DirectiveRenderer: Protocol for per-directive rendering functions

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dtlexengine.runtime.locale_context import LocaleContext

__all__ = [
    "UNSUPPORTED",
    "DirectiveRenderer",
    "DirectiveResult",
    "Unsupported",
]


@dataclass(frozen=True, slots=True)
class Unsupported:
    """Result marking a directive the vocabulary knows but cannot render yet.

    Renderers return this instead of raising, so the driver can tell a
    deferred feature apart from a runtime failure and report the directive
    and its offset.

    Attributes:
        reason: Short explanation shown in diagnostics
    """

    reason: str = "not implemented"


UNSUPPORTED = Unsupported()

type DirectiveResult = str | int | Unsupported


class DirectiveRenderer(Protocol):
    """Protocol for directive rendering functions.

    Renderers receive the date value and the resolved locale positionally
    and return text, an integer (stringified by the driver), or Unsupported.
    """

    def __call__(self, value: datetime, locale: LocaleContext, /) -> DirectiveResult:
        ...  # pragma: no cover  # Protocol stub - not executable
