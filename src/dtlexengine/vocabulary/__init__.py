"""Built-in directive vocabularies and lookup by name.

Vocabularies:
    - moment: moment.js format tokens with ``[...]`` escapes
    - date_fns: date-fns tokens (no directives yet); also reachable as "date-fns"

Example:
    >>> get_vocabulary("moment") is MOMENT
    True
    >>> available_vocabularies()
    ('date_fns', 'moment')

Python 3.13+.
"""

from types import MappingProxyType

from dtlexengine.diagnostics import ErrorTemplate, UnknownVocabularyError
from dtlexengine.syntax import DirectiveRegistry

from .date_fns import DATE_FNS
from .moment import MOMENT

__all__ = ["DATE_FNS", "MOMENT", "available_vocabularies", "get_vocabulary"]

_VOCABULARIES: MappingProxyType[str, DirectiveRegistry] = MappingProxyType(
    {registry.name: registry for registry in (DATE_FNS, MOMENT)}
)

_ALIASES: MappingProxyType[str, str] = MappingProxyType({"date-fns": "date_fns"})


def available_vocabularies() -> tuple[str, ...]:
    """Names of the built-in vocabularies, sorted."""
    return tuple(sorted(_VOCABULARIES))


def get_vocabulary(name: str) -> DirectiveRegistry:
    """Look up a built-in vocabulary by name.

    Raises:
        UnknownVocabularyError: If no vocabulary has that name (also a LookupError)
    """
    registry = _VOCABULARIES.get(_ALIASES.get(name, name))
    if registry is None:
        available = available_vocabularies()
        diagnostic = ErrorTemplate.vocabulary_unknown(name, available)
        raise UnknownVocabularyError(diagnostic, name=name, available=available)
    return registry
