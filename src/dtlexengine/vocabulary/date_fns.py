"""date-fns-style directive vocabulary.

Registered with no directives and no escape convention yet: every
character of a pattern tokenizes as literal text.

Python 3.13+.
"""

from dtlexengine.syntax import DirectiveRegistry

__all__ = ["DATE_FNS"]

DATE_FNS = DirectiveRegistry("date_fns", {})
