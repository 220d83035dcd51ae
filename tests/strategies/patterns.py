"""Hypothesis strategies for format patterns and date/time values.

Provides reusable, event-emitting strategies for generating tokenizer and
renderer inputs: patterns built from moment directives, literal text, and
bracket escapes; ad-hoc directive registries; and datetime values across
the supported range.

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - pattern_part: Kind of pattern fragment drawn (directive|literal|escape)
    - registry_size: Size bucket of an ad-hoc registry (empty|small|large)
    - datetime_tz: Time zone kind of a datetime (naive|utc|fixed|iana)
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from hypothesis import event
from hypothesis import strategies as st

from dtlexengine.core.value_types import UNSUPPORTED, DirectiveResult
from dtlexengine.runtime.locale_context import LocaleContext
from dtlexengine.syntax import DirectiveRegistry
from dtlexengine.vocabulary import MOMENT

# Characters with no meaning in the moment vocabulary
LITERAL_CHARS = " -/:.,_|0123456789TbcfijlnpqrtuvBCFIJLOPRUV"

# Directives whose renderers are implemented
IMPLEMENTED_MOMENT_DIRECTIVES: tuple[str, ...] = tuple(
    directive
    for directive in MOMENT
    if directive not in {"YYYYYY", "Y", "z", "zz"}
)

IANA_ZONES = ("UTC", "Europe/Riga", "America/New_York", "Asia/Kolkata", "Australia/Lord_Howe")


def _constant_renderer(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    return "*"


def _deferred_renderer(value: datetime, locale: LocaleContext, /) -> DirectiveResult:
    return UNSUPPORTED


# ============================================================================
# PATTERNS
# ============================================================================


def literal_text(min_size: int = 1, max_size: int = 8) -> st.SearchStrategy[str]:
    """Text made only of characters no moment directive uses."""
    return st.text(alphabet=LITERAL_CHARS, min_size=min_size, max_size=max_size)


def escape_fragments() -> st.SearchStrategy[str]:
    """Bracket escapes with arbitrary non-bracket content, e.g. ``[at]``."""
    content = st.text(
        alphabet=st.characters(exclude_characters="[]", exclude_categories=("Cs",)),
        max_size=10,
    )
    return content.map(lambda text: f"[{text}]")


@st.composite
def moment_patterns(draw: st.DrawFn, *, implemented_only: bool = False) -> str:
    """Patterns assembled from moment directives, literals, and escapes.

    Events emitted:
    - pattern_part={directive|literal|escape}: Fragment kind
    """
    directives = IMPLEMENTED_MOMENT_DIRECTIVES if implemented_only else tuple(MOMENT)
    parts: list[str] = []
    for _ in range(draw(st.integers(min_value=0, max_value=8))):
        kind = draw(st.sampled_from(["directive", "literal", "escape"]))
        event(f"pattern_part={kind}")
        match kind:
            case "directive":
                parts.append(draw(st.sampled_from(directives)))
            case "literal":
                parts.append(draw(literal_text()))
            case _:
                parts.append(draw(escape_fragments()))
    return "".join(parts)


def escape_free_text(max_size: int = 30) -> st.SearchStrategy[str]:
    """Arbitrary text without escape brackets."""
    return st.text(
        alphabet=st.characters(exclude_characters="[]", exclude_categories=("Cs",)),
        max_size=max_size,
    )


# ============================================================================
# REGISTRIES
# ============================================================================


@st.composite
def ad_hoc_registries(draw: st.DrawFn) -> DirectiveRegistry:
    """Registries over a small alphabet, so directives overlap often.

    Events emitted:
    - registry_size={empty|small|large}: Directive count bucket
    """
    directives = draw(
        st.lists(
            st.text(alphabet="abcAB", min_size=1, max_size=4),
            unique=True,
            max_size=12,
        )
    )
    size = len(directives)
    event(f"registry_size={'empty' if size == 0 else 'small' if size < 6 else 'large'}")
    deferred = draw(st.sets(st.sampled_from(directives))) if directives else set()
    mapping = {
        directive: _deferred_renderer if directive in deferred else _constant_renderer
        for directive in directives
    }
    return DirectiveRegistry("ad_hoc", mapping)


def ad_hoc_patterns(max_size: int = 20) -> st.SearchStrategy[str]:
    """Patterns over the ad-hoc registry alphabet plus a few literals."""
    return st.text(alphabet="abcAB xy-", max_size=max_size)


# ============================================================================
# DATETIMES
# ============================================================================


@st.composite
def datetimes_any_zone(draw: st.DrawFn) -> datetime:
    """Datetimes that are naive or carry a UTC, fixed-offset, or IANA zone.

    Years stay within 2..9998 so zone conversions never leave datetime's range.

    Events emitted:
    - datetime_tz={naive|utc|fixed|iana}: Time zone kind
    """
    naive = draw(
        st.datetimes(min_value=datetime(2, 1, 1), max_value=datetime(9998, 12, 31, 23, 59, 59))
    )
    kind = draw(st.sampled_from(["naive", "utc", "fixed", "iana"]))
    event(f"datetime_tz={kind}")
    match kind:
        case "naive":
            return naive
        case "utc":
            return naive.replace(tzinfo=UTC)
        case "fixed":
            minutes = draw(st.integers(min_value=-14 * 60, max_value=14 * 60))
            return naive.replace(tzinfo=timezone(timedelta(minutes=minutes)))
        case _:
            return naive.replace(tzinfo=ZoneInfo(draw(st.sampled_from(IANA_ZONES))))
