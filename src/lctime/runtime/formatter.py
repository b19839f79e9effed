"""Format scanner and directive dispatcher.

strftime() walks a template once, left to right. '%' plus the next
character is a directive, dispatched through the DIRECTIVES table; anything
else is copied through. Composite directives (%c %D %F %r %R %T %x %X)
re-enter the scanner with their sub-template.

The formatting path never raises for a well-formed locale record:
- Unknown directives are emitted verbatim ("%q" -> "%q")
- A trailing lone '%' is emitted as '%'
- Composite nesting past MAX_COMPOSITE_DEPTH is emitted verbatim

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from lctime.constants import MAX_TEMPLATE_CACHE_SIZE
from lctime.core.depth_guard import DepthGuard, DepthLimitExceededError
from lctime.enums import SegmentKind
from lctime.runtime.calendar import PointInTime
from lctime.runtime.directives import DIRECTIVES, CompositeDirective
from lctime.runtime.record import LocaleRecord

__all__ = ["Segment", "dispatch", "scan", "strftime"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Segment:
    """One piece of a scanned template.

    Attributes:
        kind: LITERAL for copied text, DIRECTIVE for a two-character code
        text: The literal run, or the directive code including '%'
    """

    kind: SegmentKind
    text: str

    @classmethod
    def literal(cls, text: str) -> Segment:
        return cls(SegmentKind.LITERAL, text)

    @classmethod
    def directive(cls, code: str) -> Segment:
        return cls(SegmentKind.DIRECTIVE, code)


@lru_cache(maxsize=MAX_TEMPLATE_CACHE_SIZE)
def scan(template: str) -> tuple[Segment, ...]:
    """Split a template into literal runs and directive codes.

    A '%' with no following character is part of a literal run. Adjacent
    literal text is merged into a single segment.

    Results are cached per template; segments are immutable.

    Example:
        >>> [s.text for s in scan("%Y-%m-%d %")]
        ['%Y', '-', '%m', '-', '%d', ' %']
    """
    segments: list[Segment] = []
    literal_start = 0
    pos = template.find("%")
    end = len(template)

    while pos != -1 and pos + 1 < end:
        if pos > literal_start:
            segments.append(Segment.literal(template[literal_start:pos]))
        segments.append(Segment.directive(template[pos : pos + 2]))
        literal_start = pos + 2
        pos = template.find("%", literal_start)

    if literal_start < end:
        segments.append(Segment.literal(template[literal_start:]))

    return tuple(segments)


def dispatch(
    code: str,
    t: PointInTime,
    locale: LocaleRecord,
    guard: DepthGuard | None = None,
) -> str:
    """Render one directive code.

    Args:
        code: Two-character directive including '%' (e.g. "%d")
        t: Point in time to render
        locale: Locale vocabulary
        guard: Depth guard of the enclosing format call; a fresh one is
            created when dispatch is called directly

    Returns:
        The rendered field, or code itself when it is not a known directive
    """
    entry = DIRECTIVES.get(code)
    if entry is None:
        logger.debug("Unknown directive %r passed through", code)
        return code
    if isinstance(entry, CompositeDirective):
        return _expand(code, entry, t, locale, guard or DepthGuard())
    return entry(t, locale)


def strftime(template: str, t: PointInTime, locale: LocaleRecord) -> str:
    """Format a point in time with a POSIX strftime template.

    Args:
        template: Format string (e.g. "%a %d %b %Y")
        t: datetime to render (a date is read as midnight)
        locale: Locale vocabulary, numerals and composite templates

    Returns:
        The rendered string

    Example:
        >>> t = datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)
        >>> strftime("%a %b %d %Y %H:%M:%S", t, POSIX_LOCALE)
        'Mon Jan 02 2006 15:04:05'
        >>> strftime("%q", t, POSIX_LOCALE)
        '%q'
    """
    return _render(template, t, locale, DepthGuard())


def _render(template: str, t: PointInTime, locale: LocaleRecord, guard: DepthGuard) -> str:
    parts: list[str] = []
    for segment in scan(template):
        if segment.kind is SegmentKind.LITERAL:
            parts.append(segment.text)
        else:
            parts.append(dispatch(segment.text, t, locale, guard))
    return "".join(parts)


def _expand(
    code: str,
    composite: CompositeDirective,
    t: PointInTime,
    locale: LocaleRecord,
    guard: DepthGuard,
) -> str:
    # A runaway chain unwinds to the outermost composite, which is emitted
    # verbatim; inner levels must not recover or "%x %x" expands 2**depth times.
    outermost = guard.depth == 0
    try:
        with guard:
            return _render(composite.template(locale), t, locale, guard)
    except DepthLimitExceededError:
        if not outermost:
            raise
        logger.warning(
            "Composite directive %r exceeded expansion depth %d in locale %r; "
            "emitting it verbatim",
            code,
            guard.max_depth,
            locale.name,
        )
        return code
