"""Depth limiting for composite directive expansion.

Composite directives (%c, %x, %X, %r) expand locale-supplied templates by
re-entering the scanner. A template that references itself, directly or
through another composite, would recurse until RecursionError. DepthGuard
bounds that nesting.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import sys
from dataclasses import dataclass, field

from lctime.constants import MAX_COMPOSITE_DEPTH
from lctime.diagnostics import LctimeError
from lctime.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "composite_depth_limit", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(LctimeError):
    """Raised when composite expansion nesting exceeds the limit.

    This error indicates a locale record whose composite templates
    reference each other in a cycle, or nest far deeper than any real
    locale data does.
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard()
        with guard:
            # Recursive operation
            result = _render(sub_template, t, locale, guard)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Thread Safety:
        Uses explicit instance state, fully reentrant.
        Each format call creates its own DepthGuard instance.

    Attributes:
        max_depth: Maximum allowed depth, used as given (default:
            composite_depth_limit())
        current_depth: Current recursion depth
    """

    max_depth: int = field(default_factory=lambda: composite_depth_limit())
    current_depth: int = field(default=0, init=False)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing. __exit__ is not called
        when __enter__ raises, so incrementing first would leave
        current_depth permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(
                ErrorTemplate.expansion_depth_exceeded(self.max_depth)
            )
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Each level of composite expansion costs a few interpreter frames, so
    the usable depth is a fraction of sys.getrecursionlimit(). Logs a
    warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(200)
        >>> depth_clamp(30)  # OK, within limit
        30
        >>> depth_clamp(500)  # Exceeds limit, clamped to 50
        50
    """
    # _render -> dispatch -> _expand per level
    frames_per_level = 3
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth


@functools.cache
def composite_depth_limit() -> int:
    """MAX_COMPOSITE_DEPTH clamped against the recursion limit.

    Computed on first use and reused by every DepthGuard, so a clamp is
    logged once per process. Call composite_depth_limit.cache_clear()
    after changing sys.setrecursionlimit().
    """
    return depth_clamp(MAX_COMPOSITE_DEPTH)
