"""Core utilities shared across the runtime and localization layers.

Exports:
    DepthGuard: Context manager for composite expansion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    composite_depth_limit: Process-wide clamped composite depth
    depth_clamp: Clamp a depth limit against the interpreter recursion limit

Python 3.13+.
"""

from .depth_guard import (
    DepthGuard,
    DepthLimitExceededError,
    composite_depth_limit,
    depth_clamp,
)

__all__ = ["DepthGuard", "DepthLimitExceededError", "composite_depth_limit", "depth_clamp"]
