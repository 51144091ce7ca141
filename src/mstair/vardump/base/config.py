# File: src/mstair/vardump/base/config.py
"""
Environment and execution context detection utilities.

This module provides utilities for checking and modifying the current
execution context, such as whether the program is running in AWS Lambda,
in test mode, desktop mode, or under static analysis, and which dump depth
applies when a caller does not pass one. It uses thread-local storage so that
overrides are isolated per thread.

Exports:
- analysis_mode_context(): context manager for analysis mode.
- in_analysis_mode(): check if analysis mode is active.
- in_lambda(): check whether code is running in AWS Lambda.
- in_test_mode(): check or override whether code is in test mode.
- in_desktop_mode(): check or override whether output is for an interactive display.
- default_depth(): check or override the default dump depth.
"""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from mstair.vardump.base.constants import DEFAULT_DEPTH, K_VARDUMP_DEPTH


_tls = threading.local()


@dataclass
class TLSAttrs:
    """Thread-local flags for environment context."""

    in_code_analyzer: bool = False
    in_test_mode_override: bool | None = None
    in_desktop_mode_override: bool | None = None
    default_depth_override: int | None = None


def _get_tls() -> TLSAttrs:
    """Return the current thread's TLSAttrs instance, initializing if needed."""
    try:
        return _tls.state
    except AttributeError:
        _tls.state = TLSAttrs()
        return _tls.state


@contextmanager
def analysis_mode_context() -> Iterator[None]:
    """
    Context manager to enable code analysis mode temporarily.

    Restores the previous value on exit. Nested contexts are supported.
    """
    tls = _get_tls()
    previous_state = tls.in_code_analyzer
    tls.in_code_analyzer = True
    try:
        yield
    finally:
        tls.in_code_analyzer = previous_state


def in_analysis_mode() -> bool:
    """Check if code analysis mode is active on this thread."""
    return _get_tls().in_code_analyzer


def in_lambda() -> bool:
    """Check if running in an AWS Lambda environment."""
    return bool(os.environ.get("AWS_LAMBDA_FUNCTION_NAME") or os.environ.get("LAMBDA_RUNTIME_DIR"))


def in_test_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Check if running in test mode, with optional override.

    Detection order:
      1. Analysis mode check (always False).
      2. Explicit override (thread-local).
      3. Presence of pytest/unittest in sys.modules.
      4. Known environment variables (e.g. PYTEST_CURRENT_TEST, CI).
    """
    if in_analysis_mode():
        return False

    tls = _get_tls()
    if unset_override:
        tls.in_test_mode_override = None
    if override is not None:
        tls.in_test_mode_override = override
        return override
    if tls.in_test_mode_override is not None:
        return tls.in_test_mode_override
    if "pytest" in sys.modules or "unittest" in sys.modules:
        return True

    env = os.environ
    return bool(
        any(env.get(k) for k in ("PYTEST_CURRENT_TEST", "PYTEST_RUNNING", "UNITTEST_RUNNING"))
        or env.get("CI") == "true"
    )


def in_desktop_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Determine if output should be formatted for interactive display.

    Rules:
      - Explicit override wins.
      - Returns True in test mode.
      - Returns False in analysis or Lambda environments.
      - Otherwise True.
    """
    tls = _get_tls()
    if unset_override:
        tls.in_desktop_mode_override = None
    if override is not None:
        tls.in_desktop_mode_override = override
        return override
    if tls.in_desktop_mode_override is not None:
        return tls.in_desktop_mode_override

    if in_test_mode():
        return True
    if in_analysis_mode():
        return False
    return not in_lambda()


def default_depth(
    *,
    unset_override: bool = False,
    override: int | None = None,
) -> int:
    """
    Return the dump depth used when a caller passes ``depth=None``.

    Resolution order: thread-local override, then the VARDUMP_DEPTH environment
    variable, then DEFAULT_DEPTH. Unparseable or negative environment values are ignored.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If set, becomes the default depth for this thread.
    :raises ValueError: If override is negative.
    """
    tls = _get_tls()
    if unset_override:
        tls.default_depth_override = None
    if override is not None:
        if override < 0:
            raise ValueError(f"Depth must be >= 0, got {override}")
        tls.default_depth_override = override
        return override
    if tls.default_depth_override is not None:
        return tls.default_depth_override

    raw = os.environ.get(K_VARDUMP_DEPTH, "").strip()
    if raw.isdigit():
        return int(raw)
    return DEFAULT_DEPTH


# End of file: src/mstair/vardump/base/config.py
