"""Removal of the engine's own frames from captured tracebacks."""

import os
from types import TracebackType
from typing import Optional

__all__ = ["filter_stack_trace"]

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


def _is_internal(tb: TracebackType) -> bool:
    return os.path.abspath(tb.tb_frame.f_code.co_filename).startswith(_PACKAGE_DIR)


def filter_stack_trace(failure: BaseException) -> BaseException:
    """Drop traceback entries for frames inside this package, in place.

    Returns:
        The same exception, for convenience in ``raise`` statements.
    """
    kept = []
    tb = failure.__traceback__
    while tb is not None:
        if not _is_internal(tb):
            kept.append(tb)
        tb = tb.tb_next

    filtered: Optional[TracebackType] = None
    for entry in reversed(kept):
        filtered = TracebackType(filtered, entry.tb_frame, entry.tb_lasti, entry.tb_lineno)

    return failure.with_traceback(filtered)
