"""Capture of the caller's source position."""

from __future__ import annotations

import inspect
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A point in the source: line, column, file and function."""

    line: int
    column: int
    file_name: str
    function_name: str

    @classmethod
    def current(cls) -> SourceLocation:
        """Return the location of the call to this method."""
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        try:
            if caller is None:
                raise RuntimeError("caller frame is not available")
            code = caller.f_code
            return cls(caller.f_lineno, 0, code.co_filename, code.co_name)
        finally:
            del frame, caller