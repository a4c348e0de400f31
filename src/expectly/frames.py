"""Render call-stack frames into traceback lines for error messages."""

from __future__ import annotations

import os
import traceback
from collections.abc import Iterable
from types import TracebackType

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def extract_frames(
    tb: TracebackType | None, limit: int | None = None
) -> list[traceback.FrameSummary]:
    """Return the frames of ``tb`` outermost first.

    Frames that belong to expectly itself are dropped. With ``limit``, only
    the innermost ``limit`` frames are kept.
    """
    if tb is None:
        return []
    frames = [f for f in traceback.extract_tb(tb) if not _is_internal(f.filename)]
    if limit is not None:
        frames = frames[-limit:] if limit > 0 else []
    return frames


def _is_internal(filename: str) -> bool:
    return os.path.dirname(os.path.abspath(filename)) == _PACKAGE_DIR


def format_frame(index: int, frame: traceback.FrameSummary) -> str:
    filename = os.path.basename(frame.filename)
    return f"{index}: {frame.name}() at {filename}#{frame.lineno}"


def create_traceback(frames: Iterable[traceback.FrameSummary]) -> list[str]:
    """Render each frame as a numbered, human-readable line."""
    return [format_frame(i, frame) for i, frame in enumerate(frames, start=1)]
