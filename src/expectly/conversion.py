"""Convert raw assertion results, caught errors and skip notices into expectations."""

from __future__ import annotations

import re
from functools import singledispatch

from expectly.errors import ExpectationFailed, UnsupportedConversion
from expectly.expectation import Expectation, Kind, Location, make_expectation, succeed_if
from expectly.frames import create_traceback, extract_frames
from expectly.skip import SkipNotice

_ERROR_PREFIX = re.compile(r"Error.*?: ")


def clean_message(text: str) -> str:
    """Strip ``Error...: `` style prefixes from an error message."""
    return _ERROR_PREFIX.sub("", text)


@singledispatch
def as_expectation(
    value: object,
    message: str | None = None,
    location: Location | None = None,
    *,
    with_traceback: bool = True,
    traceback_limit: int | None = None,
) -> Expectation:
    """Coerce ``value`` into an Expectation.

    Args:
        value: An Expectation, a bool, a caught exception or a SkipNotice.
        message: Description used for bool results.
        location: Source position filled in when the result has none.
        with_traceback: Render the exception's frames into the message.
        traceback_limit: Keep only the innermost frames of the traceback.

    Raises:
        UnsupportedConversion: ``value`` has none of the supported shapes.
    """
    names = [cls.__name__ for cls in type(value).__mro__]
    raise UnsupportedConversion(names)


@as_expectation.register(Expectation)
def _(value, message=None, location=None, **kwargs) -> Expectation:
    return value.with_location(location)


@as_expectation.register(bool)
def _(value, message=None, location=None, **kwargs) -> Expectation:
    return succeed_if(value, message or "", location=location)


@as_expectation.register(SkipNotice)
def _(value, message=None, location=None, **kwargs) -> Expectation:
    return make_expectation(Kind.SKIP, clean_message(value.message), location)


@as_expectation.register(ExpectationFailed)
def _(value, message=None, location=None, **kwargs) -> Expectation:
    return value.expectation.with_location(location)


@as_expectation.register(BaseException)
def _(
    value,
    message=None,
    location=None,
    *,
    with_traceback: bool = True,
    traceback_limit: int | None = None,
) -> Expectation:
    msg = clean_message(str(value)) or type(value).__name__

    frames = extract_frames(value.__traceback__, limit=traceback_limit)
    if with_traceback and frames:
        msg = msg + "\n" + "\n".join(create_traceback(frames))
    elif msg.endswith("\n"):
        # Keep in line with other messages, which never end in a newline
        msg = msg[:-1]

    return make_expectation(Kind.ERROR, msg or type(value).__name__, location)
