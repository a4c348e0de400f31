"""The Expectation record: the outcome of a single assertion."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, replace
from enum import Enum

from expectly.errors import InvalidKind, InvalidMessage


class Kind(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"
    SKIP = "skip"


BROKEN_KINDS = frozenset({Kind.FAILURE, Kind.ERROR})


@dataclass(frozen=True)
class Location:
    """Source position where an assertion was made.

    Attributes:
        file: Path of the source file, or None for an opaque token.
        line: 1-based line number within ``file``.
        token: Free-form reference used when no file/line pair is available.
    """

    file: str | None = None
    line: int | None = None
    token: str | None = None

    @classmethod
    def from_frame(cls, depth: int = 1) -> Location:
        """Capture the position of the frame ``depth`` levels above the caller."""
        frame = inspect.currentframe()
        try:
            target = frame.f_back if frame is not None else None
            for _ in range(depth):
                if target is None:
                    break
                target = target.f_back
            if target is None:
                return cls(token="<unknown>")
            return cls(file=target.f_code.co_filename, line=target.f_lineno)
        finally:
            del frame

    def __str__(self) -> str:
        if self.file is not None:
            return f"{self.file}:{self.line}" if self.line is not None else self.file
        return self.token or "<unknown>"


@dataclass(frozen=True)
class Expectation:
    """Outcome of one assertion.

    Instances are immutable; decorating an expectation returns a new one.
    """

    kind: Kind
    message: str = ""
    location: Location | None = None

    @property
    def broken(self) -> bool:
        return self.kind in BROKEN_KINDS

    def with_location(self, location: Location | None) -> Expectation:
        """Fill a missing location; an existing one is kept."""
        if self.location is not None or location is None:
            return self
        return replace(self, location=location)

    def __str__(self) -> str:
        from expectly.formatting import format_expectation

        return format_expectation(self)


def _coerce_kind(kind: Kind | str) -> Kind:
    if isinstance(kind, Kind):
        return kind
    if isinstance(kind, str):
        try:
            return Kind(kind.lower())
        except ValueError:
            pass
    raise InvalidKind(kind)


def make_expectation(
    kind: Kind | str, message: str, location: Location | None = None
) -> Expectation:
    """Build an Expectation, rejecting unknown kinds rather than defaulting."""
    resolved = _coerce_kind(kind)
    if message is None:
        message = ""
    if not isinstance(message, str):
        raise InvalidMessage(
            f"expectation message must be text, got {type(message).__name__}"
        )
    if resolved in BROKEN_KINDS and not message:
        raise InvalidMessage(f"a {resolved.value} expectation must describe its cause")
    return Expectation(kind=resolved, message=message, location=location)


def succeed_if(
    condition: object, message: str, location: Location | None = None
) -> Expectation:
    kind = Kind.SUCCESS if condition else Kind.FAILURE
    return make_expectation(kind, message, location=location)


def is_expectation(value: object) -> bool:
    return isinstance(value, Expectation)


def update(
    exp: Expectation,
    location: Location | None,
    info: str | None = None,
    label: str | None = None,
) -> Expectation:
    """Decorate ``exp`` with the calling frame's context.

    The location is always assigned; callers must not pass a less specific
    location over one that is already set. ``label`` is prefixed before
    ``info`` is appended.
    """
    message = exp.message
    if label is not None:
        message = f"{label} {message}"
    if info is not None:
        message = f"{message}\n{info}"
    return replace(exp, location=location, message=message)
