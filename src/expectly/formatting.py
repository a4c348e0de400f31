"""Human-readable rendering of expectations."""

from __future__ import annotations

import typer

from expectly.expectation import Expectation, Kind

_GLYPHS: dict[Kind, tuple[str, str]] = {
    Kind.SKIP: ("S", typer.colors.YELLOW),
    Kind.SUCCESS: (".", typer.colors.GREEN),
    Kind.ERROR: ("E", typer.colors.MAGENTA),
    Kind.FAILURE: ("F", typer.colors.RED),
}


def format_expectation(exp: Expectation) -> str:
    if exp.kind is Kind.SUCCESS:
        return "As expected"
    return f"Not expected: {exp.message}."


def single_letter_summary(exp: Expectation, colour: bool = False) -> str:
    """One-character progress glyph for ``exp``."""
    glyph, fg = _GLYPHS.get(exp.kind, ("?", typer.colors.WHITE))
    if colour:
        return typer.style(glyph, fg=fg)
    return glyph
