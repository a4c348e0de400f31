"""Predicates over an expectation's kind."""

from __future__ import annotations

from expectly.expectation import BROKEN_KINDS, Expectation, Kind


def expectation_type(exp: Expectation) -> Kind:
    return exp.kind


def _is_kind(exp: object, kind: Kind) -> bool:
    return isinstance(exp, Expectation) and exp.kind is kind


def is_success(exp: object) -> bool:
    return _is_kind(exp, Kind.SUCCESS)


def is_failure(exp: object) -> bool:
    return _is_kind(exp, Kind.FAILURE)


def is_error(exp: object) -> bool:
    return _is_kind(exp, Kind.ERROR)


def is_skip(exp: object) -> bool:
    return _is_kind(exp, Kind.SKIP)


def is_broken(exp: object) -> bool:
    """True for failures and errors."""
    return isinstance(exp, Expectation) and exp.kind in BROKEN_KINDS
