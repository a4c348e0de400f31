from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import typer

from expectly.config import ExpectlyConfig
from expectly.conversion import as_expectation
from expectly.errors import ExpectationFailed, ExpectlyError
from expectly.expectation import Expectation, Kind, Location
from expectly.formatting import format_expectation, single_letter_summary
from expectly.frames import extract_frames
from expectly.signals import continue_test
from expectly.skip import SkipNotice
from expectly.verbose import setup_logger

TestBody = Callable[[], object]


@dataclass
class TestResult:
    """Outcomes recorded while running one test body.

    Attributes:
        name: Test name as registered.
        expectations: Recorded outcomes, in the order they were raised.
        duration_seconds: Wall-clock time spent in the test body.
        usage_error: Diagnostic for an API misuse that halted the test.
    """

    __test__ = False

    name: str
    expectations: list[Expectation] = field(default_factory=list)
    duration_seconds: float = 0.0
    usage_error: str | None = None

    def count(self, kind: Kind) -> int:
        return sum(1 for exp in self.expectations if exp.kind is kind)

    @property
    def n_success(self) -> int:
        return self.count(Kind.SUCCESS)

    @property
    def n_failure(self) -> int:
        return self.count(Kind.FAILURE)

    @property
    def n_error(self) -> int:
        return self.count(Kind.ERROR)

    @property
    def n_skip(self) -> int:
        return self.count(Kind.SKIP)

    @property
    def passed(self) -> bool:
        return self.usage_error is None and not any(
            exp.broken for exp in self.expectations
        )

    @property
    def skipped(self) -> bool:
        return self.n_skip > 0

    def summary(self, colour: bool = False) -> str:
        return "".join(
            single_letter_summary(exp, colour=colour) for exp in self.expectations
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "duration_seconds": self.duration_seconds,
            "usage_error": self.usage_error,
            "expectations": [
                {
                    "kind": exp.kind.value,
                    "message": exp.message,
                    "location": str(exp.location) if exp.location else None,
                }
                for exp in self.expectations
            ],
        }


@dataclass
class SuiteResult:
    name: str
    tests: list[TestResult] = field(default_factory=list)
    duration_seconds: float = 0.0

    def total(self, kind: Kind) -> int:
        return sum(t.count(kind) for t in self.tests)

    @property
    def passed(self) -> bool:
        return all(t.passed for t in self.tests)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "duration_seconds": self.duration_seconds,
            "totals": {kind.value: self.total(kind) for kind in Kind},
            "tests": [t.to_dict() for t in self.tests],
        }


def _error_location(exc: BaseException, body: TestBody) -> Location | None:
    """Innermost frame of the test body's source file, else the innermost frame."""
    frames = extract_frames(exc.__traceback__)
    if not frames:
        return None
    code = getattr(body, "__code__", None)
    own = [f for f in frames if code is not None and f.filename == code.co_filename]
    innermost = own[-1] if own else frames[-1]
    return Location(file=innermost.filename, line=innermost.lineno)


def run_test(
    name: str,
    body: TestBody,
    config: ExpectlyConfig | None = None,
    logger: logging.Logger | None = None,
) -> TestResult:
    """Run one test body, recording every expectation it raises.

    Assertion outcomes are recovered at this frame, so a failing assertion
    does not stop the remaining ones. A skip or an unexpected exception ends
    the test and is recorded. Usage errors propagate to the caller.
    """
    config = config or ExpectlyConfig()
    logger = logger or logging.getLogger("expectly")
    result = TestResult(name=name)

    def record(exp: Expectation) -> bool:
        if config.stop_on_failure and exp.broken:
            return False
        result.expectations.append(exp)
        logger.debug(f"[{name}] {exp.kind.value}: {format_expectation(exp)}")
        return True

    start = time.monotonic()
    try:
        with continue_test(record):
            body()
    except ExpectlyError:
        raise
    except SkipNotice as e:
        exp = as_expectation(e)
        result.expectations.append(exp)
        logger.debug(f"[{name}] skipped: {exp.message}")
    except ExpectationFailed as e:
        if not any(r is e.expectation for r in result.expectations):
            result.expectations.append(e.expectation)
        logger.debug(f"[{name}] aborted: {format_expectation(e.expectation)}")
    except Exception as e:
        exp = as_expectation(
            e,
            location=_error_location(e, body),
            with_traceback=config.traceback,
            traceback_limit=config.max_traceback_frames,
        )
        result.expectations.append(exp)
        logger.debug(f"[{name}] error: {exp.message}")
    finally:
        result.duration_seconds = time.monotonic() - start

    return result


class Suite:
    """An ordered collection of named test bodies."""

    def __init__(
        self,
        name: str,
        config: ExpectlyConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.name = name
        self.config = config or ExpectlyConfig()
        self.logger = logger or setup_logger(
            debug_file=Path(self.config.debug_log) if self.config.debug_log else None,
            verbose=self.config.verbose,
            logger_name=f"expectly_{name}",
        )
        self._tests: list[tuple[str, TestBody]] = []

    def add(self, name: str, body: TestBody) -> None:
        if any(existing == name for existing, _ in self._tests):
            raise ValueError(f"Test '{name}' is already registered in suite '{self.name}'")
        self._tests.append((name, body))

    def test(self, name: str | None = None) -> Callable[[TestBody], TestBody]:
        """Decorator registering a function as a test body."""

        def decorator(body: TestBody) -> TestBody:
            self.add(name or body.__name__, body)
            return body

        return decorator

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self._tests]

    def run(self) -> SuiteResult:
        suite_result = SuiteResult(name=self.name)
        self.logger.debug(f"Running suite '{self.name}' ({len(self._tests)} tests)")

        start = time.monotonic()
        for name, body in self._tests:
            try:
                test_result = run_test(
                    name, body, config=self.config, logger=self.logger
                )
            except ExpectlyError as e:
                self.logger.error(f"Test '{name}' halted by usage error: {e}")
                test_result = TestResult(name=name, usage_error=f"{type(e).__name__}: {e}")
            suite_result.tests.append(test_result)
            self.logger.debug(f"Test '{name}' completed: {test_result.summary()}")
            typer.echo(f"  {name} {test_result.summary(colour=self.config.colour)}")
        suite_result.duration_seconds = time.monotonic() - start

        self.logger.info(
            f"Suite '{self.name}': "
            f"{suite_result.total(Kind.SUCCESS)} passed, "
            f"{suite_result.total(Kind.FAILURE)} failed, "
            f"{suite_result.total(Kind.ERROR)} errors, "
            f"{suite_result.total(Kind.SKIP)} skipped"
        )
        return suite_result
