"""Outcome reporting: console progress and the append-only report file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

import click

from ..config.models import MethodSpec
from ..pneuma.tx import AttemptFailure

DEFAULT_REPORT_PATH = Path("ocs01_report.txt")

OK = "ok"
ERROR = "error"
SKIPPED = "skipped"


@dataclass(frozen=True)
class MethodOutcome:
    method: MethodSpec
    params: tuple[str, ...]
    status: str
    result: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status == OK

    def describe(self) -> str:
        if self.status == SKIPPED:
            return f"Skipped - unknown method type {self.method.kind!r}"
        if self.status == ERROR:
            return f"Error - {self.error}"
        if self.method.is_call:
            return f"TX Hash {self.result}"
        return str(self.result)

    def log_line(self) -> str:
        return f"{self.method.label}: {self.describe()}"


class Reporter(Protocol):
    def method_started(self, method: MethodSpec) -> None:
        ...

    def method_finished(self, outcome: MethodOutcome) -> None:
        ...


class ConsoleReporter:
    def method_started(self, method: MethodSpec) -> None:
        click.echo(f"▶ {method.label}...")

    def method_finished(self, outcome: MethodOutcome) -> None:
        if outcome.status == SKIPPED:
            click.secho("Unknown method type", fg="yellow")
        elif outcome.status == ERROR:
            click.secho(f"Error: {outcome.error}", fg="red")
        elif outcome.method.is_call:
            click.secho(f"TX Hash: {outcome.result}", fg="green")
        else:
            click.echo(f"Result: {outcome.result}")

    def attempt_failed(self, failure: AttemptFailure) -> None:
        click.secho(f"⚠ {failure}", fg="yellow", err=True)


@dataclass(frozen=True)
class ReportLog:
    path: Path = DEFAULT_REPORT_PATH

    def method_started(self, method: MethodSpec) -> None:
        pass

    def method_finished(self, outcome: MethodOutcome) -> None:
        self.append(outcome.log_line())

    def append(self, line: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
