"""Shared pytest fixtures and test helpers for tzconv tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import pytest
from click.testing import CliRunner

from tzconv.domain.types import ConversionRequest, InputField
from tzconv.services.result import ServiceResult


@dataclass
class FixedClock:
    """Clock stub that always reports the same instant and counts reads."""

    value: datetime
    reads: int = 0

    def now(self) -> datetime:
        self.reads += 1
        return self.value


@dataclass
class RecordingPort:
    """In-memory UI port that records everything the form renders."""

    request: ConversionRequest = field(default_factory=ConversionRequest)
    rendered: list[ServiceResult] = field(default_factory=list)

    def read_inputs(self) -> ConversionRequest:
        return self.request

    def set_wall_clock(self, value: str) -> None:
        self.request = self.request.replace(InputField.WALL_CLOCK, value)

    def set(self, field_name: InputField, value: str | None) -> None:
        self.request = self.request.replace(field_name, value)

    def show_result(self, result: ServiceResult) -> None:
        self.rendered.append(result)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2024, 6, 15, 14, 30, 47, 123456))


@pytest.fixture
def port() -> RecordingPort:
    return RecordingPort()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's tzconv.toml or TZCONV_* env out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("TZCONV_CONFIG", "TZCONV_QUIET", "TZCONV_JSON_OUTPUT", "TZCONV_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo any logging configuration a CLI invocation installed."""
    import logging

    import structlog

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tz_level = logging.getLogger("tzconv").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("tzconv").setLevel(tz_level)
    structlog.reset_defaults()
