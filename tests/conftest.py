from pathlib import Path

import pytest
import yaml

from safecalc.rules import RULES_PATH_ENV


class InMemoryConsole:
    """ConsolePort fake fed from a list of lines."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.output: list[str] = []

    def read_line(self) -> str | None:
        if not self._lines:
            return None
        return self._lines.pop(0)

    def write(self, message: str) -> None:
        self.output.append(message)

    @property
    def text(self) -> str:
        return "".join(self.output)


@pytest.fixture
def make_console():
    """Factory for in-memory consoles."""
    return InMemoryConsole


@pytest.fixture
def write_rules(tmp_path: Path):
    """Write a rules dict to a temporary rules.yaml and return its path."""

    def _write(rules: dict, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        with open(path, "w") as f:
            yaml.dump(rules, f)
        return path

    return _write


@pytest.fixture(autouse=True)
def isolate_rules_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SAFECALC_RULES_PATH out of the tests."""
    monkeypatch.delenv(RULES_PATH_ENV, raising=False)
