"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path

import pytest

from atom_styles.compiler import CompileOutcome
from atom_styles.models import ProjectConfig


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def write_json(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def project(temp_dir: Path) -> ProjectConfig:
    """A project with primitive and semantic token files."""
    tokens = temp_dir / "tokens"
    write_json(
        tokens / "global" / "colors.tokens.json",
        {
            "color": {
                "$type": "color",
                "$description": "Palette",
                "zinc": {
                    "50": {"$value": "#fafafa"},
                    "900": {"$value": "#18181b"},
                },
            }
        },
    )
    write_json(
        tokens / "global" / "spacing.tokens.json",
        {"space": {"sm": {"$value": {"value": 8, "unit": "px"}, "$type": "dimension"}}},
    )
    write_json(
        tokens / "semantic" / "colors.tokens.json",
        {"light": {"text": {"primary": {"$value": "{color.zinc.900}", "$type": "color"}}}},
    )
    write_json(
        tokens / "semantic" / "colors.dark.tokens.json",
        {"dark": {"text": {"primary": {"$value": "{color.zinc.50}", "$type": "color"}}}},
    )
    return ProjectConfig(root=temp_dir)


class FakeCompiler:
    """Stands in for the sass executable: copies the entry into the output."""

    def __init__(self, fail: set[str] | None = None):
        self.fail = fail or set()
        self.calls: list[tuple[Path, Path]] = []

    def __call__(self, entry: Path, output: Path) -> CompileOutcome:
        self.calls.append((entry, output))
        if output.name in self.fail:
            return CompileOutcome(entry, output, ok=False, error=f"Error: cannot compile {entry.name}")
        output.write_text(f"/* {entry.parent.name}/{entry.name} */\n", encoding="utf-8")
        return CompileOutcome(entry, output, ok=True)


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()
