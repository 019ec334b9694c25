"""
Tests for project configuration loading.
"""

from pathlib import Path

import pytest

from atom_styles.config import ConfigLoader, load_config
from atom_styles.errors import ConfigError
from atom_styles.models import DEFAULT_MODULES, ModuleEntry


class TestDefaults:
    """Tests for the configuration without atom.yaml."""

    def test_defaults(self, temp_dir: Path):
        config = load_config(temp_dir)
        assert config.root == temp_dir.resolve()
        assert config.prefix == "atom"
        assert config.tokens_path == temp_dir.resolve() / "tokens"
        assert config.output_path == temp_dir.resolve() / "src" / "tokens"
        assert config.dist_path == temp_dir.resolve() / "dist"
        assert config.modules == list(DEFAULT_MODULES)
        assert config.compiler.command == ["sass"]
        assert config.strict is False
        assert config.coalesce is False

    def test_dark_selectors(self, temp_dir: Path):
        config = load_config(temp_dir)
        assert config.dark_selectors == ["[data-theme='dark']", ".atom-theme-dark"]


class TestConfigFile:
    """Tests for atom.yaml overrides."""

    def test_overrides(self, temp_dir: Path):
        (temp_dir / "atom.yaml").write_text(
            "prefix: ds\n"
            "dist_dir: build\n"
            "strict: true\n"
            "compiler:\n"
            "  command: [npx, sass]\n"
            "modules:\n"
            "  - entry: tokens/_primitive.scss\n"
            "    output: tokens/primitives.css\n"
        )
        config = load_config(temp_dir)

        assert config.prefix == "ds"
        assert config.dist_path == temp_dir.resolve() / "build"
        assert config.strict is True
        assert config.compiler.command == ["npx", "sass"]
        assert config.compiler.args == ["--style=expanded", "--no-source-map"]
        assert config.modules == [
            ModuleEntry(entry="tokens/_primitive.scss", output="tokens/primitives.css")
        ]

    def test_empty_file(self, temp_dir: Path):
        (temp_dir / "atom.yaml").write_text("")
        assert load_config(temp_dir).prefix == "atom"

    def test_invalid_yaml(self, temp_dir: Path):
        (temp_dir / "atom.yaml").write_text("prefix: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(temp_dir)

    def test_invalid_value(self, temp_dir: Path):
        (temp_dir / "atom.yaml").write_text("modules:\n  - entry: only-entry.scss\n")
        with pytest.raises(ConfigError):
            load_config(temp_dir)

    def test_top_level_must_be_mapping(self, temp_dir: Path):
        (temp_dir / "atom.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(temp_dir)

    def test_custom_filename(self, temp_dir: Path):
        (temp_dir / "styles.yaml").write_text("prefix: ui\n")
        loader = ConfigLoader(temp_dir, filename="styles.yaml")
        assert loader.path == temp_dir.resolve() / "styles.yaml"
        assert loader.load().prefix == "ui"
