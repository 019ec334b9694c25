"""
Stylesheet assembler - writes the generated SCSS token fragments.

Input:  tokens/global/*.tokens.json, tokens/semantic/*.tokens.json
Output: src/tokens/_primitive.scss, src/tokens/_semantic.scss

Tier 1 (primitives) is one :root block with a commented section per
category. Tier 2 (semantics) is a light :root block plus a dark theme
block; semantic values reference primitives through var() lookups.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from atom_styles.constants import (
    PRIMITIVE_OUTPUT,
    SEMANTIC_OUTPUT,
    TOKEN_FILE_SUFFIX,
    SuccessMessages,
)
from atom_styles.models.config import ProjectConfig
from atom_styles.tokens.flattener import flatten_tokens
from atom_styles.tokens.loader import load_token_file
from atom_styles.tokens.references import find_references, resolve_references

logger = logging.getLogger(__name__)

BANNER_RULE = "// " + "=" * 44


def banner(title: str) -> str:
    """Header written at the top of every generated fragment."""
    return (
        f"{BANNER_RULE}\n"
        f"// {title} (auto-generated)\n"
        "// DO NOT EDIT - run: atom-tokens\n"
        "// Source: DTCG W3C 2025.10 format\n"
        f"{BANNER_RULE}\n\n"
    )


def declarations(tokens: Mapping[str, str], prefix: str, indent: str = "  ") -> str:
    """{"space-sm": "8px"} -> "  --atom-space-sm: 8px;" (one line per token)."""
    return "".join(f"{indent}--{prefix}-{key}: {value};\n" for key, value in tokens.items())


def render_block(selectors: Iterable[str], body: str) -> str:
    """Wrap declarations in a selector block, one selector per line."""
    return ",\n".join(selectors) + " {\n" + body + "}\n"


@dataclass
class GenerateResult:
    """Outcome of a token generation run."""

    outputs: list[Path] = field(default_factory=list)
    token_counts: dict[str, int] = field(default_factory=dict)
    skipped: list[Path] = field(default_factory=list)

    @property
    def total_tokens(self) -> int:
        return sum(self.token_counts.values())


class TokenGenerator:
    """
    Generates the primitive and semantic SCSS fragments for a project.

    Missing token files are skipped; malformed ones stop the run with
    TokenFileError.
    """

    def __init__(self, config: ProjectConfig):
        """
        Initialize the generator.

        Args:
            config: Project layout and switches
        """
        self.config = config

    @property
    def global_dir(self) -> Path:
        return self.config.tokens_path / "global"

    @property
    def semantic_dir(self) -> Path:
        return self.config.tokens_path / "semantic"

    def generate(self) -> GenerateResult:
        """Generate both tiers."""
        result = GenerateResult()
        primitives = self.generate_primitives(result)
        self.generate_semantics(result, known=primitives)
        return result

    def generate_primitives(self, result: GenerateResult | None = None) -> set[str]:
        """
        Write _primitive.scss.

        Returns:
            Flattened keys of every primitive token written
        """
        result = result if result is not None else GenerateResult()
        prefix = self.config.prefix
        keys: set[str] = set()

        output = banner("Tier 1: Primitive Tokens")
        output += ":root {\n"

        for category in self.config.primitive_categories:
            path = self.global_dir / f"{category}{TOKEN_FILE_SUFFIX}"
            if not path.exists():
                logger.info(f"  Skipping missing token file: {path}")
                result.skipped.append(path)
                continue

            tokens = flatten_tokens(load_token_file(path), strict=self.config.strict)
            if not tokens:
                continue

            result.token_counts[category] = len(tokens)
            keys.update(tokens)
            output += f"  // {category}\n"
            output += declarations(tokens, prefix)
            output += "\n"

        output += "}\n"

        target = self._write(PRIMITIVE_OUTPUT, output)
        result.outputs.append(target)
        return keys

    def generate_semantics(
        self,
        result: GenerateResult | None = None,
        known: set[str] | None = None,
    ) -> Path:
        """
        Write _semantic.scss.

        Args:
            result: Result to record counts and skipped files into
            known: Primitive keys; references to anything else are logged

        Returns:
            Path of the written fragment
        """
        result = result if result is not None else GenerateResult()
        output = banner("Tier 2: Semantic Tokens")
        # Keys of every theme rendered so far; dark tokens may reference light ones
        semantic_keys: set[str] = set()

        themes = (
            (
                "light",
                self.config.semantic_light_file,
                self.config.semantic_light_key,
                [":root"],
            ),
            (
                "dark",
                self.config.semantic_dark_file,
                self.config.semantic_dark_key,
                self.config.dark_selectors,
            ),
        )

        for theme, filename, key, selectors in themes:
            path = self.semantic_dir / filename
            if not path.exists():
                logger.info(f"  Skipping missing token file: {path}")
                result.skipped.append(path)
                continue

            data = load_token_file(path)
            group = data.get(key)
            if not isinstance(group, dict) or not group:
                logger.info(f"  No '{key}' group in {path}")
                continue

            tokens = flatten_tokens(group, strict=self.config.strict)
            semantic_keys.update(tokens)
            if known is not None:
                self._check_references(tokens, known | semantic_keys, theme)

            resolved = {
                name: resolve_references(value, self.config.prefix)
                for name, value in tokens.items()
            }
            result.token_counts[f"semantic-{theme}"] = len(resolved)
            output += render_block(selectors, declarations(resolved, self.config.prefix))
            output += "\n"

        target = self._write(SEMANTIC_OUTPUT, output)
        result.outputs.append(target)
        return target

    def _check_references(self, tokens: dict[str, str], known: set[str], theme: str) -> None:
        for name, value in tokens.items():
            for ref in find_references(value):
                if ref.replace(".", "-") not in known:
                    logger.warning(f"  {theme}: '{name}' references unknown token {{{ref}}}")

    def _write(self, filename: str, content: str) -> Path:
        self.config.output_path.mkdir(parents=True, exist_ok=True)
        target = self.config.output_path / filename
        target.write_text(content, encoding="utf-8")
        logger.info(SuccessMessages.GENERATED.format(path=self._display(target)))
        return target

    def _display(self, path: Path) -> Path:
        try:
            return path.relative_to(self.config.root)
        except ValueError:
            return path


def generate_tokens(config: ProjectConfig) -> GenerateResult:
    """Convenience wrapper: generate both tiers for a project."""
    logger.info("Generating SCSS tokens from DTCG JSON...")
    result = TokenGenerator(config).generate()
    logger.info(f"Done. {result.total_tokens} tokens written.")
    return result
