#!/usr/bin/env python3
"""
Example: Generating SCSS custom properties from DTCG tokens.

Builds a throwaway project with a few primitive and semantic tokens,
runs the token generator and prints the generated fragments.

Usage:
    python examples/generate_tokens.py
"""

import json
import logging
import tempfile
from pathlib import Path

from atom_styles.models import ProjectConfig
from atom_styles.tokens import flatten_tokens, generate_tokens

PRIMITIVES = {
    "motion.tokens.json": {
        "duration": {
            "$type": "duration",
            "fast": {"$value": {"value": 150, "unit": "ms"}},
        },
        "easing": {
            "$type": "cubicBezier",
            "standard": {"$value": [0.4, 0, 0.2, 1]},
        },
    },
    "shadows.tokens.json": {
        "shadow": {
            "$type": "shadow",
            "md": {
                "$value": [
                    {
                        "offsetX": {"value": 0, "unit": "px"},
                        "offsetY": {"value": 4, "unit": "px"},
                        "blur": {"value": 6, "unit": "px"},
                        "spread": {"value": -1, "unit": "px"},
                        "color": "rgba(0, 0, 0, 0.1)",
                    },
                    {
                        "offsetX": "0",
                        "offsetY": "2px",
                        "blur": "4px",
                        "spread": "-2px",
                        "color": "rgba(0, 0, 0, 0.1)",
                    },
                ]
            },
        }
    },
    "colors.tokens.json": {
        "color": {
            "$type": "color",
            "zinc": {"50": {"$value": "#fafafa"}, "900": {"$value": "#18181b"}},
        }
    },
}

SEMANTICS = {
    "colors.tokens.json": {"light": {"text": {"primary": {"$value": "{color.zinc.900}"}}}},
    "colors.dark.tokens.json": {"dark": {"text": {"primary": {"$value": "{color.zinc.50}"}}}},
}


def main() -> None:
    """Demonstrate token generation."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("Flattening a single tree:")
    for key, value in flatten_tokens(PRIMITIVES["motion.tokens.json"]).items():
        print(f"  --atom-{key}: {value}")
    print()

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        for name, data in PRIMITIVES.items():
            path = root / "tokens" / "global" / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, indent=2))
        for name, data in SEMANTICS.items():
            path = root / "tokens" / "semantic" / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, indent=2))

        config = ProjectConfig(root=root)
        result = generate_tokens(config)
        print()

        for path in result.outputs:
            print(f"{path.name}:")
            print(path.read_text())


if __name__ == "__main__":
    main()
