"""Token file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from atom_styles.constants import ErrorMessages
from atom_styles.errors import TokenFileError


def load_token_file(path: Path) -> dict[str, Any]:
    """
    Read a token JSON file into a token tree.

    Raises:
        TokenFileError: The file is not valid JSON or not a JSON object
    """
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TokenFileError(
            ErrorMessages.INVALID_JSON.format(
                path=path, line=e.lineno, column=e.colno, reason=e.msg
            ),
            path=str(path),
        ) from e

    if not isinstance(data, dict):
        raise TokenFileError(
            ErrorMessages.NOT_AN_OBJECT.format(path=path, kind=type(data).__name__),
            path=str(path),
        )
    return data
