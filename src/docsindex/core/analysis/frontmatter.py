from __future__ import annotations

"""
Front-Matter Metadata Extractor.

Reads markdown files and parses the YAML block delimited by '---' lines at
the top of the document. Failures are confined to the file at hand: they
are logged, recorded as warnings, and reported as "no metadata".
"""

import datetime
import logging
import math
import os
from typing import AbstractSet, Any, Iterable, List, Optional, Tuple

import yaml

from docsindex.domain.constants import MARKDOWN_EXTENSIONS
from docsindex.domain.errors import FrontMatterError, MetadataWarning
from docsindex.domain.tree_models import Metadata, MetadataValue

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"
_CLOSING_DELIMITERS = (FRONT_MATTER_DELIMITER, "...")
_BOM = "\ufeff"


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_markdown(file_name: str, extensions: Optional[Iterable[str]] = None) -> bool:
    """
    Check whether a file name carries one of the markdown extensions.

    Args:
        file_name: Base name or path of the file.
        extensions: Accepted extensions (with leading dot).

    Returns:
        bool: True for markdown files (case-insensitive).
    """
    exts = extensions if extensions is not None else MARKDOWN_EXTENSIONS
    _, ext = os.path.splitext(file_name)
    return ext.lower() in {e.lower() for e in exts}


def split_front_matter(text: str) -> Tuple[Optional[str], str]:
    """
    Separate the front-matter block from the markdown body.

    A block exists only when the very first line is the '---' marker. It
    ends at the next line that is '---' (or the YAML end marker '...').

    Args:
        text: Full document content.

    Returns:
        Tuple[Optional[str], str]: (raw YAML block or None, body).

    Raises:
        FrontMatterError: If the opening marker is never closed.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]

    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONT_MATTER_DELIMITER:
        return None, text

    for idx in range(1, len(lines)):
        if lines[idx].rstrip() in _CLOSING_DELIMITERS:
            block = "".join(lines[1:idx])
            body = "".join(lines[idx + 1:])
            return block, body

    raise FrontMatterError("Unterminated front-matter block")


def parse_front_matter(text: str) -> Optional[Metadata]:
    """
    Parse the front-matter of a markdown document.

    Args:
        text: Full document content.

    Returns:
        Optional[Metadata]: Parsed mapping, or None if there is no block.

    Raises:
        FrontMatterError: If the block is unterminated, is not valid YAML,
            does not describe a mapping, or contains a recursive alias.
    """
    block, _ = split_front_matter(text)
    if block is None:
        return None

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML in front-matter: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front-matter must be a mapping, received {type(data).__name__}"
        )

    return _coerce_value(data)  # type: ignore[return-value]


def extract_metadata(
        file_path: str,
        extensions: Optional[Iterable[str]] = None,
        warnings: Optional[List[MetadataWarning]] = None,
        rel_path: str = "",
) -> Optional[Metadata]:
    """
    Extract the front-matter mapping of a markdown file.

    Non-markdown files are skipped without being opened. Any read or parse
    failure is logged and yields None so the rest of the tree can still be
    indexed.

    Args:
        file_path: Absolute path of the file.
        extensions: Markdown extensions to accept.
        warnings: Optional accumulator for recoverable failures.
        rel_path: Display path used in logs and warnings.

    Returns:
        Optional[Metadata]: The parsed mapping, or None.
    """
    if not is_markdown(file_path, extensions):
        return None

    display = rel_path or file_path
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
        return parse_front_matter(content)
    except (OSError, UnicodeDecodeError) as e:
        _record(warnings, display, f"Cannot read file: {e}")
    except FrontMatterError as e:
        _record(warnings, display, str(e))
    except RecursionError:
        _record(warnings, display, "Front-matter nesting is too deep")
    return None


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _record(warnings: Optional[List[MetadataWarning]], rel_path: str, error: str) -> None:
    logger.warning(f"Skipping metadata for '{rel_path}': {error}")
    if warnings is not None:
        warnings.append(MetadataWarning(rel_path=rel_path, error=error))


def _coerce_value(value: Any, _active: AbstractSet[int] = frozenset()) -> MetadataValue:
    """
    Restrict YAML values to types that serialize to JSON.

    _active holds the ids of the containers on the current path, so that
    self-referencing aliases (e.g. "a: &x [*x]") are rejected. Aliases
    shared between sibling keys are fine.

    Raises:
        FrontMatterError: On a container that contains itself.
    """
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        # JSON has no literal for inf or nan
        return value if math.isfinite(value) else str(value)
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(str(v) for v in value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (dict, list, tuple)):
        if id(value) in _active:
            raise FrontMatterError("Front-matter contains a recursive alias")
        active = _active | {id(value)}
        if isinstance(value, dict):
            return {str(k): _coerce_value(v, active) for k, v in value.items()}
        return [_coerce_value(v, active) for v in value]
    return str(value)
