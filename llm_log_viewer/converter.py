#!/usr/bin/env python3
"""Load chat transcripts and convert them to Markdown or HTML."""

import logging
from pathlib import Path
from typing import Optional

from .factories import create_conversation
from .models import Conversation, LoadError
from .parser import MAX_INPUT_BYTES, SIZE_WARNING, decode_text, detect_and_parse
from .renderer import get_file_extension, get_renderer
from .timings import log_timing

logger = logging.getLogger(__name__)


# =============================================================================
# Transcript Loading Functions
# =============================================================================


def load_from_bytes(data: bytes, source_name: Optional[str] = None) -> Conversation:
    """Decode, parse and normalize a transcript held in memory.

    Raises:
        LoadError: If the bytes are not UTF-8 or a JSON array is malformed.
            Recoverable problems are reported in ``Conversation.warnings``.
    """
    with log_timing("Decode"):
        text = decode_text(data)

    with log_timing("Parse"):
        records, warnings = detect_and_parse(text)

    if len(data) > MAX_INPUT_BYTES:
        warnings.append(SIZE_WARNING)

    with log_timing(lambda: f"Normalize ({len(records)} records)"):
        conversation = create_conversation(records, warnings, source_name)

    logger.debug(
        "Loaded %d turns (system preamble: %s, %d warnings)",
        len(conversation.turns),
        "yes" if conversation.system is not None else "no",
        len(conversation.warnings),
    )
    return conversation


def load_from_path(path: Path) -> Conversation:
    """Load a transcript file. The file name is kept as ``source_name``."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise LoadError(f"Failed to read {path}") from e

    return load_from_bytes(data, source_name=path.name or str(path))


# =============================================================================
# Conversion
# =============================================================================


def convert_to(
    format: str,
    input_path: Path,
    output_path: Optional[Path] = None,
    theme: str = "dark",
    title: Optional[str] = None,
) -> tuple[Path, Conversation]:
    """Convert a transcript file to the specified format.

    Args:
        format: Output format ("html", "preview", "md" or "markdown").
        input_path: Path to a JSON or JSONL transcript.
        output_path: Optional output path; defaults to the input path with
            the format's extension.
        theme: Colour theme for HTML output ("dark" or "light").
        title: Optional page title for HTML output.

    Returns:
        Tuple of (output path, loaded conversation) so callers can report
        the conversation's warnings.
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input path not found: {input_path}")

    renderer = get_renderer(format, theme)
    conversation = load_from_path(input_path)

    if output_path is None:
        output_path = input_path.with_suffix(f".{get_file_extension(format)}")

    content = renderer.generate(conversation, title)
    assert content is not None
    output_path.write_text(content, encoding="utf-8")
    return output_path, conversation
