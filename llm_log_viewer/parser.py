#!/usr/bin/env python3
"""Detect the transcript format and decode it into RawRecord lists.

Two input formats are supported:
- a single JSON array of ``{"role": ..., "content": ...}`` objects
- JSONL, one such object per line

Array mode is all-or-nothing. JSONL mode skips and counts broken lines
so a partially corrupted log still loads.
"""

import logging
from enum import Enum

from pydantic import TypeAdapter, ValidationError

from .models import LoadError, RawRecord
from .utils import split_lines

logger = logging.getLogger(__name__)

MAX_INPUT_BYTES = 20 * 1024 * 1024
SIZE_WARNING = "File larger than ~20MB"

_RECORD_LIST = TypeAdapter(list[RawRecord])


class InputFormat(str, Enum):
    JSON_ARRAY = "json"
    JSONL = "jsonl"


def decode_text(data: bytes) -> str:
    """Decode raw bytes as strict UTF-8."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise LoadError("Non-UTF8 file") from e


def detect_format(text: str) -> InputFormat:
    """Pick a parse strategy from the first non-whitespace character.

    Only ``[`` selects array mode. A JSONL file whose first line is itself
    a bracketed value is therefore parsed as an array, and fails.
    """
    if text.lstrip()[:1] == "[":
        return InputFormat.JSON_ARRAY
    return InputFormat.JSONL


def parse_json_array(text: str) -> list[RawRecord]:
    try:
        return _RECORD_LIST.validate_json(text)
    except ValidationError as e:
        logger.debug("JSON array rejected: %s", e)
        raise LoadError("JSON array parse error") from e


def parse_jsonl(text: str) -> tuple[list[RawRecord], int]:
    """Parse one record per non-blank line.

    Returns:
        Tuple of (records in input order, number of lines that failed)
    """
    records: list[RawRecord] = []
    failed = 0
    for line_no, line in enumerate(split_lines(text), 1):
        line = line.strip()
        if not line:
            continue
        try:
            records.append(RawRecord.model_validate_json(line))
        except ValidationError as e:
            failed += 1
            logger.debug(
                "JSONL line %d skipped: %d validation error(s)", line_no, e.error_count()
            )
    return records, failed


def detect_and_parse(text: str) -> tuple[list[RawRecord], list[str]]:
    """Parse text in whichever format it appears to be in.

    Returns:
        Tuple of (records, warnings). At most one warning is produced,
        summarising every JSONL line that failed.
    """
    input_format = detect_format(text)
    logger.debug("Detected %s input", input_format.value)

    warnings: list[str] = []
    if input_format == InputFormat.JSON_ARRAY:
        records = parse_json_array(text)
    else:
        records, failed = parse_jsonl(text)
        if failed > 0:
            warnings.append(f"{failed} JSONL line(s) failed to parse")
    return records, warnings
