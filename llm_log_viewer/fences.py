"""Code fence handling for untrusted chat text.

Chat messages often contain stray triple backticks ("``` code block.",
or a sentence that ends in a backtick run). Passed to a Markdown renderer
unchanged, these open a code block that swallows everything after it.

``classify_lines`` is the shared line scanner: a two-state machine
(outside / inside a fence) that labels every line. The sanitizer below
and the HTML fence converter in ``html.utils`` both consume its tokens.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from .utils import split_lines

FENCE = "```"
ZERO_WIDTH_SPACE = "\u200b"
# A backtick run with a zero-width space after the second backtick:
# visually identical, but no longer a fence delimiter.
DEFUSED_FENCE = "``" + ZERO_WIDTH_SPACE + "`"

_LANG_TAG_CHARS = frozenset("_+-.#")


class FenceKind(str, Enum):
    TEXT = "text"  # Ordinary line outside a fence
    CODE = "code"  # Literal line inside a fence
    FENCE_OPEN = "fence_open"
    FENCE_CLOSE = "fence_close"
    STRAY_FENCE = "stray_fence"  # Starts with ``` but is not a valid opener
    TRAILING_FENCE = "trailing_fence"  # Ends with ``` outside a fence


@dataclass(frozen=True)
class FenceToken:
    kind: FenceKind
    line: str
    lang: Optional[str] = None
    synthetic: bool = False  # Closing fence added for an unterminated block


def _is_lang_tag(text: str) -> bool:
    return bool(text) and all(c.isalnum() or c in _LANG_TAG_CHARS for c in text)


def _parse_opener(line: str) -> tuple[bool, Optional[str]]:
    """Check whether a line opens a fence.

    Returns:
        Tuple of (is_opener, language tag or None)
    """
    trimmed = line.lstrip()
    if not trimmed.startswith(FENCE):
        return False, None
    rest = trimmed[len(FENCE) :].strip()
    if not rest:
        return True, None
    if _is_lang_tag(rest):
        return True, rest
    return False, None


def _is_closer(line: str) -> bool:
    return line.strip() == FENCE


def classify_lines(
    lines: Iterable[str], close_unterminated: bool = True
) -> Iterator[FenceToken]:
    """Label each line according to its role in fenced code blocks.

    Inside a fence only a line that is exactly ``` (ignoring surrounding
    whitespace) is significant; everything else is CODE.

    Args:
        lines: Lines without line terminators
        close_unterminated: Emit a synthetic FENCE_CLOSE if input ends
            inside a fence

    Yields:
        One FenceToken per input line, plus the optional synthetic close
    """
    inside = False
    for line in lines:
        if inside:
            if _is_closer(line):
                inside = False
                yield FenceToken(FenceKind.FENCE_CLOSE, line)
            else:
                yield FenceToken(FenceKind.CODE, line)
            continue

        is_opener, lang = _parse_opener(line)
        if is_opener:
            inside = True
            yield FenceToken(FenceKind.FENCE_OPEN, line, lang=lang)
        elif line.lstrip().startswith(FENCE):
            yield FenceToken(FenceKind.STRAY_FENCE, line)
        elif line.endswith(FENCE):
            yield FenceToken(FenceKind.TRAILING_FENCE, line)
        else:
            yield FenceToken(FenceKind.TEXT, line)

    if inside and close_unterminated:
        yield FenceToken(FenceKind.FENCE_CLOSE, FENCE, synthetic=True)


def defuse_trailing(line: str) -> str:
    """Break up the backtick run at the end of a line."""
    return line[: -len(FENCE)] + DEFUSED_FENCE


def defuse_leading(line: str) -> str:
    """Break up the first backtick run, and the trailing one if present."""
    defused = line.replace(FENCE, DEFUSED_FENCE, 1)
    if defused.endswith(FENCE):
        defused = defuse_trailing(defused)
    return defused


def sanitize_chat_markdown(text: str) -> str:
    """Neutralize accidental code fences so the text renders safely.

    Genuine fences (``` or ```lang on their own line) are kept. Stray
    backtick runs outside a fence are defused, and an unterminated fence
    is closed at the end. Running this on its own output is a no-op.
    """
    out: list[str] = []
    for token in classify_lines(split_lines(text)):
        if token.kind == FenceKind.STRAY_FENCE:
            out.append(defuse_leading(token.line))
        elif token.kind == FenceKind.TRAILING_FENCE:
            out.append(defuse_trailing(token.line))
        else:
            out.append(token.line)
    return "\n".join(out)
