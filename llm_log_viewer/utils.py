"""Text helpers shared by the parser, the normalizer and the renderers."""


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``, dropping every trailing ``\\r`` from each line.

    Joining the result with ``\\n`` gives back the text with CRLF (and
    runs like ``\\r\\r\\n``) normalized to LF, so a second split sees the
    same lines. A trailing newline shows up as a final empty line.
    """
    return [line.rstrip("\r") for line in text.split("\n")]


def title_case(label: str) -> str:
    """Upper-case the first character and lower-case the rest.

    >>> title_case("TOOL")
    'Tool'
    """
    return label[:1].upper() + label[1:].lower()
