"""Text chunker — splits documentation pages into overlapping, boundary-aware segments.

Chunks target ~1000 characters (roughly 250 tokens) and never drop below
800 characters unless the whole document is short. Consecutive chunks share
a fixed 200-character overlap so that a sentence cut at a boundary is still
seen whole by at least one embedding.
"""

import re

from docs_assistant.domain.entities import TextChunk

# ── Chunking constants ──────────────────────────────────────────────
TARGET_CHUNK_SIZE = 1000
MIN_CHUNK_SIZE = 800
MAX_CHUNK_SIZE = 2000
OVERLAP_SIZE = 200

_CODE_PATTERN = re.compile(
    r"```"                                    # fenced block marker
    r"|`[^`\n]+`"                             # inline code span
    r"|\b(?:def|function|func)\s+\w+\s*\("    # function definition
    r"|\bclass\s+\w+\s*[:({]"                 # class definition
)
_FENCE_LANGUAGE = re.compile(r"```([A-Za-z0-9_+#-]+)")
_LANGUAGE_HINTS: list[tuple[str, re.Pattern[str]]] = [
    (
        "python",
        re.compile(r"^\s*(?:def\s+\w+\s*\(|from\s+[\w.]+\s+import\s|import\s+[\w.]+\s*$)", re.MULTILINE),
    ),
    (
        "go",
        re.compile(r"\bfunc\s+(?:\([^)]*\)\s*)?\w+\s*\(|^\s*package\s+\w+\s*$", re.MULTILINE),
    ),
    (
        "javascript",
        re.compile(
            r"\bfunction\s+\w+\s*\(|^\s*import\s+.+\s+from\s+['\"]|\b(?:const|let)\s+\w+\s*=",
            re.MULTILINE,
        ),
    ),
]


def chunk_text(text: str) -> list[TextChunk]:
    """Split ``text`` into ordered chunks.

    Short documents (up to ``MAX_CHUNK_SIZE``) come back as a single chunk.
    Longer ones are cut near ``TARGET_CHUNK_SIZE`` at the last sentence end,
    line break or space that still leaves ``MIN_CHUNK_SIZE`` characters, or
    hard-cut when no such boundary exists.
    """
    return [
        TextChunk(
            content=segment,
            position=position,
            has_code=detect_code(segment),
            language=detect_language(segment),
        )
        for position, segment in enumerate(split_text(text))
    ]


def split_text(text: str) -> list[str]:
    """Return the raw chunk strings for ``text`` (see :func:`chunk_text`)."""
    text = text.strip()
    if len(text) <= MAX_CHUNK_SIZE:
        return [text]

    segments: list[str] = []
    length = len(text)
    start = 0

    while start < length:
        end = min(start + TARGET_CHUNK_SIZE, length)
        if end < length:
            end = _natural_boundary(text, start, end)

        if end - start < MIN_CHUNK_SIZE and start > 0:
            # Undersized tail: re-slice backwards instead of emitting a stub
            segments.append(text[max(0, end - MIN_CHUNK_SIZE):end])
        else:
            segments.append(text[start:end])

        if end >= length:
            break
        start = end - OVERLAP_SIZE

    return segments


def _natural_boundary(text: str, start: int, end: int) -> int:
    """Move ``end`` back to a sentence, line or word boundary past the minimum size."""
    floor = start + MIN_CHUNK_SIZE + 1

    sentence_end = text.rfind(".", floor, end + 1)
    if sentence_end != -1:
        return sentence_end + 1

    line_end = text.rfind("\n", floor, end + 1)
    if line_end != -1:
        return line_end + 1

    word_end = text.rfind(" ", floor, end + 1)
    if word_end != -1:
        return word_end

    return end


def detect_code(text: str) -> bool:
    """Heuristic: fenced blocks, inline spans, or function/class-like syntax."""
    return bool(_CODE_PATTERN.search(text))


def detect_language(text: str) -> str | None:
    """Language of the first fenced block, else a keyword-based guess."""
    fence = _FENCE_LANGUAGE.search(text)
    if fence:
        return fence.group(1).lower()
    for language, pattern in _LANGUAGE_HINTS:
        if pattern.search(text):
            return language
    return None
