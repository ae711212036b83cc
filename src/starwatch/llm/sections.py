"""Labeled-section extraction for structured LLM responses.

Responses are expected to look like::

    SUMMARY: first section text
    ANALYSIS: second section,
    possibly spanning lines
    PREDICTIONS: last section, running to the end of the text

The scan is line-oriented: a line that starts with a known label followed
by a colon opens that section, and every following line belongs to it
until the next label line or the end of the text. Light markdown around
the label (``**SUMMARY:**``, ``## ANALYSIS:``) is tolerated and matching
is case-insensitive. Labels that never appear, or whose text is empty,
are simply missing from the result.
"""

from collections.abc import Iterable


def _match_label(line: str, labels: list[tuple[str, str]]) -> tuple[str | None, str]:
    """Return ``(label, remainder)`` if ``line`` opens a section."""
    head = line.strip().lstrip("*#").lstrip()
    upper = head.upper()
    for key, label in labels:
        if not upper.startswith(key):
            continue
        rest = head[len(key):].lstrip("*")
        if rest.startswith(":"):
            return label, rest[1:].lstrip("*").strip()
    return None, ""


def parse_sections(text: str, labels: Iterable[str]) -> dict[str, str]:
    """Split ``text`` into labeled sections.

    Args:
        text: Raw response text.
        labels: Known section labels, e.g. ``("SUMMARY", "ANALYSIS")``.

    Returns:
        Mapping of label (as given) to stripped section text. When a label
        appears more than once, the first occurrence wins and the repeated
        section is discarded.
    """
    # Longest first so a label that prefixes another cannot shadow it
    known = sorted(((label.upper(), label) for label in labels), key=lambda kv: len(kv[0]), reverse=True)

    sections: dict[str, list[str]] = {}
    current: str | None = None

    for line in text.splitlines():
        label, remainder = _match_label(line, known)
        if label is not None:
            if label in sections:
                current = None
            else:
                sections[label] = [remainder]
                current = label
            continue
        if current is not None:
            sections[current].append(line)

    result: dict[str, str] = {}
    for label, lines in sections.items():
        body = "\n".join(lines).strip()
        if body:
            result[label] = body
    return result


__all__ = ["parse_sections"]
