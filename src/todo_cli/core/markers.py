"""Marker extraction from free-text task descriptions.

Recognized markers (whitespace-delimited tokens):

    @context     first one wins, all are stripped
    P:project    p: also accepted; first one wins, all are stripped
    T:tag        t: also accepted; every one is kept
    Due:date     prefix is case-insensitive; absolute or relative date

A marker with nothing after its prefix is plain text.
"""

from dataclasses import dataclass, field
from datetime import date

from .dates import resolve_date

CONTEXT = "context"
PROJECT = "project"
TAG = "tag"
DUE = "due"


@dataclass
class ParsedMarkers:
    """Result of extracting markers from a raw description."""

    description: str
    context: str | None = None
    project: str | None = None
    tags: list[str] = field(default_factory=list)
    due_date: date | None = None


def classify_token(word: str) -> tuple[str, str] | None:
    """Return (kind, value) for a marker token, or None for plain text."""
    if word.startswith("@"):
        kind, value = CONTEXT, word[1:]
    elif word[:2] in ("P:", "p:"):
        kind, value = PROJECT, word[2:]
    elif word[:2] in ("T:", "t:"):
        kind, value = TAG, word[2:]
    elif word[:4].lower() == "due:":
        kind, value = DUE, word[4:]
    else:
        return None
    if not value:
        return None
    return kind, value


def first_wins(values: list):
    """Reduce every match of a marker kind to the first one seen."""
    return values[0] if values else None


def extract_markers(raw: str, reference_date: date) -> ParsedMarkers:
    """
    Split a raw description into clean text and structured metadata.

    Due values are resolved against reference_date; an invalid one raises
    InvalidDate so the caller never stores a half-parsed description.
    """
    words: list[str] = []
    found: dict[str, list] = {CONTEXT: [], PROJECT: [], TAG: [], DUE: []}

    for word in raw.split():
        marker = classify_token(word)
        if marker is None:
            words.append(word)
            continue
        kind, value = marker
        if kind == DUE:
            found[DUE].append(resolve_date(value, reference_date))
        else:
            found[kind].append(value)

    return ParsedMarkers(
        description=" ".join(words),
        context=first_wins(found[CONTEXT]),
        project=first_wins(found[PROJECT]),
        tags=found[TAG],
        due_date=first_wins(found[DUE]),
    )
