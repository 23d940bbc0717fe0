"""Rule-based place-name extraction from free-text trip queries.

The extractor is an ordered tuple of pure strategies. Each strategy takes
the lowercase-normalized query and returns a raw place-name candidate or
None; the first non-empty candidate wins and is then cleaned and
title-cased.

Example
-------
    >>> extract_place_name("I'm going to Paris, let's plan my trip")
    'Paris'
    >>> extract_place_name("What's the weather in New York?")
    'New York'
    >>> extract_place_name("tokyo weather")
    'Tokyo'
"""

import re
from typing import Callable, Optional, Tuple

PlaceStrategy = Callable[[str], Optional[str]]

# Words that end a place-name capture when they follow whitespace.
STOP_WORDS: Tuple[str, ...] = (
    "what",
    "where",
    "when",
    "how",
    "let's",
    "lets",
    "plan",
    "is",
    "there",
    "are",
    "can",
    "will",
    "the",
)

# One of these is stripped from the end of a cleaned name.
TRAILING_STOP_WORDS: Tuple[str, ...] = STOP_WORDS + ("and", "or")

TRIGGER_PHRASES: Tuple[str, ...] = ("going to go to", "going to", "visiting", "visit")

TRIGGER_WORDS = frozenset({"going", "to", "visiting", "visit"})

TOPIC_WORDS: Tuple[str, ...] = ("weather", "temperature", "temp", "places", "attractions")

COMMON_WORDS = frozenset(
    {
        "i", "i'm", "im", "am", "a", "an", "the", "is", "are", "was", "were",
        "be", "to", "in", "at", "on", "for", "of", "and", "or", "but", "with",
        "my", "me", "we", "our", "you", "your", "it", "this", "that", "there",
        "what", "where", "when", "how", "why", "which", "who", "can", "will",
        "would", "should", "could", "do", "does", "did", "have", "has",
        "let's", "lets", "let", "plan", "planning", "trip", "travel", "go",
        "going", "visit", "visiting", "see", "want", "like", "tell", "about",
        "some", "any", "please", "weather", "places", "attractions", "today",
        "tomorrow", "next", "week", "weekend",
    }
)

# A capture starting with one of these is a clause ("going to plan a
# trip to Rome", "going to be in Oslo"), not a place.
NON_PLACE_LEADERS = frozenset(
    {"a", "an", "my", "our", "this", "some", "be", "go", "plan", "see", "do",
     "have", "get", "make", "take", "spend", "stay", "in", "at", "to", "near",
     "around", "for", "on", "with"}
)

_STOP_ALTERNATION = "|".join(re.escape(word) for word in STOP_WORDS)

_CAPTURE_RE = re.compile(
    rf"^\s*([^,.?!;]+?)(?=\s*[,.?!;]|\s+(?:{_STOP_ALTERNATION})\b|\s*$)"
)

_TRIGGER_RES = tuple(
    (phrase, re.compile(rf"\b{re.escape(phrase)}\b")) for phrase in TRIGGER_PHRASES
)

_PREPOSITION_RE = re.compile(r"\b(?:in|at|to|near|around)\s+(?=\S)")

_TOPIC_SUFFIX_RE = re.compile(
    rf"([a-z0-9][a-z0-9\s'-]*?)\s+(?:{'|'.join(TOPIC_WORDS)})\b"
)

_TRAILING_PUNCT_RE = re.compile(r"[.,!?;:]+$")

_TRAILING_STOP_RE = re.compile(
    rf"\s+(?:{'|'.join(re.escape(word) for word in TRAILING_STOP_WORDS)})$"
)


def normalize_query(query: str) -> str:
    """Lowercase, unify apostrophes and collapse whitespace."""
    return " ".join(query.replace("’", "'").lower().split())


def _capture_place(text: str) -> Optional[str]:
    """Capture a place name from the start of ``text``.

    The capture runs up to the first punctuation mark or stop-word.
    """
    match = _CAPTURE_RE.match(text)
    if not match:
        return None
    captured = match.group(1).strip()
    if not captured or captured.split()[0] in NON_PLACE_LEADERS:
        return None
    return captured


def extract_after_trigger_phrase(text: str) -> Optional[str]:
    """Capture the text following a trigger phrase.

    Phrases are tried in priority order so that "going to go to" is
    preferred over its "going to" prefix.
    """
    for _phrase, pattern in _TRIGGER_RES:
        match = pattern.search(text)
        if match:
            captured = _capture_place(text[match.end():])
            if captured:
                return captured
    return None


def extract_after_preposition(text: str) -> Optional[str]:
    """Capture the text following "in", "at", "to", "near" or "around"."""
    for match in _PREPOSITION_RE.finditer(text):
        captured = _capture_place(text[match.end():])
        if captured and captured.split()[0] not in COMMON_WORDS:
            return captured
    return None


def extract_before_topic_word(text: str) -> Optional[str]:
    """Capture the words right before "weather", "places", etc.

    Only the trailing run of uncommon words is kept, so "what is the
    weather" yields nothing while "tell me about oslo weather" yields
    "oslo".
    """
    for match in _TOPIC_SUFFIX_RE.finditer(text):
        words = match.group(1).split()
        kept = []
        for word in reversed(words):
            if word in COMMON_WORDS:
                break
            kept.append(word)
        if kept:
            return " ".join(reversed(kept))
    return None


def extract_after_trigger_word(text: str) -> Optional[str]:
    """Collect uncommon tokens following a trigger word.

    Tokens shorter than three characters are skipped; the run ends at the
    first common word once something has been collected.
    """
    collected = []
    found_trigger = False

    for raw in text.split():
        word = re.sub(r"[.,!?]", "", raw)
        if word in TRIGGER_WORDS:
            found_trigger = True
            continue
        if not found_trigger:
            continue
        if len(word) > 2 and word not in COMMON_WORDS:
            collected.append(word)
        elif collected and word in COMMON_WORDS:
            break

    return " ".join(collected) or None


STRATEGIES: Tuple[PlaceStrategy, ...] = (
    extract_after_trigger_phrase,
    extract_after_preposition,
    extract_before_topic_word,
    extract_after_trigger_word,
)


def clean_place_name(name: str) -> str:
    """Strip trailing punctuation and one trailing stop-word.

    Parameters
    ----------
    name : str
        Raw captured place name.

    Returns
    -------
    str
        The cleaned name with whitespace collapsed; case is preserved.
    """
    cleaned = " ".join(name.split())
    cleaned = _TRAILING_PUNCT_RE.sub("", cleaned)
    cleaned = _TRAILING_STOP_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def title_case(name: str) -> str:
    """Upper-case the first letter of each token and lower-case the rest."""
    return " ".join(token[:1].upper() + token[1:].lower() for token in name.split())


def extract_place_name(
    query: str, strategies: Tuple[PlaceStrategy, ...] = STRATEGIES
) -> Optional[str]:
    """Extract a title-cased place name from a query.

    Parameters
    ----------
    query : str
        Raw user query.
    strategies : tuple of callables, optional
        Ordered extraction strategies; the first non-empty result wins.

    Returns
    -------
    str or None
        The place name, or None when no strategy found one.
    """
    text = normalize_query(query)
    if not text:
        return None

    for strategy in strategies:
        raw = strategy(text)
        if not raw:
            continue
        cleaned = clean_place_name(raw)
        if cleaned:
            return title_case(cleaned)

    return None
