import re
import unicodedata
from typing import Iterable

from rapidfuzz import process, fuzz

from src.config import MIN_SUBSTRING_LENGTH, MAX_EDIT_DISTANCE, NEAR_MISS_SCORE

_DISALLOWED = re.compile(r"[^a-z\s.-]")
_SPACES = re.compile(r"\s+")


def normalize(text: str) -> str:
    """
    Canonical comparison form: lowercase, no accents, only a-z, space, '.' and '-'.
    """
    text = unicodedata.normalize("NFD", text.lower())
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = _DISALLOWED.sub("", text)
    return _SPACES.sub(" ", text).strip()


def levenshtein(a: str, b: str) -> int:
    """
    Levenshtein distance between two already-normalized strings.
    Keeps a single row of len(b) + 1 cells.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        diag = row[0]
        row[0] = i
        for j, cb in enumerate(b, start=1):
            above = row[j]
            row[j] = min(
                above + 1,                  # deletion
                row[j - 1] + 1,             # insertion
                diag + (ca != cb),          # substitution
            )
            diag = above
    return row[-1]


def fuzzy_match(guess: str, targets: Iterable[str]) -> bool:
    """
    True if the guess matches any target exactly, as a substring
    (at least MIN_SUBSTRING_LENGTH chars) or within MAX_EDIT_DISTANCE edits.
    """
    inp = normalize(guess)
    for target in targets:
        norm = normalize(target)
        if norm == inp:
            return True
        if len(inp) >= MIN_SUBSTRING_LENGTH and inp in norm:
            return True
        if levenshtein(inp, norm) <= MAX_EDIT_DISTANCE:
            return True
    return False


def near_miss(guess: str, targets: Iterable[str]) -> bool:
    """Whether a wrong guess is close enough to say so. Feedback only."""
    inp = normalize(guess)
    if not inp:
        return False

    choices = [n for n in (normalize(t) for t in targets) if n]
    match = process.extractOne(inp, choices, scorer=fuzz.WRatio)
    return bool(match) and match[1] > NEAR_MISS_SCORE
