import json
import logging
import random

from src.config import data_path
from src.matching import normalize

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "country", "position", "club")

COUNTRY_CODES = {
    "Germany": "DE", "France": "FR", "England": "GB", "Spain": "ES",
    "Portugal": "PT", "Norway": "NO", "Poland": "PL", "Belgium": "BE",
    "Netherlands": "NL", "Italy": "IT", "Austria": "AT", "Switzerland": "CH",
    "Croatia": "HR", "Canada": "CA", "Egypt": "EG", "Argentina": "AR",
    "Brazil": "BR", "Uruguay": "UY", "Nigeria": "NG", "Georgia": "GE",
}


class DatasetError(ValueError):
    """Raised when the player file is missing or malformed."""


def _validate(record, idx, file_path):
    if not isinstance(record, dict):
        raise DatasetError(f"{file_path}: player #{idx} is not an object")

    for field in REQUIRED_FIELDS:
        value = record.get(field)
        if not isinstance(value, str) or not value.strip():
            raise DatasetError(f"{file_path}: player #{idx} has no '{field}'")

    if not normalize(record["name"]):
        raise DatasetError(f"{file_path}: player #{idx} has a name with no letters")

    aliases = record.get("aliases") or []
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise DatasetError(f"{file_path}: player #{idx} has invalid 'aliases'")

    # every target must keep at least one character after normalize()
    for alias in aliases:
        if not normalize(alias):
            raise DatasetError(f"{file_path}: player #{idx} has an alias with no letters: {alias!r}")

    return {**record, "aliases": aliases}


def load_players(file_path=None):
    """Loads the athlete data from the JSON file."""
    file_path = file_path or data_path()

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise DatasetError(f"Cannot read player file {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"{file_path} is not valid JSON: {e}") from e

    if not isinstance(data, list) or not data:
        raise DatasetError(f"{file_path}: expected a non-empty list of players")

    players = [_validate(record, idx, file_path) for idx, record in enumerate(data)]
    logger.info("Loaded %d players from %s", len(players), file_path)
    return players


def to_flag(country):
    """Flag emoji for a country name, or a globe if the country is unknown."""
    code = COUNTRY_CODES.get(country)
    if not code:
        logger.debug("No flag for country %r", country)
        return "🌍"
    return "".join(chr(127397 + ord(c)) for c in code)


def shuffled_order(count, rng=None):
    """A random play order over `count` players."""
    order = list(range(count))
    (rng or random).shuffle(order)
    return order
