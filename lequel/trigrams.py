"""
Trigram extraction, normalization and similarity scoring.
"""
import logging
from typing import Dict, Mapping, Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)

TRIGRAM_LENGTH = 3

Line = Union[str, bytes]


class LequelError(Exception):
    """Base class for language identification errors."""


class EmptyProfileError(LequelError, ValueError):
    """Raised when normalizing a profile that holds no trigrams."""


class MalformedEncodingError(LequelError, ValueError):
    """Raised when a line of text is not valid UTF-8."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"Line {line_number} is not valid UTF-8: {reason}")
        self.line_number = line_number
        self.reason = reason


def decode_line(line: Line, line_number: int = 0) -> str:
    """Decode a line into a sequence of code points.

    Bytes are decoded as strict UTF-8; str lines are returned as they are.
    """
    if isinstance(line, str):
        return line

    try:
        return bytes(line).decode('utf-8', errors='strict')
    except UnicodeDecodeError as e:
        raise MalformedEncodingError(line_number, str(e)) from e


def build_trigram_profile(text: Sequence[Line]) -> Dict[str, float]:
    """
    Build a trigram profile from a text.

    Args:
        text: Lines of text (str or UTF-8 bytes), each with an optional
            trailing carriage return

    Returns:
        Mapping from trigram to raw occurrence count
    """
    profile = {}

    for line_number, line in enumerate(text):
        line = decode_line(line, line_number)

        if line.endswith('\r'):
            line = line[:-1]

        if len(line) < TRIGRAM_LENGTH:
            continue

        for i in range(len(line) - TRIGRAM_LENGTH + 1):
            trigram = line[i:i + TRIGRAM_LENGTH]
            profile[trigram] = profile.get(trigram, 0.0) + 1.0

    return profile


def normalize_trigram_profile(profile: Dict[str, float]) -> None:
    """
    Normalize a trigram profile in place.

    Every weight is divided by the square root of the sum of all weights.
    Stored reference profiles are normalized with this same formula, so it
    must not be replaced by the Euclidean norm of the count vector.
    """
    total = sum(profile.values())
    if not np.isfinite(total):
        raise ValueError("Cannot normalize a trigram profile with non-finite weights")
    if total <= 0:
        raise EmptyProfileError("Cannot normalize an empty trigram profile")

    total = np.sqrt(total)

    for trigram in profile:
        profile[trigram] = float(profile[trigram] / total)


def get_cosine_similarity(text_profile: Mapping[str, float],
                          language_profile: Mapping[str, float]) -> float:
    """Dot product of two sparse trigram profiles."""
    if len(language_profile) < len(text_profile):
        text_profile, language_profile = language_profile, text_profile

    similarity = 0.0
    for trigram, weight in text_profile.items():
        other = language_profile.get(trigram)
        if other is not None:
            similarity += weight * other

    return similarity


def select_top_trigrams(profile: Mapping[str, float], max_trigrams: int = None) -> Dict[str, float]:
    """Keep the most frequent trigrams, ties broken by trigram text."""
    ranked = sorted(profile.items(), key=lambda item: (-item[1], item[0]))
    if max_trigrams is not None:
        if max_trigrams < 1:
            raise ValueError("max_trigrams must be a positive integer")
        ranked = ranked[:max_trigrams]
    return dict(ranked)


def build_language_profile(text: Sequence[Line], max_trigrams: int = None) -> Dict[str, float]:
    """
    Build a normalized reference profile for a language.

    Args:
        text: Corpus lines for the language
        max_trigrams: Keep only the most frequent trigrams (all if None)

    Returns:
        Normalized trigram profile
    """
    profile = select_top_trigrams(build_trigram_profile(text), max_trigrams)
    normalize_trigram_profile(profile)
    return profile
