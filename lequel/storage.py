"""
Reading and writing trigram profiles.

Profiles are stored one language per file as ``<code>.csv`` with rows of
``trigram,weight``. Files written by ``train.py`` hold raw counts; they are
normalized when loaded.
"""
import csv
import logging
import math
import os
from typing import Dict, Mapping, Sequence

from .trigrams import (
    TRIGRAM_LENGTH, EmptyProfileError, LequelError, normalize_trigram_profile
)

logger = logging.getLogger(__name__)

PROFILE_EXTENSION = '.csv'


class ProfileFormatError(LequelError, ValueError):
    """Raised when a stored profile cannot be parsed."""


def save_trigram_profile(path: str, profile: Mapping[str, float]):
    """
    Save a profile as CSV, most frequent trigrams first.

    The profile should hold raw counts: load_language_profiles normalizes
    on load, so saving an already normalized profile normalizes it twice.
    """
    rows = sorted(profile.items(), key=lambda item: (-item[1], item[0]))

    with open(path, 'w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f)
        for trigram, weight in rows:
            writer.writerow([trigram, repr(float(weight))])


def load_trigram_profile(path: str) -> Dict[str, float]:
    """Load a profile saved with save_trigram_profile."""
    profile = {}

    with open(path, 'r', encoding='utf-8', newline='') as f:
        for line_number, row in enumerate(csv.reader(f), start=1):
            if not row:
                continue
            if len(row) != 2:
                raise ProfileFormatError(
                    f"{path}:{line_number}: expected 2 columns, found {len(row)}")

            trigram, weight = row
            if len(trigram) != TRIGRAM_LENGTH:
                raise ProfileFormatError(
                    f"{path}:{line_number}: {trigram!r} is not a trigram")

            try:
                weight = float(weight)
            except ValueError:
                raise ProfileFormatError(
                    f"{path}:{line_number}: invalid weight {weight!r}") from None

            if not math.isfinite(weight) or weight < 0:
                raise ProfileFormatError(
                    f"{path}:{line_number}: weight must be finite and non-negative, got {weight}")

            profile[trigram] = weight

    return profile


def load_language_profiles(profiles_dir: str,
                           languages: Sequence[str] = None,
                           normalize: bool = True) -> Dict[str, Dict[str, float]]:
    """
    Load every language profile stored in a directory.

    Args:
        profiles_dir: Directory containing ``<code>.csv`` files
        languages: Language codes to load, in this order (all files sorted
            by code if None)
        normalize: Normalize each profile after loading

    Returns:
        Ordered mapping from language code to trigram profile
    """
    if not os.path.isdir(profiles_dir):
        raise FileNotFoundError(f"Profiles directory not found: {profiles_dir}")

    if languages is None:
        languages = sorted(
            filename[:-len(PROFILE_EXTENSION)]
            for filename in os.listdir(profiles_dir)
            if filename.endswith(PROFILE_EXTENSION)
        )

    profiles = {}
    for code in languages:
        path = os.path.join(profiles_dir, code + PROFILE_EXTENSION)
        if not os.path.exists(path):
            raise FileNotFoundError(f"No profile for language '{code}' in {profiles_dir}")

        profile = load_trigram_profile(path)

        if normalize:
            try:
                normalize_trigram_profile(profile)
            except EmptyProfileError:
                logger.warning(f"Skipping empty profile {path}")
                continue

        profiles[code] = profile

    return profiles


def load_language_names(path: str) -> Dict[str, str]:
    """Load a ``code,name`` table of language names."""
    names = {}

    with open(path, 'r', encoding='utf-8', newline='') as f:
        for line_number, row in enumerate(csv.reader(f), start=1):
            if not row:
                continue
            if len(row) != 2:
                raise ProfileFormatError(
                    f"{path}:{line_number}: expected 'code,name', found {row!r}")
            code, name = (value.strip() for value in row)
            names[code] = name

    return names
