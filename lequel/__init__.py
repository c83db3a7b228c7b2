"""
Lequel: language identification with character trigrams

Identifies the language of a text by comparing its trigram frequency
profile against reference profiles of known languages.
"""

__version__ = "1.0.0"

from .identifier import NO_MATCH, LanguageIdentifier, LanguageProfile, identify_language, rank_languages
from .storage import ProfileFormatError, load_language_profiles
from .trigrams import (
    EmptyProfileError, LequelError, MalformedEncodingError,
    build_language_profile, build_trigram_profile, decode_line,
    get_cosine_similarity, normalize_trigram_profile
)
