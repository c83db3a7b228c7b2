"""
Language identification over a set of reference trigram profiles.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .scripts import detect_script
from .storage import load_language_names, load_language_profiles
from .trigrams import Line, build_trigram_profile, decode_line, get_cosine_similarity

logger = logging.getLogger(__name__)

# Returned when no language scores above zero
NO_MATCH = None


@dataclass(frozen=True)
class LanguageProfile:
    """A language code paired with its normalized trigram profile."""
    language_code: str
    trigram_profile: Mapping[str, float] = field(repr=False)

    def __post_init__(self):
        # Freeze a private copy so shared profiles stay read-only
        object.__setattr__(self, 'trigram_profile',
                           MappingProxyType(dict(self.trigram_profile)))

    def __len__(self) -> int:
        return len(self.trigram_profile)


def identify_language(text: Sequence[Line],
                      languages: Sequence[LanguageProfile]) -> Optional[str]:
    """
    Identify the language of a text.

    Args:
        text: Lines of text
        languages: Normalized language profiles; the first of several
            equally scored languages wins

    Returns:
        The language code with the highest score, or NO_MATCH if no
        language scores above zero
    """
    text_profile = build_trigram_profile(text)

    max_similarity = 0.0
    language_code = NO_MATCH

    for language in languages:
        similarity = get_cosine_similarity(text_profile, language.trigram_profile)
        logger.debug(f"{language.language_code}: {similarity:.6f}")

        if similarity > max_similarity:
            max_similarity = similarity
            language_code = language.language_code

    return language_code


def rank_languages(text: Sequence[Line],
                   languages: Sequence[LanguageProfile]) -> List[Tuple[str, float]]:
    """Score every language, best first. Equal scores keep collection order."""
    text_profile = build_trigram_profile(text)
    return _rank_profile(text_profile, languages)


def _rank_profile(text_profile: Mapping[str, float],
                  languages: Sequence[LanguageProfile]) -> List[Tuple[str, float]]:
    scores = [(language.language_code,
               get_cosine_similarity(text_profile, language.trigram_profile))
              for language in languages]
    return sorted(scores, key=lambda item: item[1], reverse=True)


class LanguageIdentifier:
    """
    Holds a read-only set of language profiles and identifies texts against it.

    Profiles are stored as a tuple of frozen LanguageProfile objects, so a
    single identifier can be shared between threads.
    """

    def __init__(self,
                 languages: Sequence[LanguageProfile] = (),
                 language_names: Mapping[str, str] = None):
        self.languages = tuple(languages)
        self.language_names = dict(language_names or {})

    @classmethod
    def from_directory(cls, profiles_dir: str,
                       names_path: str = None,
                       languages: Sequence[str] = None) -> 'LanguageIdentifier':
        """Create an identifier from a directory of stored profiles."""
        identifier = cls()
        identifier.load_profiles(profiles_dir, languages=languages)
        if names_path:
            identifier.language_names = load_language_names(names_path)
        return identifier

    def load_profiles(self, profiles_dir: str, languages: Sequence[str] = None):
        """Load and normalize the reference profiles stored in a directory."""
        profiles = load_language_profiles(profiles_dir, languages=languages)
        self.languages = tuple(LanguageProfile(code, profile)
                               for code, profile in profiles.items())
        logger.info(f"Loaded {len(self.languages)} language profiles from {profiles_dir}")

    @property
    def language_codes(self) -> List[str]:
        return [language.language_code for language in self.languages]

    def language_name(self, language_code: Optional[str]) -> Optional[str]:
        if language_code is NO_MATCH:
            return None
        return self.language_names.get(language_code, language_code)

    def identify(self, text: Sequence[Line]) -> Optional[str]:
        if not self.languages:
            logger.warning("No language profiles loaded")
        return identify_language(text, self.languages)

    def rank(self, text: Sequence[Line], top_k: int = None) -> List[Tuple[str, float]]:
        ranking = rank_languages(text, self.languages)
        return ranking if top_k is None else ranking[:top_k]

    def predict(self, text: Sequence[Line], top_k: int = 5) -> Dict:
        """
        Identify a text and describe the result.

        Returns:
            Dictionary with the identified language, its score, the dominant
            script of the text and the top ranked languages
        """
        text_profile = build_trigram_profile(text)
        ranking = _rank_profile(text_profile, self.languages)

        language = NO_MATCH
        score = 0.0
        if ranking and ranking[0][1] > 0:
            language, score = ranking[0]

        decoded = '\n'.join(decode_line(line, i) for i, line in enumerate(text))

        return {
            'language': language,
            'language_name': self.language_name(language),
            'score': score,
            'script': detect_script(decoded).value,
            'num_trigrams': len(text_profile),
            'ranking': ranking[:top_k] if top_k is not None else ranking,
        }
