import pytest

from lequel.identifier import LanguageProfile
from lequel.trigrams import build_language_profile

ENGLISH_CORPUS = [
    "the cat sat on the mat",
    "the dog ate the bone",
    "there is a cat in the hat",
    "they went to the market with their mother",
]

SPANISH_CORPUS = [
    "el gato se sentó en la alfombra",
    "el perro comió el hueso",
    "la casa es grande y bonita",
    "ellos fueron al mercado con su madre",
]


@pytest.fixture
def english_profile():
    return LanguageProfile('en', build_language_profile(ENGLISH_CORPUS))


@pytest.fixture
def spanish_profile():
    return LanguageProfile('es', build_language_profile(SPANISH_CORPUS))


@pytest.fixture
def languages(english_profile, spanish_profile):
    return (english_profile, spanish_profile)


@pytest.fixture
def corpus_dir(tmp_path):
    directory = tmp_path / 'corpus'
    directory.mkdir()
    (directory / 'en.txt').write_text('\n'.join(ENGLISH_CORPUS) + '\n', encoding='utf-8')
    (directory / 'es.txt').write_text('\r\n'.join(SPANISH_CORPUS) + '\r\n', encoding='utf-8')
    return directory
