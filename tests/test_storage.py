import pytest

from lequel.storage import (
    ProfileFormatError, load_language_names, load_language_profiles,
    load_trigram_profile, save_trigram_profile
)
from lequel.trigrams import build_language_profile, build_trigram_profile


def write_profile(directory, code, content):
    path = directory / f'{code}.csv'
    path.write_text(content, encoding='utf-8')
    return path


class TestTrigramProfileFiles:

    def test_round_trip(self, tmp_path):
        profile = {"a,b": 2.0, ' "q': 1.0, "xyz": 3.0, "é\U0001F600\r": 0.125}
        path = str(tmp_path / 'xx.csv')

        save_trigram_profile(path, profile)

        assert load_trigram_profile(path) == profile

    def test_most_frequent_first(self, tmp_path):
        path = tmp_path / 'xx.csv'
        save_trigram_profile(str(path), {"abc": 1.0, "xyz": 3.0, "bcd": 1.0})

        lines = path.read_text(encoding='utf-8').splitlines()
        assert lines == ["xyz,3.0", "abc,1.0", "bcd,1.0"]

    def test_leading_spaces_are_kept(self, tmp_path):
        path = write_profile(tmp_path, 'en', " ca,2\nat ,1\n")
        assert load_trigram_profile(str(path)) == {" ca": 2.0, "at ": 1.0}

    @pytest.mark.parametrize('content', [
        "abcd,1\n",
        "ab,1\n",
        "abc\n",
        "abc,1,2\n",
        "abc,many\n",
        "abc,-1\n",
        "abc,nan\n",
        "abc,inf\n",
        "abc,-inf\n",
    ])
    def test_malformed_rows(self, tmp_path, content):
        path = write_profile(tmp_path, 'xx', "the,4\n" + content)
        with pytest.raises(ProfileFormatError, match=r'xx\.csv:2'):
            load_trigram_profile(str(path))


class TestLoadLanguageProfiles:

    def test_profiles_are_normalized(self, tmp_path):
        write_profile(tmp_path, 'en', "abc,3\nbcd,1\n")

        profiles = load_language_profiles(str(tmp_path))

        assert profiles['en'] == pytest.approx({"abc": 1.5, "bcd": 0.5})

    def test_infinite_weight_is_rejected(self, tmp_path):
        write_profile(tmp_path, 'en', "abc,inf\nbcd,1\n")
        with pytest.raises(ProfileFormatError):
            load_language_profiles(str(tmp_path))

    def test_saved_counts_load_like_a_built_profile(self, tmp_path):
        text = ["the cat sat on the mat", "the hat"]
        save_trigram_profile(str(tmp_path / 'en.csv'), build_trigram_profile(text))

        profiles = load_language_profiles(str(tmp_path))

        assert profiles['en'] == pytest.approx(build_language_profile(text))

    def test_raw_counts(self, tmp_path):
        write_profile(tmp_path, 'en', "abc,3\nbcd,1\n")
        assert load_language_profiles(str(tmp_path), normalize=False) == {'en': {"abc": 3.0, "bcd": 1.0}}

    def test_sorted_by_code(self, tmp_path):
        for code in ('fr', 'de', 'en'):
            write_profile(tmp_path, code, "abc,1\n")
        (tmp_path / 'notes.txt').write_text("not a profile", encoding='utf-8')

        assert list(load_language_profiles(str(tmp_path))) == ['de', 'en', 'fr']

    def test_selected_languages_keep_their_order(self, tmp_path):
        for code in ('fr', 'de', 'en'):
            write_profile(tmp_path, code, "abc,1\n")

        profiles = load_language_profiles(str(tmp_path), languages=['fr', 'en'])

        assert list(profiles) == ['fr', 'en']

    def test_missing_language(self, tmp_path):
        write_profile(tmp_path, 'en', "abc,1\n")
        with pytest.raises(FileNotFoundError):
            load_language_profiles(str(tmp_path), languages=['de'])

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_language_profiles(str(tmp_path / 'missing'))

    def test_empty_profiles_are_skipped(self, tmp_path, caplog):
        write_profile(tmp_path, 'en', "abc,1\n")
        write_profile(tmp_path, 'xx', "")

        profiles = load_language_profiles(str(tmp_path))

        assert list(profiles) == ['en']
        assert 'Skipping empty profile' in caplog.text


class TestLanguageNames:

    def test_load(self, tmp_path):
        path = tmp_path / 'names.csv'
        path.write_text("en,English\nes, Spanish\n\npt,\"Portuguese, Brazil\"\n", encoding='utf-8')

        assert load_language_names(str(path)) == {
            'en': 'English',
            'es': 'Spanish',
            'pt': 'Portuguese, Brazil',
        }

    def test_malformed(self, tmp_path):
        path = tmp_path / 'names.csv'
        path.write_text("en\n", encoding='utf-8')
        with pytest.raises(ProfileFormatError):
            load_language_names(str(path))
