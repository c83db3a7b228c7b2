"""
Utility functions for reading texts and datasets.
"""
import json
import os
import sys
from typing import Any, Dict, List, Union

DEFAULT_PROFILES_DIR = os.path.join('resources', 'trigrams')
DEFAULT_LANGUAGE_NAMES_PATH = os.path.join('resources', 'languagecode_names.csv')
PROFILES_DIR_ENV = 'LEQUEL_PROFILES_DIR'

# Language codes and their full names
LANGUAGE_CODES = {
    'ar': 'Arabic',
    'bg': 'Bulgarian',
    'ca': 'Catalan',
    'cs': 'Czech',
    'da': 'Danish',
    'de': 'German',
    'el': 'Greek',
    'en': 'English',
    'es': 'Spanish',
    'fi': 'Finnish',
    'fr': 'French',
    'he': 'Hebrew',
    'hi': 'Hindi',
    'hu': 'Hungarian',
    'id': 'Indonesian',
    'it': 'Italian',
    'ja': 'Japanese',
    'ko': 'Korean',
    'nl': 'Dutch',
    'no': 'Norwegian',
    'pl': 'Polish',
    'pt': 'Portuguese',
    'ro': 'Romanian',
    'ru': 'Russian',
    'sv': 'Swedish',
    'th': 'Thai',
    'tr': 'Turkish',
    'uk': 'Ukrainian',
    'vi': 'Vietnamese',
    'zh': 'Chinese'
}


def get_profiles_dir(profiles_dir: str = None) -> str:
    """Resolve the profiles directory from an argument, the environment or the default."""
    return profiles_dir or os.environ.get(PROFILES_DIR_ENV) or DEFAULT_PROFILES_DIR


def split_lines(data: Union[str, bytes]) -> List[Union[str, bytes]]:
    """Split text on newlines, keeping any carriage return at the end of a line."""
    if not data:
        return []

    newline = b'\n' if isinstance(data, bytes) else '\n'
    lines = data.split(newline)

    # A final newline terminates the last line rather than starting a new one
    if lines[-1] == newline[:0]:
        lines.pop()

    return lines


def read_text_file(filepath: str) -> List[bytes]:
    """Read a file as raw byte lines."""
    with open(filepath, 'rb') as f:
        return split_lines(f.read())


def read_stdin() -> List[bytes]:
    """Read standard input as raw byte lines."""
    return split_lines(sys.stdin.buffer.read())


def load_dataset(filepath: str) -> List[Dict]:
    """Load a labelled dataset."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def save_results(results: Any, filepath: str):
    """Save results to JSON file."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(results, f, indent=2, ensure_ascii=False)
