"""
Unicode script detection used when reporting identification results.
"""
from enum import Enum
from typing import Dict

import regex


class ScriptType(Enum):
    """Enumeration of different script types."""
    LATIN = "Latin"
    CYRILLIC = "Cyrillic"
    GREEK = "Greek"
    ARABIC = "Arabic"
    HEBREW = "Hebrew"
    DEVANAGARI = "Devanagari"
    BENGALI = "Bengali"
    HAN = "Han"
    HIRAGANA = "Hiragana"
    KATAKANA = "Katakana"
    HANGUL = "Hangul"
    THAI = "Thai"
    UNKNOWN = "Unknown"


SCRIPT_PATTERNS = {
    script: regex.compile(rf'\p{{Script={script.value}}}')
    for script in ScriptType
    if script is not ScriptType.UNKNOWN
}


def count_scripts(text: str) -> Dict[ScriptType, int]:
    """Count the characters of each known script in a text."""
    counts = {}
    for script, pattern in SCRIPT_PATTERNS.items():
        count = len(pattern.findall(text))
        if count:
            counts[script] = count
    return counts


def detect_script(text: str) -> ScriptType:
    """Detect the primary script of a text segment."""
    script_counts = count_scripts(text)

    if not script_counts:
        return ScriptType.UNKNOWN

    # Return script with highest character count
    return max(script_counts, key=script_counts.get)
