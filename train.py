#!/usr/bin/env python3
"""
Build reference trigram profiles from a corpus.

The corpus directory holds one UTF-8 text file per language named
``<code>.txt``. Each language gets a ``<code>.csv`` profile with the raw
counts of its most frequent trigrams.
"""
import argparse
import logging
import os
import sys
from typing import Dict, List

from lequel.storage import save_trigram_profile
from lequel.trigrams import LequelError, build_trigram_profile, select_top_trigrams
from lequel.utils import LANGUAGE_CODES, get_profiles_dir, read_text_file

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

CORPUS_EXTENSION = '.txt'


def find_corpus_files(corpus_dir: str, languages: List[str] = None) -> Dict[str, str]:
    """Map language codes to corpus files."""
    if not os.path.isdir(corpus_dir):
        raise FileNotFoundError(f"Corpus directory not found: {corpus_dir}")

    corpus_files = {}
    for filename in sorted(os.listdir(corpus_dir)):
        if not filename.endswith(CORPUS_EXTENSION):
            continue
        code = filename[:-len(CORPUS_EXTENSION)]
        if languages and code not in languages:
            continue
        corpus_files[code] = os.path.join(corpus_dir, filename)

    return corpus_files


def build_profiles(corpus_dir: str, output_dir: str,
                   max_trigrams: int = None,
                   languages: List[str] = None) -> Dict[str, int]:
    """
    Build and save a profile for every corpus file.

    Returns:
        Number of trigrams saved per language
    """
    corpus_files = find_corpus_files(corpus_dir, languages)
    if not corpus_files:
        logger.warning(f"No corpus files found in {corpus_dir}")
        return {}

    os.makedirs(output_dir, exist_ok=True)

    sizes = {}
    for code, path in corpus_files.items():
        if code not in LANGUAGE_CODES:
            logger.warning(f"Unknown language code '{code}', building profile anyway")

        text = read_text_file(path)
        profile = build_trigram_profile(text)
        if not profile:
            logger.warning(f"No trigrams found in {path}, skipping")
            continue

        profile = select_top_trigrams(profile, max_trigrams)
        save_trigram_profile(os.path.join(output_dir, f"{code}.csv"), profile)

        sizes[code] = len(profile)
        logger.info(f"Built profile for {code}: {len(profile)} trigrams from {len(text)} lines")

    return sizes


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(description='Build trigram profiles from a text corpus')

    parser.add_argument('--corpus_dir', type=str, default='corpus',
                       help='Directory with one <code>.txt file per language')
    parser.add_argument('--output_dir', type=str, default=None,
                       help='Directory to save profiles (default: resources/trigrams)')
    parser.add_argument('--max_trigrams', type=int, default=4000,
                       help='Number of most frequent trigrams kept per language (0 keeps all)')
    parser.add_argument('--languages', type=str, nargs='+',
                       help='Only build profiles for these language codes')
    parser.add_argument('--verbose', action='store_true',
                       help='Verbose output')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    output_dir = get_profiles_dir(args.output_dir)
    max_trigrams = args.max_trigrams or None

    try:
        sizes = build_profiles(args.corpus_dir, output_dir, max_trigrams, args.languages)
    except (LequelError, ValueError, OSError) as e:
        logger.error(f"Profile building failed: {e}")
        return 1

    logger.info(f"Saved {len(sizes)} profiles to {output_dir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
