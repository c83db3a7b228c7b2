#!/usr/bin/env python3
"""
Prediction script for trigram language identification.
Identifies the language of a text given on the command line, in a file or
on standard input.
"""
import argparse
import logging
import os
import sys
from typing import Dict, List

from lequel.identifier import NO_MATCH, LanguageIdentifier
from lequel.trigrams import LequelError
from lequel.utils import (
    DEFAULT_LANGUAGE_NAMES_PATH, get_profiles_dir, read_stdin, read_text_file,
    save_results, split_lines
)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

NO_MATCH_MESSAGE = "No similar language found"


def format_score_bar(score: float, top_score: float, width: int = 10) -> str:
    """Bar of `width` cells scaled so the best score fills it."""
    filled = int(round(score / top_score * width)) if top_score > 0 else 0
    return "█" * filled + "░" * (width - filled)


def format_prediction_output(prediction: Dict, verbose: bool = False) -> str:
    """Format prediction output for display."""
    output = []

    if prediction['language'] is NO_MATCH:
        output.append(NO_MATCH_MESSAGE)
    else:
        output.append(f"Language: {prediction['language_name']} ({prediction['language']})")
        output.append(f"Score: {prediction['score']:.4f}")

    if verbose:
        output.append(f"Script: {prediction['script']}")
        output.append(f"Trigrams: {prediction['num_trigrams']}")
        output.append("")
        output.append("Ranking:")
        ranking = prediction['ranking']
        top_score = ranking[0][1] if ranking else 0.0
        for i, (code, score) in enumerate(ranking):
            score_bar = format_score_bar(score, top_score)
            output.append(f"  {i+1:2d}. {code:5} {score:.4f} {score_bar}")

    return "\n".join(output)


def load_identifier(profiles_dir: str, names_path: str = None) -> LanguageIdentifier:
    if names_path is None and os.path.exists(DEFAULT_LANGUAGE_NAMES_PATH):
        names_path = DEFAULT_LANGUAGE_NAMES_PATH

    return LanguageIdentifier.from_directory(profiles_dir, names_path=names_path)


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(description='Identify the language of a text')

    # Profile arguments
    parser.add_argument('--profiles_dir', type=str, default=None,
                       help='Directory containing language profiles (default: $LEQUEL_PROFILES_DIR or resources/trigrams)')
    parser.add_argument('--names_path', type=str, default=None,
                       help='CSV file mapping language codes to names')

    # Input arguments
    parser.add_argument('--text', type=str,
                       help='Text to analyze')
    parser.add_argument('--input_file', type=str,
                       help='File to analyze (standard input if neither --text nor --input_file is given)')

    # Output arguments
    parser.add_argument('--top_k', type=int, default=5,
                       help='Number of ranked languages to report')
    parser.add_argument('--output_file', type=str,
                       help='Save the prediction as JSON')
    parser.add_argument('--verbose', action='store_true',
                       help='Verbose output')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    profiles_dir = get_profiles_dir(args.profiles_dir)

    try:
        identifier = load_identifier(profiles_dir, args.names_path)

        if args.text is not None:
            text = split_lines(args.text)
        elif args.input_file:
            text = read_text_file(args.input_file)
        else:
            text = read_stdin()

        prediction = identifier.predict(text, top_k=args.top_k)
    except (LequelError, OSError) as e:
        logger.error(f"Language identification failed: {e}")
        return 1

    print(format_prediction_output(prediction, args.verbose))

    if args.output_file:
        save_results(prediction, args.output_file)
        logger.info(f"Prediction saved to {args.output_file}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
