#!/usr/bin/env python3
"""
Evaluation script for trigram language identification.

The dataset is a JSON list of ``{"text": ..., "lang": ...}`` samples.
"""
import argparse
import logging
import os
import sys
from typing import Dict, List

from lequel.evaluation import LanguageIdentificationEvaluator
from lequel.identifier import LanguageIdentifier
from lequel.trigrams import LequelError
from lequel.utils import get_profiles_dir, load_dataset, save_results, split_lines

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def validate_dataset(data: List[Dict]):
    """Check that every sample has a text and a language label."""
    if not isinstance(data, list):
        raise ValueError("Dataset must be a JSON list of samples")

    for i, sample in enumerate(data):
        if not isinstance(sample, dict):
            raise ValueError(f"Sample {i} is not an object")
        if not isinstance(sample.get('text'), str) or not sample.get('lang'):
            raise ValueError(f"Sample {i} must have 'text' and 'lang' fields")


def evaluate_identifier(identifier: LanguageIdentifier, data: List[Dict]) -> Dict:
    """Identify every sample and compute evaluation metrics."""
    predictions = []
    for i, sample in enumerate(data):
        if i % 100 == 0:
            logger.info(f"Processing sample {i+1}/{len(data)}")

        try:
            predictions.append(identifier.identify(split_lines(sample['text'])))
        except LequelError as e:
            logger.warning(f"Failed to identify sample {i}: {e}")
            predictions.append(None)

    evaluator = LanguageIdentificationEvaluator()
    results = evaluator.evaluate_predictions(predictions, [sample['lang'] for sample in data])
    results['predictions'] = predictions

    return results


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(description='Evaluate trigram language identification')

    parser.add_argument('--data_path', type=str, required=True,
                       help='Path to the labelled JSON dataset')
    parser.add_argument('--profiles_dir', type=str, default=None,
                       help='Directory containing language profiles')
    parser.add_argument('--languages', type=str, nargs='+',
                       help='Only compare against these language codes')
    parser.add_argument('--output_dir', type=str, default='results',
                       help='Directory to save evaluation results')

    args = parser.parse_args(argv)

    try:
        logger.info(f"Loading dataset from {args.data_path}")
        data = load_dataset(args.data_path)
        validate_dataset(data)
        logger.info(f"Loaded {len(data)} samples")

        identifier = LanguageIdentifier.from_directory(
            get_profiles_dir(args.profiles_dir), languages=args.languages)
    except (LequelError, OSError, ValueError) as e:
        logger.error(f"Evaluation setup failed: {e}")
        return 1

    results = evaluate_identifier(identifier, data)

    LanguageIdentificationEvaluator().print_evaluation_report(results)

    output_path = os.path.join(args.output_dir, 'evaluation_results.json')
    save_results(results, output_path)
    logger.info(f"Results saved to {output_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
