"""
Evaluation framework for language identification.
"""
import logging
from collections import defaultdict
from typing import Dict, List, Optional

import numpy as np

logger = logging.getLogger(__name__)

# Label used for texts that matched no language
NO_MATCH_LABEL = 'none'


class LanguageIdentificationEvaluator:
    """Accuracy, per-language F1 and confusion matrix for identified texts."""

    def __init__(self, target_languages: List[str] = None):
        self.target_languages = target_languages

    def evaluate_predictions(self, predicted: List[Optional[str]], true: List[str]) -> Dict:
        """
        Evaluate predictions against ground truth.

        Args:
            predicted: Identified language per text (None when no match)
            true: Expected language per text

        Returns:
            Overall metrics, per-language metrics and the confusion matrix
        """
        if len(predicted) != len(true):
            raise ValueError("Number of predictions must match ground truth")

        predicted = [NO_MATCH_LABEL if p is None else p for p in predicted]

        languages = self.target_languages or sorted((set(true) | set(predicted)) - {NO_MATCH_LABEL})

        per_language = self._calculate_per_language_metrics(predicted, true, languages)

        return {
            'overall': self._calculate_overall_metrics(predicted, true, per_language),
            'per_language': per_language,
            'confusion_matrix': self._calculate_confusion_matrix(predicted, true),
            'total_samples': len(true),
        }

    def _calculate_overall_metrics(self, predicted: List[str], true: List[str],
                                   per_language: Dict) -> Dict:
        correct = sum(1 for p, t in zip(predicted, true) if p == t)
        total = len(true)

        f1_scores = [metrics['f1_score'] for metrics in per_language.values()]
        supports = [metrics['support'] for metrics in per_language.values()]
        total_support = sum(supports)

        return {
            'accuracy': correct / total if total > 0 else 0.0,
            'macro_f1': float(np.mean(f1_scores)) if f1_scores else 0.0,
            'weighted_f1': (float(np.average(f1_scores, weights=supports))
                            if total_support > 0 else 0.0),
            'correct': correct,
            'total': total,
            'no_match': sum(1 for p in predicted if p == NO_MATCH_LABEL),
        }

    def _calculate_per_language_metrics(self, predicted: List[str], true: List[str],
                                        languages: List[str]) -> Dict:
        """Calculate precision, recall, F1 for each language."""
        language_metrics = {}

        for lang in languages:
            tp = sum(1 for p, t in zip(predicted, true) if p == lang and t == lang)
            fp = sum(1 for p, t in zip(predicted, true) if p == lang and t != lang)
            fn = sum(1 for p, t in zip(predicted, true) if p != lang and t == lang)

            precision = tp / (tp + fp) if (tp + fp) > 0 else 0.0
            recall = tp / (tp + fn) if (tp + fn) > 0 else 0.0
            f1 = 2 * precision * recall / (precision + recall) if (precision + recall) > 0 else 0.0

            language_metrics[lang] = {
                'precision': precision,
                'recall': recall,
                'f1_score': f1,
                'support': tp + fn,
                'tp': tp,
                'fp': fp,
                'fn': fn
            }

        return language_metrics

    def _calculate_confusion_matrix(self, predicted: List[str], true: List[str]) -> Dict:
        confusion = defaultdict(lambda: defaultdict(int))

        for p, t in zip(predicted, true):
            confusion[t][p] += 1

        return {t: dict(row) for t, row in confusion.items()}

    def print_evaluation_report(self, evaluation_results: Dict):
        """Print an evaluation report."""
        print("=" * 60)
        print("LANGUAGE IDENTIFICATION EVALUATION REPORT")
        print("=" * 60)

        overall = evaluation_results['overall']
        print(f"\nOVERALL METRICS:")
        print(f"  Accuracy:          {overall['accuracy']:.4f}")
        print(f"  Macro F1:          {overall['macro_f1']:.4f}")
        print(f"  Weighted F1:       {overall['weighted_f1']:.4f}")
        print(f"  Total Samples:     {overall['total']}")
        print(f"  No Match:          {overall['no_match']}")

        per_lang = evaluation_results['per_language']
        print(f"\nPER-LANGUAGE METRICS:")
        for lang in sorted(per_lang.keys()):
            metrics = per_lang[lang]
            print(f"  {lang.upper()}: P={metrics['precision']:.4f} "
                  f"R={metrics['recall']:.4f} F1={metrics['f1_score']:.4f} "
                  f"(support: {metrics['support']})")

        confusion = evaluation_results['confusion_matrix']
        errors = [(t, p, count)
                  for t, row in confusion.items()
                  for p, count in row.items() if p != t]
        if errors:
            print(f"\nMOST FREQUENT ERRORS:")
            for t, p, count in sorted(errors, key=lambda e: e[2], reverse=True)[:10]:
                print(f"  {t} -> {p}: {count}")

        print("\n" + "=" * 60)
