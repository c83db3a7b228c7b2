import pytest

from lequel.evaluation import NO_MATCH_LABEL, LanguageIdentificationEvaluator


@pytest.fixture
def results():
    evaluator = LanguageIdentificationEvaluator()
    return evaluator.evaluate_predictions(['en', 'es', None, 'en'], ['en', 'es', 'en', 'es'])


def test_overall_metrics(results):
    overall = results['overall']
    assert overall['accuracy'] == 0.5
    assert overall['correct'] == 2
    assert overall['total'] == 4
    assert overall['no_match'] == 1
    assert overall['macro_f1'] == pytest.approx((0.5 + 2 / 3) / 2)
    assert overall['weighted_f1'] == pytest.approx((0.5 + 2 / 3) / 2)


def test_per_language_metrics(results):
    en = results['per_language']['en']
    assert (en['tp'], en['fp'], en['fn']) == (1, 1, 1)
    assert en['precision'] == 0.5
    assert en['recall'] == 0.5

    es = results['per_language']['es']
    assert es['precision'] == 1.0
    assert es['recall'] == 0.5
    assert es['f1_score'] == pytest.approx(2 / 3)
    assert es['support'] == 2


def test_confusion_matrix(results):
    assert results['confusion_matrix'] == {
        'en': {'en': 1, NO_MATCH_LABEL: 1},
        'es': {'es': 1, 'en': 1},
    }


def test_wrongly_predicted_language_is_scored():
    results = LanguageIdentificationEvaluator().evaluate_predictions(['fr', 'en'], ['en', 'en'])

    assert list(results['per_language']) == ['en', 'fr']
    assert results['per_language']['fr']['fp'] == 1
    assert results['overall']['macro_f1'] == pytest.approx((2 / 3 + 0.0) / 2)


def test_target_languages():
    evaluator = LanguageIdentificationEvaluator(target_languages=['en', 'fr'])
    results = evaluator.evaluate_predictions(['en'], ['en'])
    assert list(results['per_language']) == ['en', 'fr']
    assert results['per_language']['fr']['support'] == 0


def test_length_mismatch():
    with pytest.raises(ValueError):
        LanguageIdentificationEvaluator().evaluate_predictions(['en'], ['en', 'es'])


def test_empty_dataset():
    results = LanguageIdentificationEvaluator().evaluate_predictions([], [])
    assert results['overall']['accuracy'] == 0.0
    assert results['overall']['macro_f1'] == 0.0


def test_report(results, capsys):
    LanguageIdentificationEvaluator().print_evaluation_report(results)
    output = capsys.readouterr().out
    assert 'Accuracy:          0.5000' in output
    assert 'en -> none: 1' in output
