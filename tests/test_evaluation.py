import pytest

from inline_dice.evaluation import InvalidFormula, evaluate, parse_formula
from inline_dice.models import CriticalTag, ParsedFormula
from inline_dice.randomness import SequenceRandomSource, SystemRandomSource
from inline_dice.tokenization import matches_dice_grammar


def test_parse_formula_reads_groups():
    assert parse_formula("3d8+2") == ParsedFormula(3, 8, 2, "d")
    assert parse_formula("5к8-2") == ParsedFormula(5, 8, -2, "к")
    assert parse_formula("4D10").modifier == 0


def test_parsed_formula_reserializes_to_grammar():
    for literal in ["3d8+2", "5к8-2", "4D10", "1d20+0"]:
        assert matches_dice_grammar(parse_formula(literal).to_literal())


@pytest.mark.parametrize("literal", ["", "d20", "2d", "1d20 ", "roll 1d6", "0d6", "2d0"])
def test_evaluate_rejects_invalid_literals(literal: str):
    with pytest.raises(InvalidFormula):
        evaluate(literal, SequenceRandomSource([]))


def test_evaluate_with_modifier():
    result = evaluate("2d6+1", SequenceRandomSource([3, 5]))

    assert result.rolls == (3, 5)
    assert result.base_sum == 8
    assert result.final_sum == 9
    assert result.critical is None


def test_evaluate_negative_modifier_keeps_draw_order():
    result = evaluate("3к4-2", SequenceRandomSource([4, 1, 2]))

    assert result.rolls == (4, 1, 2)
    assert result.final_sum == 5
    assert result.modifier == -2


def test_evaluate_stays_within_bounds():
    rng = SystemRandomSource(seed=7)
    for _ in range(50):
        result = evaluate("6d8-3", rng)
        assert len(result.rolls) == 6
        assert all(1 <= roll <= 8 for roll in result.rolls)
        assert result.final_sum == sum(result.rolls) - 3


def test_plain_d20_gets_critical_tags():
    assert evaluate("1d20", SequenceRandomSource([20])).critical is CriticalTag.SUCCESS
    assert evaluate("1D20", SequenceRandomSource([1])).critical is CriticalTag.FAIL
    assert evaluate("1d20", SequenceRandomSource([11])).critical is None


@pytest.mark.parametrize("literal", ["1D20+0", "1к20", "1d20-1", "01d20", "2d20"])
def test_other_spellings_never_get_critical_tags(literal: str):
    for value in (1, 20):
        values = [value] * 2
        assert evaluate(literal, SequenceRandomSource(values)).critical is None


def test_evaluate_uses_default_source_without_injection():
    result = evaluate("1d6")
    assert 1 <= result.rolls[0] <= 6


def test_evaluate_rejects_oversized_dice_pools():
    with pytest.raises(InvalidFormula):
        evaluate("999999999d6", SequenceRandomSource([]))
    with pytest.raises(InvalidFormula):
        evaluate("3d6", SequenceRandomSource([1, 1, 1]), max_count=2)
    assert len(evaluate("1000d2", SystemRandomSource(seed=1)).rolls) == 1000
