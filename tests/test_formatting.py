from inline_dice.config import DiceConfig
from inline_dice.evaluation import evaluate
from inline_dice.formatting import (
    INVALID_FORMULA_TEXT,
    build_notice,
    format_invalid,
    format_roll,
)
from inline_dice.models import CriticalTag
from inline_dice.randomness import SequenceRandomSource


def test_format_roll_with_positive_modifier():
    result = evaluate("2d6+1", SequenceRandomSource([3, 5]))
    formatted = format_roll("2d6+1", result)

    assert formatted.text.splitlines() == [
        "🎲 2d6+1",
        "Rolls: [3] [5]",
        "Sum: 8 + 1 = 9",
    ]
    assert formatted.style_tag is None


def test_format_roll_without_modifier_has_no_total_suffix():
    result = evaluate("4d10", SequenceRandomSource([2, 2, 2, 2]))
    lines = format_roll("4d10", result).text.splitlines()

    assert lines[1] == "Rolls: [2] [2] [2] [2]"
    assert lines[2] == "Sum: 8"
    assert "=" not in lines[2]


def test_format_roll_negative_modifier_uses_absolute_value():
    result = evaluate("1к8-3", SequenceRandomSource([6]))
    lines = format_roll("1к8-3", result, icon="*").text.splitlines()

    assert lines[0] == "* 1к8-3"
    assert lines[2] == "Sum: 6 - 3 = 3"


def test_zero_modifier_literal_formats_without_suffix():
    result = evaluate("1D20+0", SequenceRandomSource([20]))
    formatted = format_roll("1D20+0", result)

    assert formatted.text.splitlines()[2] == "Sum: 20"
    assert formatted.style_tag is None


def test_style_tag_mirrors_critical():
    result = evaluate("1d20", SequenceRandomSource([20]))
    assert format_roll("1d20", result).style_tag is CriticalTag.SUCCESS


def test_build_notice_maps_style_to_css_class():
    config = DiceConfig(notice_duration_ms=5000)
    fail = format_roll("1d20", evaluate("1d20", SequenceRandomSource([1])))
    notice = build_notice(fail, config)

    assert notice.css_class == "dice-critical-fail"
    assert notice.duration_ms == 5000
    assert build_notice(format_invalid("bad"), config).css_class is None
    assert format_invalid("bad").text == INVALID_FORMULA_TEXT
