import pytest

from swade_dice_roller.errors import DiceError, ParseError
from swade_dice_roller.parser import parse_notation


@pytest.mark.parametrize(
    ("text", "prefix", "token"),
    [
        ("2x6", "[INVALID_CONSTANT]", "'2x6'"),
        ("abc", "[INVALID_CONSTANT]", "'abc'"),
        ("d", "[INVALID_SIDES]", "''"),
        ("2 d 6", "[INVALID_COUNT]", "'2 '"),
        ("xd6", "[INVALID_COUNT]", "'x'"),
        ("0d6", "[INVALID_COUNT]", "'0'"),
        ("-2d6", "[INVALID_COUNT]", "'-2'"),
        ("d0", "[INVALID_SIDES]", "'0'"),
        ("d6d", "[INVALID_SIDES]", "''"),
        ("d6dx", "[INVALID_SIDES]", "'x'"),
        ("2D6", "[INVALID_CONSTANT]", "'2D6'"),
        ("d6 + ", "[INVALID_CONSTANT]", "''"),
        ("d6 + + d4", "[INVALID_CONSTANT]", "''"),
    ],
)
def test_parse_rejections(text, prefix, token):
    with pytest.raises(ParseError) as exc:
        parse_notation(text)
    message = str(exc.value)
    assert message.startswith(prefix)
    assert f"got {token}" in message


def test_parse_error_is_a_dice_error():
    with pytest.raises(DiceError):
        parse_notation("d8 + nope")


def test_dice_group_error_names_the_whole_piece():
    with pytest.raises(ParseError) as exc:
        parse_notation("d8 + 2d6dq")
    assert "'2d6dq'" in str(exc.value)


@pytest.mark.parametrize(
    ("text", "prefix"),
    [
        ("9" * 5000, "[INVALID_CONSTANT]"),
        ("-" + "9" * 5000, "[INVALID_CONSTANT]"),
        ("d" + "9" * 5000, "[INVALID_SIDES]"),
        ("9" * 5000 + "d6", "[INVALID_COUNT]"),
        ("d8 + 2d6d" + "1" * 5000, "[INVALID_SIDES]"),
    ],
)
def test_oversized_integers_are_parse_errors(text, prefix):
    with pytest.raises(ParseError) as exc:
        parse_notation(text)
    assert str(exc.value).startswith(prefix)
