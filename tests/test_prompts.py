import pytest

from tictactoe_console.game_basics import BOARD_CELLS
from tictactoe_console.prompts import INVALID_INTEGER_MESSAGE, input_int, parse_int

from conftest import make_console

REPEAT_BAD_INPUT_TIMES = 3
DEFAULT_NUMBER = 3
ERROR_OUTPUT = INVALID_INTEGER_MESSAGE + "\n\n"


def test_prints_the_message_given():
    console = make_console(f"{DEFAULT_NUMBER}\n")
    input_int("Enter integer: ", console)
    assert console.stdout.getvalue() == "Enter integer: "


@pytest.mark.parametrize(
    "raw,expected",
    [("3", 3), ("0", 0), ("-120", -120), ("123asdf", 123), ("  42", 42), ("+7", 7)],
)
def test_accepts_integers(raw, expected):
    console = make_console(f"{raw}\n")
    assert input_int("", console) == expected
    assert INVALID_INTEGER_MESSAGE not in console.stdout.getvalue()


@pytest.mark.parametrize("bad", ["", "edf", "00", "-0", "0abc", "x12", "４"])
def test_reprompts_until_it_receives_an_integer(bad):
    console = make_console(f"{bad}\n" * REPEAT_BAD_INPUT_TIMES + f"{DEFAULT_NUMBER}\n")
    assert input_int("", console) == DEFAULT_NUMBER
    assert console.stdout.getvalue() == ERROR_OUTPUT * REPEAT_BAD_INPUT_TIMES


def test_prompt_repeats_after_each_error():
    console = make_console("nope\n5\n")
    assert input_int("> ", console) == 5
    assert console.stdout.getvalue() == "> " + ERROR_OUTPUT + "> "


def test_windows_line_endings_are_stripped():
    console = make_console("0\r\n")
    assert input_int("", console) == 0


def test_exhausted_input_raises_eof():
    console = make_console("abc\n")
    with pytest.raises(EOFError):
        input_int("", console)


@pytest.mark.parametrize("raw", ["", " ", "abc", "0.5x", "--1"])
def test_parse_int_rejects(raw):
    # "0.5x" reads a leading 0 that is not the literal "0"
    assert parse_int(raw) is None


def test_parse_int_ignores_trailing_text():
    assert parse_int("12 34") == 12
    assert parse_int("7.9") == 7


@pytest.mark.parametrize(
    "raw,expected",
    [("9" * 5000, BOARD_CELLS), ("-" + "1" * 5000, -BOARD_CELLS), ("0" * 5000 + "4", 4), ("1" * 19 + "x", BOARD_CELLS)],
)
def test_very_long_digit_runs_read_as_off_board(raw, expected):
    assert parse_int(raw) == expected


def test_very_long_number_does_not_stop_the_prompt():
    console = make_console("9" * 5000 + "\n4\n")
    assert input_int("> ", console) == BOARD_CELLS
    assert INVALID_INTEGER_MESSAGE not in console.stdout.getvalue()


def test_parse_int_accepts_only_ascii_digits():
    assert parse_int("４") is None
    assert parse_int("　" + "4") is None
    assert parse_int("0004") == 4
