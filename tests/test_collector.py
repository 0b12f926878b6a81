"""Tests for value collection."""

from unittest.mock import MagicMock, patch

from t3.variables.collector import collect_values, terminal_prompt


def test_prompts_each_variable_once_in_order():
    prompt = MagicMock(side_effect=["1", "2", "3"])

    values = collect_values(["A", "B", "C"], prompt)

    assert values == {"A": "1", "B": "2", "C": "3"}
    assert [c.args[0] for c in prompt.call_args_list] == ["A", "B", "C"]


def test_blank_and_none_answers_skip():
    answers = {"A": "", "B": None, "C": "c"}

    values = collect_values(["A", "B", "C"], answers.get)

    assert values == {"C": "c"}


def test_whitespace_answer_is_kept_verbatim():
    values = collect_values(["A"], lambda name: " ")
    assert values == {"A": " "}


def test_presets_are_not_prompted():
    prompt = MagicMock(return_value="prompted")

    values = collect_values(["A", "B"], prompt, preset={"A": "preset"})

    assert values == {"A": "preset", "B": "prompted"}
    prompt.assert_called_once_with("B")


def test_empty_or_null_preset_skips_without_prompt():
    prompt = MagicMock(return_value="prompted")

    values = collect_values(["A", "B"], prompt, preset={"A": "", "B": None})

    assert values == {}
    prompt.assert_not_called()


def test_presets_for_unknown_variables_are_ignored():
    values = collect_values(["A"], lambda name: "a", preset={"Z": "z"})
    assert values == {"A": "a"}


def test_terminal_prompt_uses_input():
    with patch("builtins.input", return_value="World") as mock_input:
        assert terminal_prompt("NAME") == "World"
    mock_input.assert_called_once_with("NAME: ")


def test_terminal_prompt_end_of_input_skips(capsys):
    with patch("builtins.input", side_effect=EOFError):
        assert terminal_prompt("NAME") is None
