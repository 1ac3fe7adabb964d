"""End-to-end tests for `assegai-util text ...` and `assegai-util empty-dir`."""

from pathlib import Path

import pytest

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "args, expected",
    [
        (["case", "camel", "user profile"], "userProfile"),
        (["case", "PASCAL", "user_profile"], "UserProfile"),
        (["case", "snake", "userProfile"], "user_profile"),
        (["case", "kebab", "User Profile"], "user-profile"),
        (["case", "title", "user-profile"], "User Profile"),
        (["plural", "category"], "categories"),
        (["singular", "categories"], "category"),
        (["singular", "apples", "--article", "a"], "an apple"),
    ],
)
def test_text_commands(invoke, args, expected):
    result = invoke(["text", *args])
    assert result.exit_code == 0, result.output
    assert expected in result.output.splitlines()


def test_unknown_case_style_is_rejected(invoke):
    result = invoke(["text", "case", "shouting", "x"])
    assert result.exit_code == 2


def test_plural_of_blank_word_is_a_usage_error(invoke):
    result = invoke(["text", "plural", " "])
    assert result.exit_code == 2
    assert "non-empty word" in result.output


def test_empty_dir_with_yes(invoke):
    target = Path("build")
    (target / "nested").mkdir(parents=True)
    (target / "nested" / "a.o").write_text("obj")

    result = invoke(["empty-dir", "--yes", str(target)])
    assert result.exit_code == 0
    assert target.is_dir()
    assert not list(target.iterdir())
    assert "Emptied build" in result.stderr


def test_empty_dir_prompts_and_aborts(invoke):
    target = Path("keep")
    target.mkdir()
    (target / "file").write_text("x")

    result = invoke(["empty-dir", str(target)], input="n\n")
    assert result.exit_code == 1
    assert (target / "file").exists()


def test_empty_dir_on_missing_directory(invoke):
    result = invoke(["empty-dir", "--yes", "missing"])
    assert result.exit_code == 1
    assert "Not a directory: missing" in result.stderr
