"""Unit tests for slug, text and interactive prompt utilities."""

import pytest

from design_review.exceptions import InvalidProjectNameError
from design_review.utils import (
    slugify,
    validate_project_name,
    is_valid_slug,
    format_bytes,
    levenshtein,
    similarity,
    suggest_closest,
    select_project,
)


# ===================================================================
# slugify
# ===================================================================

class TestSlugify:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Botim Quest", "botim-quest"),
            ("  Sign Up Flow  ", "sign-up-flow"),
            ("Hello, World!", "hello-world"),
            ("a -- b", "a-b"),
            ("-leading and trailing-", "leading-and-trailing"),
            ("Version 2.0", "version-20"),
        ],
    )
    def test_slugify(self, name, expected):
        assert slugify(name) == expected

    def test_symbols_only_becomes_empty(self):
        assert slugify("!!! ???") == ""

    def test_validate_returns_slug(self):
        assert validate_project_name("My Project") == "my-project"

    def test_validate_rejects_empty_slug(self):
        with pytest.raises(InvalidProjectNameError) as exc_info:
            validate_project_name("***")
        assert exc_info.value.error_code == "ERR_INPUT_001"
        assert exc_info.value.details == {"name": "***"}

    @pytest.mark.parametrize("value, expected", [
        ("sign-up-flow", True),
        ("..", False),
        ("a/b", False),
        ("Sign-Up", False),
        ("", False),
    ])
    def test_is_valid_slug(self, value, expected):
        assert is_valid_slug(value) is expected


# ===================================================================
# text helpers
# ===================================================================

class TestTextHelpers:
    @pytest.mark.parametrize(
        "size, expected",
        [(512, "512 bytes"), (2048, "2.0 KB"), (5 * 1024 * 1024, "5.0 MB")],
    )
    def test_format_bytes(self, size, expected):
        assert format_bytes(size) == expected

    def test_levenshtein(self):
        assert levenshtein("kitten", "sitting") == 3
        assert levenshtein("", "abc") == 3
        assert levenshtein("same", "same") == 0

    def test_similarity_bounds(self):
        assert similarity("", "") == 1.0
        assert similarity("abc", "xyz") == 0.0
        assert similarity("review", "reveiw") == pytest.approx(1 - 2 / 6)

    def test_suggest_closest_finds_typo(self):
        assert suggest_closest("reviw", ["init", "review", "comment"]) == "review"
        assert suggest_closest("DOCTR", ["doctor", "serve"]) == "doctor"

    def test_suggest_closest_below_threshold(self):
        assert suggest_closest("xyz", ["init", "review", "comment"]) is None


# ===================================================================
# select_project
# ===================================================================

class TestSelectProject:
    def test_no_projects(self):
        assert select_project([], input_fn=lambda _: "1") is None

    def test_single_project_does_not_ask(self):
        def fail(_):
            raise AssertionError("should not prompt")

        assert select_project(["only"], input_fn=fail) == "only"

    def test_asks_again_until_valid_number(self, capsys):
        answers = iter(["0", "abc", "2"])
        chosen = select_project(["alpha", "beta"], input_fn=lambda _: next(answers))
        assert chosen == "beta"
        assert "Please enter a number between 1 and 2" in capsys.readouterr().out

    def test_non_decimal_digit_is_asked_again(self, capsys):
        answers = iter(["²", "1"])
        chosen = select_project(["alpha", "beta"], input_fn=lambda _: next(answers))
        assert chosen == "alpha"
        assert "Please enter a number between 1 and 2" in capsys.readouterr().out

    def test_closed_input_cancels(self):
        def closed(_):
            raise EOFError

        assert select_project(["alpha", "beta"], input_fn=closed) is None
