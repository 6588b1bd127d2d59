"""Tests for answers file loading."""
import pytest

from cppsetup.capture.answers import load_answers
from cppsetup.capture.fields import STANDARD_UNSUPPORTED, Outcome, classify_standard
from cppsetup.core.errors import AnswersFileError


class TestLoadAnswers:
    """Loading YAML answers files."""

    def test_quoted_values(self, tmp_path):
        path = tmp_path / "answers.yml"
        path.write_text('name: Foo\nstandard: "17"\nexceptions: "n"\n')

        answers = load_answers(path)

        assert answers.name == "Foo"
        assert answers.standard == "17"
        assert answers.exceptions == "n"

    def test_unquoted_scalars_kept_as_text(self, tmp_path):
        """Bare numbers and YAML booleans come back exactly as written."""
        path = tmp_path / "answers.yml"
        path.write_text("name: Foo\nstandard: 20\nexceptions: YES\n")

        answers = load_answers(path)

        assert answers.standard == "20"
        assert answers.exceptions == "YES"

    def test_leading_zero_name_unmodified(self, tmp_path):
        """Octal-looking and underscored numbers are not reinterpreted."""
        path = tmp_path / "answers.yml"
        path.write_text("name: 007\n")
        assert load_answers(path).name == "007"

        path.write_text("name: 1_000\n")
        assert load_answers(path).name == "1_000"

    def test_leading_zero_standard_is_unsupported(self, tmp_path):
        path = tmp_path / "answers.yml"
        path.write_text("standard: 03\n")

        answers = load_answers(path)

        assert answers.standard == "03"
        result = classify_standard(answers.standard)
        assert result.outcome == Outcome.UNSUPPORTED
        assert result.message == STANDARD_UNSUPPORTED

    def test_nested_value_rejected(self, tmp_path):
        path = tmp_path / "answers.yml"
        path.write_text("name:\n  - Foo\n")
        with pytest.raises(AnswersFileError, match="Invalid answers"):
            load_answers(path)

    def test_partial_file(self, tmp_path):
        path = tmp_path / "answers.yml"
        path.write_text("name: Foo\n")

        answers = load_answers(path)

        assert answers.name == "Foo"
        assert answers.standard is None

    def test_empty_file(self, tmp_path):
        path = tmp_path / "answers.yml"
        path.write_text("")
        assert load_answers(path).name is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(AnswersFileError) as exc_info:
            load_answers(tmp_path / "missing.yml")
        assert exc_info.value.exit_code == 8

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "answers.yml"
        path.write_text("name: [unclosed\n")
        with pytest.raises(AnswersFileError, match="not valid YAML"):
            load_answers(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "answers.yml"
        path.write_text("name: Foo\ncompiler: clang\n")
        with pytest.raises(AnswersFileError, match="Invalid answers"):
            load_answers(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "answers.yml"
        path.write_text("- Foo\n- 17\n")
        with pytest.raises(AnswersFileError, match="must contain a mapping"):
            load_answers(path)
