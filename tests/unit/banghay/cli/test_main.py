"""Tests for the command-line interface."""

import json
import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from banghay.cli.main import app, format_paradigm, read_roots
from banghay.core.models import Focus
from banghay.morphology.conjugator import get_paradigm


@pytest.fixture
def runner():
    return CliRunner()


class TestConjugateCommand:
    """Test the single-form command."""

    def test_conjugate(self, runner):
        result = runner.invoke(app, ["conjugate", "luto", "--focus", "mag", "--aspect", "infinitive"])
        assert result.exit_code == 0
        assert result.output.strip() == "magluto"

    def test_short_options(self, runner):
        result = runner.invoke(app, ["conjugate", "inom", "-f", "in", "-a", "completed"])
        assert result.exit_code == 0
        assert result.output.strip() == "ininom"

    def test_lexicon_override(self, runner):
        result = runner.invoke(app, ["conjugate", "dala", "-f", "in", "-a", "infinitive"])
        assert result.output.strip() == "dalhin"

    def test_no_lexicon(self, runner):
        result = runner.invoke(app, ["--no-lexicon", "conjugate", "dala", "-f", "in", "-a", "infinitive"])
        assert result.exit_code == 0
        assert result.output.strip() == "dalahin"

    def test_extra_lexicon(self, runner, tmp_path):
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"luto": {"in:completed": "linuto"}}), encoding="utf-8")

        result = runner.invoke(app, ["--lexicon", str(path), "conjugate", "luto", "-f", "in", "-a", "completed"])

        assert result.exit_code == 0
        assert result.output.strip() == "linuto"

    def test_malformed_extra_lexicon(self, runner, tmp_path):
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"luto": {"completed": "linuto"}}), encoding="utf-8")

        result = runner.invoke(app, ["--lexicon", str(path), "conjugate", "luto", "-f", "in", "-a", "completed"])

        assert result.exit_code != 0

    def test_extra_lexicon_not_utf8(self, runner, tmp_path):
        path = tmp_path / "extra.json"
        path.write_bytes(b'{"luto": {"in:completed": "\xff"}}')

        result = runner.invoke(app, ["--lexicon", str(path), "conjugate", "luto", "-f", "in", "-a", "completed"])

        assert result.exit_code == 2
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_lexicon_and_no_lexicon_rejected(self, runner, tmp_path):
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"luto": {"in:completed": "linuto"}}), encoding="utf-8")

        result = runner.invoke(
            app, ["--lexicon", str(path), "--no-lexicon", "conjugate", "luto", "-f", "in", "-a", "completed"]
        )

        assert result.exit_code == 2
        assert "linuto" not in result.output

    def test_invalid_focus(self, runner):
        result = runner.invoke(app, ["conjugate", "luto", "-f", "ipag", "-a", "infinitive"])
        assert result.exit_code != 0

    def test_verbose_initializes_logging(self, runner):
        with patch("banghay.cli.main.init_logging") as mock_init:
            result = runner.invoke(app, ["--verbose", "conjugate", "kain", "-f", "um", "-a", "completed"])
        assert result.exit_code == 0
        mock_init.assert_called_once_with(logging.DEBUG)


class TestParadigmCommand:
    """Test the paradigm table command."""

    def test_single_focus(self, runner):
        result = runner.invoke(app, ["paradigm", "luto", "--focus", "in"])
        assert result.exit_code == 0
        assert "[in] luto" in result.output
        assert "lulutuin" in result.output
        assert "[mag]" not in result.output

    def test_all_focuses(self, runner):
        result = runner.invoke(app, ["paradigm", "kain"])
        assert result.exit_code == 0
        for header in ("[mag] kain", "[um] kain", "[in] kain"):
            assert header in result.output
        assert "kumakain" in result.output

    def test_format_paradigm(self):
        table = format_paradigm(get_paradigm("aral", Focus.MAG))
        lines = table.splitlines()
        assert lines[0] == "[mag] aral"
        assert lines[1].split() == ["infinitive", "mag-aral"]
        assert lines[4].split() == ["contemplated", "mag-aaral"]


class TestBatchCommand:
    """Test batch conjugation to TSV."""

    def test_read_roots(self):
        assert read_roots("kain\n\n# comment\n  luto  \n") == ["kain", "luto"]

    def test_batch(self, runner, tmp_path):
        input_path = tmp_path / "roots.txt"
        input_path.write_text("kain\n# skipped\nluto\n", encoding="utf-8")
        output_path = tmp_path / "out" / "forms.tsv"

        result = runner.invoke(app, ["batch", str(input_path), "-o", str(output_path), "--no-progress"])

        assert result.exit_code == 0
        assert "Wrote 24 forms for 2 roots" in result.output
        lines = output_path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "root\tfocus\taspect\tform"
        assert len(lines) == 25
        assert "kain\tum\tincompleted\tkumakain" in lines
        assert "luto\tin\tcompleted\tniluto" in lines

    def test_batch_missing_input(self, runner, tmp_path):
        result = runner.invoke(app, ["batch", str(tmp_path / "missing.txt")])
        assert result.exit_code != 0
