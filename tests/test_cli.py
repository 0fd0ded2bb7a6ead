import json
from pathlib import Path

from typer.testing import CliRunner

from short_answer_grader.cli import app

runner = CliRunner()


def _write_words(tmp_path: Path) -> Path:
    path = tmp_path / "dictionary.txt"
    path.write_text("the\ncat\nsat\ndog\n", encoding="utf-8")
    return path


def test_cli_grade_outputs_json(tmp_path: Path):
    """grade command prints the verdict as JSON."""
    words = _write_words(tmp_path)
    result = runner.invoke(
        app, ["grade", "The cat sat", "The dog sat", "--dictionary", str(words)]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {
        "correct": False,
        "blame": "wrong_word",
        "highlights": [{"reference": [4, 7], "candidate": [4, 7]}],
    }


def test_cli_grade_list_format(tmp_path: Path):
    words = _write_words(tmp_path)
    result = runner.invoke(
        app,
        [
            "grade",
            "The cat sat",
            "The cot sat",
            "--dictionary",
            str(words),
            "--format",
            "list",
        ],
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "[False, 'typo', [[[4, 7], [4, 7]]]]"


def test_cli_grade_reads_config(tmp_path: Path):
    words = _write_words(tmp_path)
    config_path = tmp_path / "grader.yaml"
    config_path.write_text(
        f"dictionary_path: {words.as_posix()}\ntypo_max_distance: 3\n",
        encoding="utf-8",
    )
    result = runner.invoke(
        app, ["grade", "The cat sat", "The xyz sat", "--config", str(config_path)]
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["blame"] == "typo"


def test_cli_grade_rejects_unknown_format():
    result = runner.invoke(app, ["grade", "a", "a", "--format", "xml"])
    assert result.exit_code != 0


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "typo_max_distance" in result.stdout
