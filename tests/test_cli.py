import json

from typer.testing import CliRunner

from cli.salience_cli import app


runner = CliRunner()


def test_cli_feed_applies_boosts_before_feeding():
    result = runner.invoke(
        app,
        [
            "feed",
            "hi! this is just a sample message with distinct words.",
            "just a message",
            "--boost",
            "message",
            "--boost",
            "message",
            "--boost",
            "just",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "message just this sample with distinct words",
        "message just",
    ]


def test_cli_feed_min_length_option():
    result = runner.invoke(app, ["feed", "cat dog bee", "--min-length", "3"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "cat dog bee"


def test_cli_feed_json_snapshot():
    result = runner.invoke(app, ["feed", "test test test", "words", "--json"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    assert payload["min_keyword_length"] == 4
    assert payload["keywords"] == [
        {"word": "test", "score": 3},
        {"word": "words", "score": 1},
    ]


def test_cli_feed_scores_table():
    result = runner.invoke(app, ["feed", "alpha beta beta", "--scores"])
    assert result.exit_code == 0, result.output
    assert "beta alpha" in result.stdout
    assert "Keyword scores" in result.stdout


def test_cli_rejects_invalid_configuration():
    result = runner.invoke(app, ["feed", "anything", "--min-length", "0"])
    assert result.exit_code == 2


def test_cli_rejects_empty_boost():
    result = runner.invoke(app, ["feed", "anything", "--boost", "!!!"])
    assert result.exit_code == 2


def test_cli_session_replays_script(tmp_path):
    script = tmp_path / "session.txt"
    script.write_text(
        "\n".join(
            [
                "hi! this is just a sample message with distinct words.",
                "",
                "+message Message MESSAGE message",
                "+just just just",
                "just a message",
            ]
        ),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["session", str(script), "--top"])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "this just sample message with distinct words",
        "message just",
        "message just this sample with distinct words",
    ]


def test_cli_session_reads_stdin():
    result = runner.invoke(app, ["session"], input="cats dogs\n+dogs\ncats dogs\n")
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["cats dogs", "dogs cats"]


def test_cli_session_reads_dash_as_stdin():
    result = runner.invoke(app, ["session", "-"], input="cats dogs\n")
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["cats dogs"]


def test_cli_session_rejects_missing_file(tmp_path):
    result = runner.invoke(app, ["session", str(tmp_path / "missing.txt")])
    assert result.exit_code == 2


def test_cli_session_rejects_directory(tmp_path):
    result = runner.invoke(app, ["session", str(tmp_path)])
    assert result.exit_code == 2


def test_cli_log_level_debug_reports_boosts():
    result = runner.invoke(
        app, ["feed", "just a message", "--boost", "message", "--log-level", "DEBUG"]
    )
    assert result.exit_code == 0, result.output
    assert "message just" in result.stdout
    assert "Boosted" in result.output


def test_cli_rejects_unknown_log_level():
    result = runner.invoke(app, ["feed", "anything", "--log-level", "LOUD"])
    assert result.exit_code == 2
