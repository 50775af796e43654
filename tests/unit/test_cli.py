import json

import pytest

from text_similarity.cli.main import main


def test_cli_score_plain(capsys):
    assert main(["score", "我爱购物", "我爱读书", "--strategy", "overlap"]) == 0
    assert capsys.readouterr().out.strip() == "0.5"


def test_cli_score_json(capsys):
    assert main(["score", "我爱购物", "他是黑客", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["strategy"] == "cosine"
    assert out["score"] == 0.0
    assert out["finite"] is True


def test_cli_score_empty_prints_nan(capsys):
    assert main(["score", "", "abc"]) == 0
    assert capsys.readouterr().out.strip() == "nan"


def test_cli_demo(capsys):
    assert main(["demo", "--strategy", "cosine"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 6
    assert lines[0] == "我爱购物 vs 我爱购物: 1.0"


def test_cli_env_default_strategy(monkeypatch, capsys):
    monkeypatch.setenv("TSIM_STRATEGY", "overlap")
    assert main(["score", "aab", "a"]) == 0
    assert capsys.readouterr().out.strip() == "2.0"


def test_cli_strategies(capsys):
    assert main(["strategies"]) == 0
    out = capsys.readouterr().out
    assert "cosine" in out and "overlap" in out


def test_cli_unknown_log_level_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "LOUD", "score", "a", "b"])
    assert exc.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_cli_log_level_case_insensitive(capsys):
    assert main(["--log-level", "error", "score", "a", "a"]) == 0
    assert capsys.readouterr().out.strip() == "1.0"


def test_cli_bad_env_setting_is_usage_error(monkeypatch, capsys):
    monkeypatch.setenv("TSIM_STRATEGY", "bm25")
    with pytest.raises(SystemExit) as exc:
        main(["score", "a", "b"])
    assert exc.value.code == 2
    assert "Unknown similarity strategy 'bm25'" in capsys.readouterr().err
