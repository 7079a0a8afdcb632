# Area: Shared Tests
"""Tests for the command-line entry point."""

import logging
from unittest.mock import patch

import pytest

from twentyq.cli import apply_overrides, main, parse_args
from twentyq.config import DEFAULT_CONFIG, ENV_MAPPINGS


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    for env_key in ENV_MAPPINGS:
        monkeypatch.delenv(env_key, raising=False)
    monkeypatch.setenv("LOG_FILE", "")
    monkeypatch.setattr("twentyq.config.load_dotenv", lambda: None)
    pkg_logger = logging.getLogger("twentyq")
    saved = (list(pkg_logger.handlers), pkg_logger.level, pkg_logger.propagate)
    yield
    pkg_logger.handlers[:] = saved[0]
    pkg_logger.setLevel(saved[1])
    pkg_logger.propagate = saved[2]


class TestParseArgs:
    def test_defaults_are_none(self):
        args = parse_args([])
        assert args.config is None
        assert args.port is None
        assert args.init_db is False

    def test_overrides_only_given_flags(self):
        args = parse_args(["--port", "8080", "--answers", "a.json"])
        config = apply_overrides(dict(DEFAULT_CONFIG), args)
        assert config["port"] == 8080
        assert config["answers_file"] == "a.json"
        assert config["host"] == DEFAULT_CONFIG["host"]


class TestMain:
    """main wires config, logging and the server together."""

    def test_serves_app(self):
        with patch("twentyq.cli.uvicorn.run") as run, \
             patch("twentyq.api.create_app") as create_app:
            code = main(["--port", "4000", "--log-level", "WARNING"])

        assert code == 0
        config = create_app.call_args.args[0]
        assert config["port"] == 4000
        run.assert_called_once_with(
            create_app.return_value, host="0.0.0.0", port=4000, log_level="info"
        )

    def test_invalid_config_exits_nonzero(self, monkeypatch, capsys):
        monkeypatch.setenv("PORT", "zero")
        assert main([]) == 1
        assert "Invalid config values" in capsys.readouterr().err

    def test_init_db_creates_tables(self, tmp_path, monkeypatch):
        db = tmp_path / "scores.db"
        monkeypatch.setenv("LEDGER_DATABASE_URL", f"sqlite:///{db}")
        assert main(["--init-db"]) == 0
        assert db.exists()

    def test_init_db_without_url(self, monkeypatch, capsys):
        assert main(["--init-db"]) == 1
        assert "LEDGER_DATABASE_URL" in capsys.readouterr().err
