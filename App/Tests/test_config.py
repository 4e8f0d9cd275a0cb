""" Tests for Config/config.py and Services/utility.py """
import json
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent.parent))

from App.Config.config import Settings
from App.Models.models import Account
from App.Services.utility import logging_function, resolve_level


def test_defaults(monkeypatch):
    for name in ("APP_ENV", "LOG_LEVEL", "INSTALL_DEFAULT_BROADCASTER", "TEST_ACCOUNTS"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.app_env == "local"
    assert s.install_default_broadcaster is True
    assert s.test_accounts == {}


def test_settings_read_environment(monkeypatch):
    """ Seed accounts are parsed from JSON in TEST_ACCOUNTS. """
    monkeypatch.setenv("APP_ENV", "ci")
    monkeypatch.setenv("INSTALL_DEFAULT_BROADCASTER", "false")
    monkeypatch.setenv(
        "TEST_ACCOUNTS",
        json.dumps({"Staging": [{"username": "alice", "password": "secret"}]}),
    )
    s = Settings(_env_file=None)
    assert s.app_env == "ci"
    assert s.install_default_broadcaster is False
    assert s.test_accounts == {"Staging": [Account(username="alice", password="secret")]}


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(None) == logging.INFO


def test_logging_function_routes_levels(caplog):
    with caplog.at_level(logging.DEBUG):
        logging_function("dbg", level="debug")
        logging_function("err", level="error")
        logging_function("fallback", level="weird")
    levels = {r.getMessage(): r.levelno for r in caplog.records}
    assert levels == {"dbg": logging.DEBUG, "err": logging.ERROR, "fallback": logging.INFO}
