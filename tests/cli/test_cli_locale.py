import locale
import logging

from strpath.cli import app as cli_app


def test_configure_locale_adopts_user_collation(monkeypatch):
    calls = []
    monkeypatch.setattr(locale, "setlocale", lambda category, value=None: calls.append((category, value)))

    cli_app._configure_locale()

    assert calls == [(locale.LC_COLLATE, "")]


def test_configure_locale_tolerates_unsupported_locale(monkeypatch, caplog):
    def unsupported(category, value=None):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr(locale, "setlocale", unsupported)

    with caplog.at_level(logging.DEBUG, logger="strpath.cli.app"):
        cli_app._configure_locale()

    assert "Keeping default collation" in caplog.text

