"""Tests for the uvicorn launcher."""

import logging

import run


def test_main_passes_arguments_to_uvicorn(monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(run.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr("sys.argv", ["run.py", "--host", "127.0.0.1", "--port", "9001", "--reload"])

    with caplog.at_level(logging.INFO, logger="bloglist-run"):
        run.main()

    assert calls == [("bloglist.main:app", {"host": "127.0.0.1", "port": 9001, "reload": True})]
    assert "Serving on http://127.0.0.1:9001 (reload: on)" in caplog.text
