"""Tests PanelOptions (env) + Fields (normalisation formulaire)."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from content_panel import Fields, PanelOptions


# ── PanelOptions ──────────────────────────────────────────────────────────

def test_defaults():
    options = PanelOptions()
    assert options.url == "/panel"
    assert options.kirbytext is True
    assert options.drag_texts == {}


def test_from_env(monkeypatch):
    monkeypatch.setenv("PANEL_URL", "https://cms.test/panel/")
    monkeypatch.setenv("PANEL_KIRBYTEXT", "false")
    options = PanelOptions.from_env()
    assert options.url == "https://cms.test/panel"
    assert options.kirbytext is False


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("PANEL_URL", raising=False)
    monkeypatch.delenv("PANEL_KIRBYTEXT", raising=False)
    options = PanelOptions.from_env()
    assert options.url == "/panel"
    assert options.kirbytext is True


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("PANEL_KIRBYTEXT", "0")
    options = PanelOptions.from_env(kirbytext=True)
    assert options.kirbytext is True


def test_url_trailing_slash_stripped():
    assert PanelOptions(url="https://cms.test/panel/").url == "https://cms.test/panel"


def test_drag_text_callback_key():
    cb = lambda model: "x"
    options = PanelOptions(drag_texts={"panel.markdown.fileDragText": cb})
    assert options.drag_text_callback("markdown", "file") is cb
    assert options.drag_text_callback("kirbytext", "file") is None


# ── Fields ────────────────────────────────────────────────────────────────

def test_fields_fill_lowercases_keys():
    fields = Fields({"Title": {}, "text": {}})
    assert fields.fill({"TITLE": "A", "text": "b"}).to_form_values() == {"title": "A", "text": "b"}


def test_fields_default_values():
    fields = Fields({"title": {}, "published": {"default": False}})
    assert fields.to_form_values() == {"title": None, "published": False}


def test_fields_drop_undeclared_values():
    fields = Fields({"title": {}})
    assert fields.fill({"title": "A", "secret": "x"}).to_form_values() == {"title": "A"}


def test_fields_reset():
    fields = Fields({"title": {"default": ""}})
    fields.fill({"title": "A"})
    assert fields.reset().to_form_values() == {"title": ""}


def test_fields_for_model_keeps_language():
    from helpers import make_model
    fields = Fields.for_model(make_model(fields={"title": {}}), "fr")
    assert fields.language == "fr"
    assert list(fields.definitions) == ["title"]
