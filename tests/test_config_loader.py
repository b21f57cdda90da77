import json

import pytest

from tabulation.src.utils import config_loader
from tabulation.src.utils.config_loader import load_config, load_meta_config


def test_load_yaml_and_json(tmp_path):
    y = tmp_path / "conf.yaml"
    y.write_text("html:\n  indent: 4\n")
    assert load_config(str(y)) == {"html": {"indent": 4}}

    j = tmp_path / "conf.json"
    j.write_text(json.dumps({"log_level": "debug"}))
    assert load_config(str(j)) == {"log_level": "debug"}


def test_load_config_unsupported(tmp_path):
    p = tmp_path / "conf.ini"
    p.write_text("[x]")
    with pytest.raises(ValueError):
        load_config(str(p))


def test_load_meta_config_missing(tmp_path):
    assert load_meta_config(tmp_path / "absent.yaml") == {}


def test_default_settings():
    conf = load_meta_config()
    assert conf["html"]["indent"] == 2
    assert conf["html"]["escape"] is True


def test_setters_update_settings(monkeypatch):
    monkeypatch.setattr(config_loader, "META_CONFIG", {})
    monkeypatch.setattr(config_loader, "HTML_INDENT", 2)
    monkeypatch.setattr(config_loader, "HTML_ESCAPE", True)
    monkeypatch.setattr(config_loader, "LOG_LEVEL", "INFO")
    config_loader.set_log_level("debug")
    config_loader.set_html_indent(0)
    config_loader.set_html_escape(False)
    assert config_loader.LOG_LEVEL == "DEBUG"
    assert config_loader.HTML_INDENT == 0
    assert config_loader.HTML_ESCAPE is False
    assert config_loader.META_CONFIG == {"log_level": "DEBUG", "html": {"indent": 0, "escape": False}}
