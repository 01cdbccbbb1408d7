"""Tests for run configuration loading."""

import json

import pytest

from unclassify.config import UnclassifyConfig, config_from_mapping, load_config, resolve_filter
from unclassify.errors import ConfigurationError


def keep_everything(token, allowed):
    return False


class TestDefaults:
    def test_defaults(self):
        config = UnclassifyConfig()
        assert config.js_classes is True
        assert config.knockout is False
        assert config.separator == "\n"
        assert config.jobs == 1
        assert dict(config.presets) == {}


class TestMerged:
    def test_none_overrides_ignored(self):
        config = UnclassifyConfig(dest="out.html").merged(dest=None, dry=True)
        assert config.dest == "out.html"
        assert config.dry is True

    def test_presets_merge(self):
        config = UnclassifyConfig(presets={"bootstrap": True}).merged(presets={"html5bp": True})
        assert dict(config.presets) == {"bootstrap": True, "html5bp": True}


class TestConfigFromMapping:
    def test_preset_aliases(self):
        config = config_from_mapping({"bootstrap_classes": True, "html5bp_classes": "no-js"})
        assert dict(config.presets) == {"bootstrap": True, "html5bp": "no-js"}

    def test_stylesheets_string(self):
        assert config_from_mapping({"stylesheets": "a.css"}).stylesheets == ("a.css",)

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="nope"):
            config_from_mapping({"nope": 1})

    def test_bad_jobs(self):
        with pytest.raises(ConfigurationError):
            config_from_mapping({"jobs": 0})

    def test_presets_must_be_mapping(self):
        with pytest.raises(ConfigurationError):
            config_from_mapping({"presets": ["bootstrap"]})

    def test_filter_by_name(self):
        config = config_from_mapping({"filter": f"{__name__}:keep_everything"})
        assert config.filter is keep_everything


class TestLoadConfig:
    def test_load(self, tmp_path):
        path = tmp_path / "unclassify.json"
        path.write_text(json.dumps({"custom_classes": "a b", "knockout": True, "dest": "out/"}))
        config = load_config(path)
        assert config.custom_classes == "a b"
        assert config.knockout is True
        assert config.dest == "out/"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{nope")
        with pytest.raises(ConfigurationError, match="invalid JSON"):
            load_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]")
        with pytest.raises(ConfigurationError):
            load_config(path)


class TestResolveFilter:
    def test_callable_passthrough(self):
        assert resolve_filter(keep_everything) is keep_everything

    def test_none(self):
        assert resolve_filter(None) is None

    def test_missing_module(self):
        with pytest.raises(ConfigurationError):
            resolve_filter("no_such_module_xyz:f")

    def test_bad_spec(self):
        with pytest.raises(ConfigurationError):
            resolve_filter("not-a-spec")
