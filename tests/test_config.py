from __future__ import annotations

import pytest

from addon_updater.config import DEFAULT_ADDON, load_updater_config
from addon_updater.errors import ConfigError


def test_json_config_keys_are_case_insensitive(write_config):
    p = write_config({"Page": "https://example.test/api", "Directories": ["ElvUI", "ElvUI_Options"]})
    cfg = load_updater_config(str(p))

    assert cfg.page == "https://example.test/api"
    assert cfg.directories == ["ElvUI", "ElvUI_Options"]
    assert cfg.addon == DEFAULT_ADDON
    assert cfg.feed == "json"
    assert cfg.toc_suffix == "_Mainline"
    assert cfg.install_path is None
    assert cfg.timeout == 5
    assert cfg.download_timeout == 60


def test_yaml_config_with_overrides(write_config, tmp_path):
    p = write_config(
        {
            "page": "https://example.test/elvui",
            "directories": ["ElvUI"],
            "feed": "HTML",
            "addon": "Foo",
            "toc_suffix": "",
            "install_path": str(tmp_path),
            "timeout": 2.5,
            "download_url_template": "https://example.test/{addon_lower}-{version}.zip",
        },
        name="config.yaml",
    )
    cfg = load_updater_config(str(p))

    assert cfg.feed == "html"
    assert cfg.addon == "Foo"
    assert cfg.toc_suffix == ""
    assert cfg.install_path == str(tmp_path)
    assert cfg.timeout == 2.5
    assert cfg.download_url_template == "https://example.test/{addon_lower}-{version}.zip"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="cannot read file"):
        load_updater_config(str(tmp_path / "nope.json"))


def test_malformed_json(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="cannot unmarshal"):
        load_updater_config(str(p))


def test_root_must_be_mapping(tmp_path):
    p = tmp_path / "config.json"
    p.write_text('["a"]', encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_updater_config(str(p))


@pytest.mark.parametrize(
    "data, message",
    [
        ({"directories": ["ElvUI"]}, "'page' missing"),
        ({"page": "https://x.test"}, "non-empty list"),
        ({"page": "https://x.test", "directories": []}, "non-empty list"),
        ({"page": "https://x.test", "directories": "ElvUI"}, "non-empty list"),
        ({"page": "https://x.test", "directories": ["ElvUI", ""]}, "non-empty strings"),
        ({"page": "https://x.test", "directories": ["ElvUI"], "feed": "rss"}, "unknown feed"),
        ({"page": "https://x.test", "directories": ["ElvUI"], "timeout": "fast"}, "positive number"),
        ({"page": "https://x.test", "directories": ["ElvUI"], "timeout": 0}, "positive number"),
        ({"page": "https://x.test", "directories": ["ElvUI"], "download_timeout": -1}, "positive number"),
        ({"page": "https://x.test", "directories": ["ElvUI"], "version_pattern": "Version [0-9.]+"}, "needs a group"),
        ({"page": "https://x.test", "directories": ["ElvUI"], "version_pattern": "Version ([0-9.]+"}, "invalid .version_pattern."),
    ],
)
def test_invalid_configs(write_config, data, message):
    p = write_config(data)
    with pytest.raises(ConfigError, match=message):
        load_updater_config(str(p))
