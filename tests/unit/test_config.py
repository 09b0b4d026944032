"""Unit tests for uploader configuration loading."""

from unittest.mock import patch

import pytest

from openfn_tools.core.config import ASSET_NAME, load_config, validate_config
from openfn_tools.errors import MissingTokenError


class TestLoadConfig:
    def test_defaults(self):
        with patch.dict("os.environ", {"GH_TOKEN": "tok"}, clear=True):
            cfg = load_config()
        assert cfg.github.token == "tok"
        assert cfg.github.owner == "OpenFn"
        assert cfg.github.api_url == "https://api.github.com"
        assert cfg.github.uploads_url == "https://uploads.github.com"
        assert cfg.asset_name == "build.tgz"

    def test_overrides(self):
        env = {
            "GH_TOKEN": "tok",
            "GH_OWNER": "acme",
            "GITHUB_API_URL": "https://ghe.example.com/api/v3",
            "GITHUB_UPLOADS_URL": "https://ghe.example.com/api/uploads",
        }
        with patch.dict("os.environ", env, clear=True):
            cfg = load_config()
        assert cfg.github.owner == "acme"
        assert cfg.github.api_url.endswith("/api/v3")

    def test_asset_name_ignores_environment(self):
        env = {"GH_TOKEN": "tok", "RELEASE_ASSET_NAME": "other.tgz"}
        with patch.dict("os.environ", env, clear=True):
            cfg = load_config()
        assert cfg.asset_name == ASSET_NAME == "build.tgz"


class TestValidateConfig:
    def test_missing_token(self):
        with patch.dict("os.environ", {}, clear=True):
            cfg = load_config()
        with pytest.raises(MissingTokenError) as exc_info:
            validate_config(cfg)
        assert exc_info.value.missing == ["GH_TOKEN"]

    def test_valid_config_returned(self):
        with patch.dict("os.environ", {"GH_TOKEN": "tok"}, clear=True):
            cfg = load_config()
        assert validate_config(cfg) is cfg
