"""
Test cases for loading config/config.json settings.
"""

from config.settings import (
    DEFAULT_PREVIEW_LIMIT,
    DEFAULT_TAG_PREVIEW_LIMIT,
    Settings,
    get_config_file,
    load_settings
)
from config.tools import FEATURED_ROUTES


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.json")
        assert settings == Settings()
        assert settings.preview_limit == DEFAULT_PREVIEW_LIMIT
        assert settings.tag_preview_limit == DEFAULT_TAG_PREVIEW_LIMIT
        assert settings.featured == FEATURED_ROUTES

    def test_invalid_json_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding='utf-8')
        assert load_settings(path) == Settings()

    def test_non_object_gives_defaults(self, config_file):
        assert load_settings(config_file([1, 2, 3])) == Settings()

    def test_values_are_read(self, config_file):
        path = config_file({
            'tools': {'base64': {'enabled': False}},
            'menu': {'preview_limit': 5},
            'listing': {'tag_preview_limit': 2},
            'featured': ['/tools/base64']
        })
        settings = load_settings(path)
        assert settings.preview_limit == 5
        assert settings.tag_preview_limit == 2
        assert settings.featured == ['/tools/base64']
        assert not settings.is_tool_enabled('base64')

    def test_invalid_limits_fall_back(self, config_file):
        path = config_file({
            'menu': {'preview_limit': -1},
            'listing': {'tag_preview_limit': 'three'}
        })
        settings = load_settings(path)
        assert settings.preview_limit == DEFAULT_PREVIEW_LIMIT
        assert settings.tag_preview_limit == DEFAULT_TAG_PREVIEW_LIMIT

    def test_boolean_limit_rejected(self, config_file):
        assert load_settings(config_file({'menu': {'preview_limit': True}})).preview_limit == DEFAULT_PREVIEW_LIMIT

    def test_malformed_sections_ignored(self, config_file):
        settings = load_settings(config_file({'tools': [], 'menu': 'big', 'featured': 'x'}))
        assert settings == Settings()

    def test_env_override(self, config_file, monkeypatch):
        path = config_file({'menu': {'preview_limit': 4}})
        monkeypatch.setenv('DEVTOOLKIT_CONFIG_FILE', str(path))
        assert get_config_file() == path
        assert load_settings().preview_limit == 4

    def test_default_config_file_location(self):
        path = get_config_file()
        assert path.name == 'config.json'
        assert path.parent.name == 'config'


class TestToolEnabled:
    def test_enabled_by_default(self):
        assert Settings().is_tool_enabled('anything')

    def test_explicit_flags(self):
        settings = Settings(tools={'a': {'enabled': False}, 'b': {'enabled': True}, 'c': {}})
        assert not settings.is_tool_enabled('a')
        assert settings.is_tool_enabled('b')
        assert settings.is_tool_enabled('c')
