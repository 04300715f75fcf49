"""Unit tests for configuration defaults."""

import pytest

from subtitle_converter import config
from subtitle_converter.formatters.base import OutputStyle


class TestDefaults:

    def test_supported_formats(self):
        assert config.SUPPORTED_SUBTITLE_FORMATS == {".srt", ".vtt"}

    def test_messages(self):
        assert config.NO_CONTENT_MESSAGE == "No content provided"
        assert config.COPIED_MESSAGE == "Content copied to clipboard"
        assert config.COPIED_WITH_PROMPT_MESSAGE == "Content copied with prompt"

    def test_placeholder_prompt_is_a_comment(self):
        assert config.PLACEHOLDER_AI_PROMPT.startswith("//")


class TestLoadDefaultStyle:

    def test_parses_configured_value(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_STYLE", "indented")
        assert config.load_default_style() is OutputStyle.INDENTED

    def test_invalid_value_names_variable(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_STYLE", "html")
        with pytest.raises(ValueError, match="SUBCONV_DEFAULT_STYLE"):
            config.load_default_style()
