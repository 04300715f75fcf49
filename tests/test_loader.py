"""Unit tests for loading subtitle files.

WHY: A file that cannot be read must surface as FileReadError, never as
empty input; otherwise the user would be told "No content provided" for
a file that exists.

RULES:
- All file I/O tests use tmp_path fixtures for isolation.
"""

import pytest

from subtitle_converter.errors import ConverterError, FileReadError
from subtitle_converter.loader import is_supported_subtitle, load_subtitle_file


class TestIsSupportedSubtitle:

    @pytest.mark.parametrize("name", ["a.srt", "a.vtt", "A.SRT", "dir/b.Vtt"])
    def test_supported(self, name):
        assert is_supported_subtitle(name)

    @pytest.mark.parametrize("name", ["a.txt", "a.srt.bak", "noext"])
    def test_unsupported(self, name):
        assert not is_supported_subtitle(name)


class TestLoadSubtitleFile:

    def test_reads_utf8(self, tmp_path, two_block_srt):
        path = tmp_path / "talk.srt"
        path.write_text(two_block_srt, encoding="utf-8")
        assert load_subtitle_file(path) == two_block_srt

    def test_strips_bom(self, tmp_path):
        path = tmp_path / "talk.vtt"
        path.write_bytes("\ufeffWEBVTT\n".encode("utf-8"))
        assert load_subtitle_file(path) == "WEBVTT\n"

    def test_non_ascii_text(self, tmp_path):
        path = tmp_path / "sv.srt"
        path.write_text("1\n00:00:01 --> 00:00:02\nHej där, världen!\n", encoding="utf-8")
        assert "Hej där, världen!" in load_subtitle_file(path)

    def test_extension_is_advisory(self, tmp_path):
        path = tmp_path / "captions.txt"
        path.write_text("Hello", encoding="utf-8")
        assert load_subtitle_file(path) == "Hello"

    def test_empty_file_is_not_an_error(self, tmp_path):
        path = tmp_path / "empty.srt"
        path.write_text("", encoding="utf-8")
        assert load_subtitle_file(path) == ""

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.srt"
        with pytest.raises(FileReadError) as excinfo:
            load_subtitle_file(path)
        assert excinfo.value.path == path
        assert "missing.srt" in str(excinfo.value)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.srt"
        path.write_bytes("Caf\xe9".encode("latin-1"))
        with pytest.raises(FileReadError, match="not valid UTF-8"):
            load_subtitle_file(path)

    def test_directory_is_a_read_failure(self, tmp_path):
        with pytest.raises(FileReadError):
            load_subtitle_file(tmp_path)

    def test_file_read_error_is_converter_error(self, tmp_path):
        with pytest.raises(ConverterError):
            load_subtitle_file(tmp_path / "nope.vtt")
