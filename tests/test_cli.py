"""
Tests for the command line interface.
"""

import logging

import pytest
import numpy as np
from click.testing import CliRunner
from PIL import Image

from filtergram.cli import main
from filtergram.processing.filters import list_filters


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_console_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, '_filtergram_console', False):
            root.removeHandler(handler)


@pytest.fixture
def photo(tmp_path):
    """Small colourful PNG on disk."""
    pixels = np.zeros((20, 30, 3), dtype=np.uint8)
    pixels[..., 0] = np.linspace(0, 255, 30, dtype=np.uint8)[np.newaxis, :]
    pixels[..., 1] = 120
    pixels[..., 2] = np.linspace(255, 0, 20, dtype=np.uint8)[:, np.newaxis]
    path = tmp_path / "photo.png"
    Image.fromarray(pixels).save(path)
    return path


class TestListCommand:
    """Test filter listing."""

    def test_list(self, runner):
        result = runner.invoke(main, ['list'])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "Available filters:"
        assert [line.strip() for line in lines[1:]] == list_filters()

    @pytest.mark.parametrize("alias", ['--list', '-l'])
    def test_list_aliases(self, runner, alias):
        result = runner.invoke(main, [alias])
        assert result.exit_code == 0
        assert "Available filters:" in result.output
        assert "  xpro2" in result.output

    def test_describe(self, runner):
        result = runner.invoke(main, ['list', '--describe'])
        assert result.exit_code == 0
        assert "pink screen" in result.output


class TestApplyCommand:
    """Test single-image filtering."""

    def test_shorthand_default_output(self, runner, photo):
        result = runner.invoke(main, ['1977', str(photo)])
        assert result.exit_code == 0, result.output

        expected = photo.parent / "photo-1977.png"
        assert expected.exists()
        assert result.output.splitlines() == [f"Saved: {expected}"]
        with Image.open(expected) as img:
            assert img.size == (30, 20)

    def test_explicit_output(self, runner, photo, tmp_path):
        output = tmp_path / "gray.png"
        result = runner.invoke(main, ['apply', 'inkwell', str(photo), str(output)])
        assert result.exit_code == 0, result.output

        with Image.open(output) as img:
            pixels = np.asarray(img.convert("RGB"))
        np.testing.assert_array_equal(pixels[..., 0], pixels[..., 1])
        np.testing.assert_array_equal(pixels[..., 1], pixels[..., 2])

    def test_jpeg_output(self, runner, photo, tmp_path):
        output = tmp_path / "out.jpg"
        result = runner.invoke(main, ['valencia', str(photo), str(output)])
        assert result.exit_code == 0, result.output
        with Image.open(output) as img:
            assert img.format == "JPEG"

    def test_unknown_filter(self, runner, photo):
        result = runner.invoke(main, ['bogus', str(photo)])
        assert result.exit_code == 1
        assert "Unknown filter 'bogus'" in result.output
        assert "filtergram list" in result.output
        assert not (photo.parent / "photo-bogus.png").exists()

    def test_missing_input(self, runner, tmp_path):
        missing = tmp_path / "missing.jpg"
        result = runner.invoke(main, ['1977', str(missing)])
        assert result.exit_code == 1
        assert "not found" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_undecodable_input(self, runner, tmp_path):
        broken = tmp_path / "broken.png"
        broken.write_text("not an image")
        result = runner.invoke(main, ['1977', str(broken)])
        assert result.exit_code == 1
        assert not (tmp_path / "broken-1977.png").exists()

    def test_no_overwrite_config(self, runner, photo, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("output:\n  overwrite: false\n")
        existing = tmp_path / "existing.png"
        existing.write_bytes(b"keep")

        result = runner.invoke(main, ['-c', str(config), 'lark', str(photo), str(existing)])
        assert result.exit_code == 1
        assert existing.read_bytes() == b"keep"


class TestBatchCommand:
    """Test multi-image filtering."""

    def test_batch(self, runner, photo, tmp_path):
        second = tmp_path / "second.png"
        Image.new("RGB", (8, 8), (200, 50, 50)).save(second)
        out_dir = tmp_path / "out"

        result = runner.invoke(main, ['batch', 'moon', str(photo), str(second),
                                      '--output-dir', str(out_dir), '--workers', '2'])
        assert result.exit_code == 0, result.output
        assert (out_dir / "photo-moon.png").exists()
        assert (out_dir / "second-moon.png").exists()
        assert "Succeeded:        2" in result.output

    def test_batch_reports_failures(self, runner, photo, tmp_path, caplog):
        result = runner.invoke(main, ['-q', 'batch', 'toaster', str(photo),
                                      str(tmp_path / "missing.png")])
        assert result.exit_code == 1
        assert (tmp_path / "photo-toaster.png").exists()

        failures = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert len(failures) == 1
        assert failures[0].startswith("Failed to filter image | ")
        assert "missing.png" in failures[0]

    def test_batch_unknown_filter(self, runner, photo):
        result = runner.invoke(main, ['batch', 'bogus', str(photo)])
        assert result.exit_code == 1
        assert "Unknown filter 'bogus'" in result.output


class TestUsage:
    """Test help and usage errors."""

    @pytest.mark.parametrize("flag", ['--help', '-h'])
    def test_help(self, runner, flag):
        result = runner.invoke(main, [flag])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "list" in result.output
        assert "batch" in result.output

    def test_command_short_help(self, runner):
        result = runner.invoke(main, ['apply', '-h'])
        assert result.exit_code == 0
        assert "FILTER" in result.output

    def test_no_arguments_prints_usage(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 1
        assert "Usage:" in result.output

    def test_filter_without_input(self, runner):
        result = runner.invoke(main, ['1977'])
        assert result.exit_code == 1
        assert "Missing argument" in result.output
