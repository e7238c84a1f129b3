"""
Tests for utility modules.
"""

import logging
from pathlib import Path

import pytest

from app_convert.util import files
from app_convert.util.files import ensure_dir, read_text, write_text
from app_convert.util.log import setup_logging
from app_convert.util.progress import operation_status, report_file_written


class TestFiles:
    """Tests for file utilities."""

    def test_ensure_dir_creates(self, tmp_path):
        """Test creating nested directories."""
        new_dir = tmp_path / "a" / "b" / "c"

        result = ensure_dir(new_dir)

        assert new_dir.is_dir()
        assert result == new_dir

    def test_ensure_dir_idempotent(self, tmp_path):
        """Test ensure_dir on an existing directory."""
        ensure_dir(tmp_path / "a")
        ensure_dir(tmp_path / "a")

        assert (tmp_path / "a").is_dir()

    def test_write_text_creates_parents(self, tmp_path):
        """Test writing into a missing directory."""
        target = tmp_path / "triggers" / "new_contact.js"

        write_text(target, "module.exports = {};\n")

        assert read_text(target) == "module.exports = {};\n"

    def test_write_text_overwrites(self, tmp_path):
        """Test writing replaces existing content."""
        target = tmp_path / "index.js"
        write_text(target, "old")
        write_text(target, "new")

        assert read_text(target) == "new"

    def test_accepts_strings(self, tmp_path):
        """Test str paths work like Path objects."""
        write_text(str(tmp_path / "x.txt"), "x")

        assert read_text(str(tmp_path / "x.txt")) == "x"

    def test_write_text_uses_ensure_dir(self, tmp_path, monkeypatch):
        """Test parent directories are created through ensure_dir."""
        calls = []

        def recording_ensure_dir(path):
            calls.append(Path(path))
            return ensure_dir(path)

        monkeypatch.setattr(files, "ensure_dir", recording_ensure_dir)
        target = tmp_path / "writes" / "create_contact.js"

        write_text(target, "x")

        assert calls == [target.parent]
        assert read_text(target) == "x"

    def test_write_text_is_utf8(self, tmp_path):
        """Test non-ASCII content is written as UTF-8."""
        target = tmp_path / "triggers" / "日本.js"

        write_text(target, "label: 'Café'")

        assert target.read_bytes() == "label: 'Café'".encode("utf-8")


class TestProgress:
    """Tests for progress reporting."""

    def test_report_file_written(self, capsys):
        """Test a written file is reported."""
        report_file_written("triggers/new_contact.js")

        assert "Writing triggers/new_contact.js" in capsys.readouterr().out

    def test_operation_status_success(self, capsys):
        """Test a successful operation is reported as complete."""
        with operation_status("Converting"):
            pass

        assert "Converting complete" in capsys.readouterr().out

    def test_operation_status_failure(self, capsys):
        """Test a failed operation is reported and re-raised."""
        with pytest.raises(RuntimeError):
            with operation_status("Converting"):
                raise RuntimeError("boom")

        assert "Converting failed: boom" in capsys.readouterr().out


class TestLogging:
    """Tests for logging setup."""

    def test_verbose_sets_debug(self):
        """Test verbose logging."""
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_default_is_warning(self):
        """Test quiet logging."""
        setup_logging(verbose=False)
        assert logging.getLogger().level == logging.WARNING
