"""Tests for the command line interface."""

import shutil
import tempfile
from pathlib import Path

from click.testing import CliRunner

from file_organizer import __version__
from file_organizer.cli.main import cli


class TestCli:
    """Test the file-organizer command."""

    def setup_method(self):
        """Set up test environment."""
        self.temp_dir = Path(tempfile.mkdtemp()).resolve()
        self.runner = CliRunner()

    def teardown_method(self):
        """Clean up test environment."""
        if self.temp_dir.exists():
            shutil.rmtree(self.temp_dir)

    def populate(self):
        (self.temp_dir / "report.pdf").write_text("pdf")
        (self.temp_dir / "photo.JPG").write_text("jpg")
        (self.temp_dir / ".env").write_text("SECRET=1")
        (self.temp_dir / "README").write_text("readme")
        (self.temp_dir / "notes").mkdir()

    def test_missing_argument_is_a_usage_error(self):
        result = self.runner.invoke(cli, [])

        assert result.exit_code == 2
        assert "No target directory provided" in result.output
        assert "Usage:" in result.output

    def test_organizes_directory(self):
        self.populate()

        result = self.runner.invoke(cli, [str(self.temp_dir)])

        assert result.exit_code == 0, result.output
        assert f"Organizing files in: {self.temp_dir}" in result.output
        assert "Total files processed: 4" in result.output
        assert "Files moved: 2" in result.output
        assert "Files skipped: 2" in result.output
        assert "Errors encountered" not in result.output
        assert "Completed in" in result.output
        assert "Moved report.pdf to documents/" in result.output
        assert (self.temp_dir / "documents" / "report.pdf").is_file()
        assert (self.temp_dir / "images" / "photo.JPG").is_file()

    def test_errors_line_shown_when_moves_fail(self):
        (self.temp_dir / "documents").mkdir()
        (self.temp_dir / "documents" / "report.pdf").write_text("old")
        (self.temp_dir / "report.pdf").write_text("new")

        result = self.runner.invoke(cli, [str(self.temp_dir)])

        assert result.exit_code == 0
        assert "Errors encountered: 1" in result.output
        assert result.output.count("Failed to move file report.pdf") == 1

    def test_missing_directory_exits_non_zero(self):
        missing = self.temp_dir / "does-not-exist"

        result = self.runner.invoke(cli, [str(missing)])

        assert result.exit_code == 1
        assert "Directory does not exist" in result.output
        assert "Operation Summary" not in result.output
        assert not missing.exists()

    def test_dry_run_moves_nothing(self):
        self.populate()

        result = self.runner.invoke(cli, ["--dry-run", str(self.temp_dir)])

        assert result.exit_code == 0
        assert "DRY RUN MODE" in result.output
        assert "Would move report.pdf to documents/" in result.output
        assert "Files to move: 2" in result.output
        assert (self.temp_dir / "report.pdf").is_file()
        assert not (self.temp_dir / "documents").exists()

    def test_dry_run_previews_collision(self):
        (self.temp_dir / "documents").mkdir()
        (self.temp_dir / "documents" / "report.pdf").write_text("old")
        (self.temp_dir / "report.pdf").write_text("new")

        result = self.runner.invoke(cli, ["--dry-run", str(self.temp_dir)])

        assert result.exit_code == 0
        assert "Would fail to move file report.pdf" in result.output
        assert "Files to move: 0" in result.output
        assert "Errors encountered: 1" in result.output


    def test_quiet_hides_entry_lines(self):
        self.populate()

        result = self.runner.invoke(cli, ["--quiet", str(self.temp_dir)])

        assert result.exit_code == 0
        assert "Moved report.pdf" not in result.output
        assert "Files moved: 2" in result.output

    def test_config_file_enables_dry_run(self):
        self.populate()
        config_file = self.temp_dir / "settings.ini"
        config_file.write_text("[organize]\ndry_run = true\n")

        result = self.runner.invoke(cli, ["--config", str(config_file), str(self.temp_dir)])

        assert result.exit_code == 0
        assert "DRY RUN MODE" in result.output
        assert (self.temp_dir / "report.pdf").is_file()
        assert (self.temp_dir / "settings.ini").is_file()

    def test_no_dry_run_overrides_config(self):
        self.populate()
        config_file = self.temp_dir.parent / f"{self.temp_dir.name}.ini"
        config_file.write_text("[organize]\ndry_run = true\n")

        try:
            result = self.runner.invoke(
                cli, ["--config", str(config_file), "--no-dry-run", str(self.temp_dir)]
            )
        finally:
            config_file.unlink()

        assert result.exit_code == 0
        assert (self.temp_dir / "documents" / "report.pdf").is_file()

    def test_missing_config_file_exits_non_zero(self):
        self.populate()

        result = self.runner.invoke(
            cli, ["--config", str(self.temp_dir / "missing.ini"), str(self.temp_dir)]
        )

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output
        assert (self.temp_dir / "report.pdf").is_file()

    def test_log_file_option_writes_log(self):
        self.populate()
        log_file = self.temp_dir / "logs" / "run.log"

        result = self.runner.invoke(
            cli, ["--log-level", "INFO", "--log-file", str(log_file), str(self.temp_dir)]
        )

        assert result.exit_code == 0
        assert log_file.is_file()
        assert "Moving report.pdf to documents/" in log_file.read_text()

    def test_version(self):
        result = self.runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
