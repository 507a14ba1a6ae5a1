"""
Unit tests for the command-line entry point in main.py.
"""

import pytest
import json
import os
import tempfile

from challenge_report.utils import ANSI_CYAN


class TestArgumentParser:
    """Tests for argument parsing."""

    def test_session_file_required(self):
        """Test that the session file argument is required."""
        from main import create_argument_parser

        parser = create_argument_parser()
        with pytest.raises(SystemExit):
            parser.parse_args([])

    def test_defaults(self):
        """Test default option values."""
        from main import create_argument_parser

        args = create_argument_parser().parse_args(["session.json"])

        assert args.session_file == "session.json"
        assert args.pdf_file is None
        assert args.no_color is False

    def test_options(self):
        """Test PDF and colour options."""
        from main import create_argument_parser

        args = create_argument_parser().parse_args(
            ["session.json", "--pdf", "out.pdf", "--no-color"])

        assert args.pdf_file == "out.pdf"
        assert args.no_color is True


class TestMain:
    """Tests for the main() workflow."""

    @pytest.fixture
    def workdir(self):
        """Temporary working directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            yield tmpdir

    @pytest.fixture
    def session_file(self, workdir, sample_session_data):
        """Session file written to the working directory."""
        path = os.path.join(workdir, "session.json")
        with open(path, "w") as f:
            json.dump(sample_session_data, f)
        return path

    def test_prints_report(self, session_file, capsys, monkeypatch):
        """Test printing the text report."""
        from main import main, EXIT_OK
        monkeypatch.delenv("NO_COLOR", raising=False)

        assert main([session_file]) == EXIT_OK

        captured = capsys.readouterr()
        assert "Challenge Report" in captured.out
        assert "amina" in captured.out
        assert "55 seconds" in captured.out
        assert ANSI_CYAN in captured.out

    def test_no_color_flag(self, session_file, capsys):
        """Test that --no-color removes escape codes."""
        from main import main

        main([session_file, "--no-color"])

        captured = capsys.readouterr()
        assert ANSI_CYAN not in captured.out

    def test_writes_pdf(self, workdir, session_file, capsys):
        """Test writing the PDF report."""
        from main import main, EXIT_OK
        pdf_path = os.path.join(workdir, "report.pdf")

        assert main([session_file, "--pdf", pdf_path]) == EXIT_OK

        assert os.path.exists(pdf_path)
        captured = capsys.readouterr()
        assert "[OK] PDF exported to:" in captured.out

    def test_pdf_failure_exit_code(self, workdir, session_file, capsys):
        """Test exit status when the PDF cannot be written."""
        from main import main, EXIT_EXPORT_FAILED
        pdf_path = os.path.join(workdir, "missing", "report.pdf")

        assert main([session_file, "--pdf", pdf_path]) == EXIT_EXPORT_FAILED

        captured = capsys.readouterr()
        assert "[ERROR]" in captured.out

    def test_missing_session_file(self, workdir, capsys):
        """Test exit status for a missing session file."""
        from main import main, EXIT_BAD_INPUT

        assert main([os.path.join(workdir, "nope.json")]) == EXIT_BAD_INPUT

        captured = capsys.readouterr()
        assert "[ERROR] Session file not found" in captured.out

    def test_invalid_session_file(self, workdir, capsys):
        """Test exit status for a malformed session file."""
        from main import main, EXIT_BAD_INPUT
        path = os.path.join(workdir, "bad.json")
        with open(path, "w") as f:
            json.dump({"schoolRegNo": "SCH-042"}, f)

        assert main([path]) == EXIT_BAD_INPUT

        captured = capsys.readouterr()
        assert "[ERROR] Could not load session" in captured.out
