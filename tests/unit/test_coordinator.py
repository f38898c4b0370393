"""
Unit tests for the search coordinator.

These run real searches over temporary trees with a fast spinner and check
both the returned report and the order of the console output.
"""

import os
import threading
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch
import pytest

from treefind.config import load_settings
from treefind.coordinator import SearchCoordinator
from treefind.core.errors import WorkerFailedError
from treefind.models.config import FinderSettings
from treefind.models.search_request import SearchRequest
from treefind.tools.fs_walker import FSWalker
from treefind.tools.spinner import SpinnerWorker


SPINNER_FRAMES = ("Searching -", "Searching /", "Searching |", "Searching \\")


class TestSearchCoordinator:
    """Test cases for SearchCoordinator.run()."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.old_cwd = os.getcwd()
        os.chdir(self.temp_dir)

        for file_path in ["root/a.txt", "root/sub/a_copy.txt", "root/sub2/other.log",
                          "root/data/notes.md"]:
            full_path = Path(file_path)
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_text(f"Content of {file_path}")

        self.settings = FinderSettings(spinner={'interval_ms': 1})

    @pytest.fixture(autouse=True)
    def _reporter(self, make_reporter):
        self.make_reporter = make_reporter
        self.reporter, self.output = make_reporter()

    def teardown_method(self):
        os.chdir(self.old_cwd)
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _run(self, target, extension="*"):
        request = SearchRequest(source="root", target=target, extension=extension)
        coordinator = SearchCoordinator(request, settings=self.settings, reporter=self.reporter)
        return coordinator, coordinator.run()

    def test_report_contents(self):
        _, report = self._run("a")

        assert report.directories == [os.path.join("root", "data")]
        assert set(report.files) == {os.path.join("root", "a.txt"), os.path.join("root", "sub", "a_copy.txt")}
        assert report.total_matches == 3
        assert report.stats['files_matched'] == 2

    def test_output_layout(self):
        self._run("a")
        lines = [line for line in self.output.getvalue().splitlines() if line not in SPINNER_FRAMES]

        assert lines[0] == "Searching for a in root"
        assert f"directory was found: {os.path.join('root', 'data')}" in lines
        assert f"file was found: {os.path.join('root', 'a.txt')}" in lines

        report_start = lines.index("The target directories are:")
        assert lines[report_start + 1] == f"1. {os.path.join('root', 'data')}"
        assert lines[report_start + 2] == "The target files are:"
        assert lines[report_start + 3:report_start + 5] == [
            f"1. {os.path.join('root', 'a.txt')}",
            f"2. {os.path.join('root', 'sub', 'a_copy.txt')}"
        ]
        assert lines[-1] == "Search completed"

    def test_spinner_output_ends_before_report(self):
        self._run("a")
        lines = self.output.getvalue().splitlines()

        report_start = lines.index("The target directories are:")
        assert not any(line in SPINNER_FRAMES for line in lines[report_start:])

    def test_spinner_frames_share_one_line(self):
        """Off a terminal, frames are separated by carriage returns, not newlines."""
        self._run("a")
        newline_lines = self.output.getvalue().split("\n")

        assert not any(line in SPINNER_FRAMES for line in newline_lines)
        assert not any(line.rstrip("\r").endswith(SPINNER_FRAMES) for line in newline_lines)

    def test_spinner_join_has_no_deadline(self):
        """The coordinator waits for the spinner however long it takes to exit."""
        with patch.object(SpinnerWorker, "join", autospec=True, side_effect=threading.Thread.join) as join:
            self._run("a")

        assert join.call_count >= 1
        for call in join.call_args_list:
            assert all(arg is None for arg in call.args[1:])
            assert call.kwargs.get("timeout") is None

    def test_found_lines_precede_report(self):
        self._run("a")
        lines = self.output.getvalue().splitlines()

        report_start = lines.index("The target directories are:")
        found = [i for i, line in enumerate(lines) if " was found: " in line]
        assert found and max(found) < report_start

    def test_no_match(self):
        _, report = self._run("zzz_no_match")
        lines = self.output.getvalue().splitlines()

        assert not report.has_matches()
        assert "the directory zzz_no_match was not found" in lines
        assert "the file zzz_no_match was not found" in lines
        assert lines[-1] == "Search completed"

    def test_results_store_filled(self):
        coordinator, report = self._run("sub")

        assert coordinator.results.directories() == report.directories
        assert coordinator.results.files() == []
        assert coordinator.completed.is_set()

    def test_repeat_searches_agree(self):
        _, first = self._run("a")
        self.reporter, self.output = self.make_reporter()
        _, second = self._run("a")

        assert set(first.directories) == set(second.directories)
        assert set(first.files) == set(second.files)

    def test_extension_filter(self):
        _, report = self._run("o", extension="log")

        assert report.files == [os.path.join("root", "sub2", "other.log")]

    def test_run_only_once(self):
        coordinator, _ = self._run("a")

        with pytest.raises(RuntimeError):
            coordinator.run()

    def test_settings_loaded_from_yaml(self):
        settings_path = Path(self.temp_dir) / "treefind.yaml"
        settings_path.write_text("spinner:\n  label: Scanning\n  interval_ms: 1\n", encoding="utf-8")
        self.settings = load_settings(settings_path)

        _, report = self._run("a")

        assert report.total_matches == 3
        assert "Searching -" not in self.output.getvalue()

    def test_traversal_failure_aborts_report(self):
        with patch.object(FSWalker, "walk", side_effect=RuntimeError("disk on fire")):
            with pytest.raises(WorkerFailedError) as exc_info:
                self._run("a")

        assert exc_info.value.worker_name == "traversal"
        output = self.output.getvalue()
        assert "Search completed" not in output
        assert "The target files are:" not in output
