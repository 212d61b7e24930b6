"""
Tests for CLI functionality (end-to-end).

This module runs the command-line interface against small Java trees and
checks exit codes, the DOT text on stdout and the written SVG file.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from coupling_visualizer.cli import main


class TestCLI:
    """Test CLI functionality (end-to-end)."""

    @pytest.fixture(autouse=True)
    def source_tree(self, tmp_path):
        """Create a small Java tree and an output directory."""
        self.src = tmp_path / "src"
        self.out = tmp_path / "out"
        (self.src / "a").mkdir(parents=True)
        (self.src / "b").mkdir(parents=True)
        (self.src / "a" / "A.java").write_text(
            "package a;\nimport b.B;\nimport b.B2;\nimport java.util.List;\nclass A {}\n"
        )
        (self.src / "b" / "B.java").write_text(
            "package b;\nimport a.A;\nclass B {}\n"
        )

    def run_cli(self, *args):
        """Run CLI command."""
        env = dict(os.environ)
        env["PYTHONIOENCODING"] = "utf-8"
        cmd = [sys.executable, "-m", "coupling_visualizer.cli"] + list(args)
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=Path.cwd(),
            env=env,
        )

    def test_basic_run(self):
        """Test a full run with an exclusion list."""
        result = self.run_cli(str(self.src), str(self.out), "java,javax", "--no-color")

        assert result.returncode == 0
        assert "Analysis complete" in result.stderr
        assert "digraph G {" in result.stdout
        assert "a -> b;" in result.stdout
        assert "java_util" not in result.stdout

        svgs = list(self.out.glob("graph_circular_layout_*.svg"))
        assert len(svgs) == 1
        assert 'stroke-width="2"' in svgs[0].read_text(encoding="utf-8")

    def test_stdout_is_only_dot(self):
        """Test that redirected stdout is a complete DOT document."""
        result = self.run_cli(str(self.src), str(self.out), "java", "--no-color")

        assert result.returncode == 0
        assert result.stdout.startswith("digraph G {\n")
        assert result.stdout.rstrip().endswith("}")
        assert "Analysis complete" not in result.stdout
        assert "Exported to" not in result.stdout

    def test_empty_exclusions_keep_everything(self):
        result = self.run_cli(str(self.src), str(self.out), "", "--no-color")

        assert result.returncode == 0
        assert 'java_util [ label="java.util" ];' in result.stdout

    def test_title_is_part_of_file_name(self):
        result = self.run_cli(str(self.src), str(self.out), "java", "My Graph", "--no-color")

        assert result.returncode == 0
        svgs = list(self.out.glob("graph_circular_layout_My_Graph_*.svg"))
        assert len(svgs) == 1
        assert "My Graph" in svgs[0].read_text(encoding="utf-8")

    def test_summary(self):
        result = self.run_cli(str(self.src), str(self.out), "java", "--summary", "--no-color")

        assert result.returncode == 0
        assert "Imports" in result.stderr
        assert "Package coupling" in result.stderr
        assert result.stdout.startswith("digraph G {")

    def test_verbose_lists_edges(self):
        result = self.run_cli(str(self.src), str(self.out), "java", "--verbose", "--no-color")

        assert result.returncode == 0
        assert "Adding edge from a to b" in result.stderr
        assert "Writing svg export to" in result.stderr
        assert "Adding edge" not in result.stdout

    def test_missing_arguments(self):
        """Test that missing arguments print usage and exit with 1."""
        result = self.run_cli(str(self.src))

        assert result.returncode == 1
        assert "usage" in result.stderr.lower()
        assert not self.out.exists()

    def test_no_arguments(self):
        result = self.run_cli()

        assert result.returncode == 1
        assert "usage" in result.stderr.lower()

    def test_missing_source_root(self):
        result = self.run_cli(str(self.src / "missing"), str(self.out), "java", "--no-color")

        assert result.returncode == 1
        assert "not a directory" in result.stderr

    def test_broken_file_is_reported(self):
        (self.src / "a" / "Broken.java").write_text("class {")

        result = self.run_cli(str(self.src), str(self.out), "java", "--no-color")

        assert result.returncode == 0
        assert "Broken.java" in result.stderr
        assert "a -> b;" in result.stdout

    def test_broken_file_fails_in_strict_mode(self):
        (self.src / "a" / "Broken.java").write_text("class {")

        result = self.run_cli(str(self.src), str(self.out), "java", "--strict", "--no-color")

        assert result.returncode == 1
        assert "Broken.java" in result.stderr

    def test_unwritable_output(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        result = self.run_cli(str(self.src), str(blocker), "java", "--no-color")

        assert result.returncode == 1
        assert "Cannot write svg export" in result.stderr


class TestMain:
    """In-process tests for main()."""

    def test_missing_arguments_exit_code(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "usage" in capsys.readouterr().err.lower()

    def test_run(self, tmp_path, capsys):
        src = tmp_path / "src" / "a"
        src.mkdir(parents=True)
        (src / "A.java").write_text("package a;\nimport b.B;\nclass A {}\n")

        main([str(tmp_path / "src"), str(tmp_path / "out"), "", "--no-color"])

        out = capsys.readouterr().out
        assert 'a [ label="a" ];' in out
        assert len(list((tmp_path / "out").glob("*.svg"))) == 1
