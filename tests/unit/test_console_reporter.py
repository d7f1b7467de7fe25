"""Tests for console reporting of file results."""

import io
from pathlib import Path

from rich.console import Console

from parallint.adapters.formatters.console_reporter import ConsoleReporter
from parallint.domain.models.lint import Diagnostic, FileResult, LintRunSummary, Severity


class TestEmit:

    def test_clean_file_prints_pass_line(self, reporter, result_factory):
        reporter.emit(result_factory(Path("/p/a.js")))

        assert reporter.stdout == "/p/a.js pass\n"
        assert reporter.stderr == ""

    def test_error_lines_go_to_stderr(self, reporter, result_factory):
        reporter.emit(result_factory(Path("/p/b.js"), errors=1))

        assert reporter.stdout == ""
        assert reporter.stderr.splitlines()[:2] == ["/p/b.js", "1:1 error error 0 no-undef"]

    def test_warnings_printed_when_not_quiet(self, reporter, result_factory):
        reporter.emit(result_factory(Path("/p/c.js"), warnings=1))

        assert "1:5 warning warning 0 no-unused-vars" in reporter.stderr

    def test_quiet_suppresses_pass_line(self, reporter, result_factory):
        reporter.emit(result_factory(Path("/p/a.js")), quiet=True)

        assert reporter.stdout == ""
        assert reporter.stderr == ""

    def test_quiet_suppresses_warning_only_file(self, reporter, result_factory):
        reporter.emit(result_factory(Path("/p/c.js"), warnings=2), quiet=True)

        assert reporter.stderr == ""

    def test_quiet_keeps_errors_and_drops_warnings(self, reporter, result_factory):
        reporter.emit(result_factory(Path("/p/b.js"), errors=1, warnings=1), quiet=True)

        assert "error 0 no-undef" in reporter.stderr
        assert "warning" not in reporter.stderr

    def test_missing_rule_id_is_left_blank(self, reporter):
        result = FileResult(
            file_path=Path("/p/broken.js"),
            diagnostics=[Diagnostic(Severity.ERROR, None, "Parsing error: Unexpected token", 9, 1)],
            error_count=1,
        )

        reporter.emit(result)

        assert "9:1 error Parsing error: Unexpected token\n" in reporter.stderr

    def test_markup_in_messages_is_not_interpreted(self, reporter):
        result = FileResult(
            file_path=Path("/p/[weird].js"),
            diagnostics=[Diagnostic(Severity.ERROR, "quotes", "Use [bold] quotes", 1, 1)],
            error_count=1,
        )

        reporter.emit(result)

        assert "/p/[weird].js" in reporter.stderr
        assert "Use [bold] quotes quotes" in reporter.stderr


class TestRunMessages:

    def test_no_files(self, reporter):
        reporter.no_files()

        assert reporter.stdout == "No files to lint\n"

    def test_worker_failure_names_the_chunk(self, reporter):
        reporter.worker_failed(3, "RuntimeError: boom")

        assert reporter.stderr == "Worker 3 error: RuntimeError: boom\n"

    def test_summary_reports_missing_coverage(self, reporter):
        summary = LintRunSummary(
            status=0,
            files_total=10,
            files_linted=7,
            workers_spawned=4,
            workers_failed=1,
            failed_chunks=[2],
        )

        reporter.summary(summary)

        assert "1 of 4 workers failed; 3 file(s) were not linted" in reporter.stderr
        assert "7 file(s) linted" in reporter.stdout

    def test_quiet_summary_still_reports_failures(self, reporter):
        summary = LintRunSummary(status=0, files_total=2, files_linted=1, workers_spawned=2, workers_failed=1)

        reporter.summary(summary, quiet=True)

        assert reporter.stdout == ""
        assert "workers failed" in reporter.stderr


class TestLineWrapping:

    def test_long_lines_are_not_folded(self, result_factory, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)
        out, err = io.StringIO(), io.StringIO()
        reporter = ConsoleReporter(
            console=Console(file=out, color_system=None),
            error_console=Console(file=err, color_system=None),
        )
        clean = Path("/home/user/projects/frontend/packages/dashboard/src/components/widgets/DataGrid.js")
        broken = Path("/home/user/projects/frontend/packages/dashboard/src/components/widgets/DataTable.js")
        result = FileResult(
            file_path=broken,
            diagnostics=[
                Diagnostic(
                    Severity.ERROR,
                    "@typescript-eslint/no-unsafe-member-access",
                    "Unsafe member access .rows on an `any` value in the table model.",
                    line=120,
                    column=17,
                ),
            ],
            error_count=1,
        )

        reporter.emit(result_factory(clean))
        reporter.emit(result)

        assert out.getvalue() == f"{clean} pass\n"
        assert err.getvalue().splitlines()[:2] == [
            str(broken),
            "120:17 error Unsafe member access .rows on an `any` value in the table model. "
            "@typescript-eslint/no-unsafe-member-access",
        ]
