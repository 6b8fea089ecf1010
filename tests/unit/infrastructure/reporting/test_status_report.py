from pr_checks.core.application.reporting import ReportSink
from pr_checks.core.domain.quality import ReportSeverity
from pr_checks.infrastructure.reporting import StatusReport, build_status_summary


class TestStatusReport:
    def test_collects_per_severity(self) -> None:
        report = StatusReport()
        sink = ReportSink(report)

        sink.report("e1", ReportSeverity.ERROR)
        sink.report("w1", ReportSeverity.WARNING)
        sink.report("m1", ReportSeverity.MESSAGE)
        sink.report("ignored", ReportSeverity.NONE)

        assert (report.errors, report.warnings, report.messages) == (["e1"], ["w1"], ["m1"])
        assert report.has_errors

    def test_warnings_alone_do_not_fail(self) -> None:
        report = StatusReport()
        report.warn("careful")

        assert not report.has_errors
        assert report.to_markdown().startswith("## PR checks: PASSED\n")


class TestBuildStatusSummary:
    def test_no_issues(self) -> None:
        assert build_status_summary([], [], []) == "## PR checks: PASSED\n\n> No issues found."

    def test_sections_in_severity_order(self) -> None:
        summary = build_status_summary(["broken"], [], ["fyi one", "fyi two\n"])

        assert summary == (
            "## PR checks: FAILED\n"
            "\n"
            "### Errors (1)\n\nbroken\n"
            "\n"
            "### Messages (2)\n\nfyi one\n\nfyi two\n"
        )
