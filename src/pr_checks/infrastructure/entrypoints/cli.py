import argparse
import sys
from pathlib import Path

import structlog

from pr_checks.core.application.checks import CheckContext
from pr_checks.core.application.exceptions import ChecksError
from pr_checks.core.application.reporting import ReportSink
from pr_checks.core.application.services import CheckRunner
from pr_checks.infrastructure.configuration import ChecksSettings
from pr_checks.infrastructure.observability import configure_logging
from pr_checks.infrastructure.reporting import StatusReport
from pr_checks.infrastructure.resolution import Platform, build_default_checks
from pr_checks.infrastructure.vcs import PullRequestSnapshot, SnapshotPullRequestAdapter

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_CHECKS_FAILED = 1
EXIT_RUN_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run pull request checks against a captured snapshot")
    parser.add_argument("snapshot", help="Path to the pull request snapshot (JSON or YAML)")
    parser.add_argument(
        "--platform",
        choices=[platform.value for platform in Platform],
        default=Platform.COMMON.value,
        help="Preset suite to add to the common checks (default: common)",
    )
    parser.add_argument("--output", help="Optional path for the Markdown summary")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = ChecksSettings()
    configure_logging(settings.log_level, settings.log_format)

    snapshot_path = Path(args.snapshot)
    if not snapshot_path.exists():
        print(f"ERROR: file not found: {snapshot_path}", file=sys.stderr)
        return EXIT_RUN_ERROR

    adapter = SnapshotPullRequestAdapter(PullRequestSnapshot.from_file(snapshot_path))
    report = StatusReport()
    runner = CheckRunner(build_default_checks(settings, Platform(args.platform)), ReportSink(report))
    try:
        runner.run(CheckContext(vcs=adapter, pull_request=adapter))
    except ChecksError as exc:
        logger.error("Check run aborted", error=str(exc), **exc.context)
        return EXIT_RUN_ERROR

    summary = report.to_markdown()
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(summary + "\n", encoding="utf-8")
    else:
        print(summary)
    return EXIT_CHECKS_FAILED if report.has_errors else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
