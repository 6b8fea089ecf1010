"""Runs a configured suite of checks against one pull request."""

from collections.abc import Sequence

import structlog
from structlog.contextvars import bind_contextvars, unbind_contextvars

from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext
from pr_checks.core.application.exceptions import CheckExecutionError, ChecksError
from pr_checks.core.application.reporting import ReportSink
from pr_checks.core.domain.quality import CheckOutcome

logger = structlog.get_logger()


class CheckRunner:
    """Evaluate -> Publish, one check at a time, in configured order."""

    def __init__(self, checks: Sequence[BaseCheck], sink: ReportSink) -> None:
        self._checks = list(checks)
        self._sink = sink

    def run(self, context: CheckContext) -> list[CheckOutcome]:
        logger.info("Check run started", checks=len(self._checks))
        published: list[CheckOutcome] = []
        for check in self._checks:
            outcomes = self._evaluate(check, context)
            for outcome in outcomes:
                self._sink.publish(outcome)
            published.extend(outcomes)
        logger.info("Check run completed", outcomes=len(published))
        return published

    def _evaluate(self, check: BaseCheck, context: CheckContext) -> list[CheckOutcome]:
        bind_contextvars(check_name=check.name)
        try:
            outcomes = check.evaluate(context)
        except ChecksError:
            raise
        except Exception as exc:
            logger.error("Check failed unexpectedly", error=str(exc))
            raise CheckExecutionError(str(exc), context={"check": check.name}) from exc
        finally:
            unbind_contextvars("check_name")
        logger.debug("Check evaluated", outcomes=len(outcomes))
        return outcomes
