"""pytest plugin that reports run results to Slack.

Registered through the ``pytest11`` entry point. It only activates when
SLACK_WEBHOOK_URL is set, and only on the controlling process under xdist.
"""

import time

from cat_api_suite.config import ApiConfig
from cat_api_suite.reporting.slack import SlackNotifier
from cat_api_suite.reporting.summary import RunSummary

PLUGIN_NAME = "cat-api-slack-report"


class SlackReportPlugin:
    """Counts test outcomes and hands the summary to a notifier at the end."""

    def __init__(self, notifier: SlackNotifier, workers: int = 1):
        self.notifier = notifier
        self.workers = workers
        self.outcomes: dict[str, str] = {}  # nodeid -> passed / failed / skipped
        self._started = 0.0

    def pytest_sessionstart(self, session):
        self._started = time.monotonic()
        self.notifier.notify_start(self.workers)

    def pytest_runtest_logreport(self, report):
        # A failure in any phase, teardown included, marks the test failed
        if report.failed:
            self.outcomes[report.nodeid] = "failed"
        elif self.outcomes.get(report.nodeid) == "failed":
            return
        elif report.skipped:
            self.outcomes[report.nodeid] = "skipped"
        elif report.when == "call":
            self.outcomes[report.nodeid] = "passed"

    @property
    def summary(self) -> RunSummary:
        outcomes = list(self.outcomes.values())
        return RunSummary(
            passed=outcomes.count("passed"),
            failed=outcomes.count("failed"),
            skipped=outcomes.count("skipped"),
            failed_tests=[nodeid for nodeid, outcome in self.outcomes.items() if outcome == "failed"],
        )

    def pytest_sessionfinish(self, session, exitstatus):
        summary = self.summary
        summary.duration = time.monotonic() - self._started
        self.notifier.notify(summary)


def pytest_configure(config):
    if hasattr(config, "workerinput"):
        return
    settings = ApiConfig.from_env()
    if not settings.slack_webhook_url:
        return
    notifier = SlackNotifier(settings.slack_webhook_url, settings.slack_channel)
    workers = getattr(config.option, "numprocesses", None) or 1
    config.pluginmanager.register(SlackReportPlugin(notifier, workers=workers), PLUGIN_NAME)
