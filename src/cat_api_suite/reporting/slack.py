"""Slack incoming-webhook notifier.

Delivery problems are written to the sink and never raised: a broken
webhook must not change the outcome of the test run.
"""

import json

import requests

from cat_api_suite.client.facade import Sink, echo_sink
from cat_api_suite.errors import NotificationError
from cat_api_suite.reporting.summary import (
    RunSummary,
    build_failed_message,
    build_start_message,
    build_summary_message,
)

DEFAULT_TIMEOUT = 10.0


class SlackNotifier:
    """Posts run summaries to a Slack webhook; a no-op without a webhook URL."""

    def __init__(
        self,
        webhook_url: str,
        channel: str = "#test-results",
        session: requests.Session | None = None,
        sink: Sink | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.webhook_url = webhook_url
        self.channel = channel
        self.session = session or requests.Session()
        self.sink = sink or echo_sink
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    def notify_start(self, workers: int = 1) -> bool:
        """Announce a run. Returns whether the message was delivered."""
        if not self.enabled:
            return False
        try:
            self._send(build_start_message(self.channel, workers))
        except (requests.RequestException, NotificationError) as e:
            self.sink(f"Failed to send test start notification: {e}")
            return False
        return True

    def notify(self, summary: RunSummary) -> bool:
        """Send the summary and, when tests failed, the failure list."""
        if not self.enabled:
            return False
        try:
            self._send(build_summary_message(summary, self.channel))
            failed = build_failed_message(summary, self.channel)
            if failed is not None:
                self._send(failed)
        except (requests.RequestException, NotificationError) as e:
            self.sink(f"Failed to send Slack notification: {e}")
            return False
        self.sink("Test results sent to Slack")
        return True

    def _send(self, message: dict) -> None:
        response = self.session.post(
            self.webhook_url,
            data=json.dumps(message),
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        if not response.ok:
            raise NotificationError(
                f"Slack API error: {response.status_code} {response.reason}: {response.text[:200]}"
            )
