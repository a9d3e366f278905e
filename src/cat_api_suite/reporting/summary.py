"""Run summary model and the Slack message payloads built from it."""

import math
import time
from datetime import datetime

from pydantic import BaseModel, computed_field

USERNAME = "Cat API Test Reporter"

GREEN = "#36a64f"
YELLOW = "#ffc107"
ORANGE = "#ff9800"
RED = "#f44336"
BLUE = "#0099ff"


class RunSummary(BaseModel):
    """Outcome counts of one test run."""

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    duration: float = 0.0  # seconds
    failed_tests: list[str] = []

    @computed_field
    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped

    @computed_field
    @property
    def pass_rate(self) -> int:
        """Percentage of passed tests, rounded half up; 0 for an empty run."""
        if not self.total:
            return 0
        return math.floor(self.passed / self.total * 100 + 0.5)


def format_duration(seconds: float) -> str:
    whole = int(seconds)
    minutes = whole // 60
    if minutes > 0:
        return f"{minutes}m {whole % 60}s"
    return f"{whole}s"


def color_for_pass_rate(pass_rate: int) -> str:
    if pass_rate == 100:
        return GREEN
    if pass_rate >= 80:
        return YELLOW
    if pass_rate >= 50:
        return ORANGE
    return RED


def _status_emoji(pass_rate: int) -> str:
    if pass_rate == 100:
        return "✅"
    if pass_rate >= 80:
        return "⚠️"
    return "❌"


def _field(title: str, value: str, short: bool = True) -> dict:
    return {"title": title, "value": value, "short": short}


def build_start_message(channel: str, workers: int = 1) -> dict:
    return {
        "channel": channel,
        "username": USERNAME,
        "icon_emoji": ":rocket:",
        "attachments": [
            {
                "fallback": "🚀 The Cat API automation test run started",
                "color": BLUE,
                "title": "🚀 The Cat API Automation Test Run Started",
                "fields": [
                    _field("Worker Threads", str(workers)),
                    _field("Timestamp", datetime.now().strftime("%Y-%m-%d %H:%M:%S")),
                ],
                "ts": int(time.time()),
            }
        ],
    }


def build_summary_message(summary: RunSummary, channel: str) -> dict:
    rate = summary.pass_rate
    return {
        "channel": channel,
        "username": USERNAME,
        "icon_emoji": ":robot_face:",
        "attachments": [
            {
                "fallback": f"Test Results: {summary.passed}/{summary.total} passed",
                "color": color_for_pass_rate(rate),
                "title": f"{_status_emoji(rate)} Test Results Summary",
                "fields": [
                    _field("Total Tests", str(summary.total)),
                    _field("✅ Passed", f"{summary.passed} ✓"),
                    _field("❌ Failed", f"{summary.failed} ✗"),
                    _field("Skipped", str(summary.skipped)),
                    _field("Pass Rate", f"{rate}%"),
                    _field("Duration", format_duration(summary.duration)),
                ],
                "ts": int(time.time()),
            }
        ],
    }


def build_failed_message(summary: RunSummary, channel: str) -> dict | None:
    """Numbered list of failing tests, or None when nothing failed."""
    if not summary.failed_tests:
        return None

    text = "\n\n".join(f"{i}. *{name}*" for i, name in enumerate(summary.failed_tests, start=1))
    count = len(summary.failed_tests)
    return {
        "channel": channel,
        "username": USERNAME,
        "icon_emoji": ":robot_face:",
        "attachments": [
            {
                "fallback": f"{count} test(s) failed",
                "color": RED,
                "title": f"❌ Failed Tests ({count})",
                "text": text,
                "ts": int(time.time()),
            }
        ],
    }
