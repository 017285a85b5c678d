"""
Slack Notifier - Test Fixtures
"""

import os
from typing import Any, Dict, List

import pytest

# Set test environment
os.environ["APP_ENV"] = "test"
os.environ["SLACK_WEBHOOK_URL"] = ""

from slacknotifier.core.schemas import ContextEntry, Notification


# =============================================================================
# Scenario Fixtures
# =============================================================================

SCENARIOS: List[Dict[str, Any]] = [
    {
        "notification": Notification(
            message="External API Error: Could not find API Keys",
            timestamp="2024-01-19 19:26:20.022233",
            context=[ContextEntry(label="Customer ID", value="0")],
        ),
        "expected_context": [">`Customer ID`: 0\n"],
        "expected_message": (
            "`Issue`: External API Error: Could not find API Keys\n"
            ">`Timestamp`: _2024-01-19 19:26:20.022233_\n"
            ">`Customer ID`: 0\n"
        ),
        "expected_payload": (
            '{"blocks":[{"text":{"text":"`Issue`: External API Error: Could not find API Keys\\n'
            '>`Timestamp`: _2024-01-19 19:26:20.022233_\\n'
            '>`Customer ID`: 0\\n","type":"mrkdwn"},"type":"section"}]}'
        ),
    },
    {
        "notification": Notification(
            message="Payment Proccessing Error: Failed to capture transaction",
            timestamp="2024-01-18 21:06:05.778504",
            context=[
                ContextEntry(label="Customer ID", value="0"),
                ContextEntry(label="Transaction ID", value="0d738c014b6a00ddb68edafc"),
            ],
        ),
        "expected_context": [
            ">`Customer ID`: 0\n",
            ">`Transaction ID`: 0d738c014b6a00ddb68edafc\n",
        ],
        "expected_message": (
            "`Issue`: Payment Proccessing Error: Failed to capture transaction\n"
            ">`Timestamp`: _2024-01-18 21:06:05.778504_\n"
            ">`Customer ID`: 0\n"
            ">`Transaction ID`: 0d738c014b6a00ddb68edafc\n"
        ),
        "expected_payload": (
            '{"blocks":[{"text":{"text":"`Issue`: Payment Proccessing Error: Failed to capture transaction\\n'
            '>`Timestamp`: _2024-01-18 21:06:05.778504_\\n'
            '>`Customer ID`: 0\\n'
            '>`Transaction ID`: 0d738c014b6a00ddb68edafc\\n","type":"mrkdwn"},"type":"section"}]}'
        ),
    },
    {
        "notification": Notification(
            message="Payment Link Error: Missing Order ID for level 3 data",
            timestamp="2024-01-18 16:41:04.563205",
            context=[
                ContextEntry(label="Customer ID", value="0"),
                ContextEntry(label="Payment Link", value="7ea9ab4001d87d81207be05"),
            ],
        ),
        "expected_context": [
            ">`Customer ID`: 0\n",
            ">`Payment Link`: 7ea9ab4001d87d81207be05\n",
        ],
        "expected_message": (
            "`Issue`: Payment Link Error: Missing Order ID for level 3 data\n"
            ">`Timestamp`: _2024-01-18 16:41:04.563205_\n"
            ">`Customer ID`: 0\n"
            ">`Payment Link`: 7ea9ab4001d87d81207be05\n"
        ),
        "expected_payload": (
            '{"blocks":[{"text":{"text":"`Issue`: Payment Link Error: Missing Order ID for level 3 data\\n'
            '>`Timestamp`: _2024-01-18 16:41:04.563205_\\n'
            '>`Customer ID`: 0\\n'
            '>`Payment Link`: 7ea9ab4001d87d81207be05\\n","type":"mrkdwn"},"type":"section"}]}'
        ),
    },
]


@pytest.fixture(params=SCENARIOS, ids=["one_entry", "transaction", "payment_link"])
def scenario(request) -> Dict[str, Any]:
    """Each reference scenario in turn."""
    return request.param


@pytest.fixture
def sample_notification() -> Notification:
    """A notification with two context entries."""
    return SCENARIOS[1]["notification"]


@pytest.fixture
def sample_notification_json() -> str:
    """Raw JSON for a notification, as a caller would receive it."""
    return """
{
    "message": "External API Error: Could not find API Keys",
    "timestamp": "2024-01-19 19:26:20.022233",
    "context": [
        {"label": "Customer ID", "value": "0"}
    ]
}
"""


@pytest.fixture
def webhook_url() -> str:
    """A fake Slack webhook destination."""
    return "https://hooks.slack.com/services/T000/B000/XXXXSECRET"
