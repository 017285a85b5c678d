"""Alerting module - Slack message formatting and delivery."""

from slacknotifier.alerting.formatter import (
    build_blocks,
    render_context_entry,
    render_message,
    render_payload,
)
from slacknotifier.alerting.slack import SlackNotifier, send_notification

__all__ = [
    "SlackNotifier",
    "build_blocks",
    "render_context_entry",
    "render_message",
    "render_payload",
    "send_notification",
]
