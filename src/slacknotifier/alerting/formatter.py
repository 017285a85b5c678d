"""
Slack Notifier - Message Formatting

Turns a Notification into Slack mrkdwn text and then into the JSON body
of an incoming-webhook request.
"""

import json
from typing import Any, Dict, List

from slacknotifier.core.schemas import ContextEntry, Notification


def render_context_entry(entry: ContextEntry) -> str:
    """Render one context entry as a quoted ``>`label`: value`` line."""
    return f">`{entry.label}`: {entry.value}\n"


def render_message(notification: Notification) -> str:
    """
    Render the mrkdwn text for a notification.
    
    The text holds an ``Issue`` header, a ``Timestamp`` line and one line per
    context entry in the order given. Labels and values are not escaped.
    """
    message = (
        f"`Issue`: {notification.message}\n"
        f">`Timestamp`: _{notification.timestamp}_\n"
    )
    return message + "".join(render_context_entry(ctx) for ctx in notification.context)


def build_blocks(text: str) -> List[Dict[str, Any]]:
    """Build the Block Kit blocks carrying a single mrkdwn section."""
    return [
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": text},
        }
    ]


def render_payload(notification: Notification) -> str:
    """
    Render the webhook request body for a notification.
    
    Keys are sorted and separators are compact so the output is byte-stable,
    e.g. ``{"blocks":[{"text":{"text":"...","type":"mrkdwn"},"type":"section"}]}``.
    """
    payload = {"blocks": build_blocks(render_message(notification))}
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
