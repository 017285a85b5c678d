"""
Slack Notifier - Command Line Interface

Usage:
    # Send a notification read from a file
    slack-notify notification.json --destination https://hooks.slack.com/services/...

    # Read from stdin and use SLACK_WEBHOOK_URL as the destination
    cat notification.json | slack-notify

    # Print the webhook payload without sending it
    slack-notify notification.json --dry-run
"""

import argparse
import asyncio
import sys
from typing import List, Optional

import structlog

from slacknotifier import __version__
from slacknotifier.alerting.formatter import render_payload
from slacknotifier.alerting.slack import SlackNotifier
from slacknotifier.core.config import settings
from slacknotifier.core.exceptions import DeliveryError, InvalidNotificationError
from slacknotifier.core.logging import setup_logging
from slacknotifier.core.schemas import load_notification

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_DELIVERY_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slack-notify",
        description="Format an error notification and post it to a Slack webhook",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Notification JSON file ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "--destination",
        "-d",
        help="Webhook URL (default: SLACK_WEBHOOK_URL)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: SLACK_TIMEOUT_SECONDS)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the payload instead of sending it",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_input(path: str) -> str:
    """Read raw notification JSON from a path or stdin."""
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    setup_logging()
    
    try:
        raw = read_input(args.file)
    except OSError as e:
        logger.error("Could not read notification", file=args.file, error=str(e))
        return EXIT_USAGE
    
    try:
        notification = load_notification(raw)
    except InvalidNotificationError as e:
        logger.error("Invalid notification", error=e.message, details=e.details)
        return EXIT_USAGE
    
    payload = render_payload(notification)
    
    if args.dry_run:
        sys.stdout.write(payload + "\n")
        return EXIT_OK
    
    destination = args.destination or settings.SLACK_WEBHOOK_URL
    if not destination:
        logger.error("No destination: pass --destination or set SLACK_WEBHOOK_URL")
        return EXIT_USAGE
    
    notifier = SlackNotifier(webhook_url=destination, timeout=args.timeout)
    try:
        asyncio.run(notifier.send(payload))
    except DeliveryError as e:
        logger.error("Delivery failed", code=e.code, error=e.message)
        return EXIT_DELIVERY_FAILED
    
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
