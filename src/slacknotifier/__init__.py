"""
Slack Notifier - Error Notifications for Slack Webhooks

Formats structured error notifications into Slack Block Kit messages
and delivers them to an incoming-webhook destination.
"""

__version__ = "0.1.0"
__author__ = "Slack Notifier Team"
