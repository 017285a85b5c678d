"""
Slack Notifier - Slack Webhook Delivery
"""

import asyncio
from typing import Optional

import httpx
import structlog

from slacknotifier.alerting.formatter import render_payload
from slacknotifier.core.config import settings
from slacknotifier.core.exceptions import (
    DeliveryCancelledError,
    DeliveryError,
    TransportError,
)
from slacknotifier.core.schemas import Notification

logger = structlog.get_logger()

HEADERS = {"Content-type": "application/json"}


def _host_of(destination: str) -> Optional[str]:
    try:
        return httpx.URL(destination).host or None
    except httpx.InvalidURL:
        return None


class SlackNotifier:
    """
    Slack incoming-webhook sender.
    
    Each call to :meth:`send` issues exactly one POST. Any HTTP response
    counts as delivered; only transport failures are raised. Pass ``client``
    to share one ``httpx.AsyncClient`` across concurrent sends, otherwise a
    client is opened per call.
    """
    
    def __init__(
        self,
        webhook_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.webhook_url = webhook_url or settings.SLACK_WEBHOOK_URL
        self.timeout = timeout if timeout is not None else settings.SLACK_TIMEOUT_SECONDS
        self.client = client
    
    async def send(self, payload: str, destination: Optional[str] = None) -> None:
        """
        POST a pre-rendered payload to the destination.
        
        Args:
            payload: JSON request body, sent verbatim
            destination: Webhook URL; defaults to the configured webhook
            
        Raises:
            DeliveryError: If no destination is available
            TransportError: If the request could not be completed
            DeliveryCancelledError: If the transport aborted the request
            asyncio.CancelledError: If the calling task was cancelled
        """
        destination = destination or self.webhook_url
        if not destination:
            logger.warning("Slack webhook URL not configured")
            raise DeliveryError(
                "No destination given and SLACK_WEBHOOK_URL is not set",
                code="MISSING_DESTINATION",
            )
        
        host = _host_of(destination)
        
        try:
            if self.client is not None:
                response = await self._post(self.client, payload, destination)
            else:
                async with httpx.AsyncClient(timeout=self.timeout or None) as client:
                    response = await self._post(client, payload, destination)
        except asyncio.CancelledError as e:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                logger.warning("Slack delivery cancelled", host=host)
                raise
            # Cancelled by the transport, not by our caller
            logger.error("Slack request aborted", host=host)
            raise DeliveryCancelledError(host=host) from e
        except httpx.TimeoutException as e:
            logger.error("Slack request timed out", host=host, timeout=self.timeout)
            raise TransportError(
                f"Slack request timed out: {e}", reason=type(e).__name__, host=host
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error("Slack request failed", host=host, error=str(e))
            raise TransportError(
                f"Slack request failed: {e}", reason=type(e).__name__, host=host
            ) from e
        
        logger.info(
            "Slack message delivered",
            host=host,
            status_code=response.status_code,
        )
    
    async def send_notification(
        self,
        notification: Notification,
        destination: Optional[str] = None,
    ) -> None:
        """Format a notification and send it."""
        await self.send(render_payload(notification), destination=destination)
    
    async def _post(
        self, client: httpx.AsyncClient, payload: str, destination: str
    ) -> httpx.Response:
        return await client.post(
            destination,
            headers=HEADERS,
            content=payload.encode("utf-8"),
        )


async def send_notification(
    notification: Notification,
    destination: Optional[str] = None,
) -> None:
    """
    Convenience function to format and send a single notification.
    
    Args:
        notification: The notification to report
        destination: Optional webhook URL override
    """
    notifier = SlackNotifier(webhook_url=destination)
    await notifier.send_notification(notification)
