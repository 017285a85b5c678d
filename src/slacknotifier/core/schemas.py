"""
Slack Notifier - Core Schemas

Pydantic models for the notification data contract.
"""

from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from slacknotifier.core.exceptions import InvalidNotificationError


class ContextEntry(BaseModel):
    """A labeled key/value annotation attached to a notification."""
    model_config = ConfigDict(frozen=True)
    
    label: str = Field(..., description="Label shown in backticks, e.g. 'Customer ID'")
    value: str = Field(..., description="Value rendered after the label")


class Notification(BaseModel):
    """
    One event or error to report.
    
    Instances are frozen; the context sequence is stored as a tuple so the
    rendered output cannot change once the notification is built.
    """
    model_config = ConfigDict(frozen=True)
    
    message: str = Field(..., description="Human-readable issue description")
    timestamp: str = Field(..., description="Caller-formatted timestamp, echoed verbatim")
    context: Tuple[ContextEntry, ...] = Field(
        default_factory=tuple, description="Ordered context annotations"
    )


def load_notification(data: Union[str, bytes, Dict[str, Any]]) -> Notification:
    """
    Build a Notification from a JSON document or an already-decoded mapping.
    
    Raises:
        InvalidNotificationError: If the input is not valid JSON or does not
            match the notification contract.
    """
    try:
        if isinstance(data, (str, bytes)):
            return Notification.model_validate_json(data)
        return Notification.model_validate(data)
    except PydanticValidationError as e:
        errors = [
            {
                "type": err["type"],
                "message": err["msg"],
                "location": ".".join(str(part) for part in err["loc"]),
            }
            for err in e.errors()
        ]
        raise InvalidNotificationError(
            f"Invalid notification: {e.error_count()} error(s)",
            details={"errors": errors},
        ) from e
