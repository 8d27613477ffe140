"""
Event Resource

Events are delivered to webhook endpoints. ``data.object`` holds the
resource the event is about in whatever shape the API version produced;
``Event.data_object_as`` decodes it into a resource model on demand.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field

from ..schemas.bases import StripeModel, StripeResource

ModelT = TypeVar("ModelT", bound=BaseModel)


class EventData(StripeModel):
    object: Optional[Dict[str, Any]] = Field(None, description="Object the event is about")
    previous_attributes: Optional[Dict[str, Any]] = Field(
        None, description="Prior values of changed attributes, for *.updated events"
    )


class EventRequest(StripeModel):
    id: Optional[str] = None
    idempotency_key: Optional[str] = None


class Event(StripeResource):
    OBJECT_NAME = "event"

    account: Optional[str] = None
    api_version: Optional[str] = None
    created: Optional[datetime] = None
    data: Optional[EventData] = None
    livemode: Optional[bool] = None
    pending_webhooks: Optional[int] = None
    request: Optional[EventRequest] = None
    type: Optional[str] = Field(None, description="Event type, e.g. invoice.paid")

    def data_object_as(self, model_type: Type[ModelT]) -> ModelT:
        """
        Decode ``data.object`` as ``model_type``.

        Raises:
            ValueError: If the event carries no ``data.object``.
        """
        if self.data is None or self.data.object is None:
            raise ValueError(f"Event {self.id} has no data.object")
        return model_type.model_validate(self.data.object)
