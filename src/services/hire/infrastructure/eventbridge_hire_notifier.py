import json
import os

import boto3

from services.hire.domain.event import HireEvent
from services.hire.domain.gateway import HireNotifier

SOURCE = "guide-hire"
# PutEvents の1リクエストあたりの上限
_BATCH_SIZE = 10


class EventBridgeHireNotifier(HireNotifier):
    """雇用イベントを EventBridge に送る"""

    def __init__(self, event_bus_name: str | None = None) -> None:
        self.event_bus_name = event_bus_name or os.getenv("EVENT_BUS_NAME", "default")
        self.client = boto3.client("events")

    def publish(self, events: list[HireEvent]) -> None:
        entries = [
            {
                "Source": SOURCE,
                "DetailType": event.name,
                "Detail": json.dumps(event.to_detail()),
                "EventBusName": self.event_bus_name,
            }
            for event in events
        ]
        for start in range(0, len(entries), _BATCH_SIZE):
            self.client.put_events(Entries=entries[start : start + _BATCH_SIZE])
