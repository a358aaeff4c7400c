from aws_cdk import aws_events as events
from constructs import Construct


class Messaging(Construct):
    """雇用イベント通知用の EventBridge バス"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.event_bus = events.EventBus(
            self, "HireEventBus", event_bus_name="guide-hire-events"
        )
