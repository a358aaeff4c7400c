from aws_cdk import Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Messaging


class GuideHireStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        messaging = Messaging(self, "Messaging")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            event_bus=messaging.event_bus,
        )

        Api(self, "Api", functions=fns)
