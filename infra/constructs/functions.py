import datetime

from aws_cdk import Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_events as events
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# AWS 公開の Powertools レイヤー（pydantic を含む）
POWERTOOLS_LAYER_ARN = (
    "arn:aws:lambda:{region}:017000801446:layer:"
    "AWSLambdaPowertoolsPythonV3-python313-x86_64:7"
)


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        event_bus: events.EventBus,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._event_bus = event_bus
        self._powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            POWERTOOLS_LAYER_ARN.format(region=Stack.of(self).region),
        )

        self.availability = self._create_function(
            "AvailabilityLambda",
            "services.guide.handlers.availability.lambda_handler",
            "guide-service",
        )
        table.grant_read_data(self.availability)

        self.direct_hire = self._create_function(
            "DirectHireLambda", "services.hire.handlers.direct_hire.lambda_handler"
        )
        self.submit_request = self._create_function(
            "SubmitHireRequestLambda",
            "services.hire.handlers.submit_request.lambda_handler",
        )
        self.approve = self._create_function(
            "ApproveHireLambda", "services.hire.handlers.approve.lambda_handler"
        )
        self.reject = self._create_function(
            "RejectHireLambda", "services.hire.handlers.reject.lambda_handler"
        )
        self.cancel = self._create_function(
            "CancelHireLambda", "services.hire.handlers.cancel.lambda_handler"
        )
        self.complete = self._create_function(
            "CompleteHireLambda", "services.hire.handlers.complete.lambda_handler"
        )
        self.payment_status = self._create_function(
            "PaymentStatusLambda",
            "services.hire.handlers.payment_status.lambda_handler",
        )
        self.create_order = self._create_function(
            "CreateOrderLambda", "services.hire.handlers.create_order.lambda_handler"
        )
        self.update_availability = self._create_function(
            "UpdateAvailabilityLambda",
            "services.hire.handlers.update_availability.lambda_handler",
        )

        for fn in [
            self.direct_hire,
            self.submit_request,
            self.approve,
            self.reject,
            self.cancel,
            self.complete,
            self.payment_status,
            self.create_order,
            self.update_availability,
        ]:
            table.grant_read_write_data(fn)
            event_bus.grant_put_events_to(fn)

        self.list_guide_hires = self._create_function(
            "ListGuideHiresLambda",
            "services.hire.handlers.list_guide_hires.lambda_handler",
        )
        self.list_requester_hires = self._create_function(
            "ListRequesterHiresLambda",
            "services.hire.handlers.list_requester_hires.lambda_handler",
        )
        table.grant_read_data(self.list_guide_hires)
        table.grant_read_data(self.list_requester_hires)

    def _create_function(
        self, id: str, handler: str, service_name: str = "hire-service"
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._powertools_layer],
            environment={
                "TABLE_NAME": self._table.table_name,
                "EVENT_BUS_NAME": self._event_bus.event_bus_name,
                "BASE_CURRENCY": "TJS",
                "MAX_COMMIT_ATTEMPTS": "5",
                "POWERTOOLS_SERVICE_NAME": service_name,
                "POWERTOOLS_LOG_LEVEL": "INFO",
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
