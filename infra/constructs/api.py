from aws_cdk import aws_apigateway as apigw
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct"""

    def __init__(self, scope: Construct, id: str, functions: Functions) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "GuideHireRestApi",
            rest_api_name="Guide Hire API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )
        root = self.rest_api.root

        # /guides/{guide_id}
        guide = root.add_resource("guides").add_resource("{guide_id}")
        availability = guide.add_resource("availability")
        availability.add_method("GET", apigw.LambdaIntegration(functions.availability))
        availability.add_method(
            "PUT", apigw.LambdaIntegration(functions.update_availability)
        )
        guide_hires = guide.add_resource("hires")
        guide_hires.add_method("POST", apigw.LambdaIntegration(functions.direct_hire))
        guide_hires.add_method(
            "GET", apigw.LambdaIntegration(functions.list_guide_hires)
        )

        # /requesters/{requester_id}/hires
        root.add_resource("requesters").add_resource("{requester_id}").add_resource(
            "hires"
        ).add_method("GET", apigw.LambdaIntegration(functions.list_requester_hires))

        # /hire-requests
        hire_requests = root.add_resource("hire-requests")
        hire_requests.add_method(
            "POST", apigw.LambdaIntegration(functions.submit_request)
        )

        hire_request = hire_requests.add_resource("{hire_id}")
        for path, fn in [
            ("approve", functions.approve),
            ("reject", functions.reject),
            ("cancel", functions.cancel),
            ("complete", functions.complete),
            ("payment-status", functions.payment_status),
            ("order", functions.create_order),
        ]:
            hire_request.add_resource(path).add_method(
                "POST", apigw.LambdaIntegration(fn)
            )
