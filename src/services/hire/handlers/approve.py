from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.hire.applications.approve_hire_request import ApproveHireRequestService
from services.hire.domain.value_object import HireId
from services.hire.handlers import dependencies
from services.hire.handlers.api_event import json_body, path_parameter
from services.hire.handlers.error_response import handle_errors
from services.hire.handlers.request_models import DecisionRequest
from services.hire.handlers.response_models import hire_response
from services.shared.utils import api_response

logger = Logger()

service = ApproveHireRequestService(
    repository=dependencies.hire_repository,
    transaction=dependencies.transaction,
    order_service=dependencies.order_service,
    notifier=dependencies.notifier,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """依頼承認 Lambda Handler（POST /hire-requests/{hire_id}/approve）"""
    hire_id = HireId(value=path_parameter(event, "hire_id"))
    request = DecisionRequest.model_validate(json_body(event))
    logger.info("Approving hire request", extra={"hire_id": str(hire_id)})

    result = service.approve(hire_id, admin_notes=request.admin_notes)
    return api_response(200, hire_response(result))
