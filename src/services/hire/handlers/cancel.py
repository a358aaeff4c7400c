from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.hire.applications.reject_or_cancel_hire_request import (
    RejectOrCancelHireRequestService,
)
from services.hire.domain.value_object import HireId
from services.hire.handlers import dependencies
from services.hire.handlers.api_event import json_body, path_parameter
from services.hire.handlers.error_response import handle_errors
from services.hire.handlers.request_models import DecisionRequest
from services.hire.handlers.response_models import record_response
from services.shared.utils import api_response

logger = Logger()

service = RejectOrCancelHireRequestService(
    repository=dependencies.hire_repository,
    transaction=dependencies.transaction,
    notifier=dependencies.notifier,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler（POST /hire-requests/{hire_id}/cancel）"""
    hire_id = HireId(value=path_parameter(event, "hire_id"))
    request = DecisionRequest.model_validate(json_body(event))
    logger.info("Cancelling hire request", extra={"hire_id": str(hire_id)})

    record = service.cancel(hire_id, admin_notes=request.admin_notes)
    return api_response(200, record_response(record))
