from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.hire.applications.update_payment_status import UpdatePaymentStatusService
from services.hire.domain.value_object import HireId
from services.hire.handlers import dependencies
from services.hire.handlers.api_event import json_body, path_parameter
from services.hire.handlers.error_response import handle_errors
from services.hire.handlers.request_models import PaymentStatusRequest
from services.hire.handlers.response_models import record_response
from services.shared.utils import api_response

logger = Logger()

service = UpdatePaymentStatusService(repository=dependencies.hire_repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """支払いステータス更新 Lambda Handler（POST /hire-requests/{hire_id}/payment-status）"""
    hire_id = HireId(value=path_parameter(event, "hire_id"))
    request = PaymentStatusRequest.model_validate(json_body(event))
    logger.info(
        "Updating payment status",
        extra={"hire_id": str(hire_id), "payment_status": request.payment_status},
    )

    if request.payment_status == "paid":
        record = service.mark_paid(hire_id)
    else:
        record = service.refund(hire_id)
    return api_response(200, record_response(record))
