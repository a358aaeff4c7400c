from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.hire.domain.value_object import HireId
from services.hire.handlers import dependencies
from services.hire.handlers.api_event import path_parameter
from services.hire.handlers.error_response import handle_errors
from services.hire.handlers.response_models import order_response
from services.shared.utils import api_response

logger = Logger()

service = dependencies.order_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """決済用注文の作成 Lambda Handler（POST /hire-requests/{hire_id}/order）

    作成済みの場合は既存の注文を返す。
    """
    hire_id = HireId(value=path_parameter(event, "hire_id"))
    logger.info("Creating payable order", extra={"hire_id": str(hire_id)})

    order = service.create(hire_id)
    return api_response(200, order_response(order))
