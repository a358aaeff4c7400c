from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.guide.domain import GuideId
from services.hire.applications.request_direct_hire import RequestDirectHireService
from services.hire.handlers import dependencies
from services.hire.handlers.api_event import display_currency, json_body, path_parameter
from services.hire.handlers.error_response import handle_errors
from services.hire.handlers.request_models import HireRequest
from services.hire.handlers.response_models import hire_response
from services.shared.utils import api_response

logger = Logger()

service = RequestDirectHireService(
    transaction=dependencies.transaction,
    factory=dependencies.factory,
    rate_repository=dependencies.rate_repository,
    order_service=dependencies.order_service,
    notifier=dependencies.notifier,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ガイド直接予約 Lambda Handler（POST /guides/{guide_id}/hires）"""
    guide_id = GuideId(value=path_parameter(event, "guide_id"))
    request = HireRequest.model_validate(json_body(event))
    logger.info(
        "Received direct hire request",
        extra={"guide_id": str(guide_id), "dates": request.dates},
    )

    result = service.request(
        guide_id,
        request.dates,
        request.to_requester(),
        display_currency=display_currency(event, request.currency),
        comments=request.comments,
    )
    return api_response(201, hire_response(result))
