from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.guide.domain import GuideId
from services.hire.applications.submit_hire_request import SubmitHireRequestService
from services.hire.handlers import dependencies
from services.hire.handlers.api_event import display_currency, json_body
from services.hire.handlers.error_response import handle_errors
from services.hire.handlers.request_models import SubmitHireRequest
from services.hire.handlers.response_models import record_response
from services.shared.utils import api_response

logger = Logger()

service = SubmitHireRequestService(
    guide_repository=dependencies.guide_repository,
    repository=dependencies.hire_repository,
    factory=dependencies.factory,
    rate_repository=dependencies.rate_repository,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """承認待ち依頼の登録 Lambda Handler（POST /hire-requests）"""
    request = SubmitHireRequest.model_validate(json_body(event))
    logger.info("Received hire request", extra={"guide_id": request.guide_id})

    record = service.submit(
        GuideId(value=request.guide_id),
        request.dates,
        request.to_requester(),
        display_currency=display_currency(event, request.currency),
        comments=request.comments,
    )
    return api_response(201, record_response(record))
