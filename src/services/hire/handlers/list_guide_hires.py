from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.guide.domain import GuideId
from services.hire.applications.get_hire_history import GetHireHistoryService
from services.hire.handlers import dependencies
from services.hire.handlers.api_event import page_parameters, path_parameter
from services.hire.handlers.error_response import handle_errors
from services.hire.handlers.response_models import history_response
from services.shared.utils import api_response

logger = Logger()

service = GetHireHistoryService(repository=dependencies.hire_repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ガイド別雇用履歴 Lambda Handler（GET /guides/{guide_id}/hires）"""
    guide_id = GuideId(value=path_parameter(event, "guide_id"))
    page, limit = page_parameters(event)
    logger.info("Listing hires by guide", extra={"guide_id": str(guide_id)})

    return api_response(200, history_response(service.by_guide(guide_id, page, limit)))
