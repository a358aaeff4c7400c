from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.guide.domain import GuideId
from services.hire.applications.update_guide_availability import (
    UpdateGuideAvailabilityService,
)
from services.hire.handlers import dependencies
from services.hire.handlers.api_event import json_body, path_parameter
from services.hire.handlers.error_response import handle_errors
from services.hire.handlers.request_models import GuideAvailabilityRequest
from services.hire.handlers.response_models import guide_settings_response
from services.shared.utils import api_response

logger = Logger()

service = UpdateGuideAvailabilityService(
    guide_repository=dependencies.guide_repository,
    hire_repository=dependencies.hire_repository,
    rate_repository=dependencies.rate_repository,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ガイド空き日・料金設定 Lambda Handler（PUT /guides/{guide_id}/availability）"""
    guide_id = GuideId(value=path_parameter(event, "guide_id"))
    request = GuideAvailabilityRequest.model_validate(json_body(event))
    logger.info(
        "Updating guide availability",
        extra={
            "guide_id": str(guide_id),
            "fields": sorted(request.model_dump(exclude_none=True)),
        },
    )

    guide = service.update(
        guide_id,
        available_dates=request.available_dates,
        price_per_day=request.price_per_day,
        currency=request.currency,
        is_hireable=request.is_hireable,
    )
    return api_response(200, guide_settings_response(guide))
