from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import BaseModel

from services.guide.applications.list_free_days import (
    GuideAvailability,
    ListFreeDaysService,
)
from services.guide.domain import GuideId, GuideNotHireableError
from services.guide.infrastructure.dynamodb_guide_repository import (
    DynamoDBGuideRepository,
)
from services.shared.domain.exception import ResourceNotFoundException
from services.shared.utils import api_response, error_body

logger = Logger()

repository = DynamoDBGuideRepository()
service = ListFreeDaysService(repository=repository)


class AvailabilityData(BaseModel):
    """空き日一覧のレスポンスモデル"""

    guide_id: str
    dates: list[str]
    price_per_day: str | None
    currency: str


class SuccessResponse(BaseModel):
    status: str = "success"
    data: AvailabilityData


def _to_response(availability: GuideAvailability) -> dict:
    price = availability.price_per_day
    return SuccessResponse(
        data=AvailabilityData(
            guide_id=availability.guide_id,
            dates=availability.dates,
            price_per_day=str(price) if price is not None else None,
            currency=availability.currency,
        )
    ).model_dump()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ガイド空き日取得 Lambda Handler（GET /guides/{guide_id}/availability）"""

    guide_id = (event.path_parameters or {}).get("guide_id")
    if not guide_id:
        return api_response(400, error_body("guide_id is required"))

    logger.info("Fetching guide availability", extra={"guide_id": guide_id})

    try:
        availability = service.list_free_days(GuideId(value=guide_id))
    except ResourceNotFoundException as e:
        return api_response(404, error_body(str(e)))
    except GuideNotHireableError as e:
        return api_response(400, error_body(str(e)))
    except Exception:
        logger.exception("Failed to fetch guide availability")
        return api_response(500, error_body("Internal server error"))

    return api_response(200, _to_response(availability))
