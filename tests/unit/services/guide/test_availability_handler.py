import json
from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import patch

from services.guide.applications.list_free_days import GuideAvailability
from services.guide.domain import GuideNotHireableError
from services.guide.handlers import availability
from services.shared.domain.exception import ResourceNotFoundException


@dataclass
class LambdaContext:
    function_name: str = "availability-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:availability-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


def _event(guide_id: str | None) -> dict:
    return {
        "httpMethod": "GET",
        "path": f"/guides/{guide_id}/availability",
        "headers": {},
        "pathParameters": {"guide_id": guide_id} if guide_id else None,
        "queryStringParameters": None,
        "body": None,
    }


class TestAvailabilityHandler:
    def test_returns_free_days(self):
        with patch.object(availability, "service") as service:
            service.list_free_days.return_value = GuideAvailability(
                guide_id="guide-1",
                dates=["2030-01-10", "2030-01-11"],
                price_per_day=Decimal("500"),
                currency="TJS",
            )

            response = availability.lambda_handler(_event("guide-1"), LambdaContext())

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"] == {
            "guide_id": "guide-1",
            "dates": ["2030-01-10", "2030-01-11"],
            "price_per_day": "500",
            "currency": "TJS",
        }

    def test_missing_guide_id(self):
        response = availability.lambda_handler(_event(None), LambdaContext())
        assert response["statusCode"] == 400

    def test_not_found(self):
        with patch.object(availability, "service") as service:
            service.list_free_days.side_effect = ResourceNotFoundException("Guide not found")
            response = availability.lambda_handler(_event("guide-1"), LambdaContext())
        assert response["statusCode"] == 404

    def test_not_hireable(self):
        with patch.object(availability, "service") as service:
            service.list_free_days.side_effect = GuideNotHireableError("inactive")
            response = availability.lambda_handler(_event("guide-1"), LambdaContext())
        assert response["statusCode"] == 400
