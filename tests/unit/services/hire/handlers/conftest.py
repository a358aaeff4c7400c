import json
from dataclasses import dataclass

import pytest


@dataclass
class LambdaContext:
    function_name: str = "guide-hire-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:guide-hire-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST, proxy 統合) イベントを生成する Factory fixture"""

    def _factory(
        path_parameters: dict | None = None,
        body: dict | None = None,
        query: dict | None = None,
        headers: dict | None = None,
    ) -> dict:
        return {
            "resource": "/",
            "path": "/",
            "httpMethod": "POST",
            "headers": headers or {},
            "queryStringParameters": query,
            "pathParameters": path_parameters,
            "requestContext": {"requestId": "test"},
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory
