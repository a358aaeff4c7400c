import json


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str, ensure_ascii=False),
    }


def error_body(message: str, **details: object) -> dict:
    """エラーレスポンスの body を生成する"""
    body: dict = {"status": "error", "message": message}
    body.update(details)
    return body
