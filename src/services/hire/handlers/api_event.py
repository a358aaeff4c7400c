from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent


def json_body(event: APIGatewayProxyEvent) -> dict:
    """リクエストボディを辞書にする（空ボディは空の辞書）"""
    if not event.body:
        return {}
    return event.json_body


def path_parameter(event: APIGatewayProxyEvent, name: str) -> str:
    value = (event.path_parameters or {}).get(name)
    if not value:
        raise ValueError(f"{name} is required")
    return value


def display_currency(
    event: APIGatewayProxyEvent, requested: str | None = None
) -> str | None:
    """表示通貨: ボディ → ?currency= → x-currency ヘッダーの順。なければガイドの通貨"""
    return (
        requested
        or event.get_query_string_value("currency")
        or event.get_header_value("x-currency")
    )


def page_parameters(event: APIGatewayProxyEvent) -> tuple[int, int]:
    """?page= / ?limit= を整数で取り出す"""
    page = event.get_query_string_value("page", "1")
    limit = event.get_query_string_value("limit", "10")
    try:
        return int(page), int(limit)
    except ValueError as e:
        raise ValueError("page and limit must be integers") from e
