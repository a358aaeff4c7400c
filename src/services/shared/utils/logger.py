import os

from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None) -> Logger:
    """Powertools Logger を取得する

    サービス名未指定時は POWERTOOLS_SERVICE_NAME（なければ guide-hire）を使う。
    """
    return Logger(
        service=service_name or os.getenv("POWERTOOLS_SERVICE_NAME", "guide-hire")
    )
