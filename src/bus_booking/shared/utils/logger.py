from aws_lambda_powertools import Logger


def get_logger(service_name: str) -> Logger:
    """サービス名付きの構造化ロガーを取得する"""
    return Logger(service=service_name)
