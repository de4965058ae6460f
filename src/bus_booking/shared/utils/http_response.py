import json

from bus_booking.shared.domain import DeletionResult


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str, ensure_ascii=False),
    }


def error_response(status_code: int, message: str, **detail: object) -> dict:
    """エラーレスポンスを生成する"""
    return api_response(status_code, {"status": "error", "message": message, **detail})


def deletion_response(result: DeletionResult, entity_id: str) -> dict:
    """削除結果をレスポンスに変換する

    参照整合性による拒否は 409、対象なしは 404 を返す。
    """
    if result.conflict is not None:
        return error_response(
            409,
            result.conflict.message,
            dependent_type=result.conflict.dependent_type,
            dependent_ids=list(result.conflict.dependent_ids),
        )
    if not result.deleted:
        return error_response(404, f"Not found: {entity_id}")
    return api_response(200, {"status": "success", "deleted": entity_id})
