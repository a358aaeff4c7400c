from datetime import date, datetime, timezone


def utc_today() -> date:
    """UTC での今日の日付（予約可能日の過去判定に使う）"""
    return datetime.now(timezone.utc).date()
