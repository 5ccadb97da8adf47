from datetime import datetime, timezone


def now_iso() -> str:
    # 예: 2024-05-01T03:04:05.123Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def current_year() -> int:
    return datetime.now(timezone.utc).year
