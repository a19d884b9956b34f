from datetime import datetime, timedelta, timezone


def iso_in(days: int = 0) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()
