"""Common helpers shared across models."""

from datetime import date, timedelta


def local_today() -> date:
    return date.today()


def iso_date(d: date) -> str:
    return d.isoformat()


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)
