# -*- coding: utf-8 -*-
"""Timestamp helpers shared by the log domains."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def as_utc(value: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_utc_iso(value: datetime) -> str:
    """Normalize an aware/naive datetime to an ISO8601 UTC string ending in Z."""
    return as_utc(value).isoformat().replace("+00:00", "Z")


def local_today(offset_minutes: int = 0) -> date:
    """Calendar date for a client whose clock is `offset_minutes` ahead of UTC."""
    return (datetime.now(timezone.utc) + timedelta(minutes=offset_minutes)).date()


def local_day_bounds(day: date, offset_minutes: int = 0) -> tuple[str, str]:
    """UTC [start, end) of a local calendar day, comparable with stored `logged_at` strings."""
    start = datetime.combine(day, time.min) - timedelta(minutes=offset_minutes)
    end = start + timedelta(days=1)
    return start.isoformat(timespec="seconds"), end.isoformat(timespec="seconds")


def date_prefix(iso8601: str) -> str:
    # ISO8601 strings start with YYYY-MM-DD.
    return (iso8601 or "")[:10]


def iter_days(start: str, end: str) -> List[str]:
    try:
        s = date.fromisoformat(start[:10])
        e = date.fromisoformat(end[:10])
    except ValueError:
        return []
    if e < s:
        return []
    days: List[str] = []
    cur = s
    while cur <= e:
        days.append(cur.isoformat())
        cur = cur + timedelta(days=1)
    return days


def range_bounds(start: Optional[str], end: Optional[str]) -> tuple[str, str]:
    """Inclusive date range as comparable ISO prefixes for `logged_at` filtering."""
    start_date = (start or "0000-01-01")[:10]
    end_date = (end or "9999-12-31")[:10]
    return start_date, end_date
