"""Pydantic schemas for alert analytics."""

from datetime import date

from pydantic import BaseModel


class TypeCount(BaseModel):
    alert_type: str
    count: int


class LocationCount(BaseModel):
    location_id: str
    location_name: str
    count: int


class MonthCount(BaseModel):
    month: str  # "YYYY-MM"
    count: int


class AnalyticsSummary(BaseModel):
    """Alert totals for the analytics dashboard."""

    total_alerts: int
    active_alerts: int
    resolved_alerts: int
    false_alarms: int
    by_type: list[TypeCount]
    by_location: list[LocationCount]
    by_month: list[MonthCount]


class TrendPoint(BaseModel):
    """Alert counts for one day, per alert type."""

    date: date
    fire: int = 0
    gas_leak: int = 0
    temperature: int = 0
    motion: int = 0
    total: int = 0
