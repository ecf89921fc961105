# wizard/formatters.py — Thai date & countdown text
from __future__ import annotations

from datetime import date
from typing import Optional

from .constants import BUDDHIST_ERA_OFFSET, REGISTRATION_REQUIRED, THAI_MONTHS, THAI_MONTHS_SHORT, THAI_WEEKDAYS
from .countdown import TimeRemaining
from .resolver import ActionRecord, Category, RegistrationKind


def buddhist_year(d: date) -> int:
    return d.year + BUDDHIST_ERA_OFFSET


def format_thai_date(d: date, short: bool = False, weekday: bool = False) -> str:
    """8 กุมภาพันธ์ 2569 / 8 ก.พ. 2569 / วันอาทิตย์ที่ 8 กุมภาพันธ์ 2569"""
    months = THAI_MONTHS_SHORT if short else THAI_MONTHS
    text = f"{d.day} {months[d.month - 1]} {buddhist_year(d)}"
    if weekday:
        text = f"วัน{THAI_WEEKDAYS[d.weekday()]}ที่ {text}"
    return text


def countdown_parts(tr: TimeRemaining) -> list[str]:
    # days unpadded, the rest two digits
    return [str(tr.days), f"{tr.hours:02d}", f"{tr.minutes:02d}", f"{tr.seconds:02d}"]


def registration_label(record: ActionRecord) -> Optional[str]:
    """ต้องลงทะเบียนเลือกตั้งล่วงหน้า/นอกเขต, ต้องลงทะเบียนประชามตินอกเขต, or None."""
    if not record.needs_registration:
        return None
    what = "เลือกตั้ง" if record.category is Category.ELECTION else "ประชามติ"
    how = "นอกเขต" if record.registration_kind is RegistrationKind.OUTSIDE else "ล่วงหน้า/นอกเขต"
    return f"{REGISTRATION_REQUIRED}{what}{how}"
