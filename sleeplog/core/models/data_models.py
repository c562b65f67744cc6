# sleeplog/core/models/data_models.py

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from sleeplog.utils.constants import (
    DATE_LEN, DEFAULT_DATE, NOTE_LEN, QUALITY_MAX, QUALITY_MIN
)
from sleeplog.utils.text import truncate_bytes


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class StoreStatus(str, Enum):
    """Outcome of a store or file operation"""
    OK = "ok"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    IO_ERROR = "io_error"
    NOT_FOUND = "not_found"


def _single_line(text):
    return text.replace('\r', ' ').replace('\n', ' ')


# Sleep Data Models
class SleepEntry(BaseModel):
    """One recorded day of sleep. Entries are immutable once built."""
    model_config = ConfigDict(frozen=True)
    
    date: str = DEFAULT_DATE
    hours: float
    quality: int
    screen: float
    caffeine: int
    note: str = ""
    
    @field_validator('date')
    @classmethod
    def truncate_date(cls, v):
        # the date is a single persisted field: no delimiters, no line breaks
        v = _single_line(v).replace(',', ';')
        if not v.strip():
            return DEFAULT_DATE
        return truncate_bytes(v, DATE_LEN)
    
    @field_validator('quality')
    @classmethod
    def clamp_quality(cls, v):
        return max(QUALITY_MIN, min(QUALITY_MAX, v))
    
    @field_validator('note')
    @classmethod
    def truncate_note(cls, v):
        # commas stay; they are replaced only when written
        return truncate_bytes(_single_line(v), NOTE_LEN)
