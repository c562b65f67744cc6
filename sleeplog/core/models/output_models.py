# sleeplog/core/models/output_models.py

from typing import List, Optional

from pydantic import BaseModel

from sleeplog.core.models.data_models import RiskLevel, StoreStatus


class SaveResult(BaseModel):
    """Outcome of writing the log to disk"""
    status: StoreStatus
    path: str
    written: int = 0
    error: Optional[str] = None


class LoadResult(BaseModel):
    """Outcome of reading the log from disk"""
    status: StoreStatus
    path: str
    loaded: int = 0
    stopped_at_line: Optional[int] = None  # 1-based line number in the file
    skipped_lines: List[int] = []
    dropped_over_capacity: int = 0
    error: Optional[str] = None


class RiskPrediction(BaseModel):
    """Risk band derived from the recent fatigue average"""
    level: RiskLevel
    average: float
    window: int = 3
