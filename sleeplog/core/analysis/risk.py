"""
Next-day risk prediction from the most recently recorded days.
"""

import logging

from sleeplog.core.models.data_models import RiskLevel
from sleeplog.core.models.output_models import RiskPrediction
from sleeplog.core.scoring.fatigue_score import compute_score
from sleeplog.utils.constants import RECENT_WINDOW, risk_thresholds

logger = logging.getLogger(__name__)


def avg_recent_score(log, n=RECENT_WINDOW, calculator=None):
    """
    Average fatigue score of the last `n` appended entries.
    
    Args:
        log: SleepLog to read from
        n: Window size; fewer entries are averaged when the log is shorter
        calculator: Optional FatigueScoreCalculator, default weights otherwise
        
    Returns:
        float: Mean score, 0.0 for an empty log or a non-positive window
    """
    entries = log.entries()
    used = min(n, len(entries))
    if used <= 0:
        return 0.0
    
    score = calculator.calculate_score if calculator is not None else compute_score
    total = 0.0
    for entry in entries[-used:]:
        total += score(entry)
    return total / used


def classify_risk(average, low_max=None, moderate_max=None):
    """Map an average score onto a risk band, upper bounds inclusive"""
    low_max = risk_thresholds['low_max'] if low_max is None else low_max
    moderate_max = risk_thresholds['moderate_max'] if moderate_max is None else moderate_max
    if average <= low_max:
        return RiskLevel.LOW
    if average <= moderate_max:
        return RiskLevel.MODERATE
    return RiskLevel.HIGH


def predict_risk(log, window=RECENT_WINDOW, calculator=None, low_max=None, moderate_max=None):
    """Predict next-day risk from the recent fatigue average"""
    average = avg_recent_score(log, window, calculator)
    level = classify_risk(average, low_max, moderate_max)
    logger.debug(f"Recent average {average:.2f} over last {window} -> {level.value}")
    return RiskPrediction(level=level, average=average, window=window)
