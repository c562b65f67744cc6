"""
Analysis module for the sleep log.

This module contains the risk predictor and summary metrics.
"""

from sleeplog.core.analysis.log_metrics import calculate_log_metrics, entries_to_dataframe
from sleeplog.core.analysis.risk import avg_recent_score, classify_risk, predict_risk

__all__ = [
    'avg_recent_score', 'calculate_log_metrics', 'classify_risk',
    'entries_to_dataframe', 'predict_risk',
]
