"""
Module for calculating summary statistics over the sleep log.
"""

import pandas as pd

from sleeplog.core.analysis.risk import avg_recent_score
from sleeplog.core.scoring.fatigue_score import compute_score
from sleeplog.utils.constants import CSV_COLUMNS, RECENT_WINDOW


def entries_to_dataframe(entries, calculator=None):
    """
    Build a DataFrame of entries in insertion order.
    
    Args:
        entries: Iterable of SleepEntry
        calculator: Optional FatigueScoreCalculator for the fatigue_score column
        
    Returns:
        DataFrame: The persisted columns plus 'fatigue_score'
    """
    score = calculator.calculate_score if calculator is not None else compute_score
    rows = [
        {**entry.model_dump(), 'fatigue_score': score(entry)}
        for entry in entries
    ]
    return pd.DataFrame(rows, columns=CSV_COLUMNS + ['fatigue_score'])


def calculate_log_metrics(log, recent_window=RECENT_WINDOW, calculator=None):
    """
    Calculate key metrics for the log.
    
    Args:
        log: SleepLog to summarise
        recent_window: Number of latest entries in the recent fatigue average
        calculator: Optional FatigueScoreCalculator
        
    Returns:
        dict: Dictionary of calculated metrics
    """
    data = entries_to_dataframe(log.entries(), calculator)
    
    metrics = {'days_recorded': len(data)}
    if data.empty:
        metrics['avg_hours'] = 0.0
        metrics['avg_fatigue'] = 0.0
    else:
        metrics['avg_hours'] = float(data['hours'].mean())
        metrics['avg_fatigue'] = float(data['fatigue_score'].mean())
    metrics['avg_recent_fatigue'] = avg_recent_score(log, recent_window, calculator)
    
    return metrics
