"""
SleepLog: a personal sleep tracker with fatigue scoring and next-day risk prediction.
"""

__version__ = '0.1.0'
