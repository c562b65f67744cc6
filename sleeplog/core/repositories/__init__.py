"""
Storage for sleep entries: the in-memory log and its flat-file codec.
"""

from sleeplog.core.repositories.csv_codec import SleepLogFile, format_entry_line, parse_entry_line
from sleeplog.core.repositories.sleep_log import SleepLog

__all__ = ['SleepLog', 'SleepLogFile', 'format_entry_line', 'parse_entry_line']
