# sleeplog/core/repositories/sleep_log.py
import logging

from sleeplog.core.models.data_models import StoreStatus
from sleeplog.utils.constants import MAX_ENTRIES

logger = logging.getLogger(__name__)


class SleepLog:
    """Bounded, insertion-ordered store of sleep entries"""
    
    def __init__(self, capacity=MAX_ENTRIES):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._entries = []
    
    @property
    def capacity(self):
        return self._capacity
    
    @property
    def count(self):
        return len(self._entries)
    
    @property
    def is_full(self):
        return len(self._entries) >= self._capacity
    
    def append(self, entry):
        """
        Add an entry at the end of the log.
        
        Returns:
            StoreStatus: OK, or CAPACITY_EXCEEDED when the log is full (nothing is changed)
        """
        if self.is_full:
            logger.warning(f"Storage full (max {self._capacity}), entry for {entry.date} rejected")
            return StoreStatus.CAPACITY_EXCEEDED
        self._entries.append(entry)
        return StoreStatus.OK
    
    def replace_all(self, entries):
        """Overwrite the log with at most `capacity` entries, keeping their order"""
        self._entries = list(entries)[:self._capacity]
        return len(self._entries)
    
    def entries(self):
        return tuple(self._entries)
    
    def __len__(self):
        return len(self._entries)
    
    def __iter__(self):
        return iter(tuple(self._entries))
