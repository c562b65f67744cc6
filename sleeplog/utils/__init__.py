"""
Shared helpers and constants for the SleepLog app.
"""
