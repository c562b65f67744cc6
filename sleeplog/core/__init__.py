"""
Core modules for the SleepLog app.

This package contains the core functionality for:
- Sleep entry models
- The bounded log and its flat-file persistence
- Fatigue scoring
- Risk prediction and summary metrics
"""
