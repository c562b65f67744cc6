"""
Constants used throughout the SleepLog app.
This includes storage limits, the persisted file layout, scoring weights
and risk thresholds.
"""

# Storage limits
MAX_ENTRIES = 100
DATE_LEN = 11   # bytes, label truncated beyond this
NOTE_LEN = 63   # bytes

DEFAULT_LOG_FILE = 'sleeplog.csv'
DEFAULT_DATE = 'unknown'

# Persisted file layout
CSV_COLUMNS = ['date', 'hours', 'quality', 'screen', 'caffeine', 'note']
CSV_HEADER = ','.join(CSV_COLUMNS)

# Malformed line handling on load: 'stop' keeps the historical behaviour
MALFORMED_POLICIES = ('stop', 'skip')
DEFAULT_MALFORMED_POLICY = 'stop'

QUALITY_MIN = 1
QUALITY_MAX = 10

# Fatigue score weights
scoring_weights = {
    'target_hours': 8.0,
    'undersleep_per_hour': 10.0,   # sharp penalty for short sleep
    'oversleep_per_hour': 2.0,
    'quality_per_point': 2.0,
    'screen_per_hour': 2.0,
    'caffeine_mg_per_point': 100.0,
}

SCORE_MIN = 0.0
SCORE_MAX = 100.0

# Risk bands on the recent average, upper bounds inclusive
risk_thresholds = {
    'low_max': 30.0,
    'moderate_max': 60.0,
}
RECENT_WINDOW = 3

DEFAULT_CONFIG = {
    'storage': {
        'path': DEFAULT_LOG_FILE,
        'max_entries': MAX_ENTRIES,
        'on_malformed': DEFAULT_MALFORMED_POLICY,
    },
    'scoring': dict(scoring_weights),
    'risk': {
        'low_max': risk_thresholds['low_max'],
        'moderate_max': risk_thresholds['moderate_max'],
        'window': RECENT_WINDOW,
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
}
