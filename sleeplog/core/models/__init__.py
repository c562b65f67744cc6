from sleeplog.core.models.data_models import RiskLevel, SleepEntry, StoreStatus
from sleeplog.core.models.output_models import LoadResult, RiskPrediction, SaveResult

__all__ = [
    'RiskLevel', 'SleepEntry', 'StoreStatus',
    'LoadResult', 'RiskPrediction', 'SaveResult',
]
