from sleeplog.core.scoring.fatigue_score import FatigueScoreCalculator, compute_score

__all__ = ['FatigueScoreCalculator', 'compute_score']
