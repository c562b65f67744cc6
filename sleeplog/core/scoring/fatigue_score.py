import logging

import numpy as np

from sleeplog.utils.constants import SCORE_MAX, SCORE_MIN, scoring_weights

logger = logging.getLogger(__name__)


class FatigueScoreCalculator:
    """
    Heuristic fatigue score for a single day of sleep.
    
    Short sleep is penalised much more steeply than oversleep. Poor quality,
    screen time and caffeine each add to the score linearly. Terms are summed
    unclamped and the total is clamped to 0-100 at the end, so a negative
    oversleep-plus-perfect-quality running sum is expected.
    An undefined total (NaN hours or screen, or inf - inf) scores the maximum.
    """
    
    def __init__(self, weights=None):
        """Initialize the calculator with default weights, overridden by `weights`"""
        self.weights = dict(scoring_weights)
        if weights:
            unknown = set(weights) - set(self.weights)
            if unknown:
                raise ValueError(f"Unknown scoring weights: {', '.join(sorted(unknown))}")
            self.weights.update({k: float(v) for k, v in weights.items()})
        
        logger.debug(f"Fatigue score calculator initialized with {self.weights}")
    
    def score_components(self, entry):
        """
        Per-term contributions for an entry, before clamping.
        
        Args:
            entry: SleepEntry to score
            
        Returns:
            dict: 'sleep', 'quality', 'screen' and 'caffeine' contributions
        """
        w = self.weights
        target = w['target_hours']
        if entry.hours < target:
            sleep = (target - entry.hours) * w['undersleep_per_hour']
        else:
            sleep = (entry.hours - target) * w['oversleep_per_hour']
        
        return {
            'sleep': sleep,
            'quality': (10 - entry.quality) * w['quality_per_point'],
            'screen': entry.screen * w['screen_per_hour'],
            'caffeine': entry.caffeine / w['caffeine_mg_per_point'],
        }
    
    def calculate_score(self, entry):
        """Fatigue score in [0, 100]"""
        components = self.score_components(entry)
        total = 0.0
        for key in ('sleep', 'quality', 'screen', 'caffeine'):
            total += components[key]
        total = np.nan_to_num(total, nan=SCORE_MAX, posinf=SCORE_MAX, neginf=SCORE_MIN)
        return float(np.clip(total, SCORE_MIN, SCORE_MAX))


_default_calculator = FatigueScoreCalculator()


def compute_score(entry):
    """Fatigue score of an entry using the default weights"""
    return _default_calculator.calculate_score(entry)
