"""
Randomized selection among equally scored candidates.

Candidates arrive one at a time and only the current pick is kept. A strictly
better score always takes over. An equal score takes over with probability p,
where p starts at 0.5 and halves each time a tie actually takes over. A strict
improvement resets p.
"""

from typing import Any, Generic, Optional, TypeVar

import numpy as np

from hexgame.config import SEARCH_CONFIG


T = TypeVar('T')


class TieBreaker(Generic[T]):

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        initial_probability: float = SEARCH_CONFIG['tie_probability'],
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.initial_probability = initial_probability
        self.probability = initial_probability
        self.best_score: Any = None
        self.best_item: Optional[T] = None

    def offer(self, score, item: T) -> bool:
        """
        Consider `item` with `score`.

        Returns:
            True if `item` is now the current pick
        """
        if self.best_item is None or score > self.best_score:
            self.best_score = score
            self.best_item = item
            self.probability = self.initial_probability
            return True

        if score == self.best_score:
            replace = self.rng.random() < self.probability
            if replace:
                self.best_item = item
                self.probability /= 2
            return replace

        return False
