import random
from abc import ABC, abstractmethod
from itertools import cycle


class NumberGenerator(ABC):
    @abstractmethod
    def generate(self, minimum, maximum):
        """Return an integer drawn from the inclusive range [minimum, maximum]."""


class RandomNumberGenerator(NumberGenerator):
    """Uniform draws from a private random source.

    Arguments:
        seed: Seed for the random source. Two generators with the same seed
            produce the same numbers. Defaults to None (system entropy).
    """

    def __init__(self, seed=None):
        self.seed = seed
        self._random = random.Random(seed)

    def generate(self, minimum, maximum):
        return self._random.randint(minimum, maximum)


class FixedNumberGenerator(NumberGenerator):
    """Replay the given numbers in order, starting over when exhausted.

    The requested range is ignored.
    """

    def __init__(self, *values):
        if not values:
            raise ValueError("FixedNumberGenerator needs at least one value")
        self.values = values
        self._values = cycle(values)

    def generate(self, minimum, maximum):
        return next(self._values)
