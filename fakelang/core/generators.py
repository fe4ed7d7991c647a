# fakelang/core/generators.py
import itertools
import random
from abc import ABC, abstractmethod
from typing import Collection, Dict, Optional, Type
from loguru import logger

from .graph import CharGraph

DEFAULT_MARKOV_MAX_ATTEMPTS = 1000


class GenerationExhaustedError(RuntimeError):
    """Raised when no unused fake word could be produced within the attempt bound."""


class SyllableGenerator(ABC):
    """Abstract base class for pseudo-syllable generators."""
    name: str = "Unnamed Generator" # Unique identifier name

    @abstractmethod
    def generate(self, max_length: int, reserved: Optional[Collection[str]] = None) -> str:
        """
        Produces one candidate of at most `max_length` characters.
        'reserved' holds fake words already in use; implementations that can
        vary their output avoid returning one of them.
        """
        pass


class CounterSyllableGenerator(SyllableGenerator):
    """Degenerate generator: "1", "2", "3", ... Ignores length and reservations."""
    name: str = "counter"

    def __init__(self):
        self._counter = itertools.count(1)

    def generate(self, max_length: int, reserved: Optional[Collection[str]] = None) -> str:
        return str(next(self._counter))


class MarkovSyllableGenerator(SyllableGenerator):
    """First-order Markov chain over a CharGraph: a weighted random walk from a random start."""
    name: str = "markov"

    def __init__(self, graph: CharGraph, rng: Optional[random.Random] = None,
                 max_attempts: int = DEFAULT_MARKOV_MAX_ATTEMPTS):
        if graph is None:
            raise ValueError("MarkovSyllableGenerator requires a graph")
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.graph = graph
        self._rng = rng if rng is not None else graph.rng
        self.max_attempts = max_attempts

    def _walk(self, vertices, max_length: int) -> str:
        current = self._rng.choice(vertices)
        chars = [current]
        for _ in range(1, max_length):
            following = self.graph.weighted_random_neighbour(current)
            if following is None:
                break
            chars.append(following)
            current = following
        return "".join(chars)

    def generate(self, max_length: int = 4, reserved: Optional[Collection[str]] = None) -> str:
        vertices = self.graph.vertices
        if not vertices:
            return "" # Nothing to walk, no point retrying

        for attempt in range(1, self.max_attempts + 1):
            result = self._walk(vertices, max_length)
            if reserved is None or result not in reserved:
                return result
            logger.trace(f"Markov candidate {result!r} already reserved (attempt {attempt}).")

        raise GenerationExhaustedError(
            f"Could not generate an unreserved syllable of length <= {max_length} "
            f"after {self.max_attempts} attempts."
        )


# --- Generator Registry ---
_generator_registry: Dict[str, Type[SyllableGenerator]] = {
    CounterSyllableGenerator.name: CounterSyllableGenerator,
    MarkovSyllableGenerator.name: MarkovSyllableGenerator,
}


def get_generator_class(kind: str) -> Type[SyllableGenerator]:
    try:
        return _generator_registry[kind]
    except KeyError:
        raise ValueError(f"Unknown generator '{kind}'. Available: {sorted(_generator_registry)}") from None


def create_generator(kind: str, graph: Optional[CharGraph] = None,
                     rng: Optional[random.Random] = None,
                     max_attempts: int = DEFAULT_MARKOV_MAX_ATTEMPTS) -> SyllableGenerator:
    """Builds the configured generator. The Markov generator needs a graph."""
    generator_class = get_generator_class(kind)
    if generator_class is CounterSyllableGenerator:
        logger.debug("Using counter syllable generator.")
        return CounterSyllableGenerator()
    if graph is None:
        raise ValueError("The markov generator needs a CharGraph")
    logger.debug(f"Using markov syllable generator over {len(graph)} vertices.")
    return MarkovSyllableGenerator(graph, rng=rng, max_attempts=max_attempts)
