# fakelang/core/graph.py
import random
from typing import Dict, List, Optional
from loguru import logger


class CharGraph:
    """
    Weighted directed graph over single characters.

    An edge weight counts how often the target character followed the source
    character in the training syllables. Weights only grow; there is no removal.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._edges: Dict[str, Dict[str, int]] = {}
        # Private generator unless one is injected, never the module-level one
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self._edges)

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def vertices(self) -> List[str]:
        """Vertices with at least one outgoing edge, in first-seen order."""
        return list(self._edges.keys())

    @property
    def edge_count(self) -> int:
        return sum(len(neighbours) for neighbours in self._edges.values())

    def add_edge(self, src: str, dst: str) -> None:
        """Increments the weight of src->dst, creating the edge if needed."""
        if len(src) != 1 or len(dst) != 1:
            raise ValueError(f"Graph vertices must be single characters, got {src!r} -> {dst!r}")
        neighbours = self._edges.setdefault(src, {})
        neighbours[dst] = neighbours.get(dst, 0) + 1

    def weight(self, src: str, dst: str) -> int:
        return self._edges.get(src, {}).get(dst, 0)

    def out_weight(self, vertex: str) -> int:
        return sum(self._edges.get(vertex, {}).values())

    def adjacency(self) -> Dict[str, Dict[str, int]]:
        """Copy of the adjacency map, suitable for JSON serialization."""
        return {src: dict(neighbours) for src, neighbours in self._edges.items()}

    def weighted_random_neighbour(self, vertex: str) -> Optional[str]:
        """
        Picks a neighbour of `vertex` with probability proportional to edge weight.
        Returns None when the vertex has no outgoing edges.
        """
        neighbours = self._edges.get(vertex)
        if not neighbours:
            return None

        total = sum(neighbours.values())
        threshold = self._rng.randrange(total)
        cumulative = 0
        for candidate, weight in neighbours.items():
            cumulative += weight
            if cumulative > threshold:
                return candidate
        # Unreachable while every weight is >= 1
        logger.error(f"Weighted sampling fell through for vertex {vertex!r} (total={total}).")
        return None
