# fakelang/core/graph_builder.py
import random
from typing import Any, Callable, Dict, Iterable, List, Optional
from loguru import logger

from ..services.storage import DictionaryStore
from .graph import CharGraph
from .models import Language
from .phonetics import PhoneticConverter


class GraphBuilder:
    """Trains a CharGraph from syllables, or restores the one cached in the store."""

    def __init__(self, store: DictionaryStore, converter: PhoneticConverter,
                 corpus_loader: Callable[[Language], str],
                 rng: Optional[random.Random] = None):
        self.store = store
        self.converter = converter
        self.corpus_loader = corpus_loader
        self.rng = rng

    def build(self, language: Language, rebuild: bool = False) -> CharGraph:
        key = language.graph_key
        if not rebuild and self.store.exists(key):
            logger.info(f"Restoring {language.value} graph from cache '{key}'.")
            return self.from_adjacency(self.store.read(key), rng=self.rng)

        logger.info(f"Training {language.value} graph from corpus (rebuild={rebuild}).")
        raw_corpus = self.corpus_loader(language)
        graph = self.train(self.extract_syllables(language, raw_corpus), rng=self.rng)
        self.store.write(key, graph.adjacency())
        logger.info(f"Graph for {language.value}: {len(graph)} vertices, {graph.edge_count} edges.")
        return graph

    def extract_syllables(self, language: Language, raw_corpus: str) -> List[str]:
        if language == Language.RUSSIAN:
            # word<TAB>ipa lines; the transcription is the training unit
            syllables = []
            for line_number, line in enumerate(raw_corpus.split("\n"), start=1):
                fields = line.rstrip("\r").split("\t")
                if len(fields) < 2:
                    if line.strip():
                        logger.warning(f"Skipping corpus line {line_number}: no transcription field.")
                    continue
                syllables.append(fields[1])
            return syllables
        return self.converter.split_corpus_into_syllables(raw_corpus)

    @staticmethod
    def train(syllables: Iterable[str], rng: Optional[random.Random] = None) -> CharGraph:
        """One edge increment per pair of consecutive characters in each syllable."""
        graph = CharGraph(rng=rng)
        for syllable in syllables:
            for src, dst in zip(syllable, syllable[1:]):
                graph.add_edge(src, dst)
        return graph

    @staticmethod
    def from_adjacency(adjacency: Dict[str, Any], rng: Optional[random.Random] = None) -> CharGraph:
        """Replays a serialized adjacency map through add_edge, validating it on the way."""
        graph = CharGraph(rng=rng)
        for src, neighbours in adjacency.items():
            if not isinstance(neighbours, dict):
                raise ValueError(f"Neighbours of {src!r} must be a JSON object")
            for dst, weight in neighbours.items():
                if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
                    raise ValueError(f"Edge {src!r} -> {dst!r} has invalid weight {weight!r}")
                for _ in range(weight):
                    graph.add_edge(src, dst)
        return graph
