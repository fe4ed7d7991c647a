# tests/core/test_generators.py
import random

import pytest

from fakelang.core.generators import (
    CounterSyllableGenerator,
    GenerationExhaustedError,
    MarkovSyllableGenerator,
    create_generator,
)
from fakelang.core.graph import CharGraph


def _chain_graph(seed=0):
    # a -> b -> c, c is a sink
    graph = CharGraph(rng=random.Random(seed))
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")
    return graph


def test_counter_generator_counts_and_ignores_arguments():
    generator = CounterSyllableGenerator()
    assert [generator.generate(3), generator.generate(10, {"3"}), generator.generate(1)] == ["1", "2", "3"]


def test_markov_generator_on_empty_graph_returns_empty_string():
    generator = MarkovSyllableGenerator(CharGraph(), max_attempts=1)
    assert generator.generate(5, reserved={""}) == ""


def test_markov_generator_walks_at_most_max_length():
    rng = random.Random(3)
    graph = CharGraph(rng=rng)
    for src in "abc":
        for dst in "abc":
            graph.add_edge(src, dst)
    generator = MarkovSyllableGenerator(graph, rng=rng)
    for length in (1, 3, 6):
        result = generator.generate(length)
        assert len(result) == length
        assert set(result) <= set("abc")


def test_markov_generator_stops_at_sink():
    generator = MarkovSyllableGenerator(_chain_graph())
    assert generator.generate(10) in {"abc", "bc"}


def test_markov_generator_avoids_reserved_words():
    generator = MarkovSyllableGenerator(_chain_graph(seed=11))
    for _ in range(20):
        assert generator.generate(3, reserved={"abc"}) == "bc"


def test_markov_generator_gives_up_after_max_attempts():
    generator = MarkovSyllableGenerator(_chain_graph(), max_attempts=25)
    with pytest.raises(GenerationExhaustedError):
        generator.generate(3, reserved={"abc", "bc"})


def test_markov_generator_rejects_invalid_setup():
    with pytest.raises(ValueError):
        MarkovSyllableGenerator(None)
    with pytest.raises(ValueError):
        MarkovSyllableGenerator(CharGraph(), max_attempts=0)


def test_create_generator():
    assert isinstance(create_generator("counter"), CounterSyllableGenerator)
    graph = _chain_graph()
    markov = create_generator("markov", graph=graph, max_attempts=5)
    assert isinstance(markov, MarkovSyllableGenerator)
    assert markov.max_attempts == 5
    with pytest.raises(ValueError):
        create_generator("markov")
    with pytest.raises(ValueError):
        create_generator("bogus", graph=graph)
