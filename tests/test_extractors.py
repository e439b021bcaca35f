"""Tests for entity extractors and the extractor registry."""

import asyncio

import pytest

from nlu.extractors import BooleanExtractor, CompositeExtractor, Extractor
from nlu.models import Entity


class StaticExtractor(Extractor):
    """Экстрактор с фиксированным результатом и задержкой."""

    def __init__(self, name, delay=0.0, log=None, as_dict=False):
        self.name = name
        self.delay = delay
        self.log = log if log is not None else []
        self.as_dict = as_dict
        self.calls = 0

    async def compute(self, sentence):
        self.calls += 1
        await asyncio.sleep(self.delay)
        self.log.append(self.name)
        if self.as_dict:
            return [{"dim": self.name, "value": sentence}]
        return [Entity(dim=self.name, value=sentence)]


class FailingExtractor(Extractor):
    async def compute(self, sentence):
        raise RuntimeError("extractor misconfigured")


class TestCompositeExtractor:
    """Tests for the order-preserving merge."""

    @pytest.mark.asyncio
    async def test_merge_order_ignores_completion_order(self):
        completed = []
        slow = StaticExtractor("a", delay=0.05, log=completed)
        fast = StaticExtractor("b", delay=0.0, log=completed)

        entities = await CompositeExtractor([slow, fast]).compute("hello")

        assert completed == ["b", "a"]
        assert [e.dim for e in entities] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_merge_is_stable_across_calls(self):
        extractor = CompositeExtractor([
            StaticExtractor("a", delay=0.02),
            StaticExtractor("b", delay=0.01),
            StaticExtractor("c"),
        ])

        first = await extractor.compute("x")
        second = await extractor.compute("x")

        assert [e.dim for e in first] == ["a", "b", "c"]
        assert first == second

    @pytest.mark.asyncio
    async def test_same_sentence_for_every_extractor(self):
        extractor = CompositeExtractor([StaticExtractor("a"), StaticExtractor("b")])

        entities = await extractor.compute("same sentence")

        assert {e.value for e in entities} == {"same sentence"}

    @pytest.mark.asyncio
    async def test_dict_results_are_normalized(self):
        extractor = CompositeExtractor([StaticExtractor("color", as_dict=True)])

        entities = await extractor.compute("red")

        assert entities == [Entity(dim="color", value="red")]

    @pytest.mark.asyncio
    async def test_failure_propagates(self):
        extractor = CompositeExtractor([StaticExtractor("a"), FailingExtractor()])

        with pytest.raises(RuntimeError, match="misconfigured"):
            await extractor.compute("hello")

    @pytest.mark.asyncio
    async def test_failure_cancels_slow_siblings(self):
        completed = []
        slow = StaticExtractor("slow", delay=0.05, log=completed)
        extractor = CompositeExtractor([FailingExtractor(), slow])

        with pytest.raises(RuntimeError):
            await extractor.compute("hello")
        await asyncio.sleep(0.1)

        assert slow.calls == 1
        assert completed == []

    @pytest.mark.asyncio
    async def test_second_failure_is_collected(self):
        extractor = CompositeExtractor([FailingExtractor(), FailingExtractor()])

        with pytest.raises(RuntimeError):
            await extractor.compute("hello")

    @pytest.mark.asyncio
    async def test_empty_registry(self):
        assert await CompositeExtractor([]).compute("hello") == []


class TestBooleanExtractor:
    """Tests for the built-in boolean extractor."""

    @pytest.mark.asyncio
    async def test_yes(self):
        entities = await BooleanExtractor(locale="en").compute("Yes please")

        assert len(entities) == 1
        assert entities[0].dim == "system:boolean"
        assert entities[0].value is True
        assert entities[0].body == "Yes"
        assert (entities[0].start, entities[0].end) == (0, 3)

    @pytest.mark.asyncio
    async def test_no_way_is_one_entity(self):
        entities = await BooleanExtractor(locale="en").compute("no way")

        assert [(e.value, e.body) for e in entities] == [(False, "no way")]

    @pytest.mark.asyncio
    async def test_french(self):
        entities = await BooleanExtractor(locale="fr").compute("oui, bien sûr")

        assert [e.value for e in entities] == [True, True]

    @pytest.mark.asyncio
    async def test_word_boundaries(self):
        entities = await BooleanExtractor(locale="en").compute("turn off the knob")

        assert entities == []

    def test_unknown_locale(self):
        with pytest.raises(ValueError):
            BooleanExtractor(locale="xx")
