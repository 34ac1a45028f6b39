"""
Unit Tests for the forum topic summarizer
Tests for: filtering, OR-merge of pins, ordering, default topic promotion
"""
import random

import pytest

from app.modules.forum.topics import (
    DEFAULT_TOPIC,
    MessageTopicTag,
    TopicSummary,
    summarize,
)

TOPIC_POOL = ["Genel", "Güvenlik", "Rapor", "Anket", "Zemin", "Çevre", "İthalat", "Ilık", "ödeme", "Şartname"]


def tag(topic, pinned=False):
    return MessageTopicTag(topic=topic, is_pinned=pinned)


def random_tags(rng: random.Random, size: int):
    pool = TOPIC_POOL + [None, "", "   "]
    return [tag(rng.choice(pool), rng.random() < 0.3) for _ in range(size)]


class TestExampleScenarios:
    """Reference inputs and their expected topic lists"""

    def test_default_topic_forced_first(self):
        result = summarize([tag("Genel"), tag("Güvenlik", True), tag("Genel")], default_topic="Genel")

        assert result == [TopicSummary("Genel", False), TopicSummary("Güvenlik", True)]

    def test_plain_alphabetic_when_default_absent(self):
        result = summarize([tag("Zemin"), tag("Anket")], default_topic="Genel")

        assert result == [TopicSummary("Anket", False), TopicSummary("Zemin", False)]

    def test_duplicate_topics_merge_to_pinned(self):
        result = summarize([tag("Rapor", False), tag("Rapor", True)])

        assert result == [TopicSummary("Rapor", True)]

    def test_null_and_blank_topics_dropped(self):
        result = summarize([tag(None, True), tag("  ", False)])

        assert result == []


class TestFiltering:

    def test_empty_input(self):
        assert summarize([]) == []

    def test_accepts_any_iterable(self):
        result = summarize(tag(t) for t in ["B", "A"])

        assert [s.topic for s in result] == ["A", "B"]

    def test_labels_are_not_trimmed(self):
        """Whitespace only decides blankness; labels are emitted as stored"""
        result = summarize([tag(" Rapor")])

        assert result == [TopicSummary(" Rapor", False)]


class TestPinMerge:

    @pytest.mark.parametrize("flags", [
        [True, False, False],
        [False, False, True],
        [False, True, False],
    ])
    def test_pin_is_or_of_all_tags(self, flags):
        result = summarize([tag("Rapor", f) for f in flags])

        assert result == [TopicSummary("Rapor", True)]

    def test_unpinned_when_no_tag_pinned(self):
        result = summarize([tag("Rapor"), tag("Rapor")])

        assert result == [TopicSummary("Rapor", False)]


class TestOrdering:

    def test_pinned_before_unpinned(self):
        result = summarize([tag("Anket"), tag("Zemin", True)])

        assert [s.topic for s in result] == ["Zemin", "Anket"]

    def test_pinned_group_sorted_alphabetically(self):
        result = summarize([tag("Zemin", True), tag("Çevre", True), tag("Anket", True)])

        assert [s.topic for s in result] == ["Anket", "Çevre", "Zemin"]

    def test_turkish_letters_not_byte_order(self):
        result = summarize([tag("Zemin"), tag("Şartname"), tag("Sözleşme"), tag("Çevre"), tag("Dosya")])

        assert [s.topic for s in result] == ["Çevre", "Dosya", "Sözleşme", "Şartname", "Zemin"]

    def test_default_promoted_even_when_pinned_topics_exist(self):
        result = summarize([tag("Anket", True), tag("Zemin", True), tag("Genel")])

        assert [s.topic for s in result] == ["Genel", "Anket", "Zemin"]
        assert result[0].is_pinned is False

    def test_pinned_default_keeps_pin(self):
        result = summarize([tag("Anket"), tag("Genel", True)])

        assert result[0] == TopicSummary("Genel", True)


class TestDefaultTopic:

    def test_default_value(self):
        assert DEFAULT_TOPIC == "Genel"

    def test_default_not_synthesized(self):
        result = summarize([tag("Anket")])

        assert all(s.topic != "Genel" for s in result)

    def test_custom_default(self):
        result = summarize([tag("Anket"), tag("Zemin")], default_topic="Zemin")

        assert [s.topic for s in result] == ["Zemin", "Anket"]

    @pytest.mark.parametrize("default", [None, "", "   "])
    def test_blank_default_disables_promotion(self, default):
        result = summarize([tag("Zemin"), tag("Anket")], default_topic=default)

        assert [s.topic for s in result] == ["Anket", "Zemin"]

    def test_default_match_is_exact(self):
        result = summarize([tag("genel"), tag("Anket")], default_topic="Genel")

        assert [s.topic for s in result] == ["Anket", "genel"]


class TestProperties:
    """Properties checked over seeded random inputs"""

    @pytest.mark.parametrize("seed", range(25))
    def test_unique_complete_and_sound(self, seed):
        tags = random_tags(random.Random(seed), 30)
        result = summarize(tags)

        topics = [s.topic for s in result]
        expected = {t.topic for t in tags if t.topic is not None and t.topic.strip()}
        assert len(topics) == len(set(topics))
        assert set(topics) == expected

    @pytest.mark.parametrize("seed", range(25))
    def test_pin_is_monotonic_or(self, seed):
        tags = random_tags(random.Random(seed), 30)
        result = {s.topic: s.is_pinned for s in summarize(tags)}

        for topic, pinned in result.items():
            assert pinned == any(t.is_pinned for t in tags if t.topic == topic)

    @pytest.mark.parametrize("seed", range(25))
    def test_default_first_when_present(self, seed):
        tags = random_tags(random.Random(seed), 30)
        result = summarize(tags, default_topic="Genel")

        if any(t.topic == "Genel" for t in tags):
            assert result[0].topic == "Genel"
        else:
            assert all(s.topic != "Genel" for s in result)

    @pytest.mark.parametrize("seed", range(25))
    def test_idempotent_on_own_output(self, seed):
        first = summarize(random_tags(random.Random(seed), 30))
        second = summarize([MessageTopicTag(s.topic, s.is_pinned) for s in first])

        assert second == first

    @pytest.mark.parametrize("seed", range(10))
    def test_independent_of_input_order(self, seed):
        rng = random.Random(seed)
        tags = random_tags(rng, 30)
        shuffled = list(tags)
        rng.shuffle(shuffled)

        assert summarize(shuffled) == summarize(tags)

    def test_input_not_mutated(self):
        tags = [tag("Zemin"), tag("Anket", True)]
        snapshot = list(tags)

        summarize(tags)

        assert tags == snapshot
