"""Unit tests for decorative group names."""

import random

import pytest

from group_generator.naming import ADJECTIVES, NOUNS, RandomGroupNamer, generate_group_name


class TestRandomGroupNamer:
    def test_name_is_adjective_then_noun(self):
        namer = RandomGroupNamer(random.Random(3))

        for i in range(50):
            adjective, noun = namer.name_group(i).split(" ")
            assert adjective in ADJECTIVES
            assert noun in NOUNS

    def test_word_list_sizes(self):
        assert len(ADJECTIVES) == 16
        assert len(NOUNS) == 9

    def test_same_seed_same_names(self):
        a = RandomGroupNamer(random.Random(5))
        b = RandomGroupNamer(random.Random(5))

        assert [a.name_group(i) for i in range(5)] == [b.name_group(i) for i in range(5)]

    def test_custom_word_lists(self):
        namer = RandomGroupNamer(random.Random(0), adjectives=["Quiet"], nouns=["Owls"])
        assert namer.name_group(0) == "Quiet Owls"

    @pytest.mark.parametrize("kwargs", [{"adjectives": []}, {"nouns": ()}])
    def test_empty_word_list_rejected(self, kwargs):
        with pytest.raises(ValueError, match="must not be empty"):
            RandomGroupNamer(**kwargs)


def test_generate_group_name_uses_fixed_lists():
    adjective, noun = generate_group_name().split(" ")
    assert adjective in ADJECTIVES
    assert noun in NOUNS
