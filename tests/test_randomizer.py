"""Tests for the random letter-case transform."""

from __future__ import annotations

import random

from randomcaser.core.randomizer import PLACEHOLDER_TEXT, graphemes, randomize


def test_empty_string_stays_empty() -> None:
    assert randomize("") == ""
    assert graphemes("") == []


def test_output_is_case_permutation_of_input() -> None:
    text = "Hello, World! The quick brown fox."
    for _ in range(50):
        out = randomize(text)
        assert len(out) == len(text)
        assert out.lower() == text.lower()


def test_case_invariant_text_is_unchanged() -> None:
    text = "0123456789 !?.,;:'\"()[]{} -_/\\ \t\n"
    for _ in range(20):
        assert randomize(text) == text


def test_repeated_calls_usually_differ() -> None:
    text = "abcdefghijklmnopqrstuvwxyz" * 2
    outputs = {randomize(text) for _ in range(10)}
    assert len(outputs) > 1


def test_seeded_rng_is_reproducible() -> None:
    text = "reproducible output"
    assert randomize(text, rng=random.Random(7)) == randomize(text, rng=random.Random(7))


def test_combining_sequences_stay_together() -> None:
    text = "cafe\u0301 nai\u0308ve"
    clusters = graphemes(text)
    assert "e\u0301" in clusters
    assert "i\u0308" in clusters
    assert len(clusters) == 10

    for _ in range(20):
        out = randomize(text)
        assert len(graphemes(out)) == len(clusters)
        assert out.lower() == text.lower()


def test_astral_characters_map_back_to_python_indices() -> None:
    text = "a\U0001F44D\U0001F3FDb"
    assert graphemes(text) == ["a", "\U0001F44D\U0001F3FD", "b"]
    out = randomize(text)
    assert out[1:3] == "\U0001F44D\U0001F3FD"
    assert out.lower() == "a\U0001F44D\U0001F3FDb"


def test_expanding_case_mappings_keep_character_count() -> None:
    text = "straße"
    for _ in range(30):
        out = randomize(text)
        assert len(out) == len(text)
        assert "ß" in out


def test_placeholder_text_value() -> None:
    assert PLACEHOLDER_TEXT == "rAndOmIZeD rEsULt AppEArS hERe"


def test_case_distribution_is_unbiased() -> None:
    text = "a" * 200
    trials = 400
    upper_counts = [0] * len(text)
    for _ in range(trials):
        out = randomize(text)
        for index, ch in enumerate(out):
            if ch.isupper():
                upper_counts[index] += 1

    # Binomial(400, 0.5): sd = 10, so +/-50 is five standard deviations.
    assert all(150 <= count <= 250 for count in upper_counts)
    overall = sum(upper_counts) / (len(text) * trials)
    assert 0.48 <= overall <= 0.52


def test_length_changing_single_cluster_mappings_still_flip() -> None:
    # Lowercasing U+0130 and uppercasing U+01F0 add a combining mark but stay one cluster.
    for text, other in (("\u0130", "i\u0307"), ("\u01f0", "J\u030c")):
        outputs = {randomize(text, rng=random.Random(seed)) for seed in range(40)}
        assert outputs == {text, other}


def test_sharp_s_never_expands() -> None:
    outputs = {randomize("ß", rng=random.Random(seed)) for seed in range(20)}
    assert outputs == {"ß"}
