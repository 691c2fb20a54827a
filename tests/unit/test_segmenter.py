"""Unit tests for sentence segmentation."""

import pytest_check as check

from studyprompts.prompts.segmenter import split_sentences


class TestSplitSentences:
    """Tests for split_sentences."""

    def test_empty_input(self) -> None:
        assert split_sentences("") == []

    def test_no_delimiter_returns_whole_text(self) -> None:
        assert split_sentences("no terminator here") == ["no terminator here"]

    def test_splits_on_each_delimiter(self) -> None:
        text = "First statement. Is this a question? What a surprise! Last one"

        assert split_sentences(text) == [
            "First statement",
            "Is this a question",
            "What a surprise",
            "Last one",
        ]

    def test_final_terminator_consumed(self) -> None:
        assert split_sentences("One sentence. Two sentences.") == [
            "One sentence",
            "Two sentences",
        ]

    def test_terminators_not_retained(self) -> None:
        pieces = split_sentences("Alpha. Beta? Gamma! Delta.")

        for piece in pieces:
            check.is_not_in(". ", piece)
            check.is_not_in("? ", piece)
            check.is_not_in("! ", piece)
            check.is_false(piece.endswith((".", "?", "!")))

    def test_punctuation_without_space_does_not_split(self) -> None:
        assert split_sentences("version 2.5 is out") == ["version 2.5 is out"]

    def test_abbreviation_is_split(self) -> None:
        """Abbreviations are not recognized and split like sentence ends."""
        assert split_sentences("Ask Dr. Smith about it") == ["Ask Dr", "Smith about it"]

    def test_consecutive_punctuation_splits_on_last_pair(self) -> None:
        assert split_sentences("Really?! Yes") == ["Really?", "Yes"]

    def test_order_preserved(self) -> None:
        text = ". ".join(f"sentence {i}" for i in range(10))

        assert split_sentences(text) == [f"sentence {i}" for i in range(10)]
