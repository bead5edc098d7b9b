"""Tests for the recursive splitting strategy."""

from unittest.mock import patch

import pytest

from splitkit.chunking.unified.recursive_strategy import RecursiveTextSplitter
from splitkit.chunking.unified.separators import DEFAULT_SEPARATORS


@pytest.fixture()
def splitter() -> RecursiveTextSplitter:
    return RecursiveTextSplitter()


def test_descends_to_words_only_for_oversized_paragraph(splitter: RecursiveTextSplitter) -> None:
    chunks = splitter.split_text("Para one.\n\nPara two is slightly longer.", 20, 5)

    assert chunks == ["Para one.", "Para two is", "is slightly longer."]
    assert all(len(chunk) <= 20 for chunk in chunks)


def test_empty_text_returns_no_chunks(splitter: RecursiveTextSplitter) -> None:
    assert splitter.split_text("", 100, 10) == []


def test_whitespace_only_text_returns_no_chunks(splitter: RecursiveTextSplitter) -> None:
    assert splitter.split_text("   \n\n\t  ", 100, 10) == []
    assert splitter.split_text("   \n\n\t  ", 2, 0) == []


def test_single_word_falls_to_character_level() -> None:
    """Test a word without spaces is packed per character."""
    splitter = RecursiveTextSplitter(separators=[" ", ""])
    word = "abcdefghij" * 5

    chunks = splitter.split_text(word, 10, 0)

    assert chunks == ["abcdefghij"] * 5
    assert "".join(chunks) == word


def test_paragraphs_are_packed_together(splitter: RecursiveTextSplitter) -> None:
    text = "First paragraph.\n\nSecond paragraph.\n\nThird paragraph."

    chunks = splitter.split_text(text, 40, 0)

    assert chunks == ["First paragraph.\n\nSecond paragraph.", "Third paragraph."]


def test_line_separator_used_without_paragraphs(splitter: RecursiveTextSplitter) -> None:
    assert splitter.split_text("line one\nline two", 10, 0) == ["line one", "line two"]


def test_overlap_seeds_next_chunk(splitter: RecursiveTextSplitter) -> None:
    text = "alpha bravo charlie delta echo foxtrot golf hotel"

    chunks = splitter.split_text(text, 20, 8)

    assert chunks == [
        "alpha bravo charlie",
        "charlie delta echo",
        "echo foxtrot golf",
        "golf hotel",
    ]


def test_overlap_is_an_upper_bound(splitter: RecursiveTextSplitter) -> None:
    """Test whole-segment eviction never repeats more than chunk_overlap characters."""
    text = "a bb ccc dddddddd e ffffffffff gg h iiiiiii jjj kkkkkkkkkkkk l"
    overlap = 6

    chunks = splitter.split_text(text, 16, overlap)

    for previous, current in zip(chunks, chunks[1:]):
        shared = max(
            (k for k in range(1, min(len(previous), len(current)) + 1) if previous[-k:] == current[:k]),
            default=0,
        )
        assert shared <= overlap


def test_character_level_overlap() -> None:
    splitter = RecursiveTextSplitter(separators=[""])

    chunks = splitter.split_text("abcdefghijklmnopqrst", 10, 3)

    assert chunks == ["abcdefghij", "hijklmnopq", "opqrst"]


def test_overlap_larger_than_size_terminates(splitter: RecursiveTextSplitter) -> None:
    assert splitter.split_text("aaaa bbbb cccc", 5, 10) == ["aaaa", "bbbb", "cccc"]


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_non_positive_size_returns_trimmed_text(splitter: RecursiveTextSplitter, chunk_size: int) -> None:
    assert splitter.split_text("  hello world  ", chunk_size, 0) == ["hello world"]
    assert splitter.split_text("   ", chunk_size, 0) == []


def test_atomic_segment_is_emitted_whole() -> None:
    """Test a segment no remaining separator can split is not truncated."""
    splitter = RecursiveTextSplitter(separators=[" "])

    chunks = splitter.split_text("short averyveryverylongword", 10, 0)

    assert chunks == ["short", "averyveryverylongword"]


def test_lengths_are_code_points(splitter: RecursiveTextSplitter) -> None:
    chunks = splitter.split_text("héllo wörld ñandú", 6, 0)

    assert chunks == ["héllo", "wörld", "ñandú"]


def test_chunks_are_trimmed(splitter: RecursiveTextSplitter) -> None:
    chunks = splitter.split_text("  leading words  \n\n  trailing words  ", 20, 0)

    assert chunks == ["leading words", "trailing words"]


class TestSeparatorSelection:
    def test_first_present_separator_wins(self) -> None:
        assert RecursiveTextSplitter._select_separator("a\nb c", DEFAULT_SEPARATORS) == ("\n", (" ", ""))

    def test_empty_separator_always_usable(self) -> None:
        assert RecursiveTextSplitter._select_separator("abc", DEFAULT_SEPARATORS) == ("", ())

    def test_no_usable_separator(self) -> None:
        assert RecursiveTextSplitter._select_separator("abc", ["\n\n", "\n"]) is None
        assert RecursiveTextSplitter._select_separator("abc", []) is None

    def test_segment_drops_empty_pieces(self) -> None:
        assert RecursiveTextSplitter._segment("a  b", " ") == ["a", "b"]
        assert RecursiveTextSplitter._segment("\n\na\n\n\n\nb\n\n", "\n\n") == ["a", "b"]
        assert RecursiveTextSplitter._segment("añ", "") == ["a", "ñ"]


def test_recursion_only_for_oversized_segments(splitter: RecursiveTextSplitter) -> None:
    text = "tiny\n\n" + "word " * 10

    with patch.object(splitter, "_split_at", wraps=splitter._split_at) as spy:
        splitter.split_text(text, 20, 0)

    # Top level plus one descent for the long paragraph
    assert spy.call_count == 2
    assert spy.call_args_list[1].args[1] == ("\n", " ", "")


def test_custom_separators_and_repr() -> None:
    splitter = RecursiveTextSplitter(separators=["|", ""], name="pipes")

    assert splitter.name == "pipes"
    assert splitter.split_text("aa|bb|cc", 6, 0) == ["aa|bb", "cc"]
    assert repr(splitter) == "RecursiveTextSplitter(name='pipes', separators=['|', ''])"


def test_deterministic(splitter: RecursiveTextSplitter) -> None:
    text = "Lorem ipsum dolor sit amet.\n\nConsectetur adipiscing elit.\nSed do eiusmod." * 5

    assert splitter.split_text(text, 50, 10) == splitter.split_text(text, 50, 10)


@pytest.mark.asyncio()
async def test_split_text_async_delegates_to_sync(splitter: RecursiveTextSplitter) -> None:
    with patch.object(splitter, "split_text", return_value=["sentinel"]) as mock_split:
        result = await splitter.split_text_async("sample text", 50, 5)

    mock_split.assert_called_once_with("sample text", 50, 5)
    assert result == ["sentinel"]


@pytest.mark.asyncio()
async def test_split_text_async_empty_text(splitter: RecursiveTextSplitter) -> None:
    assert await splitter.split_text_async("") == []
