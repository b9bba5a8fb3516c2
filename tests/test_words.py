import pytest

from suggestbox.words import AutoCorrect, Word, WordSort, prefix_match_length, read_words

NAMES = ["Anna", "Annabel", "Bella", "Beth", "Clara", "Ann"]


@pytest.fixture
def bank(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("Anna Annabel\nBella\tBeth\n\nClara  Ann\n", encoding="utf-8")
    return path


def test_word_defaults_to_zero_priority():
    assert Word("Anna").priority == 0


def test_read_words_splits_on_whitespace(bank):
    assert read_words(bank) == NAMES


def test_read_words_missing_file(tmp_path):
    with pytest.raises(OSError, match="Unable to open file"):
        read_words(tmp_path / "missing.txt")


def test_prefix_match_identical():
    for name in NAMES:
        assert prefix_match_length(name, name) == len(name)


def test_prefix_match_stops_at_mismatch():
    assert prefix_match_length("Anxa", "Anna") == 2


def test_prefix_match_empty_input():
    assert prefix_match_length("", "Anna") == 0


def test_prefix_match_bounded_by_shorter():
    assert prefix_match_length("Annabel", "Ann") == len("Ann")
    assert prefix_match_length("Ann", "Annabel") == len("Ann")


def test_sorted_words_descending(bank):
    result = WordSort(bank).sorted_words("Ann")
    priorities = [entry.priority for entry in result]
    assert priorities == sorted(priorities, reverse=True)
    assert sorted(entry.word for entry in result) == sorted(NAMES)


def test_sorted_words_priorities_match_prefix(bank):
    result = WordSort(bank).sorted_words("Be")
    for entry in result:
        assert entry.priority == prefix_match_length("Be", entry.word)


def test_exact_word_ranks_first(bank):
    result = WordSort(bank).sorted_words("Clara")
    assert result[0].word == "Clara"
    assert result[0].priority == len("Clara")


def test_returned_words_are_copies(bank):
    sorter = WordSort(bank)
    first = sorter.sorted_words("Bella")
    sorter.sorted_words("Clara")
    assert first[0].word == "Bella"
    assert first[0].priority == len("Bella")


def test_autocorrect_delegates(bank):
    auto = AutoCorrect(bank)
    result = auto.sorted_words("Annab")
    assert result[0].word == "Annabel"
    assert len(result) == len(NAMES)


def test_autocorrect_missing_file(tmp_path):
    with pytest.raises(OSError):
        AutoCorrect(tmp_path / "nope.txt")