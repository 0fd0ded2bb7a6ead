from short_answer_grader.edit_distance import damerau_levenshtein

PAIRS = [
    ("kitten", "sitting"),
    ("seperate", "separate"),
    ("ca", "abc"),
    ("teh", "the"),
    ("", "word"),
    ("abcdef", "badcfe"),
]


def test_identical_and_empty_strings():
    assert damerau_levenshtein("grade", "grade") == 0
    assert damerau_levenshtein("", "") == 0
    assert damerau_levenshtein("", "abc") == 3
    assert damerau_levenshtein("abcd", "") == 4


def test_adjacent_transposition_costs_one():
    assert damerau_levenshtein("ab", "ba") == 1
    assert damerau_levenshtein("teh", "the") == 1
    assert damerau_levenshtein("sat", "sta") == 1


def test_known_distances():
    assert damerau_levenshtein("kitten", "sitting") == 3
    assert damerau_levenshtein("seperate", "separate") == 1
    assert damerau_levenshtein("cat", "dog") == 3
    assert damerau_levenshtein("abcdef", "badcfe") == 3


def test_transposition_followed_by_insertion():
    # The restricted (optimal string alignment) variant gives 3 here.
    assert damerau_levenshtein("ca", "abc") == 2


def test_distance_is_symmetric():
    for source, target in PAIRS:
        assert damerau_levenshtein(source, target) == damerau_levenshtein(
            target, source
        )
