from short_answer_grader.models import Answer
from short_answer_grader.textutils import normalize_text, normalize_word, split_raw_words


def test_normalize_text_strips_punctuation_and_whitespace():
    assert normalize_text("  Hello,   World!\tIt's  ") == "hello world its"
    assert normalize_text("") == ""
    assert normalize_text(" ?! ") == ""


def test_split_raw_words_keeps_tokens_unmodified():
    assert split_raw_words("  The cat,  sat ") == ["The", "cat,", "sat"]
    assert split_raw_words("   ") == []


def test_normalize_word_matches_normalize_text():
    text = "The Cat's hat, quickly!"
    words = [normalize_word(word) for word in split_raw_words(text)]
    assert " ".join(words) == normalize_text(text)


def test_answer_skips_punctuation_only_tokens():
    answer = Answer.from_text("The cat - sat.")
    assert answer.raw_words == ("The", "cat", "-", "sat.")
    assert answer.normalized_words == ("the", "cat", "sat")
    assert answer.raw_indices == (0, 1, 3)
    assert answer.raw_index(2) == 3
    assert answer.raw_index(3) == len(answer.raw_words)
    assert not answer.is_empty
    assert Answer.from_text(" -- ").is_empty
