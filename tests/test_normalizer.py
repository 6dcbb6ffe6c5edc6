from wordtally.text import fold_case, normalize_word, normalize_words, strip_punctuation


def test_strip_punctuation_keeps_ascii_alnum_space_and_hyphen() -> None:
    assert strip_punctuation("test.") == "test"
    assert strip_punctuation("it's") == "its"
    assert strip_punctuation("well-known") == "well-known"
    assert strip_punctuation("a b") == "a b"
    assert strip_punctuation("café") == "caf"
    assert strip_punctuation("R2-D2!") == "R2-D2"


def test_fold_case() -> None:
    assert fold_case("EMERGENCY") == "emergency"
    assert fold_case("MiXeD 42") == "mixed 42"


def test_normalize_word_is_case_and_punctuation_insensitive() -> None:
    assert normalize_word("This") == normalize_word("this") == "this"
    assert normalize_word("test.") == normalize_word("test") == "test"
    assert normalize_word('"Quoted!"') == "quoted"


def test_normalize_word_can_become_empty() -> None:
    assert normalize_word("...") == ""
    assert normalize_word("—") == ""


def test_normalize_word_is_idempotent() -> None:
    for token in ["This", "test.", "Well-Known,", "a b", "¿Qué?", "...", "R2-D2"]:
        once = normalize_word(token)
        assert normalize_word(once) == once


def test_normalize_words_preserves_order_and_length() -> None:
    tokens = ["Hello,", "!!!", "World", "hello"]

    assert normalize_words(tokens) == ["hello", "", "world", "hello"]
