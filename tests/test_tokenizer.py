import pytest

from credential_assistant.assistant.tokenizer import tokenize


def test_spec_example_question():
    assert tokenize("How do I issue a credential") == ["issue", "credential"]


def test_punctuation_is_stripped_and_case_folded():
    assert tokenize("What's the PRICE?!") == ["whats", "price"]


def test_short_tokens_dropped_after_stripping():
    assert tokenize("a!! ok.. ??? ipfs") == ["ipfs"]


def test_stopwords_matched_before_stripping():
    assert tokenize("How? what! Can...") == ["how", "what", "can"]
    assert tokenize("how what can") == []


def test_only_ascii_word_characters_survive():
    assert tokenize("café ça snake_case") == ["caf", "snake_case"]


def test_duplicates_are_kept_in_order():
    assert tokenize("credential Credential wallet") == [
        "credential",
        "credential",
        "wallet",
    ]


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "the and for with", "to in on"])
def test_empty_results(text):
    assert tokenize(text) == []


def test_deterministic():
    text = "Can a soulbound token be burned?"
    assert tokenize(text) == tokenize(text) == ["soulbound", "token", "burned"]
