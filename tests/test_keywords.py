import pytest

from identnorm.core import RUST_KEYWORDS, Symbol, is_keyword


@pytest.mark.parametrize(
    "word",
    ["fn", "type", "match", "Self", "self", "async", "await", "dyn", "try", "yield", "box", "macro"],
)
def test_reserved_words_are_keywords(word):
    assert is_keyword(word)


@pytest.mark.parametrize(
    "word",
    ["Fn", "TYPE", "types", "union", "macro_rules", "name", "", "r#type", "Self_", " fn"],
)
def test_non_keywords(word):
    assert not is_keyword(word)


def test_keyword_table_size():
    assert len(RUST_KEYWORDS) == 56


def test_keyword_table_is_immutable():
    assert isinstance(RUST_KEYWORDS, frozenset)
    with pytest.raises(AttributeError):
        RUST_KEYWORDS.add("union")


def test_symbol_lookup_uses_raw_text():
    assert is_keyword(Symbol("loop"))
    assert not is_keyword(Symbol("looping"))
