import pytest

from lipi.services.devanagari import (
    CONSONANTS,
    HALANT,
    VOWELS,
    TokenKind,
    is_passthrough,
    match_consonant,
    match_vowel,
    tokenize,
    transliterate,
)


def test_empty_input():
    assert transliterate("") == ""
    assert tokenize("") == []


def test_none_is_treated_as_empty():
    assert transliterate(None) == ""


@pytest.mark.parametrize("text,expected", [
    ("ka", "क"),
    ("rtu", "र्तु"),
    ("kab", "कब्"),
    ("namaste", "नमस्ते"),
    ("k.", "क्."),
    ("a.", "अ."),
    ("kaa", "का"),
    ("kai", "कै"),
    ("aai", "आइ"),
    ("gupta", "गुप्त"),
    ("shiv", "शिव्"),
    ("ram lal", "रम् लल्"),
    ("fa", "फ़"),
    ("₹100", "₹100"),
    ("k😀", "क्😀"),
])
def test_known_words(text, expected):
    assert transliterate(text) == expected


def test_inherent_vowel_has_no_mark():
    out = transliterate("ka")
    assert out == "क"
    assert len(out) == 1


def test_case_insensitive():
    assert transliterate("Ka") == transliterate("ka")
    assert transliterate("NAMASTE") == "नमस्ते"


def test_pure_and_repeatable():
    first = transliterate("chhote lal")
    second = transliterate("chhote lal")
    assert first == second
    assert transliterate("k") == "क" + HALANT


def test_three_letter_keys_win_over_prefixes():
    three = [(k, g) for k, g in CONSONANTS if len(k) == 3]
    assert three
    for key, glyph in three:
        assert transliterate(key) == glyph + HALANT
        assert transliterate(key + "a") == glyph


def test_two_letter_keys_win_over_prefixes():
    assert transliterate("kha") == "ख"
    assert transliterate("bhai") == "भै"
    assert transliterate("aa") == "आ"


def test_tables_are_longest_first():
    for table in (CONSONANTS, VOWELS):
        lengths = [len(entry[0]) for entry in table]
        assert lengths == sorted(lengths, reverse=True)


def test_table_keys_unique_and_lowercase():
    for table in (CONSONANTS, VOWELS):
        keys = [entry[0] for entry in table]
        assert len(keys) == len(set(keys))
        assert all(k == k.lower() and 1 <= len(k) <= 3 for k in keys)


def test_matra_rules():
    for key, standalone, matra in VOWELS:
        if key == "a":
            assert matra == ""
        else:
            assert matra
            assert matra != standalone
    matras = [m for _, _, m in VOWELS if m]
    assert len(matras) == len(set(matras))


def test_matchers():
    assert match_consonant("chhota", 0) == ("chh", "छ")
    assert match_consonant("xyz", 0) is None
    assert match_vowel("kaise", 1) == ("ai", "ऐ", "ै")
    assert match_vowel("kaise", 0) is None


def test_passthrough_class():
    for ch in " \t5.,!?;:-_()₹/\\@#$%^&*+=":
        assert is_passthrough(ch)
    for ch in "ka😀'":
        assert not is_passthrough(ch)


def test_tokenize_reports_each_step():
    tokens = tokenize("kab 1")
    assert [t.kind for t in tokens] == [
        TokenKind.CONSONANT,
        TokenKind.VOWEL,
        TokenKind.CONSONANT,
        TokenKind.PASSTHROUGH,
        TokenKind.PASSTHROUGH,
    ]
    assert tokens[1].output == ""
    assert tokens[3].output == HALANT + " "
    assert "".join(t.source for t in tokens) == "kab 1"


def test_unknown_character_closes_consonant():
    tokens = tokenize("k'")
    assert tokens[-1].kind is TokenKind.UNKNOWN
    assert transliterate("k'") == "क" + HALANT + "'"
