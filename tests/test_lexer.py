import pytest
from lexer import tokenize, Token, TokenType, LexError

def test_tokenize_operators():
    assert tokenize("A and B or C -> D") == [
        Token(TokenType.ID, "A"), Token(TokenType.AND),
        Token(TokenType.ID, "B"), Token(TokenType.OR),
        Token(TokenType.ID, "C"), Token(TokenType.IMPLIES),
        Token(TokenType.ID, "D")]

def test_tokenize_punctuation_and_reserved_words():
    kinds = [t.kind for t in tokenize("forall x : exists y (not x)")]
    assert kinds == [TokenType.FORALL, TokenType.ID, TokenType.COL,
                     TokenType.EXISTS, TokenType.ID, TokenType.LP,
                     TokenType.NOT, TokenType.ID, TokenType.RP]

def test_iff_is_an_identifier():
    assert tokenize("iff") == [Token(TokenType.ID, "iff")]

def test_identifiers_and_numerals():
    assert tokenize("a1 42 007") == [Token(TokenType.ID, "a1"),
        Token(TokenType.CONST, 42), Token(TokenType.CONST, 7)]
    # a numeral ends at the first non digit
    assert tokenize("12abc") == [Token(TokenType.CONST, 12), Token(TokenType.ID, "abc")]
    # keywords are only recognised as whole words
    assert tokenize("andor") == [Token(TokenType.ID, "andor")]

def test_no_space_needed_around_arrow():
    assert [t.kind for t in tokenize("A->B")] == \
           [TokenType.ID, TokenType.IMPLIES, TokenType.ID]

def test_empty_and_blank_input():
    assert tokenize("") == []
    assert tokenize("   ") == []

def test_dash_without_arrow():
    with pytest.raises(LexError) as info:
        tokenize("A - B")
    assert info.value.pos == 2
    with pytest.raises(LexError):
        tokenize("A -")

def test_unexpected_characters():
    for text in ["A & B", "A\tB", "x_1", "A, B", "é"]:
        with pytest.raises(LexError):
            tokenize(text)
