import pytest

from ratjson.combinators import (
    between,
    betweenCharTok,
    betweenSepbyComma,
    charTok,
    choice,
    commaTok,
    digits1,
    eof,
    hexP,
    many,
    many1,
    noneof,
    oneof,
    option,
    quote,
    satisfyAll,
    satisfyAny,
    sepby,
    sepby1,
    spaces,
    stringP,
    stringTok,
    tok,
)
from ratjson.input import GenericFailure, ParserError
from ratjson.parser import character, charP, lower, parse, pure


def ok(p, text):
    res = parse(p, text)
    assert not isinstance(res, ParserError), res
    return res.remaining.rest, res.value


def is_error(p, text):
    return isinstance(parse(p, text), ParserError)


def test_many_never_matching():
    assert ok(many(charP("x")), "abc") == ("abc", [])


def test_many_collects():
    assert ok(many(charP("a")), "aaab") == ("b", ["a", "a", "a"])


def test_many_stops_on_empty_success():
    assert ok(many(pure(1)), "abc") == ("abc", [1])


def test_many1():
    assert ok(many1(charP("a")), "aab") == ("b", ["a", "a"])
    assert is_error(many1(charP("a")), "bab")


def test_spaces():
    assert ok(spaces, "  \t\nabc") == ("abc", "  \t\n")
    assert ok(spaces, "abc") == ("abc", "")


def test_tok_and_char_tok():
    assert ok(tok(charP("a")), "a   b") == ("b", "a")
    assert ok(charTok("a"), "a b") == ("b", "a")
    assert ok(commaTok, ",  x") == ("x", ",")


def test_quote():
    assert ok(quote, "'abc") == ("abc", "'")
    assert ok(quote, '"abc') == ("abc", '"')
    assert is_error(quote, "abc")


@pytest.mark.parametrize("s", ["", "a", "abc", "tr ue", "\\u00ff"])
def test_string_matches_itself(s):
    assert ok(stringP(s), s) == ("", s)
    assert ok(stringP(s), s + "extra") == ("extra", s)


def test_string_mismatch():
    assert is_error(stringP("abc"), "bcdef")
    assert is_error(stringP("abc"), "ab")


def test_string_tok():
    assert ok(stringTok("abc"), "abc  ") == ("", "abc")
    assert is_error(stringTok("abc"), "bc  ")


def test_string_backtracks_under_choice():
    assert ok(stringP("abd") | stringP("abc"), "abcx") == ("x", "abc")


def test_option():
    assert ok(option("x", character), "abc") == ("bc", "a")
    assert ok(option("x", character), "") == ("", "x")


def test_digits1():
    assert ok(digits1, "123") == ("", "123")
    assert is_error(digits1, "abc123")


def test_oneof_noneof():
    assert ok(oneof("abc"), "bcdef") == ("cdef", "b")
    assert is_error(oneof("abc"), "def")
    assert ok(noneof("bcd"), "abc") == ("bc", "a")
    assert is_error(noneof("abcd"), "abc")


def test_between():
    p = between(charP("["), charP("]"), character)
    assert ok(p, "[a]") == ("", "a")
    assert is_error(p, "[abc]")
    assert is_error(p, "[abc")
    assert is_error(p, "abc]")


def test_between_char_tok():
    p = betweenCharTok("[", "]", character)
    assert ok(p, "[a] x") == ("x", "a")
    assert ok(p, "[ a]") == ("", "a")
    assert is_error(p, "[abc]")
    assert is_error(p, "abc]")


def test_hex():
    assert ok(hexP, "u0010") == ("", "\x10")
    assert ok(hexP, "u0a1f") == ("", "\u0a1f")
    assert ok(hexP, "u00FFxyz") == ("xyz", "\xff")
    assert is_error(hexP, "0010")
    assert is_error(hexP, "u001")
    assert is_error(hexP, "u0axf")


def test_sepby1():
    p = sepby1(character, charP(","))
    assert ok(p, "a") == ("", ["a"])
    assert ok(p, "a,b,c") == ("", ["a", "b", "c"])
    assert ok(p, "a,b,c,,def") == ("def", ["a", "b", "c", ","])
    assert is_error(p, "")


def test_sepby():
    p = sepby(character, charP(","))
    assert ok(p, "") == ("", [])
    assert ok(p, "a") == ("", ["a"])
    assert ok(p, "a,b,c") == ("", ["a", "b", "c"])
    assert ok(p, "a,b,c,,def") == ("def", ["a", "b", "c", ","])


def test_sepby_dangling_separator_left_unconsumed():
    assert ok(sepby(lower, charP(",")), "a,b,") == (",", ["a", "b"])


def test_eof():
    assert ok(eof, "") == ("", None)
    assert is_error(eof, "abc")


def test_satisfy_all():
    p = satisfyAll([str.isupper, lambda c: c != "X"])
    assert ok(p, "ABC") == ("BC", "A")
    assert ok(p, "ABc") == ("Bc", "A")
    assert is_error(p, "XBc")
    assert is_error(p, "")
    assert is_error(p, "abc")


def test_satisfy_any():
    p = satisfyAny([str.islower, lambda c: c != "X"])
    assert ok(p, "abc") == ("bc", "a")
    assert ok(p, "ABc") == ("Bc", "A")
    assert is_error(p, "XBc")
    assert is_error(p, "")


def test_between_sepby_comma():
    p = betweenSepbyComma("[", "]", lower)
    assert ok(p, "[a]") == ("", ["a"])
    assert ok(p, "[]") == ("", [])
    assert ok(betweenSepbyComma("[", "]", tok(lower)), "[ a , b ,c ]") == ("", ["a", "b", "c"])
    assert is_error(p, "[A]")
    assert is_error(p, "[abc]")
    assert is_error(p, "[a")
    assert is_error(p, "a]")


def test_choice_first_success_wins():
    p = choice([charP("x"), charP("a"), character])
    assert ok(p, "abc") == ("bc", "a")


def test_choice_retries_from_same_input():
    p = choice([stringP("abd"), stringP("abc")])
    assert ok(p, "abcx") == ("x", "abc")


def test_choice_exhausted():
    res = parse(choice([charP("x"), charP("y")], "Expected x or y"), "abc")
    assert isinstance(res, GenericFailure)
    assert res.msg == "Expected x or y"
    assert is_error(choice([]), "abc")
