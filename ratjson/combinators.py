from typing import Callable, List

from .input import GenericFailure, ParserError, Success
from .parser import (
    HEX_DIGITS,
    Parser,
    charP,
    digit,
    pure,
    satisfy,
    space,
    thisMany,
)

Predicate = Callable[[str], bool]

# --- Repetition ---


def many(p: Parser) -> Parser:
    def run(inp):
        vals = []
        cur = inp
        while True:
            res = p(cur)
            if isinstance(res, ParserError):
                break
            nxt, v = res
            vals.append(v)
            # a success that consumed nothing would repeat forever
            if nxt.loc == cur.loc:
                break
            cur = nxt
        return Success(cur, vals)

    return Parser(run)


def many1(p: Parser) -> Parser:
    return p.bind(lambda x: many(p).map(lambda xs: [x] + xs))


spaces = many(space).map(lambda cs: "".join(cs))


def tok(p: Parser) -> Parser:
    return p << spaces


def charTok(c: str) -> Parser:
    return tok(charP(c))


commaTok = charTok(",")

quote = charP('"') | charP("'")


def stringP(s: str) -> Parser:
    def run(inp):
        cur = inp
        for c in s:
            res = charP(c)(cur)
            if isinstance(res, ParserError):
                return res
            cur, _ = res
        return Success(cur, s)

    return Parser(run)


def stringTok(s: str) -> Parser:
    return tok(stringP(s))


def choice(parsers: List[Parser], msg: str = "No alternative matched") -> Parser:
    """Try each parser against the same input, keeping the first success.

    Fails with `msg` when every alternative fails.
    """
    parsers = list(parsers)

    def run(inp):
        for p in parsers:
            res = p(inp)
            if not isinstance(res, ParserError):
                return res
        return GenericFailure(inp.loc, msg, inp.preview())

    return Parser(run)


def option(default, p: Parser) -> Parser:
    return p | pure(default)


digits1 = many1(digit).map(lambda cs: "".join(cs))


def oneof(chars: str) -> Parser:
    return satisfy(lambda c: c in chars, f"one of {chars!r}")


def noneof(chars: str) -> Parser:
    return satisfy(lambda c: c not in chars, f"none of {chars!r}")


# --- Structure ---


def between(openP: Parser, closeP: Parser, p: Parser) -> Parser:
    return openP >> p << closeP


def betweenCharTok(openChar: str, closeChar: str, p: Parser) -> Parser:
    return between(charTok(openChar), charTok(closeChar), p)


def sepby1(p: Parser, sep: Parser) -> Parser:
    return p.bind(lambda x: many(sep >> p).map(lambda xs: [x] + xs))


def sepby(p: Parser, sep: Parser) -> Parser:
    return sepby1(p, sep) | pure([])


def betweenSepbyComma(openChar: str, closeChar: str, p: Parser) -> Parser:
    return betweenCharTok(openChar, closeChar, sepby(p, commaTok))


def _eof(inp):
    if inp.exhausted:
        return Success(inp, None)
    return GenericFailure(inp.loc, "Expected end of input", inp.preview())


eof = Parser(_eof)


def satisfyAll(preds: List[Predicate]) -> Parser:
    return satisfy(lambda c: all(pred(c) for pred in preds), "character satisfying all predicates")


def satisfyAny(preds: List[Predicate]) -> Parser:
    return satisfy(lambda c: any(pred(c) for pred in preds), "character satisfying any predicate")


# --- Escapes ---

hexDigit = satisfy(lambda c: c in HEX_DIGITS, "hex digit")


def _hexChar(ds):
    return chr(int("".join(ds), 16))


hexP = charP("u") >> thisMany(4, hexDigit).map(_hexChar)
