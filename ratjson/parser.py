from typing import Any, Callable, Iterable, List, Optional

from .input import (
    GenericFailure,
    Input,
    ParseResult,
    ParserError,
    PredicateNotSatisfied,
    Success,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    input_uncons,
)

# --- Parser abstraction ---


class Parser:
    """A function from Input to ParseResult.

    Parsers are plain values: combinators build new parsers and never touch
    the ones they are given, so a parser can be reused on any number of inputs.
    """

    __slots__ = ("func",)

    def __init__(self, func: Callable[[Input], ParseResult]):
        self.func = func

    def __call__(self, inp: Input) -> ParseResult:
        return self.func(inp)

    def map(self, f: Callable[[Any], Any]) -> "Parser":
        def run(inp):
            res = self(inp)
            if isinstance(res, ParserError):
                return res
            inp2, x = res
            return Success(inp2, f(x))

        return Parser(run)

    def bind(self, f: Callable[[Any], "Parser"]) -> "Parser":
        def run(inp):
            res = self(inp)
            if isinstance(res, ParserError):
                return res
            inp2, x = res
            return f(x)(inp2)

        return Parser(run)

    def or_else(self, other: "Parser") -> "Parser":
        "Ordered choice; `other` always sees the original input"

        def run(inp):
            res = self(inp)
            if isinstance(res, ParserError):
                return other(inp)
            return res

        return Parser(run)

    def __or__(self, other: "Parser") -> "Parser":
        return self.or_else(other)

    def __rshift__(self, other: "Parser") -> "Parser":
        "Sequencing, discarding first result"
        return self.bind(lambda _: other)

    def __lshift__(self, other: "Parser") -> "Parser":
        "Sequencing, discarding second result"
        return self.bind(lambda x: other.map(lambda _: x))


def pure(x) -> Parser:
    return Parser(lambda inp: Success(inp, x))


def fail(msg: str) -> Parser:
    return Parser(lambda inp: GenericFailure(inp.loc, msg, inp.preview()))


def lazy(thunk: Callable[[], Parser]) -> Parser:
    """Defer building a parser until it runs, for recursive rules."""
    return Parser(lambda inp: thunk()(inp))


# --- Single characters ---


def _character(inp: Input) -> ParseResult:
    chs = input_uncons(inp)
    if chs is None:
        return UnexpectedEndOfInput(inp.loc)
    y, ys = chs
    return Success(ys, y)


character = Parser(_character)


def satisfy(pred: Callable[[str], bool], desc: Optional[str] = None) -> Parser:
    def run(inp):
        chs = input_uncons(inp)
        if chs is None:
            return UnexpectedEndOfInput(inp.loc, desc)
        y, ys = chs
        if pred(y):
            return Success(ys, y)
        return PredicateNotSatisfied(inp.loc, y, desc, inp.preview())

    return Parser(run)


def charP(x: str) -> Parser:
    def run(inp):
        chs = input_uncons(inp)
        if chs is None:
            return UnexpectedEndOfInput(inp.loc, repr(x))
        y, ys = chs
        if y != x:
            return UnexpectedCharacter(inp.loc, y, repr(x), inp.preview())
        return Success(ys, y)

    return Parser(run)


DIGITS = "0123456789"
HEX_DIGITS = "0123456789abcdefABCDEF"

digit = satisfy(lambda c: c in DIGITS, "digit")
space = satisfy(str.isspace, "whitespace")
lower = satisfy(str.islower, "lowercase letter")


def sequenceParser(parsers: Iterable[Parser]) -> Parser:
    "Run each parser in turn, collecting the results into a list"
    parsers = list(parsers)

    def run(inp):
        cur = inp
        vals: List[Any] = []
        for p in parsers:
            res = p(cur)
            if isinstance(res, ParserError):
                return res
            cur, v = res
            vals.append(v)
        return Success(cur, vals)

    return Parser(run)


def thisMany(n: int, p: Parser) -> Parser:
    return sequenceParser([p] * n)


# --- Running ---


def parse(p: Parser, text: str) -> ParseResult:
    try:
        return p(Input(0, text))
    except RecursionError:
        return GenericFailure(0, "Input nested too deeply")


def parseOptional(p: Parser, text: str):
    """Run `p` over `text` and return its value, or None on failure.

    The remaining input is ignored.
    """
    res = parse(p, text)
    if isinstance(res, ParserError):
        return None
    return res.value
