import logging
from fractions import Fraction

from .combinators import (
    charTok,
    choice,
    commaTok,
    digits1,
    hexP,
    many,
    noneof,
    oneof,
    option,
    spaces,
    stringTok,
    tok,
)
from .input import GenericFailure, Input, ParseResult, ParserError, Success
from .parser import Parser, charP, parse, sequenceParser
from .value import (
    JsonArray,
    JsonFalse,
    JsonNull,
    JsonObject,
    JsonRational,
    JsonString,
    JsonTrue,
)

logger = logging.getLogger(__name__)

# --- Strings ---

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

escapeChar = charP("\\") >> choice(
    [oneof("".join(ESCAPES)).map(ESCAPES.__getitem__), hexP],
    "Unrecognised escape sequence",
)

normalChar = noneof('"\\')

jsonString = charP('"') >> many(normalChar | escapeChar).map(lambda cs: "".join(cs)) << charTok('"')

# --- Numbers ---

# int() refuses strings past sys.get_int_max_str_digits()
_CHUNK = 1000


def _digitsToInt(ds: str) -> int:
    n = 0
    for i in range(0, len(ds), _CHUNK):
        chunk = ds[i : i + _CHUNK]
        n = n * 10 ** len(chunk) + int(chunk)
    return n


def _rational(parts) -> Fraction:
    sign, whole, frac = parts
    num = Fraction(_digitsToInt(whole + frac), 10 ** len(frac))
    return -num if sign else num


jsonNumber = tok(
    sequenceParser(
        [
            option("", charP("-")),
            digits1,
            option("", charP(".") >> digits1),
        ]
    ).map(_rational)
)

# --- Literals ---

jsonTrue = stringTok("true")
jsonFalse = stringTok("false")
jsonNull = stringTok("null")

# --- Structures ---
#
# The recursive rules call each other as plain functions rather than through
# combinator chains, so one level of nesting costs a handful of frames.

_openBracket, _closeBracket = charTok("["), charTok("]")
_openBrace, _closeBrace = charTok("{"), charTok("}")
_colon = charTok(":")


def _elements(inp: Input, item) -> ParseResult:
    "sepby(item, commaTok) as a loop"
    res = item(inp)
    if isinstance(res, ParserError):
        return Success(inp, [])
    cur, x = res
    xs = [x]
    while True:
        res_sep = commaTok(cur)
        if isinstance(res_sep, ParserError):
            break
        cur1, _ = res_sep
        res_elem = item(cur1)
        if isinstance(res_elem, ParserError):
            break
        cur, y = res_elem
        xs.append(y)
    return Success(cur, xs)


def _bracketed(inp: Input, openP: Parser, closeP: Parser, item) -> ParseResult:
    res = openP(inp)
    if isinstance(res, ParserError):
        return res
    cur, _ = res
    cur, xs = _elements(cur, item)
    res = closeP(cur)
    if isinstance(res, ParserError):
        return res
    cur, _ = res
    return Success(cur, xs)


def _jsonArray(inp: Input) -> ParseResult:
    return _bracketed(inp, _openBracket, _closeBracket, _jsonValue)


def _keyValuePair(inp: Input) -> ParseResult:
    res = jsonString(inp)
    if isinstance(res, ParserError):
        return res
    cur, k = res
    res = _colon(cur)
    if isinstance(res, ParserError):
        return res
    cur, _ = res
    res = _jsonValue(cur)
    if isinstance(res, ParserError):
        return res
    cur, v = res
    return Success(cur, (k, v))


def _jsonObject(inp: Input) -> ParseResult:
    return _bracketed(inp, _openBrace, _closeBrace, _keyValuePair)


jsonArray = Parser(_jsonArray)
keyValuePair = Parser(_keyValuePair)
jsonObject = Parser(_jsonObject)

_alternatives = [
    (jsonNull, lambda _: JsonNull()),
    (jsonTrue, lambda _: JsonTrue()),
    (jsonFalse, lambda _: JsonFalse()),
    (_jsonArray, JsonArray),
    (jsonString, JsonString),
    (_jsonObject, JsonObject),
    (jsonNumber, JsonRational),
]


def _jsonValue(inp: Input) -> ParseResult:
    cur, _ = spaces(inp)
    for p, tag in _alternatives:
        res = p(cur)
        if not isinstance(res, ParserError):
            rest, x = res
            return Success(rest, tag(x))
    return GenericFailure(cur.loc, "Expected a JSON value", cur.preview())


jsonValue = Parser(_jsonValue)

# --- Entry points ---


def parseJson(text: str) -> ParseResult:
    return parse(jsonValue, text)


def readJsonValue(path, encoding: str = "utf-8", parser: Parser = jsonValue) -> ParseResult:
    """Read a whole file and parse it, by default as a single JSON value.

    Trailing input after the value is left in the result's remaining input
    unless `parser` checks for it. I/O errors propagate to the caller.
    """
    with open(path, "r", encoding=encoding) as f:
        text = f.read()
    logger.debug("read %d characters from %s", len(text), path)
    res = parse(parser, text)
    if isinstance(res, ParserError):
        logger.debug("parse of %s failed: %s", path, res)
    else:
        logger.debug("parsed %s, %d characters remaining", path, len(res.remaining.rest))
    return res
