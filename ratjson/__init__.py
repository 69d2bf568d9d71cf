"""Parser combinators and a JSON grammar with exact rational numbers."""

from .combinators import (
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
from .grammar import (
    jsonArray,
    jsonFalse,
    jsonNull,
    jsonNumber,
    jsonObject,
    jsonString,
    jsonTrue,
    jsonValue,
    keyValuePair,
    parseJson,
    readJsonValue,
)
from .input import (
    GenericFailure,
    Input,
    ParseResult,
    ParserError,
    PredicateNotSatisfied,
    Success,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    is_error_result,
)
from .parser import (
    Parser,
    character,
    charP,
    fail,
    lazy,
    parse,
    parseOptional,
    pure,
    satisfy,
)
from .value import (
    JsonArray,
    JsonFalse,
    JsonNull,
    JsonObject,
    JsonRational,
    JsonString,
    JsonTrue,
    JsonValue,
)

__version__ = "0.1.0"
