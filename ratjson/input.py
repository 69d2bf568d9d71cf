from typing import Any, NamedTuple, Optional, Tuple, Union

# --- Input abstraction ---


class Input:
    """Immutable cursor over a text.

    The text itself is shared between every Input derived from it; only
    ``loc`` changes, so backtracking to a saved Input costs nothing.
    """

    __slots__ = ("loc", "text")

    def __init__(self, loc: int, text: str):
        if loc < 0 or loc > len(text):
            raise ValueError(f"location {loc} out of range for input of length {len(text)}")
        self.loc = loc
        self.text = text

    @property
    def rest(self) -> str:
        return self.text[self.loc :]

    @property
    def exhausted(self) -> bool:
        return self.loc >= len(self.text)

    def advance(self, n: int = 1) -> "Input":
        return Input(min(self.loc + n, len(self.text)), self.text)

    def preview(self, n: int = 16) -> str:
        frag = self.text[self.loc : self.loc + n]
        if self.loc + n < len(self.text):
            frag += "..."
        return frag

    def __eq__(self, other):
        return isinstance(other, Input) and (self.loc, self.text) == (other.loc, other.text)

    def __hash__(self):
        return hash((self.loc, self.text))

    def __repr__(self):
        return f"Input({self.loc}, {self.rest!r})"


def input_uncons(inp: Input) -> Optional[Tuple[str, Input]]:
    if inp.exhausted:
        return None
    return inp.text[inp.loc], inp.advance()


# --- Parse results ---


class Success(NamedTuple):
    remaining: Input
    value: Any


class ParserError(Exception):
    """A failed parse. Returned as a value, never raised by the engine."""

    def __init__(self, loc: int, msg: str, near: str = ""):
        super().__init__(loc, msg)
        self.loc = loc
        self.msg = msg
        self.near = near

    def __str__(self):
        if self.near:
            return f"{self.msg} at {self.loc} near {self.near!r}"
        return f"{self.msg} at {self.loc}"

    def __repr__(self):
        return f"{type(self).__name__}({self.loc}, {self.msg!r})"


class UnexpectedEndOfInput(ParserError):
    def __init__(self, loc: int, expected: Optional[str] = None):
        msg = "Unexpected end of input"
        if expected:
            msg = f"Expected {expected}, but reached end of input"
        super().__init__(loc, msg)


class UnexpectedCharacter(ParserError):
    def __init__(self, loc: int, char: str, expected: Optional[str] = None, near: str = ""):
        msg = f"Unexpected character {char!r}"
        if expected:
            msg = f"Expected {expected}, but found {char!r}"
        super().__init__(loc, msg, near)
        self.char = char


class PredicateNotSatisfied(ParserError):
    def __init__(self, loc: int, char: str, desc: Optional[str] = None, near: str = ""):
        msg = f"Character {char!r} does not satisfy predicate"
        if desc:
            msg = f"Expected {desc}, but found {char!r}"
        super().__init__(loc, msg, near)
        self.char = char


class GenericFailure(ParserError):
    pass


ParseResult = Union[Success, ParserError]


def is_error_result(res: ParseResult) -> bool:
    return isinstance(res, ParserError)
