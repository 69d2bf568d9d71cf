from fractions import Fraction
from typing import Iterable, List, Optional, Tuple

# --- JSON Value Types ---


class JsonValue:
    def to_python(self):
        raise NotImplementedError


class JsonNull(JsonValue):
    def __eq__(self, other):
        return isinstance(other, JsonNull)

    def __hash__(self):
        return hash(JsonNull)

    def __repr__(self):
        return "JsonNull"

    def to_python(self):
        return None


class JsonTrue(JsonValue):
    def __eq__(self, other):
        return isinstance(other, JsonTrue)

    def __hash__(self):
        return hash(JsonTrue)

    def __repr__(self):
        return "JsonTrue"

    def to_python(self):
        return True


class JsonFalse(JsonValue):
    def __eq__(self, other):
        return isinstance(other, JsonFalse)

    def __hash__(self):
        return hash(JsonFalse)

    def __repr__(self):
        return "JsonFalse"

    def to_python(self):
        return False


class JsonString(JsonValue):
    def __init__(self, val: str):
        self.val = val

    def __eq__(self, other):
        return isinstance(other, JsonString) and self.val == other.val

    def __hash__(self):
        return hash((JsonString, self.val))

    def __repr__(self):
        return f"JsonString({self.val!r})"

    def to_python(self):
        return self.val


class JsonRational(JsonValue):
    """An exact number. Never stored as a float."""

    def __init__(self, val: Fraction):
        self.val = Fraction(val)

    def __eq__(self, other):
        return isinstance(other, JsonRational) and self.val == other.val

    def __hash__(self):
        return hash((JsonRational, self.val))

    def __repr__(self):
        return f"JsonRational({self.val.numerator}/{self.val.denominator})"

    def to_python(self):
        return self.val


class JsonArray(JsonValue):
    def __init__(self, vals: Iterable[JsonValue]):
        self.vals: Tuple[JsonValue, ...] = tuple(vals)

    def __eq__(self, other):
        return isinstance(other, JsonArray) and self.vals == other.vals

    def __hash__(self):
        return hash((JsonArray, self.vals))

    def __repr__(self):
        return f"JsonArray({list(self.vals)})"

    def __len__(self):
        return len(self.vals)

    def __iter__(self):
        return iter(self.vals)

    def to_python(self) -> list:
        return [v.to_python() for v in self.vals]


class JsonObject(JsonValue):
    """Key/value pairs in source order. Duplicate keys are kept."""

    def __init__(self, items: Iterable[Tuple[str, JsonValue]]):
        self.items: Tuple[Tuple[str, JsonValue], ...] = tuple((k, v) for k, v in items)

    def __eq__(self, other):
        return isinstance(other, JsonObject) and self.items == other.items

    def __hash__(self):
        return hash((JsonObject, self.items))

    def __repr__(self):
        return f"JsonObject({list(self.items)})"

    def __len__(self):
        return len(self.items)

    def keys(self) -> List[str]:
        return [k for k, _ in self.items]

    def get(self, key: str, default: Optional[JsonValue] = None) -> Optional[JsonValue]:
        for k, v in self.items:
            if k == key:
                return v
        return default

    def to_python(self) -> list:
        return [(k, v.to_python()) for k, v in self.items]
