r"""
Swivel string converters.

Overview
- convert(type, raw): turn a raw command-line token into a value of `type`,
  or None when the token does not parse. Conversion never raises for bad
  input; TypeError is reserved for programming mistakes (unknown target type,
  non-string token).
- converter(type): decorator registering the converter of a type in the
  explicit registry (keyed by type identity, walked along the MRO).
- convertible(type): whether convert() can target the type.

Resolution order
1. A `__convert__(raw)` classmethod defined on the type itself.
2. Enumerations: convert to the raw-value type first, then look the member
   up by value.
3. The registry, following the type's MRO (bool before int).

Built-in vocabulary
- str: identity.
- int: r"[+-]?[0-9]+" only (no whitespace, underscores, or non-ASCII digits).
- float: anything float() accepts except surrounding whitespace, underscores
  and non-ASCII digits.
- bool: case-insensitive y/yes/t/true and n/no/f/false.

Quick example:
    >>> convert(int, "42")
    42
    >>> convert(bool, "Yes")
    True
    >>> convert(float, "x") is None
    True
"""
import builtins
import re
from enum import Enum, EnumType

from .utils import rename

_registry = {}

_TRUTHY = frozenset(("y", "yes", "t", "true"))
_FALSY = frozenset(("n", "no", "f", "false"))


def converter(type, /):
    """
    Register the decorated function as the converter for `type`.

    The function receives the raw token and returns the converted value or
    None. Registering again for the same type replaces the previous function.

    Example
        >>> @converter(Decimal)
        ... def to_decimal(raw):
        ...     try:
        ...         return Decimal(raw)
        ...     except InvalidOperation:
        ...         return None
    """
    if not isinstance(type, builtins.type):
        raise TypeError("@converter() argument must be a type")

    @rename("converter")
    def wrapper(callback, /):
        if not callable(callback):
            raise TypeError("@converter() must be applied to a callable")
        _registry[type] = callback
        return callback

    return wrapper


def _lookup(type, /):
    for base in type.__mro__:
        if base in _registry:
            return _registry[base]
    return None


def convertible(type, /):
    """
    Return True when convert() can produce values of `type`.
    """
    if not isinstance(type, builtins.type):
        return False
    if callable(getattr(type, "__convert__", None)):
        return True
    if isinstance(type, EnumType):
        return bool(_rawtypes(type))
    return _lookup(type) is not None


def _rawtypes(enum, /):
    # mixed-in data types (IntEnum -> int) win; plain enums use their values' types
    for base in enum.__mro__[1:]:
        if base in _registry and not issubclass(base, Enum):
            return (base,)
    rawtypes = []
    for member in enum:
        if type(member.value) not in rawtypes and _lookup(type(member.value)) is not None:
            rawtypes.append(type(member.value))
    return tuple(rawtypes)


def _convert_enum(enum, raw, /):
    for rawtype in _rawtypes(enum):
        if (value := convert(rawtype, raw)) is None:
            continue
        try:
            return enum(value)
        except ValueError:
            continue
    return None


def convert(type, raw, /):
    """
    Convert a raw token into a value of `type`.

    Returns
    - the converted value, or None when the token does not parse.

    Raises
    - TypeError: when `type` is not a type, `raw` is not a string, or no
      converter is known for `type`.
    """
    if not isinstance(type, builtins.type):
        raise TypeError("convert() first argument must be a type")
    if not isinstance(raw, str):
        raise TypeError("convert() second argument must be a string")

    if callable(hook := getattr(type, "__convert__", None)):
        return hook(raw)
    if isinstance(type, EnumType):
        if not _rawtypes(type):
            raise TypeError("enumeration %r has no convertible raw values" % type.__name__)
        return _convert_enum(type, raw)
    if (function := _lookup(type)) is None:
        raise TypeError("type %r is not convertible from string" % type.__name__)
    return function(raw)


@converter(str)
def _convert_str(raw, /):
    return raw


@converter(int)
def _convert_int(raw, /):
    if not re.fullmatch(r"[+-]?[0-9]+", raw):
        return None
    return int(raw)


@converter(float)
def _convert_float(raw, /):
    # float() is lenient about padding and digit grouping; tokens are not
    if not raw.isascii() or raw != raw.strip() or "_" in raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@converter(bool)
def _convert_bool(raw, /):
    lowered = raw.lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    return None


__all__ = (
    "convert",
    "converter",
    "convertible",
)
