r"""
Swivel option declarations.

Overview
- Kinds
  • Flag: boolean switch (e.g., -v/--verbose); toggle() flips its value.
  • Key[_T]: single-value option; update_value(raw) converts, validates and
    stores (last successful update wins).
  • VariadicKey[_T]: multi-value option; each successful update_value(raw)
    appends one value in parse order.

- Capabilities (typing.Protocol, runtime-checkable)
  • Option: names, short_description, identifier, is_variadic, completion,
    usage(padding). Every kind satisfies it.
  • AnyKey: Option plus type, validations and update_value(raw).

- Shared behaviour
  • The OptionType metaclass equips every kind with read-only mirrored
    properties, identifier, __repr__ ("Flag(-v, --verbose)"), __rich_repr__
    and usage(); kinds do not inherit from one another and are sealed.

Update contract (Key / VariadicKey)
1. convert(type, raw); None raises ConversionError.
2. run validations in declared order; the first failure raises its
   ValidationError and later rules are not evaluated.
3. commit the converted value.
A failed update is a no-op on stored state.

Declaration checks (raised at construction)
- names: at least one, strings, matching r"--?[^\W\d_](-?[^\W_]+)*", unique.
- description: a string (may be empty).
- type: convertible from string; validations: Validation instances;
  completion: a Completion.

Quick example:
    >>> count = Key("-c", "--count", type=int, validations=[Validation.greater_than(0)])
    >>> count.update_value("3")
    >>> count.value
    3
    >>> count.identifier
    '-c, --count <value>'
"""
import builtins
import copy
import re
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .completion import Completion
from .converters import convert, convertible
from .faults import ConversionError, ValidationError
from .rendering import usage
from .utils import Unset, coalesce, mirror, rename
from .validations import Validation


@runtime_checkable
class Option(Protocol):
    """
    What a parser or help renderer may rely on for every option kind.
    """
    names: tuple
    short_description: str
    identifier: str
    is_variadic: bool
    completion: Completion | None

    def usage(self, padding, /): ...


@runtime_checkable
class AnyKey(Option, Protocol):
    """
    Value-bearing options: the parser feeds raw tokens through update_value.
    """
    type: builtins.type
    validations: tuple

    def update_value(self, raw, /): ...


class OptionType(type):
    """
    Metaclass wiring the shared option surface into each kind.

    Responsibilities
    - __typename__ derived from the class name (camel-case split with hyphens).
    - read-only properties mirroring "_{name}" for each name in __introspectable__
      that the class body does not define itself.
    - identifier: names joined by ", " followed by the class's __marker__.
    - __repr__ ("Key(-m, --message <value>)") and __rich_repr__ (fields listed in
      __displayable__, falling back to __introspectable__).
    - usage(padding) from swivel.rendering.
    - sealing: concrete kinds cannot be subclassed.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ()) if name not in namespace
            },
        )

        @rename("identifier")
        def identifier(self):
            return ", ".join(self._names) + type(self).__marker__
        self.identifier = property(identifier)

        @rename("__repr__")
        def __repr__(self):
            return "%s(%s)" % (type(self).__name__, self.identifier)
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        self.usage = usage

        @rename("__init_subclass__")
        def __init_subclass__(cls, **options):  # NOQA: F-841
            raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
        self.__init_subclass__ = classmethod(__init_subclass__)

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: validate and normalize names and description (all kinds).

    - names: at least one; each a non-empty string (after trimming) matching a
      shell-style option pattern ("-x", "-long", "--long-name"; unicode letters
      allowed, no underscores or leading digits); duplicates rejected. Order is
      kept and the result is a tuple.
    - description: a string, kept verbatim (may be empty or span lines).

    Raises
    - TypeError: missing names, non-string names or description.
    - ValueError: empty, malformed or duplicated names.
    """
    if not metadata["names"]:
        raise TypeError(f"{cls.__typename__} must specify at least one name")

    names = []
    for name in metadata["names"]:
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} names must be strings")
        elif not (name := name.strip()):
            raise ValueError(f"{cls.__typename__} names cannot be empty-strings")
        elif not re.fullmatch(r"--?[^\W\d_](-?[^\W_]+)*", name):
            raise ValueError(f"{cls.__typename__} names must be valid shell-style option names (unicodes are allowed)")
        elif name in names:
            raise ValueError(f"{cls.__typename__} names cannot contain duplicates")
        names.append(name)
    metadata["names"] = tuple(names)

    if not isinstance(metadata["short_description"], str):
        raise TypeError(f"{cls.__typename__} 'description' must be a string")


def _sanitize_parametric_metadata(cls, metadata, /):
    """
    Internal: validate value-bearing metadata (Key / VariadicKey).

    - type: a class convert() can target.
    - completion: a Completion hint.
    - validations: an iterable of Validation, kept in declared order as a tuple.
    """
    if not isinstance(type := metadata["type"], builtins.type):
        raise TypeError(f"{cls.__typename__} 'type' must be a type")
    if not convertible(type):
        raise TypeError(f"{cls.__typename__} 'type' {type.__name__!r} is not convertible from string")

    if not isinstance(metadata["completion"], Completion):
        raise TypeError(f"{cls.__typename__} 'completion' must be a completion hint")

    if not isinstance(validations := metadata["validations"], Iterable):
        raise TypeError(f"{cls.__typename__} 'validations' must be iterable")
    validations = tuple(validations)
    if not all(isinstance(validation, Validation) for validation in validations):
        raise TypeError(f"{cls.__typename__} 'validations' must only contain validations")
    metadata["validations"] = validations


def _resolve(option, raw, /):
    """
    Internal: convert and validate a raw token for `option` without storing it.

    Faults are re-raised with the option and the raw token attached so a
    renderer can word its diagnostic.
    """
    if not isinstance(raw, str):
        raise TypeError(f"{type(option).__typename__} values must be strings")
    if (value := convert(option._type, raw)) is None:
        raise ConversionError(option=option, raw=raw)
    for validation in option._validations:
        try:
            validation.validate(value)
        except ValidationError as error:
            raise copy.replace(error, option=option, raw=raw) from None
    return value


class Flag(metaclass=OptionType):
    """
    Boolean switch with no attached value.

    The value starts at `default` and each toggle() flips it, so a flag given
    twice on the command line returns to its default.
    """

    __introspectable__ = (
        "names",
        "short_description",
        "value",
    )
    __marker__ = ""

    is_variadic = False
    completion = None

    def __init__(self, *names, description="", default=False):
        """
        Parameters
        - names: one or more str; convention is a short (-a) and a long (--all) name.
        - description: short text for usage statements.
        - default: initial value (bool).
        """
        if not isinstance(default, bool):
            raise TypeError(f"{type(self).__typename__} 'default' must be a boolean")
        metadata = {
            "names": names,
            "short_description": description,
        }
        _sanitize_metadata(type(self), metadata)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._value = default

    def toggle(self):
        self._value = not self._value


class Key[_T](metaclass=OptionType):
    """
    Option requiring exactly one typed value per occurrence.

    `value` is None until an update succeeds; a failed update never replaces
    a stored value.
    """

    __introspectable__ = (
        "names",
        "short_description",
        "type",
        "completion",
        "validations",
        "value",
    )
    __displayable__ = (
        "names",
        "type",
        "value",
    )
    __marker__ = " <value>"

    is_variadic = False

    def __init__(self, *names, type=str, description="", completion=Completion.FILENAME, validations=()):
        """
        Parameters
        - names: one or more str; convention is a short (-m) and a long (--message) name.
        - type: target type of convert(); defaults to str.
        - description: short text for usage statements.
        - completion: hint for shell-completion generators (filename by default).
        - validations: rules run in order on every converted value.
        """
        metadata = {
            "names": names,
            "short_description": description,
            "type": type,
            "completion": completion,
            "validations": validations,
        }
        _sanitize_metadata(builtins.type(self), metadata)
        _sanitize_parametric_metadata(builtins.type(self), metadata)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._value = None

    def update_value(self, raw, /):
        """
        Convert, validate and store `raw`; raises UpdateError on failure.
        """
        self._value = _resolve(self, raw)

    @property
    def value(self):
        return self._value


class VariadicKey[_T](metaclass=OptionType):
    """
    Option that may repeat, accumulating one typed value per occurrence.
    """

    __introspectable__ = (
        "names",
        "short_description",
        "type",
        "completion",
        "validations",
        "values",
    )
    __displayable__ = (
        "names",
        "type",
        "values",
    )
    __marker__ = " <value>"

    is_variadic = True

    def __init__(self, *names, type=str, description="", completion=Completion.FILENAME, validations=()):
        metadata = {
            "names": names,
            "short_description": description,
            "type": type,
            "completion": completion,
            "validations": validations,
        }
        _sanitize_metadata(builtins.type(self), metadata)
        _sanitize_parametric_metadata(builtins.type(self), metadata)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._values = []

    def update_value(self, raw, /):
        """
        Convert, validate and append `raw`; raises UpdateError on failure.
        """
        self._values.append(_resolve(self, raw))

    @property
    def values(self):
        # shallow copy; the converted values themselves are handed out as-is
        return list(self._values)


__all__ = (
    "Option",
    "AnyKey",
    "Flag",
    "Key",
    "VariadicKey",
)

# Keep the metaclass out of star-imports and docs; it is not public API.
del OptionType
