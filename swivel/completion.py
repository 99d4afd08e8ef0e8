"""
Completion hints carried by options.

A hint tells an external shell-completion generator how to complete the value
of an option. Swivel only stores and exposes it; it never interprets it.

- Completion.NONE: no completion for the value.
- Completion.FILENAME: complete file names (default for keys).
- Completion.values(("fast", "quick run"), ...): a fixed list of candidates
  with optional descriptions.
- Completion.function("_list_targets"): delegate to a named shell function.
"""
from enum import StrEnum
from typing import final


class CompletionKind(StrEnum):
    NONE = "none"
    FILENAME = "filename"
    VALUES = "values"
    FUNCTION = "function"


@final
class Completion:
    """
    Immutable, hashable completion hint (kind + payload).
    """
    __slots__ = ("_kind", "_payload")

    def __new__(cls, kind, payload=(), /):
        kind = CompletionKind(kind)
        match kind:
            case CompletionKind.NONE | CompletionKind.FILENAME:
                if payload:
                    raise ValueError("%s completion does not take a payload" % kind)
                payload = ()
            case CompletionKind.VALUES:
                payload = tuple(map(_sanitize_pair, payload))
            case CompletionKind.FUNCTION:
                if not isinstance(payload, str):
                    raise TypeError("function completion requires a function name")
                elif not (payload := payload.strip()):
                    raise ValueError("function completion name cannot be empty")

        self = super().__new__(cls)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_payload", payload)
        return self

    @property
    def kind(self):
        return self._kind

    @property
    def payload(self):
        return self._payload

    @classmethod
    def values(cls, *pairs):
        """Complete from a fixed list of (value, description) pairs or bare values."""
        return cls(CompletionKind.VALUES, pairs)

    @classmethod
    def function(cls, name, /):
        """Complete by calling the named shell function."""
        return cls(CompletionKind.FUNCTION, name)

    def __setattr__(self, name, value):
        raise AttributeError("completion hints are immutable")

    def __eq__(self, other):
        if not isinstance(other, Completion):
            return NotImplemented
        return (self._kind, self._payload) == (other._kind, other._payload)

    def __hash__(self):
        return hash((self._kind, self._payload))

    def __reduce__(self):
        return type(self), (self._kind, self._payload)

    def __repr__(self):
        if not self._payload:
            return "Completion.%s" % self._kind.name
        return "Completion.%s(%r)" % (self._kind.value, self._payload)


def _sanitize_pair(pair, /):
    # bare strings become (value, "") so generators see a uniform shape
    if isinstance(pair, str):
        pair = (pair, "")
    if not (isinstance(pair, tuple) and len(pair) == 2 and all(isinstance(part, str) for part in pair)):
        raise TypeError("values completion expects strings or (value, description) pairs")
    return pair


Completion.NONE = Completion(CompletionKind.NONE)
Completion.FILENAME = Completion(CompletionKind.FILENAME)


__all__ = (
    "Completion",
    "CompletionKind",
)
