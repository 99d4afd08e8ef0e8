"""
Swivel validations: named predicates applied to converted option values.

A Validation[_T] pairs a predicate with a fixed, human-readable message.
Keys hold an ordered list of validations and run every one of them on each
update; the first failing rule raises ValidationError(message) and the
remaining rules are skipped.

Constructors
- Validation.custom(predicate, message): general-purpose escape hatch.
- Validation.greater_than(bound) / less_than(bound): strict ordering.
- Validation.within(low, high): inclusive range.
- Validation.allowing(*values) / rejecting(*values): membership.
- Validation.contains(fragment): substring (or item) presence.

Validations are inert until invoked and never reference each other or the
option they are attached to.

Quick example:
    >>> positive = Validation.greater_than(0)
    >>> positive.validate(3)
    >>> positive.validate(-1)
    Traceback (most recent call last):
    ...
    swivel.faults.ValidationError: Must be greater than 0
"""
from .faults import ValidationError
from .utils import mirror


class Validation[_T]:
    """
    A predicate over a converted value and the message shown when it fails.
    """
    __slots__ = ("_predicate", "_message")

    predicate = mirror("predicate")
    message = mirror("message")

    def __init__(self, predicate, message, /):
        if not callable(predicate):
            raise TypeError("validation predicate must be callable")
        if not isinstance(message, str):
            raise TypeError("validation message must be a string")
        elif not message.strip():
            raise ValueError("validation message cannot be empty")
        self._predicate = predicate
        self._message = message

    def validate(self, value, /):
        """
        Raise ValidationError(message) when the predicate rejects `value`.
        """
        if not self._predicate(value):
            raise ValidationError(self._message)

    def __repr__(self):
        return "Validation(%r)" % self._message

    @classmethod
    def custom(cls, predicate, message, /):
        return cls(predicate, message)

    @classmethod
    def greater_than(cls, bound, /):
        return cls(lambda value: value > bound, "Must be greater than %s" % (bound,))

    @classmethod
    def less_than(cls, bound, /):
        return cls(lambda value: value < bound, "Must be less than %s" % (bound,))

    @classmethod
    def within(cls, low, high, /):
        if high < low:
            raise ValueError("validation range is empty (%s > %s)" % (low, high))
        return cls(lambda value: low <= value <= high, "Must be between %s and %s" % (low, high))

    @classmethod
    def allowing(cls, *values):
        if not values:
            raise TypeError("allowing() requires at least one value")
        return cls(lambda value: value in values, "Must be one of: %s" % ", ".join(map(str, values)))

    @classmethod
    def rejecting(cls, *values):
        if not values:
            raise TypeError("rejecting() requires at least one value")
        return cls(lambda value: value not in values, "Must not be: %s" % ", ".join(map(str, values)))

    @classmethod
    def contains(cls, fragment, /):
        return cls(lambda value: fragment in value, "Must contain %r" % (fragment,))


__all__ = (
    "Validation",
)
