"""
Swivel faults (update errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for value-update failures.
- UpdateError: base type raised by Key.update_value / VariadicKey.update_value.
  • ConversionError: the raw token does not convert to the key's type. Carries
    no message; callers word their own "invalid value" diagnostic.
  • ValidationError: the converted value failed a validation rule. Carries the
    rule's fixed message for direct display.
- trigger(): entry point for a parser that wants the fault surfaced
  (raised, or rendered via rich in shell mode).
- getdoc(): optional description lookup for a code from the host application.

Policy
- Faults are local to one update call and never logged by this package; the
  option keeps its prior value and stays usable for subsequent tokens.

Integration
- A parser catches UpdateError around update_value and either handles it
  itself or calls trigger(fault, shell=True, ...) to render it.
"""
import copy
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes for value updates (stable identifiers).

    grouping
    - values (211xx)
      • CONVERSION_ERROR, VALIDATION_ERROR

    normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- value errors (211xx) ---
    CONVERSION_ERROR = 21101
    VALIDATION_ERROR = 21102

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class UpdateError(Exception):
    """
    base fault for a rejected option update.

    `message` is Unset when the fault carries none; `options` is a read-only
    mapping of rendering context (option, raw, shell, fancy, colorful, ...).
    """
    code = Unset
    title = "update error"

    def __init__(self, message=Unset, /, **options):
        if not isinstance(message, str | Unset):
            raise TypeError("%s message must be a string" % type(self).__name__)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.message == other.message

    def __hash__(self):
        return hash((type(self), self.message))

    def __repr__(self):
        if self.message is Unset:
            return "%s()" % type(self).__name__
        return "%s(%r)" % (type(self).__name__, self.message)

    def _describe(self):
        # conversion faults carry no message; word one from the context
        if self.message:
            return self.message
        option = self.options.get("option")
        if option is None:
            return "invalid value %r" % self.options.get("raw", "")
        return "invalid value %r for %s" % (self.options.get("raw", ""), option.identifier)

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = getattr(main, "__prog__", None) or os.path.basename(sys.argv[0] if sys.argv else "") or "swivel"
        code = self.options.get("code", self.code)

        header = Text.assemble(
            "[ ",
            text(prog, styler("prog-name")),
            " — ",
            text(code.normalize() if isinstance(code, FaultCode) else "", styler("code")),
            " | ",
            text(self.options.get("title", self.title).title(), styler("error-title")),
            " ]"
        )
        message = text(self._describe(), styler("error-message"))

        hint = self.options.get("hint")
        if not hint and (option := self.options.get("option")) is not None:
            hint = "check the value given to %s" % " / ".join(option.names)
        renders = [message]
        if hint:
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))
        if isinstance(code, FaultCode) and (docs := getdoc(code)):
            renders.append(text(docs, styler("error-message")))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")
        return Group(header, *renders)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        if self.options.get("deferred", False):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ConversionError(UpdateError):
    """the raw token does not convert to the target type."""
    code = FaultCode.CONVERSION_ERROR
    title = "invalid value"

    def __init__(self, message=Unset, /, **options):
        if message is not Unset:
            raise TypeError("ConversionError does not carry a message")
        super().__init__(**options)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(**{**self.options, **overrides})


class ValidationError(UpdateError):
    """the converted value failed one validation rule."""
    code = FaultCode.VALIDATION_ERROR
    title = "rejected value"

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError("ValidationError message must be a string")
        super().__init__(message, **options)


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see UpdateError).
    - options are merged into the fault via copy.replace before triggering.
    - in shell mode, rendering happens via rich console; otherwise, the fault is raised.

    typical options
    - shell, fancy, colorful, deferred, title, hint, plus any context the
      renderer may want to show (option, raw).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode members and values are short documentation strings.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "UpdateError",
    "ConversionError",
    "ValidationError",
    "trigger",
    "getdoc",
)
