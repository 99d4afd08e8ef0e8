"""
Per-option usage lines.

- usage(option, padding): plain text line(s) for help output. The identifier
  is left-aligned to `padding` columns and followed by the short description;
  continuation lines of a multi-line description are re-indented under the
  description column.
- measure(options): the longest identifier among `options`, i.e. the smallest
  padding a help renderer can pass for the whole set.
- styled(option, padding): the same layout as a rich Text, colored with the
  palette below (override entries through __styles__ in __main__).

Column alignment across a set of options and the surrounding help layout are
the caller's business.

Quick example:
    >>> print(usage(Key("-m", "--message", description="Commit message"), 24))
    -m, --message <value>   Commit message
"""
from collections import defaultdict

from rich.text import Text


def usage(option, padding, /):
    """
    Render `option` as "<identifier><spaces><description>".

    Raises
    - TypeError: when padding is not an integer.
    - ValueError: when padding is narrower than the option's identifier.
    """
    if not isinstance(padding, int) or isinstance(padding, bool):
        raise TypeError("usage() padding must be an integer")
    identifier = option.identifier
    if padding < len(identifier):
        raise ValueError("usage() padding (%d) is narrower than %r" % (padding, identifier))

    spacing = " " * (padding - len(identifier))
    description = option.short_description.replace("\n", "\n" + " " * padding)
    return identifier + spacing + description


def measure(options, /):
    """
    Return the longest identifier length among `options` (0 when empty).
    """
    return max((len(option.identifier) for option in options), default=0)


def styled(option, padding, /, *, colorful=True):
    """
    Render `option` like usage(), as a rich Text.

    Palette keys
    - option-name: names of value-bearing options
    - flag-name: names of flags
    - metavar: the value placeholder after the names
    - option-description: the short description

    When colorful is False no style is applied; the plain text always equals
    usage(option, padding).
    """
    plain = usage(option, padding)
    styles = defaultdict(str, {
        "option-name": "bold #00E6FF",  # CYAN for options
        "flag-name": "bold #22C55E",  # GREEN for flags
        "metavar": "bold #FFD600",  # AMBER for parameters
        "option-description": "#9CA3AF",  # Muted gray
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    identifier = option.identifier
    head = ", ".join(option.names)
    # anything after the joined names is the value placeholder
    marker = identifier[len(head):]
    style = styler("option-name" if marker else "flag-name")

    rendered = Text()
    rendered.append_text(Text(", ").join(Text(name, style) for name in option.names))
    rendered.append(marker, styler("metavar"))
    rendered.append(plain[len(identifier):padding])
    rendered.append(plain[padding:], styler("option-description"))
    return rendered


__all__ = (
    "usage",
    "measure",
    "styled",
)
