"""
Flagship usage formatter.

Layout of one help line (columns counted from the line start):

    <indent_flag spaces>-c --count <pad to indent_description>description <default: 1>

- the flag token is padded up to indent_description; a token already past that
  column gets a single space instead, a token ending exactly on it gets none.
- the description (plus its default annotation) is cut into chunks of
  (width - column) characters; continuation lines are re-indented to the column
  and leading spaces of each chunk are dropped.
- when the room left after the flag token is not more than 30% of the terminal
  width, the description moves to its own line at indent_flag + 2 instead.

Lines are rendered once, when the option is registered, with the width known at
that moment. render_usage() only assembles them.
"""
from rich.console import Console

MIN_WIDTH = 40
FALLBACK_WIDTH = 80
RATIO = 0.3


def tty_width(console=None, /):
    """
    column count of the controlling terminal, or 80 when unknown or narrower than 40.
    """
    if console is None:
        console = Console(stderr=True)
    try:
        width = int(console.width)
    except (TypeError, ValueError, OSError):
        return FALLBACK_WIDTH
    return width if width >= MIN_WIDTH else FALLBACK_WIDTH


def flag_token(short=None, long=None, /, *, indent_flag=2):
    """the indented "-c --count " prefix (without column padding)."""
    token = " " * indent_flag
    if short:
        token += "-%s " % short
    if long:
        token += "--%s " % long
    return token


def wrap(text, column, width, /):
    """
    hard-wrap text into chunks of (width - column) characters.

    yields the chunks; the caller joins them with a newline plus `column` spaces.
    """
    step = max(width - column, 1)
    index = 0
    while True:
        while text[index:index + 1] == " ":
            index += 1
        yield text[index:index + step]
        index += step
        if index >= len(text):
            return


def render_line(short, long, description, /, *, width, indent_flag=2, indent_description=18):
    """
    render the full (possibly multi-line) help entry for one option.

    `description` already carries its default annotation.
    """
    line = flag_token(short, long, indent_flag=indent_flag)
    line += " " * (1 if len(line) > indent_description else indent_description - len(line))

    if width - len(line) > width * RATIO:
        column = len(line)
    else:
        column = indent_flag + 2
        line += "\n" + " " * column

    return line + ("\n" + " " * column).join(wrap(description, column, width))


def render_usage(header, groups, /):
    """
    assemble the usage document.

    - header verbatim (when non-empty),
    - then, per group in sorted name order: "<group>:" (omitted for "" and "_"),
      one line per entry, and a blank separator line.
    """
    parts = [header] if header else []
    for group in sorted(groups):
        if group and group != "_":
            parts.append("%s:\n" % group)
        parts.extend("%s\n" % line for line in groups[group])
        parts.append("\n")
    return "".join(parts)


__all__ = (
    "MIN_WIDTH",
    "FALLBACK_WIDTH",
    "tty_width",
    "flag_token",
    "wrap",
    "render_line",
    "render_usage",
)
