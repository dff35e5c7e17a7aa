from typing import Iterable

from rcalc.types.value import Boolean, ComplexNumber, Function, Value

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NUMBER = "\033[94m"
COLOR_FUNCTION = "\033[92m"
COLOR_BOOLEAN = "\033[95m"
COLOR_EMPTY = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "color": True,
    "reduce": False,
    "separator": ", ",
}


def colorize(value: Value, options: dict = DEFAULT_OPTIONS) -> str:
    if isinstance(value, ComplexNumber):
        text = str(value.reduced() if options.get("reduce", False) else value)
        color = COLOR_NUMBER
    elif isinstance(value, Function):
        text, color = str(value), COLOR_FUNCTION
    elif isinstance(value, Boolean):
        text, color = str(value), COLOR_BOOLEAN
    else:
        text, color = repr(value), ""
    if not options.get("color", True) or not color:
        return text
    return f"{color}{text}{RESET}"


def format_values(values: Iterable[Value], options: dict = DEFAULT_OPTIONS) -> str:
    """Render a result sequence as `[v1, v2, ...]`; an empty one as `[]`."""
    parts = [colorize(v, options) for v in values]
    if not parts and options.get("color", True):
        return f"{COLOR_EMPTY}[]{RESET}"
    return "[" + options.get("separator", ", ").join(parts) + "]"


def pprint(values: Iterable[Value], **overrides) -> None:
    options = {**DEFAULT_OPTIONS, **overrides}
    print(format_values(values, options))
