"""TeamCity service messages for publishing values to the build."""

import typer

_ESCAPES = {
    "|": "||",
    "'": "|'",
    "\n": "|n",
    "\r": "|r",
    "[": "|[",
    "]": "|]",
    "\u0085": "|x",
    "\u2028": "|l",
    "\u2029": "|p",
}


def escape_value(value: str) -> str:
    """Escape a value for use inside a TeamCity service message attribute.

    Example:
        >>> escape_value("it's [done]")
        "it|'s |[done|]"
    """
    escaped = []
    for ch in value:
        if ch in _ESCAPES:
            escaped.append(_ESCAPES[ch])
        elif ord(ch) > 0x7F:
            escaped.append(f"|0x{ord(ch):04x}")
        else:
            escaped.append(ch)
    return "".join(escaped)


def format_build_parameter(name: str, value: str) -> str:
    """Build a ``setParameter`` service message."""
    return (
        f"##teamcity[setParameter name='{escape_value(name)}' "
        f"value='{escape_value(value)}']"
    )


def export_build_parameter(name: str, value: str) -> None:
    """Publish a build parameter by writing the service message to stdout."""
    typer.echo(format_build_parameter(name, value))
