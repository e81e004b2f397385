"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``[project]`` in ``pyproject.toml``; keep ``version`` in sync
when bumping releases.
"""

from __future__ import annotations

name = "funcset"
title = "Exported function set: add, greet and age_comparator for host runtimes"
version = "1.0.0"
homepage = "https://github.com/bitranox/funcset"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "funcset"

#: Identifiers handed to lib_layered_config for platform-specific config paths.
LAYEREDCONF_VENDOR: str = "bitranox"
LAYEREDCONF_APP: str = "funcset"
LAYEREDCONF_SLUG: str = "funcset"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for funcset:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
