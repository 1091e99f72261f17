"""
Command naming — turn a user-supplied command name into a Go identifier.

``my-server`` and ``my_server`` both become ``myServer``: every dash or
underscore is dropped and the character after it is uppercased.  Names
without separators are returned untouched, so a name that is already a
valid identifier (including an exported one such as ``Server``) passes
straight through.
"""

from __future__ import annotations

SEPARATORS = frozenset("-_")


def is_separator(char: str) -> bool:
    return char in SEPARATORS


def validate_cmd_name(source: str) -> str:
    """Return ``source`` without dashes and underscores, camelCased.

    The character following a separator is uppercased.  A run of
    separators collapses: each separator followed by another one simply
    disappears.  A trailing separator is dropped.

    Never fails.  The result contains no separator, so applying the
    function twice gives the same result as applying it once.

    >>> validate_cmd_name("foo_bar-baz")
    'fooBarBaz'
    >>> validate_cmd_name("-foo")
    'Foo'
    """
    i = 0
    length = len(source)
    # Created on the first separator; None means source is already valid.
    output: list[str] | None = None

    while i < length:
        if is_separator(source[i]):
            if output is None:
                output = [source[:i]]

            # Trailing separator: drop it.
            if i == length - 1:
                break

            if is_separator(source[i + 1]):
                i += 1
                continue

            output.append(source[i + 1].upper())
            i += 2
            continue

        if output is not None:
            output.append(source[i])
        i += 1

    if output is None:
        return source
    return "".join(output)


def is_exported(identifier: str) -> bool:
    """Whether a Go identifier is visible outside its package."""
    return bool(identifier) and identifier[0].isupper()
