#!/usr/bin/env python3
"""
Word Rendering
==============
Turns words into display strings. Pure functions, no randomness.
"""

import re

MAX_RUN = 2

_TOKEN_START = re.compile(r"(^|\s)(\S)")


def collapse_repeats(text: str, max_run: int = MAX_RUN) -> str:
    """
    Collapse runs of identical characters longer than max_run.

    >>> collapse_repeats("aaa bab cccccc ok")
    'aa bab cc ok'
    """
    output = []
    prev = None
    count = 0

    for c in text:
        if c == prev:
            count += 1
        else:
            count = 1

        if count <= max_run:
            output.append(c)

        prev = c

    return ''.join(output)


def render(word) -> str:
    """Display string of a Word: its phonemes joined, long runs collapsed."""
    return collapse_repeats(word.raw_text)


def title_case(text: str) -> str:
    """Capitalize the first letter of each whitespace separated token."""
    return _TOKEN_START.sub(lambda m: m.group(1) + m.group(2).upper(), text)


__all__ = [
    'MAX_RUN',
    'collapse_repeats',
    'render',
    'title_case',
]
