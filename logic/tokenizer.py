# logic/tokenizer.py

"""
Splits raw command arguments into a preamble and marker/value pairs.

    tokenize(" 1 n/Amy Tan t/friend t/tutee", "n/", "t/")

produces the preamble "1", `n/` -> ["Amy Tan"] and `t/` -> ["friend", "tutee"].
A marker is only recognized at the start of the text or right after
whitespace, so "Lab/n/a" does not split on "n/". Markers that were not
requested are left inside the surrounding value.
"""

from __future__ import annotations

import re

from logic.cli_syntax import MESSAGE_DUPLICATE_FIELDS
from logic.exceptions import ParseError


class ArgumentMultimap:
    def __init__(self, preamble: str = ""):
        self._preamble = preamble
        self._values: dict[str, list[str]] = {}

    def put(self, prefix: str, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: str) -> str | None:
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self._values.get(prefix, []))

    def is_present(self, prefix: str) -> bool:
        return prefix in self._values

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        """
        Raises:
            ParseError: If any of `prefixes` was given more than once.
        """
        duplicated = [p for p in dict.fromkeys(prefixes) if len(self._values.get(p, [])) > 1]

        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS.format(" ".join(duplicated)))


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    if not prefixes:
        return ArgumentMultimap(args.strip())

    # longest first so that a marker never matches as the tail of another
    ordered = sorted(set(prefixes), key=len, reverse=True)
    pattern = re.compile(
        r"(?:(?<=\s)|^)(" + "|".join(re.escape(p) for p in ordered) + ")"
    )

    matches = list(pattern.finditer(args))
    end_of_preamble = matches[0].start() if matches else len(args)
    multimap = ArgumentMultimap(args[:end_of_preamble].strip())

    for current, following in zip(matches, matches[1:] + [None]):
        value_end = following.start() if following is not None else len(args)
        multimap.put(current.group(1), args[current.end():value_end].strip())

    return multimap
