from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

TRUE = "true"
FALSE = "false"
NEGATION_PREFIX = "no-"


@dataclass
class ParsedInvocation:
    args: List[str] = field(default_factory=list)
    options: Dict[str, str] = field(default_factory=dict)


def split_flag(token: str) -> Tuple[str, str]:
    """Return ``(name, default_value)`` for a dash-prefixed token.

    Exactly two dashes are stripped for ``--`` tokens and exactly one for ``-``
    tokens. Only the double-dash form honours the ``no-`` negation.
    """
    if token.startswith("--"):
        name = token[2:]
        return name, FALSE if name.startswith(NEGATION_PREFIX) else TRUE
    return token[1:], TRUE


def is_flag(token: str) -> bool:
    return token.startswith("-")


def parse_args(tokens: Iterable[str], declared_options: Iterable[str]) -> ParsedInvocation:
    """Split raw tokens into positional args and declared options.

    Single pass with one token of lookahead. A flag takes the next token as its
    value unless that token is itself dash-prefixed, otherwise it gets the
    "true"/"false" sentinel. Flags missing from ``declared_options`` are
    dropped together with their value; combined short flags are not expanded
    (``-abc`` is the option ``abc``).
    """
    tokens = list(tokens)
    declared = set(declared_options)
    parsed = ParsedInvocation()
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not is_flag(token):
            parsed.args.append(token)
            i += 1
            continue
        name, value = split_flag(token)
        if i + 1 < len(tokens) and not is_flag(tokens[i + 1]):
            value = tokens[i + 1]
            i += 2
        else:
            i += 1
        if name in declared:
            parsed.options[name] = value
    return parsed
