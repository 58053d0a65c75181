#!/usr/bin/env python3
"""
Partition an ordered sequence of values into named groups and flatten it back.

Group keys are resolved into match rules (preset names expand recursively,
anything else is compiled as a regular expression). Each value goes to the
first rule whose regexp matches its sort key; values matched by nothing land
in the single "$DEFAULT" group. Groups may then be sorted internally.

No I/O and no shared state: every call works on its own buffers.
"""
from __future__ import annotations

import locale
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union


DEFAULT_GROUP = "$DEFAULT"

GroupQuery = Union[str, re.Pattern]
Presets = Dict[str, Union[GroupQuery, Sequence[GroupQuery]]]


class OrganizeError(ValueError):
    pass


class InvalidPatternError(OrganizeError):
    def __init__(self, key: GroupQuery, reason: str):
        self.key = key
        self.reason = reason
        shown = key.pattern if isinstance(key, re.Pattern) else key
        super().__init__(f"Invalid group pattern {shown!r}: {reason}")


class UnsupportedValueTypeError(OrganizeError, TypeError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Neither a key function nor string values were passed (got {type(value).__name__})"
        )


class PresetCycleError(OrganizeError):
    def __init__(self, chain: List[str]):
        self.chain = list(chain)
        super().__init__("Preset cycle: " + " -> ".join(self.chain))


class InvalidSortError(OrganizeError):
    def __init__(self, sort: Any):
        self.sort = sort
        super().__init__(f"Unknown sort mode {sort!r} (expected ASC, DESC or disabled)")


@dataclass(frozen=True)
class Rule:
    query: GroupQuery
    regexp: Optional["re.Pattern[str]"] = None

    @property
    def is_default(self) -> bool:
        return self.regexp is None

    def matches(self, sort_key: str) -> bool:
        return self.regexp is not None and self.regexp.search(sort_key) is not None


@dataclass(frozen=True)
class OrganizedGroup:
    query: GroupQuery
    values: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class OrganizeResult:
    flat: List[Any]
    groups: List[OrganizedGroup]


def default_rule() -> Rule:
    return Rule(query=DEFAULT_GROUP)


def compile_query(query: GroupQuery, ignore_case: bool) -> "re.Pattern[str]":
    if isinstance(query, re.Pattern):
        # the case flag is always taken from ignore_case, never from the pattern
        source = query.pattern
        flags = query.flags & ~re.IGNORECASE
    else:
        source = query
        flags = 0
    if ignore_case:
        flags |= re.IGNORECASE
    try:
        return re.compile(source, flags)
    except re.error as e:
        raise InvalidPatternError(query, str(e)) from e


def resolve(groups: Iterable[GroupQuery], presets: Optional[Presets] = None, ignore_case: bool = True) -> List[Rule]:
    """Expand group keys into an ordered list of rules with exactly one default rule.

    Preset names are expanded depth-first in place. A default rule is kept at
    the position it was first requested, or appended when never requested.
    """
    if isinstance(groups, (str, re.Pattern)):
        groups = [groups]
    presets = presets or {}
    rules: List[Rule] = []
    has_default = False

    def expand(query: Any, active: List[str]) -> None:
        nonlocal has_default
        if isinstance(query, (list, tuple)):
            for q in query:
                expand(q, active)
            return
        if query == DEFAULT_GROUP:
            if not has_default:
                rules.append(default_rule())
                has_default = True
            return
        if isinstance(query, str) and query in presets:
            if query in active:
                raise PresetCycleError(active + [query])
            expand(presets[query], active + [query])
            return
        rules.append(Rule(query=query, regexp=compile_query(query, ignore_case)))

    for g in groups:
        expand(g, [])

    if not has_default:
        rules.append(default_rule())
    return rules


def trim(value: str, chars: Optional[Iterable[str]]) -> str:
    """Strip any run of `chars` from both ends of `value`."""
    if not chars:
        return value
    return value.strip("".join(chars))


def normalize_sort(sort: Any) -> Optional[str]:
    if sort is None or sort is False:
        return None
    if sort is True:
        return "ASC"
    if isinstance(sort, str) and sort.upper() in ("ASC", "DESC"):
        return sort.upper()
    raise InvalidSortError(sort)


def collation_key(sort_key: str):
    folded = unicodedata.normalize("NFC", sort_key).casefold()
    # strxfrm rejects embedded NUL, so transform the pieces around it
    folded = "\x00".join(locale.strxfrm(part) for part in folded.split("\x00"))
    # swapcase puts lowercase ahead of uppercase on case-only ties
    return (folded, sort_key.swapcase())


def organize(
    values: Sequence[Any],
    groups: Iterable[GroupQuery],
    *,
    presets: Optional[Presets] = None,
    sort: Any = False,
    ignore_case: bool = True,
    ignore_chars: Optional[str] = None,
    key: Optional[Callable[[Any], str]] = None,
) -> OrganizeResult:
    values = list(values)
    sort_mode = normalize_sort(sort)
    rules = resolve(groups, presets, ignore_case)

    if key is None:
        for v in values:
            if not isinstance(v, str):
                raise UnsupportedValueTypeError(v)
        key = _identity

    buckets: List[List[tuple]] = [[] for _ in rules]
    default_index = next(i for i, r in enumerate(rules) if r.is_default)

    for value in values:
        sort_key = trim(key(value), ignore_chars)
        for i, rule in enumerate(rules):
            if rule.matches(sort_key):
                buckets[i].append((sort_key, value))
                break
        else:
            buckets[default_index].append((sort_key, value))

    if sort_mode:
        for bucket in buckets:
            bucket.sort(key=lambda item: collation_key(item[0]), reverse=(sort_mode == "DESC"))

    out_groups = [
        OrganizedGroup(query=rule.query, values=[v for _, v in bucket])
        for rule, bucket in zip(rules, buckets)
    ]
    flat = [v for g in out_groups for v in g.values]
    return OrganizeResult(flat=flat, groups=out_groups)


def _identity(value: str) -> str:
    return value
