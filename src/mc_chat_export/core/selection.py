"""Map an externally chosen set of indices onto extracted records.

The chooser itself (a prompt, a tool argument, a fixed list) is a Selector;
resolve_selection only validates and dereferences its answer.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, TextIO

from .errors import IndexOutOfBoundsError
from .models import ExtractedRecord

_RANGE_RE = re.compile(r"^(?P<lo>\d+)\s*-\s*(?P<hi>\d+)$")


class Selector(Protocol):
    """Return chosen zero-based indices into items; empty means everything."""

    def select(self, items: Sequence[str]) -> set[int]:
        ...


def parse_index_spec(spec: str) -> set[int]:
    """Parse '0,3,5-7' into {0, 3, 5, 6, 7}. Blank input gives an empty set."""
    out: set[int] = set()
    for part in spec.split(","):
        token = part.strip()
        if not token:
            continue
        m = _RANGE_RE.match(token)
        if m:
            lo, hi = int(m.group("lo")), int(m.group("hi"))
            if lo > hi:
                raise ValueError(f"Invalid index range '{token}' (start > end)")
            out.update(range(lo, hi + 1))
            continue
        if not token.isdigit():
            raise ValueError(f"Invalid index '{token}'. Use e.g. 0,3,5-7")
        out.add(int(token))
    return out


def resolve_selection(
    selection: Iterable[int] | None,
    records: Sequence[ExtractedRecord],
) -> list[ExtractedRecord]:
    """Return the selected records in ascending index (= file) order.

    An empty or missing selection selects every record.
    """
    indices = sorted(set(selection or ()))
    if not indices:
        return list(records)

    count = len(records)
    for i in indices:
        if i < 0 or i >= count:
            raise IndexOutOfBoundsError(i, count)
    return [records[i] for i in indices]


@dataclass(frozen=True, slots=True)
class AllSelector:
    def select(self, items: Sequence[str]) -> set[int]:
        return set()


@dataclass(frozen=True, slots=True)
class IndexSelector:
    indices: frozenset[int]

    @classmethod
    def from_spec(cls, spec: str) -> IndexSelector:
        return cls(frozenset(parse_index_spec(spec)))

    def select(self, items: Sequence[str]) -> set[int]:
        return set(self.indices)


class PromptSelector:
    """Print a numbered list and read an index spec back."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stderr

    def select(self, items: Sequence[str]) -> set[int]:
        width = len(str(max(len(items) - 1, 0)))
        for i, text in enumerate(items):
            print(f"{i:>{width}}  {text}", file=self._out)
        print(
            "What messages do you want to render? (e.g. 0,3,5-7; empty for all): ",
            end="",
            file=self._out,
            flush=True,
        )
        answer = self._in.readline()
        return parse_index_spec(answer)
