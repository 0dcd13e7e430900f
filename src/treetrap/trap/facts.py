"""In-memory TRAP facts and their textual rendering.

A TRAP program is an append-only sequence of facts, one per line::

    // Auto-generated TRAP file for foo.rb
    #0 = *
    #0_loc = *
    location(#0_loc, "foo.rb", 0, 0, 0, 2)
    identifier_def(#0, "ab", #0_loc)
    ...
    program_child(#5, 0, #0)
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from treetrap.trap.escape import escape_name

F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Label:
    """A fresh identifier: ``#N`` for rows, ``#N_loc`` for source locations."""

    value: int
    is_location: bool = False

    @classmethod
    def normal(cls, value: int) -> Label:
        return cls(value)

    @classmethod
    def location(cls, value: int) -> Label:
        return cls(value, is_location=True)

    def __str__(self) -> str:
        if self.is_location:
            return f"#{self.value}_loc"
        return f"#{self.value}"


Arg = Label | int | str


def format_arg(arg: Arg) -> str:
    """Render one argument: labels bare, ints as decimals, strings SQL-quoted."""
    if isinstance(arg, str):
        return '"' + arg.replace('"', '""') + '"'
    return str(arg)


@dataclass(frozen=True, slots=True)
class NewId:
    label: Label

    def __str__(self) -> str:
        return f"{self.label} = *"


@dataclass(frozen=True, slots=True)
class RowDefinition:
    """``<table>_def(id, args..., loc)``; ``table`` is the unescaped name."""

    table: str
    id: Label
    args: tuple[Arg, ...]
    location: Label

    def __str__(self) -> str:
        rendered = "".join(f"{format_arg(arg)}, " for arg in self.args)
        return f"{escape_name(self.table + '_def')}({self.id}, {rendered}{self.location})"


@dataclass(frozen=True, slots=True)
class ChildLink:
    """``<parent>_<field>(parent_id, index, child_id)``."""

    parent_table: str
    parent_id: Label
    field_name: str
    index: int
    child_id: Label

    def __str__(self) -> str:
        name = escape_name(f"{self.parent_table}_{self.field_name}")
        return f"{name}({self.parent_id}, {self.index}, {self.child_id})"


@dataclass(frozen=True, slots=True)
class Location:
    label: Label
    path: str
    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def __str__(self) -> str:
        args = (
            self.label,
            self.path,
            self.start_line,
            self.start_col,
            self.end_line,
            self.end_col,
        )
        return f"location({', '.join(format_arg(a) for a in args)})"


@dataclass(frozen=True, slots=True)
class Comment:
    text: str

    def __str__(self) -> str:
        return f"// {self.text}"


Fact = NewId | RowDefinition | ChildLink | Location | Comment


@dataclass
class Program:
    """Ordered, append-only list of facts for one source file."""

    facts: list[Fact] = field(default_factory=list)

    def append(self, fact: Fact) -> None:
        self.facts.append(fact)

    def __iter__(self) -> Iterator[Fact]:
        return iter(self.facts)

    def __len__(self) -> int:
        return len(self.facts)

    def lines(self) -> list[str]:
        return [str(fact) for fact in self.facts]

    def render(self) -> str:
        return "".join(f"{line}\n" for line in self.lines())

    def __str__(self) -> str:
        return self.render()

    def of_type(self, kind: type[F]) -> Sequence[F]:
        """All facts of one variant, in emission order."""
        return [fact for fact in self.facts if isinstance(fact, kind)]
