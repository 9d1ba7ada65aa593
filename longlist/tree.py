"""Tree drawing parts for the tree view."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")


class TreePart(Enum):
    """One column of box-drawing characters in a tree row."""

    EDGE = "edge"
    LINE = "line"
    CORNER = "corner"
    BLANK = "blank"

    def ascii_art(self) -> str:
        return _ART[self]


_ART = {
    TreePart.EDGE: "├──",
    TreePart.LINE: "│  ",
    TreePart.CORNER: "└──",
    TreePart.BLANK: "   ",
}


@dataclass(frozen=True)
class TreeParams:
    """The depth of an entry and whether it is the last in its directory."""

    depth: int
    last: bool

    def is_at_root(self) -> bool:
        return self.depth == 0


@dataclass
class TreeTrunk:
    """Builds up tree parts across successive rows."""

    stack: list[TreePart] = field(default_factory=list)
    last_params: TreeParams | None = None

    def new_row(self, params: TreeParams) -> list[TreePart]:
        """Return the tree parts for a row at the given depth and last-ness."""
        if self.last_params is not None:
            previous = self.last_params
            self.stack[previous.depth] = (
                TreePart.BLANK if previous.last else TreePart.LINE
            )

        size = params.depth + 1
        del self.stack[size:]
        self.stack.extend([TreePart.EDGE] * (size - len(self.stack)))
        self.stack[params.depth] = TreePart.CORNER if params.last else TreePart.EDGE

        self.last_params = params
        # The zeroth level is dropped so unrelated top-level entries are not joined.
        return self.stack[1:]


def iterate_over(depth: int, items: Iterable[T]) -> Iterator[tuple[TreeParams, T]]:
    """Yield each item with tree parameters marking the last one."""
    iterator = iter(items)
    sentinel = object()
    current = next(iterator, sentinel)
    while current is not sentinel:
        following = next(iterator, sentinel)
        yield TreeParams(depth, following is sentinel), current
        current = following