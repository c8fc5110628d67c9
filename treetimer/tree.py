"""Hierarchical timer tree.

Nodes live in an arena (``TimerTree.nodes``) and refer to each other by
integer handle. The tree keeps a cursor at the innermost open region.

Name lookup is cursor-relative: ``find`` walks the cursor node, its subtree
and then the cursor's later siblings (with their subtrees), in pre-order.
Regions opened elsewhere, e.g. under an already closed sibling of an
ancestor, or an ancestor itself, are *not* found; starting such a name
creates a new node under the cursor. Callers that want one row per name
must open it from the same place every time.

With no cursor (nothing open yet, or every region closed) ``find`` covers
the whole tree from the root, but ``resolve`` only matches top-level
regions; anything else is appended to the root's sibling chain, so
consecutive top-level regions all show up at depth 0.
"""
from __future__ import annotations

from typing import Iterator

from .clock import Clock
from .node import TimerNode


class TimerTree:
    def __init__(self) -> None:
        self.nodes: list[TimerNode] = []
        self.root: int | None = None
        self.cursor: int | None = None
        # last child per parent handle; None keys the top-level chain
        self._tail: dict[int | None, int] = {}

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, handle: int) -> TimerNode:
        return self.nodes[handle]

    @property
    def current(self) -> TimerNode | None:
        if self.cursor is None:
            return None
        return self.nodes[self.cursor]

    def children(self, handle: int | None) -> list[TimerNode]:
        """Direct children of ``handle``; ``None`` lists the top level."""
        h = self.root if handle is None else self.nodes[handle].first_child
        out: list[TimerNode] = []
        while h is not None:
            node = self.nodes[h]
            out.append(node)
            h = node.next_sibling
        return out

    def path(self, handle: int) -> list[str]:
        names: list[str] = []
        h: int | None = handle
        while h is not None:
            node = self.nodes[h]
            names.append(node.name)
            h = node.parent
        names.reverse()
        return names

    # -- lookup ---------------------------------------------------------

    def _search_chain(self, handle: int | None, name: str) -> TimerNode | None:
        h = handle
        while h is not None:
            node = self.nodes[h]
            if node.name == name:
                return node
            if node.first_child is not None:
                found = self._search_chain(node.first_child, name)
                if found is not None:
                    return found
            h = node.next_sibling
        return None

    def _find_top_level(self, name: str) -> TimerNode | None:
        h = self.root
        while h is not None:
            node = self.nodes[h]
            if node.name == name:
                return node
            h = node.next_sibling
        return None

    def find(self, name: str) -> TimerNode | None:
        if self.root is None:
            return None
        start = self.cursor if self.cursor is not None else self.root
        return self._search_chain(start, name)

    # -- mutation -------------------------------------------------------

    def create_and_attach(self, name: str, note: str = "") -> TimerNode:
        handle = len(self.nodes)
        node = TimerNode(name=name, note=note, index=handle)
        self.nodes.append(node)
        if self.root is None:
            self.root = handle
            self._tail[None] = handle
        else:
            parent = self.cursor
            tail = self._tail.get(parent)
            if tail is None:
                # parent cannot be None here: the root is always the top-level head
                self.nodes[parent].first_child = handle  # type: ignore[index]
            else:
                self.nodes[tail].next_sibling = handle
                node.prev_sibling = tail
            node.parent = parent
            self._tail[parent] = handle
        self.cursor = handle
        return node

    def resolve(self, name: str, note: str = "") -> TimerNode:
        """Move the cursor to ``name``, creating the node if lookup misses.

        A found node keeps its original parent even when reached from a
        different context.
        """
        if self.cursor is None:
            node = self._find_top_level(name)
        else:
            node = self.find(name)
        if node is None:
            return self.create_and_attach(name, note)
        self.cursor = node.index
        return node

    def enter(self, name: str, clock: Clock, note: str = "") -> TimerNode:
        node = self.resolve(name, note)
        node.begin(clock)
        return node

    def leave(self, name: str, clock: Clock) -> bool:
        """Close the cursor region if it is ``name``; False leaves state untouched."""
        node = self.current
        if node is None or node.name != name:
            return False
        node.end(clock)
        self.cursor = node.parent
        return True

    # -- traversal ------------------------------------------------------

    def _walk_chain(
        self, handle: int | None, depth: int, max_depth: int | None
    ) -> Iterator[tuple[int, TimerNode]]:
        h = handle
        while h is not None:
            node = self.nodes[h]
            yield depth, node
            if node.first_child is not None and (max_depth is None or max_depth > depth):
                yield from self._walk_chain(node.first_child, depth + 1, max_depth)
            h = node.next_sibling

    def walk(self, max_depth: int | None = None) -> Iterator[tuple[int, TimerNode]]:
        """Pre-order ``(depth, node)`` pairs; ``max_depth`` bounds descent only."""
        return self._walk_chain(self.root, 0, max_depth)
