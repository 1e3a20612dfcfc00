"""Page content tree nodes.

A page's drawable content is an ordered tree:
- ContentStream: Leaf holding an opaque reference to drawing instructions
- Group: Inner node applying an affine transform to its children

Nodes are moved, never copied. A node has at most one parent at any
time; ``append_child`` refuses a node that is still attached elsewhere,
so callers must ``extract_child`` it first.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..exceptions import NodeOwnershipError
from .geometry import Matrix


class NodeContainer:
    """Ordered list of child nodes with move-only reparenting."""

    def __init__(self) -> None:
        self._children: list[Node] = []

    @property
    def children(self) -> tuple[Node, ...]:
        """Snapshot of the children in paint order."""
        return tuple(self._children)

    @property
    def first_child(self) -> Node | None:
        return self._children[0] if self._children else None

    def child_count(self) -> int:
        return len(self._children)

    def append_child(self, node: Node) -> Node:
        """Attach ``node`` as the last child.

        Raises:
            NodeOwnershipError: If the node already has a parent, or if
                attaching it would make a group contain itself
        """
        if node.parent is not None:
            raise NodeOwnershipError(f"{node!r} is still attached to {node.parent!r}; extract it first")
        if isinstance(node, NodeContainer) and _is_ancestor(node, self):
            raise NodeOwnershipError(f"Cannot append {node!r} inside its own subtree")
        node.parent = self
        self._children.append(node)
        return node

    def extract_child(self, node: Node) -> Node:
        """Detach ``node`` from this container and return it.

        Raises:
            NodeOwnershipError: If the node is not a child of this container
        """
        if node.parent is not self:
            raise NodeOwnershipError(f"{node!r} is not a child of {self!r}")
        for index, child in enumerate(self._children):
            if child is node:
                del self._children[index]
                break
        node.parent = None
        return node

    def next_sibling_of(self, node: Node) -> Node | None:
        for index, child in enumerate(self._children):
            if child is node:
                return self._children[index + 1] if index + 1 < len(self._children) else None
        raise NodeOwnershipError(f"{node!r} is not a child of {self!r}")


class Node:
    """Base class for page content nodes."""

    def __init__(self) -> None:
        self.parent: NodeContainer | None = None

    @property
    def next_sibling(self) -> Node | None:
        if self.parent is None:
            return None
        return self.parent.next_sibling_of(self)


class ContentStream(Node):
    """Leaf node referencing existing drawing instructions.

    Attributes:
        ref: Opaque handle understood by the document backend
            (a PDF stream xref for the PyMuPDF backend)
    """

    def __init__(self, ref: Any):
        super().__init__()
        self.ref = ref

    def __repr__(self) -> str:
        return f"ContentStream(ref={self.ref!r})"


class Group(Node, NodeContainer):
    """Inner node drawing its children under an affine transform."""

    def __init__(self, matrix: Matrix | None = None, children: Iterable[Node] = ()):
        Node.__init__(self)
        NodeContainer.__init__(self)
        self.matrix = matrix or Matrix.identity()
        for child in children:
            self.append_child(child)

    def __repr__(self) -> str:
        return f"Group(matrix={self.matrix.to_tuple()}, children={len(self._children)})"


def _is_ancestor(candidate: NodeContainer, container: NodeContainer) -> bool:
    current: Any = container
    while current is not None:
        if current is candidate:
            return True
        current = getattr(current, "parent", None)
    return False
