from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, Iterable, Iterator, List, Tuple
from rbt import errors as err, types


class Color(Enum):
    """node colors"""

    RED = 1
    BLACK = 2


class Side(Enum):
    """which child slot of its parent a node sits in"""

    LEFT = 1
    RIGHT = 2


class Outcome(Enum):
    """result of an insert"""

    OK = 1
    DUPLICATE_KEY = 2


@dataclass(eq=False)
class Node(Generic[types.T]):
    """tree nodes. left and right own their subtrees, parent is a back-link"""

    key: types.T
    color: Color = Color.RED
    left: Optional[Node[types.T]] = None
    right: Optional[Node[types.T]] = None
    parent: Optional[Node[types.T]] = field(default=None, repr=False)


@dataclass(frozen=True)
class NodeView(Generic[types.T]):
    """read-only descriptor handed out by traversals"""

    key: types.T
    color: Color
    left_key: Optional[types.T] = None
    right_key: Optional[types.T] = None
    has_left: bool = False
    has_right: bool = False
    side: Optional[Side] = None
    depth: int = 0

    @property
    def is_red(self) -> bool:
        """convenience"""

        return self.color is Color.RED


def _is_red(node: Optional[Node]) -> bool:
    """absent children count as black"""

    return node is not None and node.color is Color.RED


class RBTree(Generic[types.T]):
    """red-black tree implementation. insert only, keys are unique"""

    root: Optional[Node[types.T]] = None

    def __init__(
        self,
        keys: Optional[Iterable[types.T]] = None,
        comparison_key: types.ComparisonKey = lambda x: x,
    ):
        self.root = None
        self._count = 0
        # changing the comparison key of a populated tree breaks ordering
        self._cmp = comparison_key

        for key in keys or ():
            self.insert(key)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: types.T) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[types.T]:
        """keys in ascending order"""

        for view in self.inorder():
            yield view.key

    def __repr__(self) -> str:
        return f"RBTree({self.keys()!r})"

    def insert(self, key: types.T) -> Outcome:
        """bst insert then restore red-black properties"""

        node = self.root
        parent: Optional[Node[types.T]] = None
        cmp = 0

        while node:
            parent = node
            cmp = self._compare(key, node.key)

            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return Outcome.DUPLICATE_KEY

        new_node = Node[types.T](key=key, color=Color.RED, parent=parent)

        if parent is None:
            self.root = new_node
        elif cmp < 0:
            parent.left = new_node
        else:
            parent.right = new_node

        self._count += 1
        self._fix_after_insert(new_node)

        return Outcome.OK

    def search(self, key: types.T) -> Optional[types.T]:
        """stored key equal to key, if any"""

        node = self._find(key)
        return node.key if node else None

    def keys(self) -> List[types.T]:
        """all keys, ascending"""

        return list(self)

    def min_key(self) -> types.T:
        """smallest key"""

        node = self.root

        if not node:
            raise err.EmptyTree()

        while node.left:
            node = node.left

        return node.key

    def max_key(self) -> types.T:
        """largest key"""

        node = self.root

        if not node:
            raise err.EmptyTree()

        while node.right:
            node = node.right

        return node.key

    def height(self) -> int:
        """nodes on the longest root to leaf path"""

        return max((view.depth + 1 for view in self.preorder()), default=0)

    def black_height(self) -> int:
        """black nodes below the root on any path to a nil position"""

        height = 0
        node = self.root.left if self.root else None

        while node:
            if node.color is Color.BLACK:
                height += 1
            node = node.left

        return height

    def preorder(self) -> Iterator[NodeView[types.T]]:
        """node, left subtree, right subtree"""

        stack: List[Tuple[Node[types.T], Optional[Side], int]] = []

        if self.root:
            stack.append((self.root, None, 0))

        while stack:
            node, side, depth = stack.pop()
            yield self._view(node, side, depth)

            if node.right:
                stack.append((node.right, Side.RIGHT, depth + 1))
            if node.left:
                stack.append((node.left, Side.LEFT, depth + 1))

    def inorder(self) -> Iterator[NodeView[types.T]]:
        """left subtree, node, right subtree"""

        stack: List[Tuple[Node[types.T], Optional[Side], int]] = []
        node = self.root
        side: Optional[Side] = None
        depth = 0

        while stack or node:
            while node:
                stack.append((node, side, depth))
                node, side, depth = node.left, Side.LEFT, depth + 1

            current, current_side, current_depth = stack.pop()
            yield self._view(current, current_side, current_depth)
            node, side, depth = current.right, Side.RIGHT, current_depth + 1

    def validate(self) -> None:
        """
        walk the whole tree and raise InvariantViolation on the first broken
        red-black, bst or parent link property
        """

        if not self.root:
            if self._count:
                raise err.InvariantViolation(f"empty tree with count {self._count}")
            return

        if self.root.parent is not None:
            raise err.InvariantViolation("root has a parent")

        if self.root.color is not Color.BLACK:
            raise err.InvariantViolation("root is not black")

        seen = [0]
        self._validate(self.root, None, None, seen)

        if seen[0] != self._count:
            raise err.InvariantViolation(
                f"count is {self._count} but tree holds {seen[0]} nodes"
            )

    def _validate(
        self,
        node: Optional[Node[types.T]],
        low: Optional[Node[types.T]],
        high: Optional[Node[types.T]],
        seen: List[int],
    ) -> int:
        """returns black nodes on every path from node down, node included"""

        if not node:
            return 0

        seen[0] += 1

        if low and self._compare(node.key, low.key) <= 0:
            raise err.InvariantViolation(f"{node.key!r} not greater than {low.key!r}")
        if high and self._compare(node.key, high.key) >= 0:
            raise err.InvariantViolation(f"{node.key!r} not less than {high.key!r}")

        for child in (node.left, node.right):
            if child is None:
                continue
            if child.parent is not node:
                raise err.InvariantViolation(f"bad parent link on {child.key!r}")
            if _is_red(node) and _is_red(child):
                raise err.InvariantViolation(
                    f"red {node.key!r} has red child {child.key!r}"
                )

        left = self._validate(node.left, low, node, seen)
        right = self._validate(node.right, node, high, seen)

        if left != right:
            raise err.InvariantViolation(
                f"black height mismatch under {node.key!r}: {left} != {right}"
            )

        return left + (1 if node.color is Color.BLACK else 0)

    def _fix_after_insert(self, node: Node[types.T]) -> None:
        """recolor and rotate upward from a freshly inserted red node"""

        while node is not self.root and _is_red(node.parent):
            parent = node.parent
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right

                if _is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                # inner grandchild, turn it into the outer case
                if node is parent.right:
                    self._rotate_left(parent)
                    node = parent
                    parent = node.parent

                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left

                if _is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.left:
                    self._rotate_right(parent)
                    node = parent
                    parent = node.parent

                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent)

        self.root.color = Color.BLACK

    def _rotate_left(self, node: Node[types.T]) -> None:
        """right child takes node's place, node becomes its left child"""

        parent = node.parent
        right = node.right

        if not right:
            raise err.StructuralInconsistency(f"{node.key!r} has no right child")

        node.right = right.left
        if right.left:
            right.left.parent = node

        right.left = node
        node.parent = right
        self._replace_parents_child(parent, node, right)

    def _rotate_right(self, node: Node[types.T]) -> None:
        """left child takes node's place, node becomes its right child"""

        parent = node.parent
        left = node.left

        if not left:
            raise err.StructuralInconsistency(f"{node.key!r} has no left child")

        node.left = left.right
        if left.right:
            left.right.parent = node

        left.right = node
        node.parent = left
        self._replace_parents_child(parent, node, left)

    def _replace_parents_child(
        self,
        parent: Optional[Node[types.T]],
        old_child: Node[types.T],
        new_child: Optional[Node[types.T]],
    ) -> None:
        """hang new_child wherever old_child used to be"""

        if parent is None:
            self.root = new_child
        elif parent.left is old_child:
            parent.left = new_child
        elif parent.right is old_child:
            parent.right = new_child
        else:
            raise err.StructuralInconsistency(
                f"{old_child.key!r} is not a child of {parent.key!r}"
            )

        if new_child:
            new_child.parent = parent

    def _find(self, key: types.T) -> Optional[Node[types.T]]:
        """bst search"""

        node = self.root

        while node:
            cmp = self._compare(key, node.key)

            if cmp == 0:
                return node

            node = node.left if cmp < 0 else node.right

        return None

    def _compare(self, one: types.T, other: types.T) -> int:
        """simple comparator"""

        keyone, keyother = self._cmp(one), self._cmp(other)

        if keyone == keyother:
            return 0
        if keyone < keyother:
            return -1

        return 1

    @staticmethod
    def _view(
        node: Node[types.T], side: Optional[Side], depth: int
    ) -> NodeView[types.T]:
        """snapshot a node for traversal consumers"""

        return NodeView(
            key=node.key,
            color=node.color,
            left_key=node.left.key if node.left else None,
            right_key=node.right.key if node.right else None,
            has_left=node.left is not None,
            has_right=node.right is not None,
            side=side,
            depth=depth,
        )
