"""Disjoint-set (union-find) structure over arbitrary items.

Elements live in an arena of parallel lists and refer to their parent by
index, so path compression is a matter of rewriting list slots. Handles
returned to callers are thin views holding the owning structure and the
element's index.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from netalgo.errors import InternalInconsistencyError, InvalidArgumentError

T = TypeVar("T")


class UnionFindElement(Generic[T]):
    """
    Handle of a single element of a `UnionFind` structure.

    Handles are created by `UnionFind.add` and stay valid for the lifetime of
    the structure. Two handles are equal only if they are the same object.
    """

    __slots__ = ("_owner", "_index")

    def __init__(self, owner: UnionFind[T], index: int) -> None:
        self._owner = owner
        self._index = index

    @property
    def item(self) -> T:
        """The caller item wrapped by this element."""
        return self._owner._items[self._index]

    @property
    def index(self) -> int:
        """Position of this element in its structure (insertion order)."""
        return self._index

    @property
    def group(self) -> UnionFindGroup[T]:
        """The group currently containing this element."""
        return self._owner.find(self)

    def __repr__(self) -> str:
        return f"UnionFindElement(item={self.item!r})"


class UnionFindGroup(Generic[T]):
    """
    A group of a `UnionFind` structure, identified by its root element.

    While the group exists, the structure hands out the same group object
    for all of its members, so group identity can be compared with ``is``.
    """

    __slots__ = ("_owner", "_root")

    def __init__(self, owner: UnionFind[T], root: int) -> None:
        self._owner = owner
        self._root = root

    @property
    def root(self) -> UnionFindElement[T]:
        """Root element of the group."""
        return self._owner._handles[self._root]

    @property
    def elements_count(self) -> int:
        """Number of elements in the group."""
        return len(self._owner._members[self._root])

    @property
    def elements(self) -> List[UnionFindElement[T]]:
        """All elements of the group."""
        handles = self._owner._handles
        return [handles[i] for i in self._owner._members[self._root]]

    def __len__(self) -> int:
        return self.elements_count

    def __iter__(self) -> Iterator[UnionFindElement[T]]:
        return iter(self.elements)

    def __repr__(self) -> str:
        return f"UnionFindGroup(root={self.root.item!r}, size={self.elements_count})"


class UnionFind(Generic[T]):
    """
    Partition of items into disjoint groups with union and group queries.

    Uses union-by-depth and path compression. Depths are tracked per root and
    are upper bounds once compression has shortened some paths, which is all
    the merge policy needs to keep trees logarithmically shallow.

    Not safe for concurrent use: lookups rewrite parent links in place.

    Example:
        >>> uf = UnionFind(1, 2, 3, 4)
        >>> a, b, c, d = uf.elements
        >>> uf.union(a, b)
        >>> uf.union(c, d)
        >>> uf.union(a, c)
        >>> uf.groups_count, a.group.elements_count
        (1, 4)
    """

    def __init__(self, *items: T) -> None:
        self._items: List[T] = []
        self._parent: List[int] = []
        self._depth: List[int] = []
        self._handles: List[UnionFindElement[T]] = []
        # Root index -> member indices, present only for current roots
        self._members: Dict[int, List[int]] = {}
        # Root index -> cached group object, present only for current roots
        self._groups: Dict[int, UnionFindGroup[T]] = {}
        self._groups_count = 0
        if items:
            self.extend(items)

    @property
    def elements_count(self) -> int:
        """Number of elements ever added."""
        return len(self._items)

    @property
    def groups_count(self) -> int:
        """Number of disjoint groups."""
        return self._groups_count

    @property
    def elements(self) -> List[UnionFindElement[T]]:
        """Handles of all elements, in insertion order."""
        return list(self._handles)

    @property
    def groups(self) -> List[UnionFindGroup[T]]:
        """All current groups, ordered by the insertion order of their roots."""
        return [self._group_of_root(root) for root in sorted(self._members)]

    def __len__(self) -> int:
        return self.elements_count

    def add(self, *items: T) -> List[UnionFindElement[T]]:
        """
        Add items, each as a new singleton group.

        Args:
            *items: Items to add.

        Returns:
            Handles of the new elements, in argument order.
        """
        return self.extend(items)

    def extend(self, items: Optional[Iterable[T]]) -> List[UnionFindElement[T]]:
        """
        Add every item of an iterable, each as a new singleton group.

        Args:
            items: Items to add.

        Returns:
            Handles of the new elements, in iteration order.

        Raises:
            InvalidArgumentError: If `items` is None.
        """
        if items is None:
            raise InvalidArgumentError("Items to add must not be None.")

        new_handles: List[UnionFindElement[T]] = []
        for item in items:
            index = len(self._items)
            self._items.append(item)
            self._parent.append(index)
            self._depth.append(1)
            self._members[index] = [index]
            handle = UnionFindElement(self, index)
            self._handles.append(handle)
            new_handles.append(handle)

        self._groups_count += len(new_handles)
        return new_handles

    def find(self, element: UnionFindElement[T]) -> UnionFindGroup[T]:
        """
        Return the group containing `element`, compressing its root path.

        Raises:
            InvalidArgumentError: If `element` is None or belongs to another structure.
        """
        return self._group_of_root(self._root_of(self._check(element, "element")))

    def connected(self, a: UnionFindElement[T], b: UnionFindElement[T]) -> bool:
        """Return True if `a` and `b` are in the same group."""
        return self.find(a) is self.find(b)

    def union(self, a: UnionFindElement[T], b: UnionFindElement[T]) -> None:
        """
        Merge the groups containing `a` and `b`.

        The shallower tree is attached under the deeper one. On equal depths
        the group of `b` is attached under the group of `a`. Does nothing if
        both elements already share a group.

        Raises:
            InvalidArgumentError: If an element is None or belongs to another structure.
        """
        root_a = self._root_of(self._check(a, "a"))
        root_b = self._root_of(self._check(b, "b"))
        if root_a == root_b:
            return

        depth_a = self._depth[root_a]
        depth_b = self._depth[root_b]
        if depth_a >= depth_b:
            parent, child = root_a, root_b
            if depth_a == depth_b:
                self._depth[root_a] += 1
        else:
            parent, child = root_b, root_a

        self._parent[child] = parent
        moved = self._members.pop(child)
        kept = self._members[parent]
        if len(moved) > len(kept):
            moved, kept = kept, moved
            self._members[parent] = kept
        kept.extend(moved)
        self._groups.pop(child, None)
        self._groups_count -= 1

    def _check(self, element: Any, name: str) -> int:
        if element is None:
            raise InvalidArgumentError(f"Element '{name}' must not be None.")
        if not isinstance(element, UnionFindElement) or element._owner is not self:
            raise InvalidArgumentError(
                f"Element '{name}' does not belong to this UnionFind structure."
            )
        return element._index

    def _root_of(self, index: int) -> int:
        parent = self._parent
        path: List[int] = []
        root = index
        while parent[root] != root:
            path.append(root)
            if len(path) > len(parent):
                raise InternalInconsistencyError(
                    f"Cycle in parent links of element {self._items[index]!r}."
                )
            root = parent[root]

        for node in path:
            parent[node] = root
        return root

    def _group_of_root(self, root: int) -> UnionFindGroup[T]:
        group = self._groups.get(root)
        if group is None:
            group = UnionFindGroup(self, root)
            self._groups[root] = group
        return group
