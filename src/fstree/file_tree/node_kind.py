"""The closed set of kinds a tree node can have."""

from typing import TYPE_CHECKING, Any, Generic, List, Optional, Tuple, TypeVar

from fstree.types import FileType

if TYPE_CHECKING:
    from fstree.file_tree.node import Node

T = TypeVar("T")

_FILE_TYPE_ORDER = {file_type: index for index, file_type in enumerate(FileType)}


class NodeKind(Generic[T]):
    """Kind of a tree node: regular file, directory, symlink or other.

    Only the directory kind carries children. The child list is owned by the
    directory: a node object must not be placed in more than one child list, and
    the list must not be modified while an iterator over the tree is in use.

    Kinds compare by their position in ``FileType`` first and then, for
    directories, by their children.

    Attributes:
        file_type (FileType): The tag of this kind.

    Example:
        >>> NodeKind.directory().children
        []
        >>> NodeKind.symlink().children is None
        True
        >>> NodeKind.regular_file() < NodeKind.directory()
        True
    """

    __slots__ = ("file_type", "_children")

    def __init__(self, file_type: FileType, children: Optional[List["Node[T]"]] = None) -> None:
        """Initialize a NodeKind.

        Prefer the factory classmethods; this constructor is the common path for all
        of them.

        Args:
            file_type: The tag of this kind.
            children: Child nodes, only allowed for ``FileType.DIRECTORY``. A
                directory created without children gets a new empty list.

        Raises:
            ValueError: If children are given for a kind other than a directory.
        """
        file_type = FileType(file_type)
        if file_type is FileType.DIRECTORY:
            if children is None:
                children = []
        elif children is not None:
            raise ValueError(f"Only directories can have children, not {file_type.value}")
        self.file_type = file_type
        self._children = children

    @classmethod
    def regular_file(cls) -> "NodeKind[T]":
        return cls(FileType.REGULAR_FILE)

    @classmethod
    def directory(cls, children: Optional[List["Node[T]"]] = None) -> "NodeKind[T]":
        return cls(FileType.DIRECTORY, children)

    @classmethod
    def symlink(cls) -> "NodeKind[T]":
        return cls(FileType.SYMLINK)

    @classmethod
    def other(cls) -> "NodeKind[T]":
        return cls(FileType.OTHER)

    @classmethod
    def default(cls) -> "NodeKind[T]":
        """Neutral kind used by placeholder nodes: a regular file."""
        return cls.regular_file()

    @property
    def children(self) -> Optional[List["Node[T]"]]:
        """The child list of a directory, or None for every other kind."""
        return self._children

    @property
    def is_regular_file(self) -> bool:
        return self.file_type is FileType.REGULAR_FILE

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.file_type is FileType.SYMLINK

    @property
    def is_other(self) -> bool:
        return self.file_type is FileType.OTHER

    def _sort_key(self) -> Tuple[int, List["Node[T]"]]:
        return (_FILE_TYPE_ORDER[self.file_type], self._children or [])

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, NodeKind):
            return NotImplemented
        return self.file_type is other.file_type and self._children == other._children

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, NodeKind):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, NodeKind):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, NodeKind):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, NodeKind):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    # Mutable: the child list can change after construction
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_dir:
            return f"NodeKind.directory({self._children!r})"
        return f"NodeKind.{self.file_type.name.lower()}()"
