class InvalidPathSegmentError(ValueError):
    """
    Exception raised when a node is constructed from a path with more than one component.

    A node stores exactly one path segment. Passing something like ``"a/b"`` is a
    programming error on the caller's side: the path is never truncated or normalized,
    construction simply fails. Nothing inside the package catches this exception.

    Attributes:
        segment (str): The offending path, as it was passed in.

    Example:
        >>> error = InvalidPathSegmentError("a/b")
        >>> str(error)
        "Node path must be a single path component, got 'a/b'"
    """

    def __init__(self, segment: str) -> None:
        """
        Initialize the exception with the rejected path.

        Args:
            segment (str): The path that was passed to the node constructor.
        """
        self.segment = segment
        super().__init__(f"Node path must be a single path component, got {segment!r}")


class ClassificationError(OSError):
    """
    Exception raised when the kind of a real filesystem path cannot be determined.

    This happens when the path does not exist, cannot be accessed, or disappears
    between listing and inspection. It is an ``OSError`` carrying the errno, message
    and filename of the failed system call; the original error is chained as
    ``__cause__``.

    Example:
        >>> import errno
        >>> error = ClassificationError(errno.ENOENT, "No such file or directory", "/missing")
        >>> error.filename
        '/missing'
        >>> error.errno == errno.ENOENT
        True
    """

    pass
