"""Classification of real filesystem paths into node kinds."""

import errno
import os
import stat

from fstree.exceptions import ClassificationError
from fstree.types import FileType, PathType


def classify(path: PathType, follow_symlinks: bool = False) -> FileType:
    """Determine what kind of filesystem entry lives at ``path``.

    Performs a single ``stat`` (when following symlinks) or ``lstat`` call. There
    are no retries: the call either answers or fails.

    Args:
        path: The path to inspect. Can be any path-like object.
        follow_symlinks: If True, a symlink is classified as whatever it points to.
            If False (default), it is reported as ``FileType.SYMLINK``.

    Returns:
        The kind of the entry. Block and character devices, FIFOs and sockets are
        all reported as ``FileType.OTHER``.

    Raises:
        ClassificationError: If the path does not exist or cannot be accessed, or if it
            is not a valid path at all (e.g. contains a null byte). With
            ``follow_symlinks=True`` this includes dangling symlinks.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     classify(tmp)
        <FileType.DIRECTORY: 'directory'>
    """
    try:
        mode = os.stat(path).st_mode if follow_symlinks else os.lstat(path).st_mode
    except OSError as e:
        raise ClassificationError(e.errno, e.strerror, os.fspath(path)) from e
    except ValueError as e:
        # Paths the OS cannot even represent, e.g. with an embedded null byte
        raise ClassificationError(errno.EINVAL, str(e), os.fspath(path)) from e

    if stat.S_ISREG(mode):
        return FileType.REGULAR_FILE
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    return FileType.OTHER
