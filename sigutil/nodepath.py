"""Splitting a file-system path into directory, base name and extension."""

from __future__ import annotations


class NodePath:
    """A path split into its parts.

    Backslashes are treated as '/', and one trailing '/' is ignored.  The
    extension is whatever follows the last '.' in the final component.  A
    leading dot therefore starts the extension, so '.bashrc' has an empty
    base name and the extension 'bashrc'.  Without a '/' the directory is '.'.
    """

    def __init__(self, path: str | None = None) -> None:
        self._basename = ""
        self._dirname = "."
        self._extension = ""
        self._fullpath = ""
        self._initialized = False
        if path is not None:
            self.initialize(path)

    def initialize(self, path: str) -> None:
        """Split ``path`` into its parts, replacing whatever was held before."""
        fullpath = path.replace("\\", "/")
        if fullpath.endswith("/"):
            fullpath = fullpath[:-1]

        last_slash = fullpath.rfind("/")
        last_dot = fullpath.rfind(".")
        if last_dot < last_slash:
            last_dot = -1

        self._fullpath = fullpath
        self._dirname = fullpath[:last_slash] if last_slash >= 0 else "."
        self._extension = fullpath[last_dot + 1:] if last_dot >= 0 else ""
        start = last_slash + 1
        self._basename = fullpath[start:last_dot] if last_dot >= 0 else fullpath[start:]
        self._initialized = True

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("no path has been given")

    def filename(self) -> str:
        """The base name followed by '.' and the extension, if there is one."""
        self._require_initialized()
        if self._extension:
            return f"{self._basename}.{self._extension}"
        return self._basename

    def basename(self) -> str:
        self._require_initialized()
        return self._basename

    def dirname(self) -> str:
        self._require_initialized()
        return self._dirname

    def fullpath(self) -> str:
        """The whole path with '/' separators and no trailing '/'."""
        self._require_initialized()
        return self._fullpath

    def extension(self) -> str:
        self._require_initialized()
        return self._extension

    def is_initialized(self) -> bool:
        return self._initialized

    def __repr__(self) -> str:
        if not self._initialized:
            return "NodePath()"
        return f"NodePath({self._fullpath!r})"