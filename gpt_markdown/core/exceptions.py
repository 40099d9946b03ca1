"""Custom exceptions for export loading and conversion."""


class ExportNotFoundError(FileNotFoundError):
    """Raised when the export source path does not exist or holds no export."""

    def __init__(self, path: str, message: str | None = None):
        self.path = path
        self.message = message or f"Export not found: {path}"
        super().__init__(self.message)


class MalformedExportError(Exception):
    """Raised when an export record cannot be decoded into the expected shape."""

    def __init__(self, message: str | None = None, index: int | None = None):
        self.index = index
        prefix = (
            f"Malformed export (conversation #{index})"
            if index is not None
            else "Malformed export"
        )
        self.message = f"{prefix}: {message}" if message else prefix
        super().__init__(self.message)


class CyclicConversationError(Exception):
    """Raised when a conversation's parent chain loops back on itself."""

    def __init__(self, node_id: str, title: str | None = None):
        self.node_id = node_id
        self.title = title
        where = f" in {title!r}" if title else ""
        self.message = f"Cycle detected at node {node_id!r}{where}"
        super().__init__(self.message)


class ConversionFailedException(Exception):
    def __init__(self, message: str | None = None):
        self.message = (
            f"Conversion failed: {message}" if message else "Conversion failed"
        )
        super().__init__(self.message)
