class TreeCommandError(Exception):
    """
    Exception raised when the tree command cannot produce a tree view.

    The message is a single human-readable label describing what went wrong. It is
    meant to be shown to the user as-is, without a traceback.

    Attributes:
        message (str): The labeled error message.

    Example:
        >>> error = TreeCommandError("Expected a folder path to be provided when using --path flag")
        >>> str(error)
        'Expected a folder path to be provided when using --path flag'
    """

    def __init__(self, message: str) -> None:
        """
        Initialize the exception with its label.

        Args:
            message (str): The labeled error message.
        """
        self.message = message
        super().__init__(message)


class InvalidRenderStyleError(ValueError):
    """
    Exception raised when a render style cannot draw a tree.

    Example:
        >>> error = InvalidRenderStyleError("Indent must be at least 2, got 1")
        >>> str(error)
        'Indent must be at least 2, got 1'
    """

    pass


class FileSystemLoopError(OSError):
    """
    Exception reported when a followed symlink leads back to one of its ancestors.

    Attributes:
        path (str): The symlink that closes the loop.

    Example:
        >>> error = FileSystemLoopError("/repo/src/utils/loop")
        >>> str(error)
        'File system loop found: /repo/src/utils/loop points to an ancestor'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File system loop found: {path} points to an ancestor")
