class AppleTreeError(Exception):
    """Base class for errors raised by appletree before a walk begins.

    Errors encountered during the walk itself (unreadable directories, broken
    symlinks, vanished files) are never raised; the affected entry is simply
    left out of the output.
    """


class ConfigurationError(AppleTreeError, ValueError):
    """
    Exception raised when a tree configuration is invalid.

    Examples of invalid configuration include a negative depth limit, an unknown
    theme name or an empty pattern.

    Example:
        >>> error = ConfigurationError("Unknown theme 'square'. Use 'classic' or 'round'.")
        >>> str(error)
        "Unknown theme 'square'. Use 'classic' or 'round'."
    """

    pass


class RootNotFoundError(ConfigurationError):
    """
    Exception raised when the traversal root does not exist or cannot be resolved.

    Attributes:
        path (str): The root path as given by the caller.

    Example:
        >>> error = RootNotFoundError("/no/such/dir")
        >>> str(error)
        "The specified path '/no/such/dir' does not exist. Try again with a valid path."
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path (str): The root path that could not be resolved.
        """
        self.path = path
        super().__init__(f"The specified path '{path}' does not exist. Try again with a valid path.")
