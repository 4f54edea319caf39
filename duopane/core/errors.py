"""Error taxonomy shared by panels, file commands and the dispatcher."""


class DuoPaneError(Exception):
    """Base class for every error surfaced on the status line."""


class ListError(DuoPaneError):
    """Directory could not be listed."""

    def __init__(self, path, reason):
        super().__init__(f'{path}: {reason}')
        self.path = path
        self.reason = reason


class OperationError(DuoPaneError):
    """External copy/move/delete command failed."""

    def __init__(self, message, output=None):
        super().__init__(message)
        self.output = list(output or [])


class SafetyRejection(DuoPaneError):
    """Operation refused because it targets the filesystem root."""


class ShellLaunchError(DuoPaneError):
    """Interactive shell failed to start or exited abnormally."""
