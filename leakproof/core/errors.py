"""Exception types for Leak-Proof commands."""


class LeakProofError(Exception):
    """Base exception for Leak-Proof errors."""

    pass


class NotARepositoryError(LeakProofError):
    """The current directory is not inside a git work tree."""

    pass


class GitCommandError(LeakProofError):
    """A git invocation exited with a non-zero status."""

    pass


class ManifestError(LeakProofError):
    """The project manifest (package.json) could not be parsed or updated."""

    pass
