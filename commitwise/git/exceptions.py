"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NotARepositoryError: Raised outside a git working tree
- IdentityNotConfiguredError: Raised when user.name / user.email are missing
- NoChangesFoundError: Raised when there is nothing to suggest a message for
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass


class IdentityNotConfiguredError(GitError):
    """Raised when git has no user identity to commit with."""

    pass


class NoChangesFoundError(GitError):
    """Raised when there are no changes to describe."""

    pass


NOT_A_REPOSITORY_MESSAGE = "Not a git repository. Initialize git first with: git init"

IDENTITY_NOT_CONFIGURED_MESSAGE = (
    "Git user not configured. Run:\n"
    '  git config --global user.email "you@example.com"\n'
    '  git config --global user.name "Your Name"'
)

NO_STAGED_CHANGES_MESSAGE = (
    "No staged changes found. Stage your changes first with: git add <files>"
)

NO_CHANGES_MESSAGE = "No changes found in the working tree."
