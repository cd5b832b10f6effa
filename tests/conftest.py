"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

import commitwise.config as _config
from commitwise.config import API_KEY_ENV_VARS, DiffLimits
from commitwise.git.exceptions import GitError


def make_diff(path: str, added: int = 0, removed: int = 0, line: str = "value") -> str:
    """Build a unified diff for path with the given numbers of +/- lines."""
    lines = [
        f"diff --git a/{path} b/{path}",
        "index 1234567..abcdefg 100644",
        f"--- a/{path}",
        f"+++ b/{path}",
        f"@@ -1,{removed} +1,{added} @@",
    ]
    lines += [f"-old {line} {i}" for i in range(removed)]
    lines += [f"+new {line} {i}" for i in range(added)]
    return "\n".join(lines)


class FakeRepository:
    """In-memory VersionControl for engine and collector tests.

    Args:
        files: Mapping of path to (diff, porcelain status code).
        branch: Current branch name.
        commits: Recent commit subjects, newest first.
        identity: Whether a git identity is configured.
        fail_context: Raise GitError from branch and log lookups.
    """

    def __init__(
        self,
        files=None,
        branch="main",
        commits=None,
        identity=True,
        fail_context=False,
        staged_only=True,
    ):
        self.files = dict(files or {})
        self.branch = branch
        self.commits = list(commits or [])
        self.identity = identity
        self.fail_context = fail_context
        self.staged_only = staged_only
        self.diff_calls = []

    def list_changed_files(self):
        return list(self.files)

    def get_diff(self, path):
        self.diff_calls.append(path)
        return self.files[path][0]

    def get_file_status_code(self, path):
        return self.files[path][1]

    def get_current_branch_name(self):
        if self.fail_context:
            raise GitError("branch lookup failed")
        return self.branch

    def get_recent_commit_subjects(self, n):
        if self.fail_context:
            raise GitError("log failed")
        return self.commits[:n]

    def has_identity_configured(self):
        return self.identity


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests away from real API keys and ~/.commitwise."""
    for env_var in API_KEY_ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setattr("commitwise.global_config._CONFIG_DIR", tmp_path / ".commitwise")
    monkeypatch.setattr(_config, "PREFERRED_PROVIDER", None)
    monkeypatch.setattr(_config, "PREFERRED_MODEL", None)
    monkeypatch.setattr(_config, "MAX_TOKENS", _config.DEFAULT_MAX_TOKENS)
    monkeypatch.setattr(_config, "TEMPERATURE", _config.DEFAULT_TEMPERATURE)
    monkeypatch.setattr(_config, "DIFF_LIMITS", DiffLimits())


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def login_diff():
    """Diff of a new login module with 40 additions and 2 deletions."""
    return make_diff("src/auth/login.ts", added=40, removed=2, line="token")


@pytest.fixture
def login_repository(login_diff):
    """Repository with one staged file src/auth/login.ts (+40/-2, added)."""
    return FakeRepository(
        files={"src/auth/login.ts": (login_diff, "A ")},
        commits=["fix(api): handle timeouts", "docs: update readme", "chore: bump deps"],
    )


@pytest.fixture
def sample_ai_response():
    """Well-formed provider response with three suggestions."""
    return (
        '{"suggestions": ['
        '{"message": "feat(auth): add login form", "explanation": "New login module"}, '
        '{"message": "feat(auth): implement token login", "explanation": "Token handling"}, '
        '{"message": "feat: add authentication", "explanation": "Broad summary"}'
        "]}"
    )


@pytest.fixture
def diff_factory():
    """Factory building unified diffs with a given number of +/- lines."""
    return make_diff
