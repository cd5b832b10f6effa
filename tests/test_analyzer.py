"""Tests for commitwise.analyzer module."""

import pytest

from commitwise.analyzer import (
    DEFAULT_TEMPLATES,
    RuleBasedAnalyzer,
    determine_component,
    determine_scope,
    determine_type,
)
from commitwise.models import FileChange, FileStatus, SuggestionSource


def _change(filename, additions=0, deletions=0, diff=""):
    return FileChange(filename=filename, diff=diff, additions=additions, deletions=deletions)


class TestDetermineType:
    """Tests for determine_type ordered heuristics."""

    def test_test_path(self):
        """Test paths mentioning test are 'test'."""
        assert determine_type(_change("tests/test_api.py", additions=50)) == "test"

    def test_docs_path(self):
        """Test paths mentioning docs are 'docs'."""
        assert determine_type(_change("docs/guide.md", additions=50)) == "docs"

    def test_stylesheet(self):
        """Test stylesheet extensions are 'style'."""
        assert determine_type(_change("web/app.scss", additions=50)) == "style"

    def test_style_in_diff(self):
        """Test diffs mentioning style are 'style'."""
        assert determine_type(_change("ui/box.tsx", additions=50, diff="+style={x}")) == "style"

    def test_mostly_additions_is_feat(self):
        """Test additions > 2x deletions is 'feat'."""
        assert determine_type(_change("app/api.py", additions=21, deletions=10)) == "feat"

    def test_mostly_deletions_is_refactor(self):
        """Test deletions > 2x additions is 'refactor'."""
        assert determine_type(_change("app/api.py", additions=3, deletions=7)) == "refactor"

    def test_balanced_is_fix(self):
        """Test balanced changes are 'fix'."""
        assert determine_type(_change("app/api.py", additions=10, deletions=5)) == "fix"

    def test_test_wins_over_docs(self):
        """Test the first matching rule wins."""
        assert determine_type(_change("docs/test_examples.md")) == "test"


class TestScopeAndComponent:
    """Tests for scope and component helpers."""

    def test_first_segment(self):
        """Test the first directory is the scope."""
        assert determine_scope("api/routes/users.py") == "api"

    def test_source_root_skipped(self):
        """Test a leading source root is skipped when possible."""
        assert determine_scope("src/auth/login.ts") == "auth"
        assert determine_scope("src/index.ts") == "src"

    def test_general_for_top_level(self):
        """Test files without a directory get 'general'."""
        assert determine_scope("setup.py") == "general"

    def test_component_is_name_before_first_dot(self):
        """Test the component drops every extension."""
        assert determine_component("src/auth/login.spec.ts") == "login"
        assert determine_component("Makefile") == "Makefile"
        assert determine_component(".gitignore") == ".gitignore"


class TestRuleBasedAnalyzer:
    """Tests for RuleBasedAnalyzer."""

    def test_login_scenario(self, login_diff):
        """Test a new auth login module gives a feat suggestion."""
        change = FileChange(
            filename="src/auth/login.ts",
            diff=login_diff,
            additions=40,
            deletions=2,
            status=FileStatus.ADDED,
        )

        suggestion = RuleBasedAnalyzer().analyze(change)

        assert suggestion.message == "feat(auth): add login functionality"
        assert suggestion.type == "feat"
        assert suggestion.scope == "auth"
        assert suggestion.source == SuggestionSource.RULE
        assert suggestion.explanation == "Added src/auth/login.ts (+40/-2)"

    def test_deterministic(self):
        """Test identical input gives an identical message."""
        analyzer = RuleBasedAnalyzer()
        change = _change("app/api.py", additions=10, deletions=5)

        assert analyzer.analyze(change) == analyzer.analyze(change)

    @pytest.mark.parametrize("commit_type", sorted(DEFAULT_TEMPLATES))
    def test_default_templates(self, commit_type):
        """Test every template renders scope and component."""
        message = RuleBasedAnalyzer().render(commit_type, "core", "engine")

        assert message.startswith(f"{commit_type}(core): ")
        assert "engine" in message

    def test_custom_templates_override_defaults(self):
        """Test caller templates win on key collisions."""
        analyzer = RuleBasedAnalyzer({"fix": "fix({scope}): patch {component}"})

        assert analyzer.render("fix", "api", "users") == "fix(api): patch users"
        assert analyzer.render("feat", "api", "users") == "feat(api): add users functionality"

    def test_unknown_type_uses_fallback_template(self):
        """Test types without a template still render."""
        analyzer = RuleBasedAnalyzer()

        assert analyzer.render("chore", "deps", "lockfile") == "chore(deps): update lockfile"

    def test_analyze_batch_one_per_change(self):
        """Test one suggestion per change, in order."""
        changes = [
            _change("tests/test_a.py", additions=1),
            _change("README.md", additions=1, deletions=1),
            _change("web/site.css"),
        ]

        suggestions = RuleBasedAnalyzer().analyze_batch(changes)

        assert [s.type for s in suggestions] == ["test", "fix", "style"]
        assert all(s.source == SuggestionSource.RULE for s in suggestions)

    def test_empty_batch(self):
        """Test an empty batch gives an empty list."""
        assert RuleBasedAnalyzer().analyze_batch([]) == []
