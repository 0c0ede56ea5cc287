"""Tests for revision branch naming and numbering."""

import pytest

from revsubmit.core.errors import RevisionSuffixError
from revsubmit.core.revision import (
    find_last_revision_branch,
    next_revision_branch,
    parse_revision_number,
    revision_prefix,
)


def test_revision_prefix_joins_feature_and_suffix() -> None:
    assert revision_prefix("login-fix", "rev") == "login-fix_rev"


class TestParseRevisionNumber:
    """Tests for parse_revision_number."""

    def test_parses_trailing_number(self) -> None:
        assert parse_revision_number("login-fix_rev_12", "login-fix_rev") == 12

    def test_returns_none_for_other_prefix(self) -> None:
        assert parse_revision_number("signup_rev_1", "login-fix_rev") is None

    def test_returns_none_for_non_digit_suffix(self) -> None:
        assert parse_revision_number("login-fix_rev_abc", "login-fix_rev") is None

    def test_returns_none_for_extra_segments(self) -> None:
        assert parse_revision_number("login-fix_rev_1_backup", "login-fix_rev") is None

    def test_returns_none_for_zero(self) -> None:
        assert parse_revision_number("login-fix_rev_0", "login-fix_rev") is None

    def test_returns_none_for_bare_prefix(self) -> None:
        assert parse_revision_number("login-fix_rev", "login-fix_rev") is None


class TestFindLastRevisionBranch:
    """Tests for find_last_revision_branch."""

    def test_no_revisions_returns_none(self) -> None:
        branches = ["gerrit/master", "gerrit/other-feature"]
        assert find_last_revision_branch(branches, "gerrit", "login-fix", "rev") is None

    def test_picks_highest_of_consecutive_revisions(self) -> None:
        branches = [f"gerrit/login-fix_rev_{n}" for n in range(1, 5)]
        assert find_last_revision_branch(branches, "gerrit", "login-fix", "rev") == (
            "login-fix_rev_4"
        )

    def test_numeric_not_lexicographic_ordering(self) -> None:
        branches = ["gerrit/login-fix_rev_9", "gerrit/login-fix_rev_10"]
        assert find_last_revision_branch(branches, "gerrit", "login-fix", "rev") == (
            "login-fix_rev_10"
        )

    def test_ignores_other_remotes(self) -> None:
        branches = ["origin/login-fix_rev_7", "gerrit/login-fix_rev_2"]
        assert find_last_revision_branch(branches, "gerrit", "login-fix", "rev") == (
            "login-fix_rev_2"
        )

    def test_ignores_features_sharing_a_substring(self) -> None:
        branches = ["gerrit/old-login-fix_rev_5", "gerrit/login-fix_rev_1"]
        assert find_last_revision_branch(branches, "gerrit", "login-fix", "rev") == (
            "login-fix_rev_1"
        )

    def test_respects_custom_suffix(self) -> None:
        branches = ["gerrit/login-fix_rev_3", "gerrit/login-fix_v_1"]
        assert find_last_revision_branch(branches, "gerrit", "login-fix", "v") == "login-fix_v_1"

    def test_unparseable_suffix_raises(self) -> None:
        branches = ["gerrit/login-fix_rev_1", "gerrit/login-fix_rev_draft"]
        with pytest.raises(RevisionSuffixError) as exc_info:
            find_last_revision_branch(branches, "gerrit", "login-fix", "rev")
        assert exc_info.value.branch == "login-fix_rev_draft"
        assert exc_info.value.prefix == "login-fix_rev"
        assert exc_info.value.remote == "gerrit"

    def test_unparseable_suffix_message_names_remote_branch_and_fix(self) -> None:
        # Revision branch of feature `login_rev_2`, which shares the `login_rev_` prefix
        branches = ["gerrit/login_rev_1", "gerrit/login_rev_2_rev_1"]
        with pytest.raises(RevisionSuffixError) as exc_info:
            find_last_revision_branch(branches, "gerrit", "login", "rev")

        message = str(exc_info.value)
        assert "Branch 'gerrit/login_rev_2_rev_1'" in message
        assert "git push gerrit --delete login_rev_2_rev_1" in message
        assert "git config <section>.suffix <suffix>" in message


class TestNextRevisionBranch:
    """Tests for next_revision_branch."""

    def test_first_revision(self) -> None:
        assert next_revision_branch("login-fix_rev", None) == "login-fix_rev_1"

    @pytest.mark.parametrize(("last", "expected"), [(1, 2), (9, 10), (41, 42)])
    def test_increments_last_revision(self, last: int, expected: int) -> None:
        assert next_revision_branch("login-fix_rev", f"login-fix_rev_{last}") == (
            f"login-fix_rev_{expected}"
        )

    def test_unparseable_last_branch_raises(self) -> None:
        with pytest.raises(RevisionSuffixError) as exc_info:
            next_revision_branch("login-fix_rev", "login-fix_rev_next")
        assert exc_info.value.remote is None
        assert "git push" not in str(exc_info.value)
