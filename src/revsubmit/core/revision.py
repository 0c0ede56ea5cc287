"""Revision branch naming and numbering.

A feature branch `login-fix` submitted with suffix `rev` produces revision branches
`login-fix_rev_1`, `login-fix_rev_2`, ... Each new submission picks the highest
existing number on the remote and adds one.
"""

import re

from revsubmit.core.errors import RevisionSuffixError

DEFAULT_REVISION_SUFFIX = "rev"

_TRAILING_NUMBER = re.compile(r"_(\d+)")


def revision_prefix(feature_branch: str, suffix: str) -> str:
    """Name shared by every revision branch of a feature.

    Examples:
        >>> revision_prefix("login-fix", "rev")
        'login-fix_rev'
    """
    return f"{feature_branch}_{suffix}"


def parse_revision_number(branch: str, prefix: str) -> int | None:
    """Parse N out of `<prefix>_<N>`.

    Returns:
        The positive revision number, or None if branch is not
        `<prefix>_` followed only by digits.
    """
    if not branch.startswith(f"{prefix}_"):
        return None
    match = _TRAILING_NUMBER.fullmatch(branch[len(prefix) :])
    if match is None:
        return None
    number = int(match.group(1))
    if number < 1:
        return None
    return number


def find_last_revision_branch(
    remote_branches: list[str],
    remote: str,
    feature_branch: str,
    suffix: str,
) -> str | None:
    """Find the highest-numbered revision branch of a feature on a remote.

    Ordering is numeric, so `login-fix_rev_10` beats `login-fix_rev_9`.

    Args:
        remote_branches: Remote-tracking names such as 'gerrit/login-fix_rev_1'
        remote: Only branches of this remote are considered
        feature_branch: Feature branch the revisions belong to
        suffix: Revision suffix token

    Returns:
        Branch name without the remote prefix, or None if no revision exists

    Raises:
        RevisionSuffixError: If a branch of this feature has a non-numeric suffix
    """
    prefix = revision_prefix(feature_branch, suffix)
    remote_prefix = f"{remote}/"

    numbered: list[tuple[int, str]] = []
    for ref in remote_branches:
        if not ref.startswith(remote_prefix):
            continue
        branch = ref[len(remote_prefix) :]
        if not branch.startswith(f"{prefix}_"):
            continue
        number = parse_revision_number(branch, prefix)
        if number is None:
            raise RevisionSuffixError(branch, prefix, remote)
        numbered.append((number, branch))

    if not numbered:
        return None

    numbered.sort(key=lambda item: item[0], reverse=True)
    return numbered[0][1]


def next_revision_branch(prefix: str, last_branch: str | None) -> str:
    """Compute the revision branch to create next.

    Examples:
        >>> next_revision_branch("login-fix_rev", None)
        'login-fix_rev_1'
        >>> next_revision_branch("login-fix_rev", "login-fix_rev_9")
        'login-fix_rev_10'

    Raises:
        RevisionSuffixError: If last_branch has no parseable numeric suffix
    """
    if last_branch is None:
        return f"{prefix}_1"

    number = parse_revision_number(last_branch, prefix)
    if number is None:
        raise RevisionSuffixError(last_branch, prefix)
    return f"{prefix}_{number + 1}"
