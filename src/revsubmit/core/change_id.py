"""Change-Id trailer parsing and review URL construction."""

CHANGE_ID_TRAILER = "Change-Id"


def extract_change_id(message: str) -> str | None:
    """Extract the Change-Id token from a commit message.

    The commit-msg hook appends the trailer to the last paragraph, so when a
    message mentions more than one Change-Id line the last one wins.

    Examples:
        >>> extract_change_id("Fix tests\\n\\nChange-Id: I1234abcd")
        'I1234abcd'
        >>> extract_change_id("Fix tests") is None
        True
    """
    change_id: str | None = None
    for line in message.splitlines():
        stripped = line.strip()
        if not stripped.startswith(f"{CHANGE_ID_TRAILER}:"):
            continue
        token = stripped[len(CHANGE_ID_TRAILER) + 1 :].strip()
        if token:
            change_id = token.split()[0]
    return change_id


def review_url(server_url: str, change_id: str) -> str:
    """Build the review server URL that queries for a Change-Id."""
    return f"{server_url.rstrip('/')}/#/q/{change_id}"
