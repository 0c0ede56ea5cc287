"""Review settings read from git config.

Settings live under one git config section (default `review`):

    git config review.remote gerrit
    git config review.branch master
    git config review.url https://review.example.com
    git config review.suffix rev      # optional
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from revsubmit.core.errors import ConfigurationError
from revsubmit.core.git.abc import Git
from revsubmit.core.revision import DEFAULT_REVISION_SUFFIX

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_SECTION = "review"

# (key, example value, meaning) for every required setting, in resolution order
_REQUIRED_KEYS: tuple[tuple[str, str, str], ...] = (
    ("remote", "gerrit", "remote that hosts the review server"),
    ("branch", "master", "base branch reviews are submitted against"),
    ("url", "https://review.example.com", "review server base URL"),
)


@dataclass(frozen=True)
class ReviewConfig:
    """Resolved settings for one submission."""

    remote: str
    base_branch: str
    server_url: str
    suffix: str
    section: str = DEFAULT_CONFIG_SECTION


def resolve_config(
    git: Git,
    cwd: Path,
    section: str = DEFAULT_CONFIG_SECTION,
) -> ReviewConfig:
    """Read review settings, failing on the first missing required key.

    Raises:
        ConfigurationError: With the git config command that fixes it
    """
    values: dict[str, str] = {}
    for key, example, meaning in _REQUIRED_KEYS:
        full_key = f"{section}.{key}"
        value = git.get_config(cwd, full_key)
        logger.debug("config %s = %r", full_key, value)
        if not value:
            raise ConfigurationError(
                f"Missing git config '{full_key}' ({meaning})\n\n"
                f"To fix:\n"
                f"  git config {full_key} {example}"
            )
        values[key] = value

    suffix = git.get_config(cwd, f"{section}.suffix") or DEFAULT_REVISION_SUFFIX
    logger.debug("config %s.suffix = %r", section, suffix)

    return ReviewConfig(
        remote=values["remote"],
        base_branch=values["branch"],
        server_url=values["url"].rstrip("/"),
        suffix=suffix,
        section=section,
    )
