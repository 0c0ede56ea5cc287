"""Git interface and implementations."""

from revsubmit.core.git.abc import Git
from revsubmit.core.git.real import RealGit

__all__ = ["Git", "RealGit"]
