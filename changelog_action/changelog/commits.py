"""Preparation of commits before they are written to the changelog.

Commits come from version control and may have been enriched with PR
numbers and author handles by the caller. These helpers decide which of
them belong in the changelog and turn them into CommitEntry values.
"""

import re
from pathlib import Path

from changelog_action.changelog.constants import MERGE_COMMIT_PREFIX
from changelog_action.changelog.models import CommitEntry
from changelog_action.changelog.models import CommitInfo
from changelog_action.changelog.queries import is_entry_in_changelog
from changelog_action.configs.app_configs import GITHUB_SERVER_URL
from changelog_action.utils.logger import setup_logger

logger = setup_logger()

# Trailing "(#123)" added by squash merges
_PR_REFERENCE_PATTERN = re.compile(r"\s*\(#(\d+)\)\s*$")


def extract_pr_number(message: str) -> int | None:
    match = _PR_REFERENCE_PATTERN.search(message)
    return int(match.group(1)) if match else None


def strip_pr_reference(message: str) -> str:
    return _PR_REFERENCE_PATTERN.sub("", message).strip()


def is_merge_commit(commit: CommitInfo) -> bool:
    return commit.message.startswith(MERGE_COMMIT_PREFIX)


def build_repo_url(owner: str, repo: str, server_url: str = GITHUB_SERVER_URL) -> str:
    return f"{server_url.rstrip('/')}/{owner}/{repo}"


def filter_new_commits(
    commits: list[CommitInfo], changelog_path: str | Path
) -> list[CommitInfo]:
    """Drop merge commits and commits whose message is already in the changelog."""
    new_commits: list[CommitInfo] = []
    for commit in commits:
        if is_merge_commit(commit):
            logger.debug(f"Skipping merge commit: {commit.message}")
            continue

        if is_entry_in_changelog(changelog_path, strip_pr_reference(commit.message)):
            logger.debug(f"Skipping already-tracked commit: {commit.message}")
            continue

        new_commits.append(commit)
    return new_commits


def to_commit_entry(commit: CommitInfo, repo_url: str | None = None) -> CommitEntry:
    """Convert a commit into a changelog entry.

    The "(#123)" reference is moved out of the message into the PR link, and
    the hosting handle is preferred over the version control author name.
    """
    return CommitEntry(
        message=strip_pr_reference(commit.message),
        author=commit.author_handle or commit.author,
        pr_number=commit.pr_number or extract_pr_number(commit.message),
        commit_sha=commit.sha,
        repo_url=repo_url,
    )
