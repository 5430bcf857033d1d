"""Source-control metadata for templates and the repository button."""

from __future__ import annotations

from dataclasses import dataclass

from code_presence.domain.entities import RepositorySnapshot, SourceControlSnapshot
from code_presence.domain.value_objects import RemoteUrl

UNKNOWN_GIT_BRANCH = "Unknown"
UNKNOWN_GIT_REPO_NAME = "Unknown"


@dataclass(frozen=True, slots=True)
class SourceControlInfo:
    """Branch, repository name and browsable URL of the selected repository."""

    branch: str = UNKNOWN_GIT_BRANCH
    repository_name: str = UNKNOWN_GIT_REPO_NAME
    repository_url: str | None = None


def selected_repository(snapshot: SourceControlSnapshot) -> RepositorySnapshot | None:
    """Return the repository the host marks as selected, if any.

    Several repositories with none selected deliberately yield ``None``
    rather than falling back to the first one.
    """
    return next((repo for repo in snapshot.repositories if repo.selected), None)


def _first_remote_url(repo: RepositorySnapshot) -> RemoteUrl | None:
    if not repo.remotes:
        return None
    fetch_url = repo.remotes[0].fetch_url
    if not fetch_url or not fetch_url.strip():
        return None
    return RemoteUrl.from_string(fetch_url)


def resolve_source_control(snapshot: SourceControlSnapshot) -> SourceControlInfo:
    """Extract the metadata of the selected repository, with sentinels for gaps."""
    repo = selected_repository(snapshot)
    if repo is None:
        return SourceControlInfo()

    branch = repo.branch or UNKNOWN_GIT_BRANCH
    remote = _first_remote_url(repo)
    if remote is None:
        return SourceControlInfo(branch=branch)

    return SourceControlInfo(
        branch=branch,
        repository_name=remote.repository_name or UNKNOWN_GIT_REPO_NAME,
        repository_url=remote.browsable,
    )
