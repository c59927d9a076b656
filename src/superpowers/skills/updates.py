"""
Update check for the bundled superpowers library.

Asks git whether the library checkout is behind its upstream. The check is
best effort: every failure collapses to "no update available".
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import subprocess as _subprocess

import superpowers.constants as constants

_logger = _logging.getLogger(__name__)


def _git(
    repo_dir: _pathlib.Path,
    *args: str,
    timeout: float,
) -> _subprocess.CompletedProcess[str]:
    return _subprocess.run(
        ["git", *args],
        capture_output=True,
        text=True,
        cwd=repo_dir,
        timeout=timeout,
        check=True,
    )


def is_behind(status_output: str) -> bool:
    """
    Check ``git status --porcelain=v1 --branch`` output for a behind marker.

    The branch header looks like ``## main...origin/main [behind 2]``.
    """
    for line in status_output.splitlines():
        if line.startswith("## ") and "[behind " in line:
            return True
    return False


def has_updates(
    repo_dir: _pathlib.Path,
    *,
    timeout: float = constants.UPDATE_CHECK_TIMEOUT_SECONDS,
) -> bool:
    """
    Check whether the checkout at ``repo_dir`` is behind its upstream.

    Returns False when the status cannot be determined (not a checkout,
    no upstream, network failure, git missing, timeout).
    """
    try:
        _git(repo_dir, "fetch", "origin", timeout=timeout)
        result = _git(repo_dir, "status", "--porcelain=v1", "--branch", timeout=timeout)
    except (_subprocess.SubprocessError, OSError) as e:
        _logger.debug("Update check failed for %s: %s", repo_dir, e)
        return False

    return is_behind(result.stdout)
