"""Git-backed record and diff sources.

``load_commits`` is called once at startup and its failure is fatal.
``commit_diff`` is called from the draw path; callers decide how to degrade.
Both run git synchronously with no timeout.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .records import Record, make_record, split_body

logger = logging.getLogger(__name__)

_FIELD_SEP = "\x1f"


class GitSourceError(RuntimeError):
    """Raised when git cannot produce the requested history or diff."""


def _run_git(repo_dir: Path, args: list[str]) -> str:
    try:
        proc = subprocess.run(
            ["git", "-C", str(repo_dir), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as exc:
        raise GitSourceError("git executable not found") from exc
    except OSError as exc:
        raise GitSourceError(f"could not run git: {exc}") from exc
    if proc.returncode != 0:
        message = proc.stderr.strip() or f"git {args[0]} exited with status {proc.returncode}"
        raise GitSourceError(message)
    return proc.stdout


def parse_log_output(output: str) -> list[Record]:
    """Parse ``<hash><US><subject>`` lines into records, skipping blanks."""
    records: list[Record] = []
    for raw_line in output.splitlines():
        if not raw_line.strip():
            continue
        key, _sep, title = raw_line.partition(_FIELD_SEP)
        records.append(make_record(key, title))
    return records


def load_commits(repo_dir: Path, dig_up: bool = True) -> list[Record]:
    """Return the commits reachable from HEAD.

    With ``dig_up`` the initial commit comes first; otherwise the newest does.
    """
    args = ["log", f"--format=%H{_FIELD_SEP}%s"]
    if dig_up:
        args.append("--reverse")
    records = parse_log_output(_run_git(repo_dir, args))
    if not records:
        raise GitSourceError(f"no commits found in {repo_dir}")
    logger.debug("loaded %d commits from %s", len(records), repo_dir)
    return records


def commit_diff(repo_dir: Path, key: str) -> list[str]:
    """Return the ``git show`` output for one commit as display lines."""
    output = _run_git(repo_dir, ["show", "--no-color", "--no-ext-diff", key, "--"])
    return split_body(output)
