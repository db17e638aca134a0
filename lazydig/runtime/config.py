"""Persistent JSON state helpers.

Stores the last side-panel width and, per repository, the last selected
commit. Access is defensive: malformed or missing state falls back to
defaults and write failures are logged, never raised.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazydig"
CONFIG_FILENAME = "state.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
MAX_REMEMBERED_REPOS = 1000


@dataclass(frozen=True)
class RepoState:
    """Remembered position inside one repository."""

    commit: str
    side_width: int | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON object, or ``{}`` when missing or malformed."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable state file %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist state as pretty-printed JSON; failures are logged."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write state file %s: %s", CONFIG_PATH, exc)


def _coerce_width(value: object) -> int | None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def _valid_commit(value: object) -> bool:
    return isinstance(value, str) and bool(value) and not any(ch.isspace() for ch in value)


def _repo_entries(data: dict[str, object]) -> list[dict[str, object]]:
    """Return the valid repository entries, most recently used first."""
    raw = data.get("repos")
    if not isinstance(raw, list):
        return []
    entries: list[dict[str, object]] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        if not isinstance(item.get("path"), str) or not _valid_commit(item.get("commit")):
            continue
        entries.append(item)
    return entries


def load_side_width() -> int | None:
    """Return the last side-panel width used in any repository."""
    return _coerce_width(load_config().get("side_width"))


def load_repo_state(repo_dir: Path | str) -> RepoState | None:
    """Return the remembered state for ``repo_dir`` (exact path match)."""
    path = str(repo_dir)
    for entry in _repo_entries(load_config()):
        if entry["path"] == path:
            return RepoState(
                commit=str(entry["commit"]),
                side_width=_coerce_width(entry.get("side_width")),
            )
    return None


def save_repo_state(repo_dir: Path | str, commit: str, side_width: int) -> None:
    """Remember ``commit`` and ``side_width`` for ``repo_dir``.

    The repository moves to the front of the list; older entries for the same
    path and entries beyond ``MAX_REMEMBERED_REPOS`` are dropped.
    """
    if not _valid_commit(commit):
        return
    path = str(repo_dir)
    width = max(0, int(side_width))
    data = load_config()
    others = [entry for entry in _repo_entries(data) if entry["path"] != path]
    entry = {"path": path, "commit": commit, "side_width": width}
    data["repos"] = [entry, *others][:MAX_REMEMBERED_REPOS]
    data["side_width"] = width
    save_config(data)
