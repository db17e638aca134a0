"""Keyboard dispatch for normal and find modes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..search import NOT_FOUND, resolve_find
from ..state import MODE_FIND, Session
from .key_registry import KeyBinding, KeyMap

if TYPE_CHECKING:
    from ..screen import Screen

logger = logging.getLogger(__name__)

NO_MATCH_MESSAGE = "no match"
QUIT_KEYS = frozenset({"q", "CTRL_Q"})
FIND_CANCEL_KEYS = frozenset({"ESC", "CTRL_Q", "CTRL_K"})
SIDE_STEP = 1
SIDE_FAST_STEP = 2


@dataclass
class KeyContext:
    """Session and screen a key is applied to, with the global key table."""

    session: Session
    screen: Screen
    global_keys: KeyMap = field(init=False, repr=False)

    def __post_init__(self) -> None:
        screen = self.screen
        self.global_keys = KeyMap(
            (
                KeyBinding(("ENTER", "TAB", "."), screen.cycle_pane),
                KeyBinding(("ESC",), screen.focus_commits),
                KeyBinding(("CTRL_F", "/"), self.session.enter_find_mode),
                KeyBinding(("<",), lambda: screen.expand_side(-SIDE_STEP)),
                KeyBinding((">",), lambda: screen.expand_side(SIDE_STEP)),
                KeyBinding(("SHIFT_LEFT",), lambda: screen.expand_side(-SIDE_FAST_STEP)),
                KeyBinding(("SHIFT_RIGHT",), lambda: screen.expand_side(SIDE_FAST_STEP)),
                KeyBinding(("t",), screen.toggle_side),
            )
        )


def handle_key(key: str, context: KeyContext) -> bool:
    """Handle one key in the current mode and return ``True`` when app should quit."""
    if context.session.mode == MODE_FIND:
        handle_find_key(key, context)
        return False
    return handle_normal_key(key, context)


def handle_normal_key(key: str, context: KeyContext) -> bool:
    """Handle one normal-mode key and return ``True`` when app should quit."""
    if key in QUIT_KEYS:
        return True
    if not context.global_keys.dispatch(key):
        context.screen.handle_key(key)
    return False


def handle_find_key(key: str, context: KeyContext) -> None:
    """Edit the find query or run the search."""
    session = context.session
    commits = context.screen.commits

    if key in FIND_CANCEL_KEYS:
        session.leave_find_mode()
        return
    if key == "ENTER":
        target = resolve_find(session.records, session.find_query, commits.current_index)
        if target == NOT_FOUND:
            session.find_message = NO_MATCH_MESSAGE
            return
        logger.debug("find %r -> %d", session.find_query, target)
        commits.select(target)
        return
    if key == "BACKSPACE":
        session.delete_find_char()
        return
    if len(key) == 1 and key.isprintable():
        session.append_find_char(key)
