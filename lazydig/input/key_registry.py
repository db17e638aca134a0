"""Key-token tables shared by the screen areas and mode handlers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

Action = Callable[[], object]


@dataclass(frozen=True)
class KeyBinding:
    """One action reachable from several key tokens."""

    keys: tuple[str, ...]
    action: Action


class KeyMap:
    """Exact-match table from key token to action.

    Action return values are ignored; ``dispatch`` only reports whether the
    key was bound, so areas can fall through to the next handler.
    """

    def __init__(self, bindings: Iterable[KeyBinding] = ()) -> None:
        self._actions: dict[str, Action] = {}
        for binding in bindings:
            self.bind(binding.keys, binding.action)

    def bind(self, keys: Iterable[str], action: Action) -> KeyMap:
        """Bind every token in ``keys``; later bindings replace earlier ones."""
        for key in keys:
            self._actions[key] = action
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._actions

    def dispatch(self, key: str) -> bool:
        action = self._actions.get(key)
        if action is None:
            return False
        action()
        return True
