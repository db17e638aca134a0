"""Main interactive event loop for the terminal UI.

The loop is the single consumer of the event queue: draw a full frame, block
for the next event, apply it, repeat. All rendering happens on this thread.
"""

from __future__ import annotations

import logging
import queue

from ..input.keys import KeyContext, handle_key
from ..screen import Screen
from .events import Event, InputClosedEvent, InputProducer, KeyEvent, ResizeEvent
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def render_frame(screen: Screen, terminal: TerminalController) -> None:
    """Compose every area onto a fresh canvas and write it out."""
    canvas = screen.new_canvas()
    screen.draw(canvas)
    terminal.write_frame(canvas.encode())


def apply_event(event: Event, context: KeyContext) -> bool:
    """Apply one event; return ``True`` when the loop should stop."""
    if isinstance(event, ResizeEvent):
        logger.debug("resize to %dx%d", event.size.column, event.size.line)
        context.screen.resize(event.size)
        return False
    if isinstance(event, InputClosedEvent):
        return True
    if isinstance(event, KeyEvent):
        return handle_key(event.key, context)
    return False


def run_main_loop(
    context: KeyContext,
    terminal: TerminalController,
    events: queue.Queue[Event],
    producer: InputProducer,
) -> None:
    """Run the interactive TUI loop until a quit key or input failure."""
    with terminal.raw_mode():
        producer.start()
        try:
            while True:
                render_frame(context.screen, terminal)
                if apply_event(events.get(), context):
                    break
        finally:
            producer.stop()
