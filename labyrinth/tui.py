"""Textual front end for exploring a dungeon.

Panels:
 - Map (fog-of-war rendering of the current floor)
 - Status line (floor, position, turn count, discovered cells)
 - Event Log (messages from each turn)

Run with: `python run.py play`
"""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Log, Static

from labyrinth.controls import KEY_LABELS, KEYMAP, command_for_key
from labyrinth.dungeon import DungeonConfig
from labyrinth.render import render_session
from labyrinth.services.turn_service import Command, TurnResult, resolve_turn
from labyrinth.session import Session


def _bindings():
    # Footer entries only; key presses are routed through on_key
    return [Binding(key, f"turn('{KEYMAP[key].value}')", label) for key, label in KEY_LABELS.items()]


class LabyrinthApp(App):
    """Interactive explorer.

    Every key that ``command_for_key`` maps to a command resolves exactly one
    turn, then the map and status panels are redrawn from the session. Other
    keys are left to Textual and do not consume a turn.
    """

    TITLE = "Labyrinth Adventures"

    CSS = """
    Screen { layout: vertical; }
    .panel { border: tall $primary; padding: 0 1; }
    .panel-title { content-align: center middle; text-style: bold; }
    #map-panel { height: 3fr; }
    #log-panel { height: 1fr; }
    """

    BINDINGS = _bindings()

    def __init__(self, session: Session) -> None:
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Header()
        with Vertical(id="map-panel", classes="panel"):
            self.map_view = Static("", markup=False)
            yield self.map_view
            self.status = Static("", markup=False)
            yield self.status
        with Vertical(id="log-panel", classes="panel"):
            yield Static("Event Log", classes="panel-title")
            self.event_log = Log()
            yield self.event_log
        yield Footer()

    def on_mount(self) -> None:
        self.redraw()
        self.event_log.write_line("You enter the labyrinth. WASD/arrows move, F searches, E takes stairs.")

    def redraw(self) -> None:
        s = self.session
        self.map_view.update(render_session(s))
        seen = s.visibility.discovered_count(s.player.floor)
        total = s.dungeon.width * s.dungeon.height
        self.status.update(
            f"Floor {s.player.floor + 1}/{s.dungeon.floor_count}  "
            f"Pos ({s.player.x},{s.player.y})  Turn {s.turns}  Explored {seen}/{total}"
        )

    def apply(self, command: Command) -> TurnResult:
        result = resolve_turn(self.session, command)
        if command is Command.QUIT:
            self.exit(result.message)
            return result
        if result.found_door:
            self.bell()
        if result.message:
            self.event_log.write_line(result.message)
        self.redraw()
        return result

    async def on_key(self, event: events.Key) -> None:
        command = command_for_key(event.key)
        if command is None:
            return
        event.stop()
        event.prevent_default()
        self.apply(command)

    def action_turn(self, name: str) -> None:
        self.apply(Command(name))


def run_tui(config: DungeonConfig | None = None) -> None:  # pragma: no cover (interactive)
    app = LabyrinthApp(Session.start(config))
    app.run()
