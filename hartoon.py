#!/usr/bin/env python3
"""
hartoon — pinned tmux sessions
Keep a short, ordered list of tmux sessions and jump between them.

Usage:
    hartoon                                Fuzzy picker over live tmux sessions
    hartoon pick                           Same as above
    hartoon pin                            Pin the current tmux session
    hartoon unpin <name>                   Remove a session from the pinned list
    hartoon edit                           Edit the pinned list in a panel
    hartoon jump <n>                       Switch to the n-th pinned session
    hartoon <n>                            Shorthand for jump <n>
    hartoon switch <name>                  Switch to (or create) a session
    hartoon list                           List pinned sessions
    hartoon sessions                       List live tmux sessions
    hartoon theme list|set                 Manage themes
    hartoon help                           Show help

Add --debug anywhere to log tmux commands to stderr.
"""

import logging
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.fuzzy import Matcher
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.theme import Theme
from textual.widgets import Input, OptionList, Static, TextArea
from textual.widgets.option_list import Option
from rich.style import Style
from rich.text import Text

log = logging.getLogger("hartoon")

# ── Paths ─────────────────────────────────────────────────────────────

def env_path(var: str, default: Path) -> Path:
    """Path from environment variable *var* (with ``~`` expanded), else *default*."""
    value = os.environ.get(var)
    return Path(value).expanduser() if value else default


CONFIG_DIR = env_path("HARTOON_CONFIG_DIR", Path.home() / ".config" / "hartoon")
PINS_FILE = CONFIG_DIR / "tmux_sessions.txt"
THEME_FILE = CONFIG_DIR / "theme.txt"
HAS_TMUX = shutil.which("tmux") is not None
TMUX_QUERY_TIMEOUT = 2  # seconds to wait on list/display queries
STATUS_TTL = 5


def pins_path() -> Path:
    """Pins file location, honouring ``HARTOON_PINS_FILE``."""
    return env_path("HARTOON_PINS_FILE", PINS_FILE)


def setup_logging(debug: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ── Data ──────────────────────────────────────────────────────────────


@dataclass
class Notice:
    """Outcome of a user-facing operation.

    ``level`` is one of ``info``, ``success`` or ``error``.  The CLI prints
    it (errors to stderr with a non-zero exit); the TUI shows it in the
    footer.
    """

    message: str
    level: str = "info"

    @property
    def ok(self) -> bool:
        return self.level != "error"


class PinStore:
    """Ordered list of pinned session names, one per line in a text file."""

    def __init__(self, path):
        self.path = Path(path)

    def read(self) -> List[str]:
        try:
            with open(self.path, encoding="utf-8") as f:
                lines = [ln.rstrip("\r\n") for ln in f]
        except FileNotFoundError:
            return []
        except OSError as e:
            log.warning("could not read %s: %s", self.path, e)
            return []
        return [ln for ln in lines if ln]

    def write(self, names: Sequence[str]) -> bool:
        """Replace the file with *names*.  Returns False if it could not be written."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                for name in names:
                    f.write(name + "\n")
        except OSError as e:
            log.warning("could not write %s: %s", self.path, e)
            return False
        return True

    def remove(self, name: str) -> bool:
        pins = self.read()
        kept = [p for p in pins if p != name]
        if len(kept) == len(pins):
            return False
        return self.write(kept)


# ── Tmux ──────────────────────────────────────────────────────────────


class CommandRunner:
    """Runs external commands from argument vectors, never through a shell."""

    def run(self, argv: Sequence[str], timeout: float = TMUX_QUERY_TIMEOUT) -> str:
        """Run *argv* to completion and return its stdout ("" on failure)."""
        log.debug("run: %s", list(argv))
        try:
            r = subprocess.run(
                list(argv),
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            log.debug("%s failed: %s", argv[0], e)
            return ""
        return r.stdout

    def spawn(self, argv: Sequence[str]):
        """Start *argv* in the background and forget about it."""
        log.debug("spawn: %s", list(argv))
        try:
            subprocess.Popen(
                list(argv),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            log.warning("could not start %s: %s", argv[0], e)

    def exec(self, argv: Sequence[str]) -> bool:
        """Replace the current process with *argv*.  Returns False if it could not start."""
        log.debug("exec: %s", list(argv))
        try:
            os.execvp(argv[0], list(argv))
        except OSError as e:
            log.warning("could not start %s: %s", argv[0], e)
        return False


class Tmux:
    def __init__(self, runner: Optional[CommandRunner] = None, env=None):
        self.runner = runner or CommandRunner()
        self.env = os.environ if env is None else env

    def server_running(self) -> bool:
        return bool(self.runner.run(["pgrep", "tmux"]).strip())

    def inside(self) -> bool:
        """True when this process runs inside a tmux client."""
        return bool(self.env.get("TMUX"))

    def list_sessions(self) -> List[str]:
        out = self.runner.run(["tmux", "list-sessions", "-F", "#{session_name}"])
        return [ln for ln in out.splitlines() if ln]

    def current_session(self) -> Optional[str]:
        out = self.runner.run(["tmux", "display-message", "-p", "#S"])
        lines = out.splitlines()
        return lines[0] if lines and lines[0] else None

    def switch_to(self, name: str, foreground: bool = False) -> Optional[str]:
        """Create *name* if needed, then switch the client or attach to it.

        Returns ``"switch"`` or ``"attach"``, or None for an empty name or
        a foreground attach that could not start.  Every tmux command is
        fire-and-forget.  With *foreground* the session is created
        synchronously and, outside tmux, the attach replaces this process
        so it gets the terminal.
        """
        if not name:
            return None
        log.debug("tmux server running: %s", self.server_running())
        inside = self.inside()

        if name not in self.list_sessions():
            create = ["tmux", "new-session", "-d", "-s", name]
            if foreground:
                self.runner.run(create)
            else:
                self.runner.spawn(create)

        if inside:
            self.runner.spawn(["tmux", "switch-client", "-t", name])
            return "switch"
        attach = ["tmux", "attach-session", "-t", name]
        if foreground:
            if self.runner.exec(attach) is False:
                return None
        else:
            self.runner.spawn(attach)
        return "attach"


# ── Operations ────────────────────────────────────────────────────────


def pin_current(store: PinStore, tmux: Tmux) -> Notice:
    name = tmux.current_session()
    if not name:
        return Notice("No tmux session found", "error")
    pins = store.read()
    if name in pins:
        return Notice("Session already pinned", "info")
    pins.append(name)
    if not store.write(pins):
        return Notice(f"Could not save pinned sessions to {store.path}", "error")
    return Notice(f"Pinned tmux session: {name}", "success")


def unpin(store: PinStore, name: str) -> Notice:
    if store.remove(name):
        return Notice(f"Unpinned tmux session: {name}", "success")
    return Notice(f"Not pinned: {name}", "info")


def save_pins(store: PinStore, lines: Sequence[str]) -> Notice:
    """Replace the pinned list with the non-blank *lines*, keeping their order."""
    if not store.write([ln for ln in lines if ln]):
        return Notice(f"Could not save pinned sessions to {store.path}", "error")
    return Notice("Pinned tmux sessions updated!", "success")


def jump(store: PinStore, tmux: Tmux, index: int, foreground: bool = False) -> Notice:
    pins = store.read()
    if 1 <= index <= len(pins):
        name = pins[index - 1]
        if tmux.switch_to(name, foreground=foreground) is None:
            return Notice(f"Could not switch to {name}", "error")
        return Notice(f"Switched to {name}", "success")
    return Notice(f"No session at index {index}", "error")


def fuzzy_filter(query: str, names: Sequence[str]) -> List[str]:
    """Names matching *query* fuzzily, best match first.

    An empty query keeps every name in its original order; ties keep the
    original order too.
    """
    query = query.strip()
    if not query:
        return list(names)
    matcher = Matcher(query)
    scored = []
    for i, name in enumerate(names):
        score = matcher.match(name)
        if score > 0:
            scored.append((-score, i, name))
    scored.sort()
    return [name for _, _, name in scored]


# ── Themes ───────────────────────────────────────────────────────────

THEME_NAMES = ["dark", "light"]
DEFAULT_THEME = "dark"

HARTOON_THEMES = {
    "hartoon-dark": Theme(
        name="hartoon-dark",
        primary="#00cccc",
        secondary="#cc00cc",
        warning="#cc0000",
        success="#00cc00",
        accent="#00cccc",
        dark=True,
        variables={
            "header-color": "#00ffff",
            "pin-color": "#ffff00",
            "current-color": "#00ff00",
            "dim-color": "#888888",
            "status-color": "#00ff00",
            "warn-color": "#ff4444",
        },
    ),
    "hartoon-light": Theme(
        name="hartoon-light",
        primary="#0066cc",
        secondary="#880088",
        warning="#cc0000",
        success="#008800",
        accent="#0066cc",
        dark=False,
        variables={
            "header-color": "#0055aa",
            "pin-color": "#aa6600",
            "current-color": "#008800",
            "dim-color": "#777777",
            "status-color": "#007700",
            "warn-color": "#cc0000",
        },
    ),
}

TEXTUAL_THEME_MAP = {name: f"hartoon-{name}" for name in THEME_NAMES}

_THEME_COLORS = {}
for _tname, _tobj in HARTOON_THEMES.items():
    _THEME_COLORS[_tname] = dict(_tobj.variables)


def _tc(app, role: str, fallback: str = "") -> str:
    """Hex color for *role* in the app's theme, or *fallback*."""
    theme_name = getattr(app, "_hartoon_theme_name", "hartoon-dark")
    return _THEME_COLORS.get(theme_name, {}).get(role, fallback)


def load_theme() -> str:
    try:
        if THEME_FILE.exists():
            name = THEME_FILE.read_text().strip()
            if name in THEME_NAMES:
                return name
    except OSError as e:
        log.debug("could not read %s: %s", THEME_FILE, e)
    return DEFAULT_THEME


def save_theme(name: str):
    THEME_FILE.parent.mkdir(parents=True, exist_ok=True)
    THEME_FILE.write_text(name)


# ── Default CSS ───────────────────────────────────────────────────────

DEFAULT_CSS = """
Screen {
    background: $surface;
}

#header {
    height: 3;
    dock: top;
    padding: 0 1;
    border: heavy $accent;
    background: $surface;
}

#query {
    dock: top;
    border: none;
    height: 1;
    background: $surface;
    color: $accent;
}

LiveSessionList {
    height: 1fr;
    border: heavy $accent;
    scrollbar-size: 1 1;
}

LiveSessionList > .option-list--option-highlighted {
    background: $accent-darken-3;
    color: $text;
}

#footer {
    height: 1;
    dock: bottom;
    background: $surface;
    padding: 0 1;
}
"""


# ── Widget classes ────────────────────────────────────────────────────


class HeaderBox(Static):
    live_count = reactive(0)
    pinned_count = reactive(0)
    current = reactive("")

    def render(self) -> Text:
        tc = lambda role, fb="": _tc(self.app, role, fb)
        text = Text()
        text.append("◆ hartoon", style=Style(color=tc("header-color", "#00ffff"), bold=True))
        text.append(f"  {self.live_count} live · {self.pinned_count} pinned",
                    style=Style(color=tc("dim-color", "#888888")))
        if self.current:
            text.append("  ● ", style=Style(color=tc("current-color", "#00ff00")))
            text.append(self.current, style=Style(color=tc("current-color", "#00ff00"), bold=True))
        return text


def build_session_row(app, name: str, slot: Optional[int], is_current: bool) -> Text:
    """One picker row: pin slot, current marker, name."""
    tc = lambda role, fb="": _tc(app, role, fb)
    text = Text()
    if slot is not None:
        text.append(f"★ {slot:<3d}", style=Style(color=tc("pin-color", "#ffff00"), bold=True))
    else:
        text.append("      ")
    if is_current:
        text.append("● ", style=Style(color=tc("current-color", "#00ff00")))
    else:
        text.append("  ")
    text.append(name)
    return text


class LiveSessionList(OptionList):
    """Live tmux sessions; slots of pinned ones are shown beside the name."""

    def rebuild(self, names: Sequence[str], pins: Sequence[str], current: Optional[str]):
        self.clear_options()
        for name in names:
            slot = pins.index(name) + 1 if name in pins else None
            row = build_session_row(self.app, name, slot, name == current)
            self.add_option(Option(row))
        if names:
            self.highlighted = 0


class QueryInput(Input):
    """Filter box.  Claims ``ctrl+e`` and ``ctrl+t`` ahead of Input's own line-editing keys."""

    BINDINGS = [
        Binding("ctrl+e", "app.edit_pins", "Edit pins", show=False, priority=True),
        Binding("ctrl+t", "app.pin_current", "Pin current", show=False, priority=True),
    ]


class FooterBar(Static):
    status = reactive("")
    is_error = reactive(False)

    def render(self) -> Text:
        tc = lambda role, fb="": _tc(self.app, role, fb)
        text = Text()
        if self.status:
            color = tc("warn-color", "#ff4444") if self.is_error else tc("status-color", "#00ff00")
            text.append(f" {self.status} ", style=Style(color=color, bold=True))
        else:
            dim = Style(color=tc("dim-color", "#888888"))
            text.append(" ⏎ switch  ·  ^E edit pins  ·  ^T pin current  "
                        "·  F5 refresh  ·  Esc quit", style=dim)
        return text


# ── Modal Screens ────────────────────────────────────────────────────


class PinEditorModal(ModalScreen[Optional[str]]):
    """Pinned list as editable text.  Dismisses with a name to jump to, or None."""

    DEFAULT_CSS = """
    PinEditorModal {
        align: center middle;
    }
    #pins-box {
        width: 40%;
        min-width: 36;
        height: auto;
        max-height: 90%;
        border: heavy $accent;
        background: $surface;
        padding: 0 1;
    }
    #pins-title {
        text-align: center;
    }
    #pins-area {
        height: auto;
    }
    #pins-hints {
        height: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+o", "jump_line", "Jump", priority=True),
        Binding("escape", "cancel", "Close", show=False, priority=True),
    ]

    hints_ttl = STATUS_TTL

    def __init__(self, store: PinStore):
        super().__init__()
        self.store = store
        self._hints_timer = None
        self.save_notice: Optional[Notice] = None  # shown in place of the key hints

    def compose(self) -> ComposeResult:
        with Vertical(id="pins-box"):
            yield Static(id="pins-title")
            yield TextArea(id="pins-area")
            yield Static(id="pins-hints")

    def on_mount(self):
        tc = lambda role, fb="": _tc(self.app, role, fb)
        title = Text("Hartoon - Pinned Tmux Sessions",
                     style=Style(color=tc("header-color", "#00ffff"), bold=True))
        self.query_one("#pins-title", Static).update(title)
        pins = self.store.read()
        ta = self.query_one("#pins-area", TextArea)
        ta.load_text("\n".join(pins))
        ta.styles.min_height = max(5, len(pins)) + 2
        self._show_hints()
        ta.focus()

    def _show_hints(self, notice: Optional[Notice] = None):
        tc = lambda role, fb="": _tc(self.app, role, fb)
        self.save_notice = notice
        if notice is None:
            hints = Text("Ctrl+S Save  ·  Ctrl+O Jump to line  ·  Esc Close",
                         style=Style(color=tc("dim-color", "#888888")))
        else:
            role = "status-color" if notice.ok else "warn-color"
            hints = Text(notice.message, style=Style(color=tc(role, "#00ff00"), bold=True))
            if self._hints_timer:
                self._hints_timer.stop()
            self._hints_timer = self.set_timer(self.hints_ttl, self._show_hints)
        self.query_one("#pins-hints", Static).update(hints)

    def action_save(self):
        ta = self.query_one("#pins-area", TextArea)
        self._show_hints(save_pins(self.store, ta.text.split("\n")))

    def action_jump_line(self):
        ta = self.query_one("#pins-area", TextArea)
        row, _ = ta.cursor_location
        line = ta.document.get_line(row)
        self.dismiss(line or None)

    def action_cancel(self):
        self.dismiss(None)


# ── App ──────────────────────────────────────────────────────────────


class HartoonApp(App):
    """Fuzzy picker over live tmux sessions, with the pinned list editor."""

    CSS = DEFAULT_CSS

    BINDINGS = [
        Binding("escape", "quit_picker", "Quit", show=False),
        Binding("down", "cursor_down", show=False),
        Binding("up", "cursor_up", show=False),
        Binding("ctrl+e", "edit_pins", "Edit pins", show=False),
        Binding("ctrl+t", "pin_current", "Pin current", show=False),
        Binding("f5", "refresh", "Refresh", show=False),
    ]

    exit_action = None  # ("switch", name) once a session is chosen

    def __init__(self, store: PinStore, tmux: Tmux, start_view: str = "pick"):
        super().__init__()
        for theme_obj in HARTOON_THEMES.values():
            self.register_theme(theme_obj)
        self._hartoon_theme_name = TEXTUAL_THEME_MAP.get(load_theme(), "hartoon-dark")
        self.theme = self._hartoon_theme_name
        self.store = store
        self.tmux = tmux
        self.start_view = start_view
        self.sessions: List[str] = []
        self.filtered: List[str] = []
        self.pins: List[str] = []
        self.current: Optional[str] = None
        self.exit_action = None
        self._status_timer = None

    def compose(self) -> ComposeResult:
        yield HeaderBox(id="header")
        yield QueryInput(id="query", placeholder="Filter tmux sessions...")
        yield LiveSessionList(id="live-list")
        yield FooterBar(id="footer")

    def on_mount(self):
        self._do_refresh()
        if self.start_view == "edit":
            self.action_edit_pins()
        else:
            self.query_one("#query", Input).focus()

    # -- Data management ---------------------------------------------------

    def _do_refresh(self):
        self.sessions = self.tmux.list_sessions()
        self.pins = self.store.read()
        self.current = self.tmux.current_session() if self.tmux.inside() else None
        header = self.query_one("#header", HeaderBox)
        header.live_count = len(self.sessions)
        header.pinned_count = len(self.pins)
        header.current = self.current or ""
        self._apply_filter(self.query_one("#query", Input).value)

    def _apply_filter(self, text: str):
        self.filtered = fuzzy_filter(text, self.sessions)
        self.query_one("#live-list", LiveSessionList).rebuild(
            self.filtered, self.pins, self.current,
        )

    def _highlighted_name(self) -> Optional[str]:
        ol = self.query_one("#live-list", LiveSessionList)
        if ol.highlighted is not None and ol.highlighted < len(self.filtered):
            return self.filtered[ol.highlighted]
        return None

    def _select(self, name: Optional[str]):
        if not name:
            self._set_status("No matching session", error=True)
            return
        self.exit_action = ("switch", name)
        self.exit()

    def _set_status(self, msg, error=False, ttl=STATUS_TTL):
        footer = self.query_one("#footer", FooterBar)
        footer.status = msg
        footer.is_error = error
        if self._status_timer:
            self._status_timer.stop()
        self._status_timer = self.set_timer(ttl, self._clear_status)

    def _clear_status(self):
        footer = self.query_one("#footer", FooterBar)
        footer.status = ""
        footer.is_error = False

    # -- Event handlers ----------------------------------------------------

    def on_input_changed(self, event: Input.Changed):
        if event.input.id == "query":
            self._apply_filter(event.value)

    def on_input_submitted(self, event: Input.Submitted):
        if event.input.id == "query":
            self._select(self._highlighted_name())

    def on_option_list_option_selected(self, event: OptionList.OptionSelected):
        if event.option_list.id == "live-list" and event.option_index < len(self.filtered):
            self._select(self.filtered[event.option_index])

    # -- Actions -----------------------------------------------------------

    def action_cursor_down(self):
        self.query_one("#live-list", LiveSessionList).action_cursor_down()

    def action_cursor_up(self):
        self.query_one("#live-list", LiveSessionList).action_cursor_up()

    def action_quit_picker(self):
        self.exit()

    def action_refresh(self):
        self._do_refresh()
        self._set_status("Refreshed session list")

    def action_pin_current(self):
        if isinstance(self.screen, ModalScreen):
            return
        notice = pin_current(self.store, self.tmux)
        self._do_refresh()
        self._set_status(notice.message, error=not notice.ok)

    def action_edit_pins(self):
        if isinstance(self.screen, ModalScreen):
            return

        def on_result(name):
            if name:
                self._select(name)
            elif self.start_view == "edit":
                self.exit()
            else:
                self._do_refresh()
                self.query_one("#query", Input).focus()

        self.push_screen(PinEditorModal(self.store), on_result)


# ── CLI helpers ───────────────────────────────────────────────────────


def _fail(msg: str):
    print(f"\033[31m{msg}\033[0m", file=sys.stderr)
    sys.exit(1)


def _report(notice: Notice):
    if notice.level == "error":
        _fail(notice.message)
    elif notice.level == "success":
        print(f"\033[1;36m◆\033[0m {notice.message}")
    else:
        print(notice.message)


def _require_tmux():
    if not HAS_TMUX:
        _fail("tmux is not installed.")


# ── CLI commands ─────────────────────────────────────────────────────


def cmd_help():
    print("""\033[1;36m◆ hartoon — pinned tmux sessions\033[0m

\033[1mUsage:\033[0m
  hartoon                                Fuzzy picker over live tmux sessions
  hartoon pick                           Same as above
  hartoon pin                            Pin the current tmux session
  hartoon unpin <name>                   Remove a session from the pinned list
  hartoon edit                           Edit the pinned list in a panel
  hartoon jump <n>                       Switch to the n-th pinned session
  hartoon <n>                            Shorthand for jump <n>
  hartoon switch <name>                  Switch to (or create) a session
  hartoon list                           List pinned sessions
  hartoon sessions                       List live tmux sessions
  hartoon theme list                     List themes
  hartoon theme set <name>               Set theme
  hartoon help                           Show this help

\033[1mOptions:\033[0m
  --debug                                Log tmux commands to stderr

\033[1mEnvironment:\033[0m
  HARTOON_CONFIG_DIR                     Config directory (~/.config/hartoon)
  HARTOON_PINS_FILE                      Pinned sessions file""")


def cmd_list(store: PinStore):
    pins = store.read()
    if not pins:
        print("No pinned sessions.")
        return
    for i, name in enumerate(pins, 1):
        print(f"  ★ {i:<3d} {name}")


def cmd_sessions(store: PinStore, tmux: Tmux):
    names = tmux.list_sessions()
    if not names:
        print("No tmux sessions.")
        return
    pins = store.read()
    current = tmux.current_session() if tmux.inside() else None
    for name in names:
        slot = f"★ {pins.index(name) + 1:<3d}" if name in pins else "      "
        mark = "● " if name == current else "  "
        print(f"  {slot}{mark}{name}")


def cmd_pin(store: PinStore, tmux: Tmux):
    _report(pin_current(store, tmux))


def cmd_unpin(store: PinStore, name: str):
    _report(unpin(store, name))


def cmd_jump(store: PinStore, tmux: Tmux, arg: str):
    try:
        index = int(arg)
    except ValueError:
        _fail(f"Not a session number: {arg}")
    _report(jump(store, tmux, index, foreground=True))


def cmd_switch(tmux: Tmux, name: str):
    if not name:
        _fail("Usage: hartoon switch <name>")
    if tmux.switch_to(name, foreground=True) is None:
        _fail(f"Could not switch to {name}")
    _report(Notice(f"Switched to {name}", "success"))


def cmd_theme_list():
    current = load_theme()
    for t in THEME_NAMES:
        marker = " *" if t == current else "  "
        print(f"  {marker} {t}")


def cmd_theme_set(name: str):
    if name not in THEME_NAMES:
        _fail(f"Unknown theme '{name}'. Available: {', '.join(THEME_NAMES)}")
    try:
        save_theme(name)
    except OSError as e:
        _fail(f"Could not save theme to {THEME_FILE}: {e}")
    print(f"Theme set to: {name}")


def cmd_tui(store: PinStore, tmux: Tmux, start_view: str = "pick"):
    app = HartoonApp(store, tmux, start_view=start_view)
    app.run()
    action = app.exit_action
    if action is None:
        return
    if action[0] == "switch":
        _require_tmux()
        if tmux.switch_to(action[1], foreground=True) is None:
            _fail(f"Could not switch to {action[1]}")


# ── Main ─────────────────────────────────────────────────────────────


def main(argv=None, store: Optional[PinStore] = None, tmux: Optional[Tmux] = None):
    args = list(sys.argv[1:] if argv is None else argv)
    debug = "--debug" in args or os.environ.get("HARTOON_DEBUG") == "1"
    args = [a for a in args if a != "--debug"]
    setup_logging(debug)

    store = store or PinStore(pins_path())
    tmux = tmux or Tmux()

    if not args or args[0] == "pick":
        _require_tmux()
        cmd_tui(store, tmux)
        return

    verb = args[0]

    if verb in ("help", "-h", "--help"):
        cmd_help()

    elif verb == "list":
        cmd_list(store)

    elif verb == "sessions":
        _require_tmux()
        cmd_sessions(store, tmux)

    elif verb == "pin":
        _require_tmux()
        cmd_pin(store, tmux)

    elif verb == "unpin":
        if len(args) < 2:
            _fail("Usage: hartoon unpin <name>")
        cmd_unpin(store, args[1])

    elif verb == "edit":
        cmd_tui(store, tmux, start_view="edit")

    elif verb == "jump":
        if len(args) < 2:
            _fail("Usage: hartoon jump <n>")
        _require_tmux()
        cmd_jump(store, tmux, args[1])

    elif verb.isdigit():
        _require_tmux()
        cmd_jump(store, tmux, verb)

    elif verb == "switch":
        if len(args) < 2:
            _fail("Usage: hartoon switch <name>")
        _require_tmux()
        cmd_switch(tmux, args[1])

    elif verb == "theme":
        if len(args) < 2:
            _fail("Usage: hartoon theme list|set")
        sub = args[1]
        if sub == "list":
            cmd_theme_list()
        elif sub == "set":
            if len(args) < 3:
                _fail(f"Usage: hartoon theme set <{'|'.join(THEME_NAMES)}>")
            cmd_theme_set(args[2])
        else:
            _fail(f"Unknown theme command: {sub}")

    else:
        print(f"\033[31mUnknown command: {verb}\033[0m", file=sys.stderr)
        print("Run 'hartoon help' for usage information.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
