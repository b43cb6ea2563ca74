"""
interactive pickers, each one a short-lived inline textual app.

``choose_one`` / ``choose_many`` are the generic building blocks; the
``vim_variant`` / ``session_open`` / ``session_remove`` prompts are what the
session manager actually asks.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from rich.text import Text

from vsm.errors import SelectionFailure
from vsm.logger import get_logger

logger = get_logger(__name__)

HELP_SELECT = "  ↑/↓ or k/j to move · enter to select · q to quit"
HELP_MULTI  = "  ↑/↓ or k/j to move · space to toggle · enter to confirm · q to quit"

CANCELED = "operation was canceled by the user"

CSS = """
Screen {
    background: $background;
    &:inline { height: auto; border: none; }
}

OptionList, SelectionList {
    border: none;
    height: auto;
    max-height: 22;
    padding: 0;
    background: $background;
    & > .option-list--option { padding: 0 1; }
    & > .option-list--option-highlighted {
        background: $surface;
        color: $text;
    }
}

.label {
    height: 1;
    padding: 0 1;
    color: $success;
    text-style: bold;
}

.hint {
    height: 1;
    padding: 0 1;
    color: $warning;
}
"""


class PromptRenderer(Protocol):
    def vim_variant(self, variants: Sequence[str]) -> str: ...

    def session_open(self, names: Sequence[str]) -> str: ...

    def session_remove(self, names: Sequence[str]) -> set[str]: ...


class Selector:
    """renders the pickers; every failure surfaces as SelectionFailure"""

    def choose_one(self, prompt: str, options: Sequence[str]) -> str:
        if not options:
            raise SelectionFailure("no options to choose from")

        from textual.app import App, ComposeResult
        from textual.widgets import Label, OptionList, Static
        from textual.widgets.option_list import Option

        result_holder: list = []

        class SelectApp(App):
            CSS_PATH = None
            CSS = CSS
            def compose(self) -> ComposeResult:
                yield Label(f"  {prompt}", classes="label")
                yield OptionList(*[Option(_label(o)) for o in options])
                yield Static(HELP_SELECT, classes="hint")
            def on_option_list_option_selected(self, event) -> None:
                result_holder.append(options[event.option_index])
                self.exit()
            def on_key(self, event) -> None:
                _vim_keys(self, event, OptionList)

        _run_inline(SelectApp())
        if not result_holder:
            raise SelectionFailure(CANCELED)
        return result_holder[0]

    def choose_many(self, prompt: str, options: Sequence[str]) -> set[str]:
        if not options:
            raise SelectionFailure("no options to choose from")

        from textual.app import App, ComposeResult
        from textual.binding import Binding
        from textual.widgets import Label, SelectionList, Static

        result_holder: list = []

        class MultiSelectApp(App):
            CSS_PATH = None
            CSS = CSS
            # enter would otherwise toggle the highlighted row
            BINDINGS = [Binding("enter", "confirm", "confirm", priority=True)]
            def compose(self) -> ComposeResult:
                yield Label(f"  {prompt}", classes="label")
                yield SelectionList[int](*[(_label(o), i) for i, o in enumerate(options)])
                yield Static(HELP_MULTI, classes="hint")
            def action_confirm(self) -> None:
                chosen = self.query_one(SelectionList).selected
                result_holder.append({options[i] for i in chosen})
                self.exit()
            def on_key(self, event) -> None:
                _vim_keys(self, event, SelectionList)

        _run_inline(MultiSelectApp())
        if not result_holder:
            raise SelectionFailure(CANCELED)
        return result_holder[0]

    # ── prompts used by the session manager ───────────────────────────────────

    def vim_variant(self, variants: Sequence[str]) -> str:
        return self.choose_one("Which variant would you like to use?", variants)

    def session_open(self, names: Sequence[str]) -> str:
        return self.choose_one("Which session would you like to open?", names)

    def session_remove(self, names: Sequence[str]) -> set[str]:
        return self.choose_many("Which session(s) would you like to remove?", names)


# ── helpers ───────────────────────────────────────────────────────────────────

def _label(option: str) -> Text:
    # plain text: session names may contain [brackets] that read as markup
    return Text(f"  {option}")


def _vim_keys(app, event, widget_type) -> None:
    if event.key in ("q", "escape"):
        app.exit()
    elif event.key == "j":
        app.query_one(widget_type).action_cursor_down()
    elif event.key == "k":
        app.query_one(widget_type).action_cursor_up()


def _run_inline(app) -> None:
    print()
    try:
        app.run(inline=True)
    except Exception as e:
        logger.debug(f"prompt crashed: {e!r}")
        raise SelectionFailure(str(e)) from e
