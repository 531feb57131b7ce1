from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Key, Paste, Resize
from textual.widgets import OptionList, Static

from fuzzmatch.models import CaseMode
from fuzzmatch.ranking import RankedCandidate, rank_candidates
from fuzzmatch.rendering import highlight, render_match_details
from fuzzmatch.scoring import Scoring


class FuzzyPickerTui(App[str | None]):
    CSS = """
    #body {
        height: 1fr;
    }
    #sidebar {
        width: 2fr;
        border: round $accent;
    }
    #sidebar-list {
        height: 1fr;
    }
    #status {
        height: auto;
        color: $text-muted;
    }
    #main-panel {
        width: 3fr;
        border: round $secondary;
    }
    """
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("escape", "escape", "Clear / Quit"),
        Binding("ctrl+c", "quit", show=False),
    ]

    def __init__(
        self,
        candidates: Iterable[str],
        *,
        scoring: Scoring | None = None,
        case_mode: CaseMode = "insensitive",
        initial_query: str = "",
    ) -> None:
        super().__init__()
        self.theme = "rose-pine"
        self._all_candidates: list[str] = list(candidates)
        self._scoring = scoring
        self._case_mode: CaseMode = case_mode
        self._search_query = initial_query
        self._visible_candidates: list[RankedCandidate] = [
            RankedCandidate(text=candidate) for candidate in self._all_candidates
        ]

    def compose(self) -> ComposeResult:
        with Horizontal(id="body"):
            with Vertical(id="sidebar"):
                yield OptionList(id="sidebar-list")
                yield Static("", id="status")
            with Vertical(id="main-panel"):
                yield Static("Type to filter candidates.", id="main-placeholder")

    def on_mount(self) -> None:
        self.query_one("#sidebar-list", OptionList).focus()
        self._filter_candidates()

    def _filter_candidates(self) -> None:
        self._visible_candidates = rank_candidates(
            self._search_query,
            self._all_candidates,
            scoring=self._scoring,
            case_mode=self._case_mode,
        )
        self._render_candidate_options()
        self._update_status()
        self._update_filter_indicator()
        if self._visible_candidates:
            self._render_preview(self._visible_candidates[0])
        else:
            self.query_one("#main-placeholder", Static).update(
                "No candidates match the current query."
            )

    def _render_candidate_options(self, *, preserve_position: bool = False) -> None:
        candidate_list = self.query_one("#sidebar-list", OptionList)
        previous_highlight = candidate_list.highlighted
        candidate_list.clear_options()
        if not self._visible_candidates:
            return
        candidate_list.add_options(
            [
                highlight(candidate.match, candidate.text)
                for candidate in self._visible_candidates
            ]
        )
        if preserve_position and previous_highlight is not None:
            candidate_list.highlighted = min(
                previous_highlight, len(self._visible_candidates) - 1
            )
        else:
            candidate_list.highlighted = 0

    def _main_panel_content_width(self) -> int:
        main_panel = self.query_one("#main-panel", Vertical)
        return max(40, main_panel.size.width - 4)

    def _render_preview(self, candidate: RankedCandidate) -> None:
        self.query_one("#main-placeholder", Static).update(
            render_match_details(candidate, self._main_panel_content_width())
        )

    def _update_status(self) -> None:
        total = len(self._all_candidates)
        shown = len(self._visible_candidates)
        self.query_one("#status", Static).update(f"{shown}/{total} candidates")

    def _filter_indicator_text(self) -> Text:
        indicator = Text()
        indicator.append(">", style="bold red")
        if self._search_query:
            indicator.append(f" {self._search_query}_", style="bold white")
        else:
            indicator.append(" type to filter", style="dim")
        return indicator

    def _update_filter_indicator(self) -> None:
        sidebar = self.query_one("#sidebar", Vertical)
        sidebar.border_title = self._filter_indicator_text()
        sidebar.border_subtitle = (
            "case sensitive" if self._case_mode == "sensitive" else ""
        )

    def _set_query(self, query: str) -> None:
        self._search_query = query
        self._filter_candidates()

    def _highlighted_candidate(self) -> RankedCandidate | None:
        highlighted = self.query_one("#sidebar-list", OptionList).highlighted
        if highlighted is None or not (
            0 <= highlighted < len(self._visible_candidates)
        ):
            return None
        return self._visible_candidates[highlighted]

    def action_escape(self) -> None:
        if self._search_query:
            self._set_query("")
            return
        self.exit(None)

    def on_key(self, event: Key) -> None:
        if event.key == "backspace":
            self._set_query(self._search_query[:-1])
            event.stop()
            return

        if event.key == "space":
            self._set_query(self._search_query + " ")
            event.stop()
            return

        if event.character and event.character.isprintable():
            self._set_query(self._search_query + event.character)
            event.stop()

    def on_paste(self, event: Paste) -> None:
        sanitized = event.text.replace("\r", "").replace("\n", "")
        if not sanitized:
            return
        self._set_query(self._search_query + sanitized)
        event.stop()

    def on_resize(self, event: Resize) -> None:
        del event
        self.call_after_refresh(self._refresh_after_resize)

    def _refresh_after_resize(self) -> None:
        self._render_candidate_options(preserve_position=True)
        candidate = self._highlighted_candidate()
        if candidate is not None:
            self._render_preview(candidate)

    def on_option_list_option_highlighted(
        self, event: OptionList.OptionHighlighted
    ) -> None:
        if event.option_list.id != "sidebar-list":
            return
        candidate = self._highlighted_candidate()
        if candidate is not None:
            self._render_preview(candidate)

    def on_option_list_option_selected(
        self, event: OptionList.OptionSelected
    ) -> None:
        if event.option_list.id != "sidebar-list":
            return
        if not 0 <= event.option_index < len(self._visible_candidates):
            return
        self.exit(self._visible_candidates[event.option_index].text)
