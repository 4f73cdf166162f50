"""Interactive Textual-based picker for agents."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, SelectionList, Static
from textual.widgets.selection_list import Selection

from skill_corpus.agents.models import Agent


class AgentSelectorApp(App[list[str]]):
    """Pick the agents whose skills should be resolved."""

    TITLE = "Agent Selector"
    CSS_DEFAULT = """
    Screen {
        layout: vertical;
    }
    #info {
        height: 3;
        content-align: center middle;
        background: $primary-darken-2;
        color: $text;
        padding: 0 1;
    }
    SelectionList {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("a", "select_all", "Select All"),
        Binding("n", "select_none", "Select None"),
        Binding("enter", "confirm", "Confirm", priority=True),
        Binding("q", "quit_app", "Quit"),
    ]

    def __init__(self, agents: list[Agent], preselected: set[str] | None = None) -> None:
        super().__init__()
        self._agents = agents
        self._preselected = preselected or set()

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(
            f"Agents: {len(self._agents)} | "
            f"Use [a] select all, [n] select none, [enter] confirm",
            id="info",
        )

        selections: list[Selection[str]] = []
        for agent in self._agents:
            label = f"{agent.name} ({len(agent.skills)} skills)"
            if agent.metadata.description:
                label = f"{label}: {agent.metadata.description}"
            selections.append(
                Selection(label, agent.name, agent.name in self._preselected)
            )

        yield SelectionList[str](*selections)
        yield Footer()

    def action_select_all(self) -> None:
        self.query_one(SelectionList).select_all()

    def action_select_none(self) -> None:
        self.query_one(SelectionList).deselect_all()

    def action_confirm(self) -> None:
        selected = set(self.query_one(SelectionList).selected)
        # Keep listing order rather than click order.
        self.exit([agent.name for agent in self._agents if agent.name in selected])

    def action_quit_app(self) -> None:
        self.exit([])
