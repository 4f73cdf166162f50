"""Tests for the interactive agent selector TUI."""

from __future__ import annotations

from pathlib import Path

import pytest

from skill_corpus.agents.models import Agent, AgentMetadata
from skill_corpus.tui.agent_selector import AgentSelectorApp


def _agent(name: str, skills: list[str]) -> Agent:
    return Agent(
        name=name,
        source_path=Path(f"agents/{name}.md"),
        metadata=AgentMetadata(name=name, description=f"{name} agent", skills=skills),
        content="",
    )


def _agents() -> list[Agent]:
    return [
        _agent("backend", ["rails-models"]),
        _agent("frontend", ["react-hooks"]),
        _agent("qa", []),
    ]


@pytest.mark.asyncio(loop_scope="function")
async def test_all_agents_listed() -> None:
    app = AgentSelectorApp(_agents())
    async with app.run_test():
        sel = app.query_one("SelectionList")
        assert sel.option_count == 3
        assert len(sel.selected) == 0


@pytest.mark.asyncio(loop_scope="function")
async def test_preselected_agents() -> None:
    app = AgentSelectorApp(_agents(), preselected={"qa"})
    async with app.run_test():
        sel = app.query_one("SelectionList")
        assert sel.selected == ["qa"]


@pytest.mark.asyncio(loop_scope="function")
async def test_select_all_and_none() -> None:
    app = AgentSelectorApp(_agents())
    async with app.run_test() as pilot:
        await pilot.press("a")
        sel = app.query_one("SelectionList")
        assert len(sel.selected) == 3
        await pilot.press("n")
        assert len(sel.selected) == 0


@pytest.mark.asyncio(loop_scope="function")
async def test_confirm_keeps_listing_order() -> None:
    app = AgentSelectorApp(_agents(), preselected={"qa", "backend"})
    async with app.run_test():
        # enter may be consumed by the focused SelectionList
        app.action_confirm()
    assert app.return_value == ["backend", "qa"]


@pytest.mark.asyncio(loop_scope="function")
async def test_quit_returns_empty() -> None:
    app = AgentSelectorApp(_agents())
    async with app.run_test() as pilot:
        await pilot.press("q")
    assert app.return_value == []


@pytest.mark.asyncio(loop_scope="function")
async def test_enter_confirms_selection() -> None:
    app = AgentSelectorApp(_agents(), preselected={"backend"})
    async with app.run_test() as pilot:
        await pilot.press("enter")
    assert app.return_value == ["backend"]
