from typing import Iterable, Optional

from rich.panel import Panel
from rich.text import Text

from skill_corpus.tui.enums import UIStyle
from skill_corpus.utils import compact_home_path


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value, subtitle: Optional[str] = None) -> Panel:
        return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))

    @staticmethod
    def bullets(title: str, items: Iterable[str], style: str) -> Panel:
        body = Text("\n".join(f"- {compact_home_path(item)}" for item in items))
        return Panel(body, title=title, border_style=style, padding=(0, 1))
