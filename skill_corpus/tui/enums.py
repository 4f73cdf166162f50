from enum import Enum

from skill_corpus.lint.models import CheckStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


CHECK_STATUS_STYLE = {
    CheckStatus.PASS: UIStyle.GREEN.value,
    CheckStatus.FAIL: UIStyle.RED.value,
    CheckStatus.SKIP: UIStyle.YELLOW.value,
}
