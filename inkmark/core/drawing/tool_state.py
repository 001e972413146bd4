"""
Currently selected annotation tool and its parameters.
"""
from dataclasses import dataclass
from enum import Enum


class Tool(Enum):
    SELECT = "select"
    HIGHLIGHT = "highlight"
    UNDERLINE = "underline"
    COMMENT = "comment"
    SIGNATURE = "signature"


DEFAULT_HIGHLIGHT_COLOR = "#ffff00"
DEFAULT_UNDERLINE_COLOR = "#0000ff"


@dataclass
class ToolState:
    """
    Tool selection plus per-tool parameters.

    Colors are read when a gesture commits, so changing them only affects
    annotations created afterwards.
    """
    current_tool: Tool = Tool.SELECT
    highlight_color: str = DEFAULT_HIGHLIGHT_COLOR
    underline_color: str = DEFAULT_UNDERLINE_COLOR
    comment_text: str = ""

    def take_comment_text(self, default: str) -> str:
        """Return the pending comment text (or default) and clear it."""
        text = self.comment_text or default
        self.comment_text = ""
        return text
