# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich `Theme` used by flagslot output.

`OneColors` holds hex values from the One Dark palette so they can be used
directly in rich markup (`f"[{OneColors.GREEN}]ok[/]"`). `get_theme()` maps
the semantic style names used by the renderer onto those colors.
"""
from rich.style import Style
from rich.theme import Theme


class OneColors:
    """One Dark palette."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"


def get_theme() -> Theme:
    """Return the rich theme for flagslot output."""
    return Theme(
        {
            "flag": Style(color=OneColors.BLUE, bold=True),
            "kind": Style(color=OneColors.MAGENTA),
            "value": Style(color=OneColors.GREEN),
            "default": Style(color=OneColors.COMMENT_GREY, italic=True),
            "option": Style(color=OneColors.CYAN),
            "invalid": Style(color=OneColors.RED, bold=True),
            "error": Style(color=OneColors.DARK_RED, bold=True),
        }
    )
