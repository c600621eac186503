"""The coloured banner printed at start-up."""

from __future__ import annotations

from enum import Enum

from rich.console import Console
from rich.text import Text

_console = Console(highlight=False)

_ART = (
    "                              ____",
    ",-.----.                    ,'  , `.",
    "\\    /  \\    ,---.       ,-+-,.' _ |",
    "|   :    |  '   ,'\\   ,-+-. ;   , ||",
    "|   | .\\ : /   /   | ,--.'|'   |  ||",
    ".   : |: |.   ; ,. :|   |  ,', |  |,",
    "|   |  \\ :'   | |: :|   | /  | |--'",
    "|   : .  |'   | .; :|   : |  | ,",
    ":     |`-'|   :    ||   : |  |/",
    ":   : :    \\   \\  / |   | |`-'",
    "|   | :     `----'  |   ;/",
    "`---'.|             '---'",
    "  `---`",
)

_COLUMN_WIDTH = 36


class SplashScreen(Enum):
    """How the banner is laid out."""

    ROW = "Row"
    STACKED = "Stacked"
    NONE = "None"

    @classmethod
    def from_name(cls, text: str) -> SplashScreen:
        """Parse ``Row`` or ``Stacked``; anything else means no banner."""
        if text in ("Row", "Stacked"):
            return cls(text)
        return cls.NONE


def render_splash(variant: SplashScreen) -> Text:
    """Build the banner for ``variant`` as styled text."""
    text = Text()
    if variant is SplashScreen.NONE:
        return text
    text.append("\n")
    if variant is SplashScreen.ROW:
        for line in _ART:
            text.append(line.ljust(_COLUMN_WIDTH), style="magenta")
            text.append(line, style="cyan")
            text.append("\n")
    else:
        text.append("\n" + "\n".join(_ART), style="magenta")
        text.append(" " * 23 + "____\n" + "\n".join(_ART[1:]), style="cyan")
        text.append("\n")
    return text


def splash_screen(variant: SplashScreen) -> None:
    """Print the banner, unless the variant is ``NONE``."""
    if variant is SplashScreen.NONE:
        return
    _console.print(render_splash(variant), soft_wrap=True)