"""Widgets for the toki TUI."""

from rich.text import Text
from textual.widgets import Static

from ..core.runner import StageRunner


class TimerView(Static):
    """Shows the runner's current view: clock line and progress bar."""

    DEFAULT_CSS = """
    TimerView {
        height: auto;
        width: 100%;
    }
    """

    def __init__(self, runner: StageRunner, **kwargs):
        super().__init__(**kwargs)
        self.runner = runner

    def render(self) -> Text:
        return self.runner.view()
