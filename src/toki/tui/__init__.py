"""toki TUI - Terminal User Interface.

Textual front end that drives a stage runner with a render ticker, a
per-stage countdown and key/resize events. The application lives in
``toki.tui.app`` and is imported on demand by the CLI.
"""
