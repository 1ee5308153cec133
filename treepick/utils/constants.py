"""Constants used throughout treepick."""

import os

# Default config directory and filename
DEFAULT_CONFIG_DIR = os.path.expanduser("~/.config/treepick")
DEFAULT_CONFIG_FILE = "config.json"

# Default matching mode
DEFAULT_CASE_SENSITIVITY = "smart"

# Help line shown above the filter
HELP_MESSAGE = [
    ("", "Press "),
    ("class:help.key", "ctrl+c"),
    ("", " to exit"),
]

# Default screen style (prompt_toolkit style classes)
DEFAULT_SCREEN_STYLE = {
    'help.key': 'bold',
    'filter': 'ansiyellow',
    'frame.label': 'bold',
    'candidate': '',
    'candidate.selected': 'bg:ansiblue',
}
