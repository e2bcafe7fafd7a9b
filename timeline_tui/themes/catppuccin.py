"""Catppuccin Mocha color scheme for the timeline TUI."""

# Catppuccin Mocha Palette
CATPPUCCIN = {
    "red": "#f38ba8",
    "peach": "#fab387",
    "yellow": "#f9e2af",
    "green": "#a6e3a1",
    "teal": "#94e2d5",
    "blue": "#89b4fa",
    "mauve": "#cba6f7",
    # Surface & background
    "text": "#cdd6f4",
    "subtext0": "#a6adc8",
    "overlay1": "#7f849c",
    "overlay0": "#6c7086",
    "surface1": "#45475a",
    "surface0": "#313244",
    "base": "#1e1e2e",
    "mantle": "#181825",
    "crust": "#11111b",
}

COLORS = {
    # Plan entry / tool call status
    "pending": CATPPUCCIN["subtext0"],
    "in_progress": CATPPUCCIN["peach"],
    "completed": CATPPUCCIN["green"],
    "failed": CATPPUCCIN["red"],
    # Priority
    "high": CATPPUCCIN["peach"],
    "medium": CATPPUCCIN["blue"],
    "low": CATPPUCCIN["overlay1"],
    # UI elements
    "header_bg": CATPPUCCIN["mantle"],
    "panel_bg": CATPPUCCIN["base"],
    "border": CATPPUCCIN["surface1"],
    "text": CATPPUCCIN["text"],
    "muted": CATPPUCCIN["overlay1"],
    "accent": CATPPUCCIN["mauve"],
}

# Textual CSS theme
TIMELINE_THEME = f"""
Screen {{
    background: {CATPPUCCIN["base"]};
}}

VerticalScroll {{
    scrollbar-background: {CATPPUCCIN["mantle"]};
    scrollbar-color: {CATPPUCCIN["surface1"]};
}}

.status-pending {{
    color: {COLORS["pending"]};
}}

.status-in_progress {{
    color: {COLORS["in_progress"]};
}}

.status-completed {{
    color: {COLORS["completed"]};
}}

.status-failed {{
    color: {COLORS["failed"]};
}}

.priority-high {{
    color: {COLORS["high"]};
    text-style: bold;
}}

.priority-medium {{
    color: {COLORS["medium"]};
}}

.priority-low {{
    color: {COLORS["low"]};
}}

CollapsibleTitle {{
    color: {CATPPUCCIN["text"]};
}}

CollapsibleTitle:hover {{
    background: {CATPPUCCIN["surface0"]};
}}
"""
