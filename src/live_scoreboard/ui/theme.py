"""
UI theme constants for the scoreboard ticker.

ESPN-style palette shared by the ticker widget and the scoreboard window.
"""

ESPN_THEME = {
    "red": "#cc0000",
    "dark_red": "#990000",
    "dark_bg": "#0d0d0d",
    "card_bg": "#1a1a1a",
    "card_hover": "#252525",
    "text_primary": "#FFFFFF",
    "text_secondary": "#888888",
    "text_muted": "#666666",
    "border": "#333333",
}

# Convenience aliases for direct import
ESPN_RED = ESPN_THEME["red"]
ESPN_DARK_BG = ESPN_THEME["dark_bg"]
ESPN_CARD_BG = ESPN_THEME["card_bg"]
ESPN_CARD_HOVER = ESPN_THEME["card_hover"]
ESPN_TEXT_PRIMARY = ESPN_THEME["text_primary"]
ESPN_TEXT_SECONDARY = ESPN_THEME["text_secondary"]
ESPN_TEXT_MUTED = ESPN_THEME["text_muted"]
ESPN_BORDER = ESPN_THEME["border"]


def nav_button_style() -> str:
    """Stylesheet for the ticker's left/right arrow buttons"""
    return f"""
        QPushButton {{
            background-color: {ESPN_CARD_BG};
            color: {ESPN_TEXT_PRIMARY};
            border: none;
            font-size: 16px;
            font-weight: bold;
        }}
        QPushButton:hover {{
            background-color: {ESPN_RED};
        }}
        QPushButton:disabled {{
            color: #444444;
        }}
    """


def team_label_style(leading: bool, font_size: int) -> str:
    color = ESPN_TEXT_PRIMARY if leading else ESPN_TEXT_SECONDARY
    weight = "bold" if leading else "normal"
    return f"color: {color}; font-size: {font_size}px; font-weight: {weight};"
