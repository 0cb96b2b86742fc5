"""ANSI color codes with semantic meanings for the scheduler console."""

import platform
import os

# Initialize color support for Windows terminals
if platform.system() == "Windows":
    os.system("")  # Enables ANSI escape sequences in Windows 10/11 terminals


class Colors:
    """ANSI color codes with semantic naming."""

    RESET = "\033[0m"

    # Bright colors (base palette)
    BRIGHT_BLACK = "\033[90m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"

    # Text modifiers
    BOLD = "\033[1m"

    # ========== SEMANTIC COLORS - USE THESE FOR CONSISTENCY ==========

    PRIMARY = "\033[96m"  # Bright Cyan - Main brand/interactive
    ACCENT = "\033[95m"  # Bright Magenta - Special highlights

    # Status Colors
    SUCCESS = "\033[92m"  # Bright Green - Success, completion
    ERROR = "\033[91m"  # Bright Red - Errors, failures
    WARNING = "\033[93m"  # Bright Yellow - Warnings, cautions
    INFO = "\033[94m"  # Bright Blue - Information, hints

    # UI Component Colors
    PROMPT = "\033[96m"  # Bright Cyan - Input prompts
    HEADER = "\033[1m\033[96m"  # Bold Cyan - Section headers
    BORDER = "\033[90m"  # Gray - UI borders, decorative

    # Event Display Colors
    TITLE = "\033[97m"  # Bright White - Event title
    MUTED = "\033[90m"  # Gray - Less important text
