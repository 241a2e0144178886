"""
Lightweight configuration validation to catch bad stroke settings before rendering.
"""

import numbers
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_config(config: Any) -> None:
    """
    Validate the stroke and logging sections of a loaded configuration.
    Raises ValueError on invalid values.
    """
    pen_width = config.get("stroke.penWidth")
    pen_colour = config.get("stroke.penColour")
    title = config.get("stroke.title")
    level = config.get("logging.level", "INFO")

    if pen_width is not None:
        if isinstance(pen_width, bool) or not isinstance(pen_width, numbers.Real):
            raise ValueError(f"stroke.penWidth must be a number, got {pen_width!r}.")
        if pen_width <= 0:
            raise ValueError(f"stroke.penWidth must be positive, got {pen_width}.")

    if pen_colour is not None and not isinstance(pen_colour, str):
        raise ValueError(
            f"stroke.penColour must be a colour string such as '#145394', got {pen_colour!r}."
        )

    if title is not None and not isinstance(title, str):
        raise ValueError(f"stroke.title must be a string, got {title!r}.")

    if str(level).upper() not in LOG_LEVELS:
        raise ValueError(
            f"Unsupported logging.level '{level}'. Use one of {', '.join(LOG_LEVELS)}."
        )
