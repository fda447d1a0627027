"""
Module: screens.overlays

Purpose:
    Transient feedback shown over a screen: short toasts and modal alerts.

Key Classes:
    - Toast: Short message auto-dismissed after `duration` seconds
    - Alert: Titled modal message with icon and accent colour

Used By:
    - screens.collage, screens.compress, screens.brightness
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TOAST_DURATION = 1.5


@dataclass(frozen=True)
class Toast:
    """
    Short auto-dismissing message.

    Attributes:
        message: Text to display
        duration: Seconds before the toast hides itself
    """

    message: str
    duration: float = DEFAULT_TOAST_DURATION


@dataclass(frozen=True)
class Alert:
    """
    Modal alert dismissed by the user.

    Attributes:
        title: Bold heading ("Saved!")
        message: Body text
        icon: Symbol name shown above the title
        color: Accent colour name
    """

    title: str
    message: str
    icon: str = "info.circle.fill"
    color: str = "blue"
