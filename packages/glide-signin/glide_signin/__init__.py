"""glide-signin - The animated sign-in screen controller."""
from __future__ import annotations

from glide_signin.config import ScreenConfig
from glide_signin.messages import REJECTION_MESSAGES, SUCCESS_TITLE, describe
from glide_signin.screen import DecorFrame, Notifier, ScreenDisposedError, SigninScreen

__all__ = [
    "SigninScreen",
    "ScreenConfig",
    "ScreenDisposedError",
    "DecorFrame",
    "Notifier",
    "REJECTION_MESSAGES",
    "SUCCESS_TITLE",
    "describe",
]
