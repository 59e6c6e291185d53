"""glide-tween - Smooth value interpolation over frame time."""
from __future__ import annotations

from glide_tween.components import Parallel, Tween
from glide_tween.easing import EASINGS, bezier, in_out, resolve

__all__ = ["Tween", "Parallel", "EASINGS", "bezier", "in_out", "resolve"]
