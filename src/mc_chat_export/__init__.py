"""Extract chat messages from game logs and render them as text, CSV or images."""

from __future__ import annotations

__version__ = "0.1.0"
