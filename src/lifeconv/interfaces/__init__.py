"""User-facing interfaces (terminal rendering)."""

from __future__ import annotations
