"""Integrations subpackage for validated.

Contains the pytest plugin, auto-discovered through the ``pytest11`` entry
point declared in pyproject.toml.  It is not imported here so that importing
``validated`` never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
