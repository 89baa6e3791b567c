"""respect core: value model, diff recorder, sequence matcher and comparator.

Everything under this package is pure and synchronous. It has **no**
dependency on typer, PyYAML, pytest, or any other outer layer.
"""
from __future__ import annotations
