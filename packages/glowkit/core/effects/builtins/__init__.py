"""Builtin effect definitions.

Importing this module registers effect metadata, the device names
table and custom effects with the global effect registry.
"""

from glowkit.core.effects.builtins import (
    custom as _custom,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)
from glowkit.core.effects.builtins import (
    effects as _effects,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)
from glowkit.core.effects.builtins import (
    names as _names,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)

__all__: list[str] = []
