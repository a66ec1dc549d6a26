"""Builtin catalog content.

Importing this module registers every static node source with the
global source registry. Import order is build order.
"""

from glowkit.core.library.builtins import (  # isort: skip
    sports as _sports,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)
from glowkit.core.library.builtins import (  # isort: skip
    holidays as _holidays,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)
from glowkit.core.library.builtins import (  # isort: skip
    seasons as _seasons,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)
from glowkit.core.library.builtins import (  # isort: skip
    parties as _parties,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)
from glowkit.core.library.builtins import (  # isort: skip
    movies as _movies,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)
from glowkit.core.library.builtins import (  # isort: skip
    nature as _nature,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)
from glowkit.core.library.builtins import (  # isort: skip
    architectural as _architectural,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)
from glowkit.core.library.builtins import (  # isort: skip
    security as _security,  # pyright: ignore[reportUnusedImport]  # noqa: F401
)

__all__: list[str] = []
