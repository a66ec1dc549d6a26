"""Builtin security and alert palettes."""

from glowkit.core.library.builtins._helpers import named_palette as _p
from glowkit.core.library.builtins._helpers import palette_nodes
from glowkit.core.library.categories import CAT_SECURITY
from glowkit.core.library.models import LibraryNode, NamedPalette
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY

SECURITY: tuple[NamedPalette, ...] = (
    _p("security_bright", "Security Bright", "Maximum brightness white", ("#FFFFFF",), (0,), speed=0, intensity=255),
    _p("security_alert_red", "Alert Red", "Emergency red flash", ("#FF0000", "#000000"), (1, 23), speed=200, intensity=255),
    _p("security_police", "Police Lights", "Red and blue flash", ("#FF0000", "#0000FF"), (1, 12), speed=180, intensity=255),
    _p("security_amber", "Caution Amber", "Warning amber", ("#FFBF00", "#000000"), (1, 2), speed=150, intensity=255),
    _p("security_motion", "Motion Detected", "Bright white on motion", ("#FFFFFF", "#FFD700"), (0,), speed=0, intensity=255),
)


def build_security_nodes() -> list[LibraryNode]:
    return palette_nodes(CAT_SECURITY, SECURITY)


# Auto-register on import
NODE_SOURCE_REGISTRY.register("security", CAT_SECURITY, build_security_nodes, "Security and alert palettes")
