"""Edit module - editor session and the surface it draws on."""

from mu_logo.edit.session import EditorSession
from mu_logo.edit.surface import NullSurface, RenderSurface

__all__ = [
    "EditorSession",
    "RenderSurface",
    "NullSurface",
]
