"""
Module-level IR types for bindspec.

A BindingModule is the parser output for one source buffer.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .classes import ClassSpec


class BindingModule(BaseModel):
    """
    Parsed binding file.

    Attributes:
        name: Module name (file stem by default)
        file: Source file path
        classes: Class declarations in source order
    """

    name: str
    file: Path
    classes: tuple[ClassSpec, ...] = ()

    model_config = ConfigDict(frozen=True)

    def get_class(self, name: str) -> ClassSpec | None:
        """Get class by name."""
        for cls in self.classes:
            if cls.name == name:
                return cls
        return None
