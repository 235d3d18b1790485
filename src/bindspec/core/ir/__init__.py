"""
bindspec Intermediate Representation (IR) types.

Immutable declaration tree produced by the parser. Types are organized into
submodules and re-exported here.
"""

from .bind import MAX_ADDRESS, BindTable, normalize_address
from .classes import ClassSpec
from .location import SourceLocation
from .members import MemberSpec, ParamSpec
from .methods import MethodModifier, MethodSpec
from .module import BindingModule
from .platforms import Platform

__all__ = [
    # Platforms and binds
    "Platform",
    "BindTable",
    "MAX_ADDRESS",
    "normalize_address",
    # Declarations
    "ParamSpec",
    "MemberSpec",
    "MethodModifier",
    "MethodSpec",
    "ClassSpec",
    "BindingModule",
    # Locations
    "SourceLocation",
]
