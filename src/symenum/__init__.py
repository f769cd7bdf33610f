"""symenum: 整数コードで保存する属性にシンボル名の列挙を与える."""

from symenum.attribute import EnumAttribute
from symenum.exceptions import ConfigurationError, SymenumError, UnknownCodeError, ValidationError
from symenum.inflector import pluralize
from symenum.mapping import EnumMapping
from symenum.model import Model
from symenum.options import EnumOptions
from symenum.protocol import AttributeStore, ScopeRegistry
from symenum.registrar import register, register_config, symbolic_enum, symbolic_enums

__version__ = "0.1.0"

__all__ = [
    "AttributeStore",
    "ConfigurationError",
    "EnumAttribute",
    "EnumMapping",
    "EnumOptions",
    "Model",
    "ScopeRegistry",
    "SymenumError",
    "UnknownCodeError",
    "ValidationError",
    "pluralize",
    "register",
    "register_config",
    "symbolic_enum",
    "symbolic_enums",
]
