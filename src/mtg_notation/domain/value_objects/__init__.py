"""Value objects for type lines, mana costs and color identities."""

from .color_identity import ColorIdentity
from .mana_cost import ManaCost, ManaCostSignature, cost_signature
from .mana_symbol import ManaSymbol, SymbolKind
from .type_line import EM_DASH, TypeLine

__all__ = [
    "ColorIdentity",
    "ManaCost",
    "ManaCostSignature",
    "ManaSymbol",
    "SymbolKind",
    "TypeLine",
    "EM_DASH",
    "cost_signature",
]
