"""Line building: declarations, lazy resolution and inheritance lookup."""

from chessline.lines.addressing import LineId, MoveIndex, SlotAddress, address
from chessline.lines.builder import LineBuilder
from chessline.lines.defaults import DefaultMap, list_map
from chessline.lines.interfaces import RulesBackend
from chessline.lines.models import (
    BuilderError,
    MoveDeclaration,
    ResolvedMove,
    ResolvedPosition,
    RootDeclaration,
)
from chessline.lines.store import DeclarationStore

__all__ = [
    # Addressing
    "LineId",
    "MoveIndex",
    "SlotAddress",
    "address",
    # Containers
    "DefaultMap",
    "list_map",
    # Declarations / results
    "BuilderError",
    "MoveDeclaration",
    "ResolvedMove",
    "ResolvedPosition",
    "RootDeclaration",
    # Services
    "DeclarationStore",
    "LineBuilder",
    "RulesBackend",
]
