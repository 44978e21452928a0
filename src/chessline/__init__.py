"""chessline — memoized trees of chess lines built from declarations."""

from chessline.config import BuilderOptions
from chessline.lines import BuilderError, LineBuilder, address

__all__ = ["BuilderError", "BuilderOptions", "LineBuilder", "address"]
