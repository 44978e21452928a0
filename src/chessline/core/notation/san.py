"""SAN (Standard Algebraic Notation) parsing and conversion."""

from __future__ import annotations

import chess

from chessline.core.notation.models import SanIntent

_KINGSIDE = "O-O"
_QUEENSIDE = "O-O-O"
_CASTLING_ALIASES: dict[str, str] = {
    "O-O": _KINGSIDE,
    "0-0": _KINGSIDE,
    "O-O-O": _QUEENSIDE,
    "0-0-0": _QUEENSIDE,
}


def parse_san(text: str) -> SanIntent:
    """Parse SAN syntax into a :class:`SanIntent`.

    Only the shape of the string is checked; whether the move is legal
    is decided later by :func:`match_move`.
    """
    if not isinstance(text, str):
        raise ValueError(f"Invalid SAN: {text!r}")

    clean = text.strip().rstrip("+#!?")

    castling = _CASTLING_ALIASES.get(clean)
    if castling is not None:
        return SanIntent(text=text, piece_type=chess.KING, castling=castling)

    match = chess.SAN_REGEX.match(clean)
    if match is None:
        raise ValueError(f"Invalid SAN: {text!r}")

    piece_char, file_char, rank_char, to_name, promo = match.groups()

    piece_type = (
        chess.PIECE_SYMBOLS.index(piece_char.lower()) if piece_char else chess.PAWN
    )

    promotion: chess.PieceType | None = None
    if promo:
        promotion = chess.PIECE_SYMBOLS.index(promo[-1].lower())
        if piece_type != chess.PAWN or promotion in (chess.PAWN, chess.KING):
            raise ValueError(f"Invalid SAN promotion: {text!r}")

    return SanIntent(
        text=text,
        piece_type=piece_type,
        to_square=chess.parse_square(to_name),
        from_file=chess.FILE_NAMES.index(file_char) if file_char else None,
        from_rank=int(rank_char) - 1 if rank_char else None,
        promotion=promotion,
    )


def match_move(board: chess.Board, intent: SanIntent) -> chess.Move:
    """Return the single legal move on *board* described by *intent*."""
    if intent.is_castling:
        for m in board.legal_moves:
            if intent.castling == _KINGSIDE and board.is_kingside_castling(m):
                return m
            if intent.castling == _QUEENSIDE and board.is_queenside_castling(m):
                return m
        raise ValueError(f"Illegal move: {intent.text}")

    candidates: list[chess.Move] = []
    for m in board.legal_moves:
        if board.piece_type_at(m.from_square) != intent.piece_type:
            continue
        if m.to_square != intent.to_square:
            continue
        if m.promotion != intent.promotion:
            continue
        from_file = chess.square_file(m.from_square)
        if intent.from_file is not None and from_file != intent.from_file:
            continue
        # A pawn SAN without a source file is a push along the target file.
        if (
            intent.piece_type == chess.PAWN
            and intent.from_file is None
            and from_file != chess.square_file(m.to_square)
        ):
            continue
        from_rank = chess.square_rank(m.from_square)
        if intent.from_rank is not None and from_rank != intent.from_rank:
            continue
        candidates.append(m)

    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise ValueError(f"Illegal move: {intent.text}")
    raise ValueError(f"Ambiguous move: {intent.text} -> {candidates}")


def move_to_san(board: chess.Board, move: chess.Move) -> str:
    """Convert a legal *move* to SAN given the *board* before the move."""
    return board.san(move)


def move_to_uci(move: chess.Move) -> str:
    """UCI long-algebraic notation."""
    return move.uci()
