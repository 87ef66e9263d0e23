"""Connect Four with a bitboard engine, a negamax computer opponent and a pygame front end."""

__version__ = "0.1.0"