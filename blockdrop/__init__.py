"""A falling-block puzzle game: board and piece logic, leaderboard storage and a pygame front end."""

__version__ = "0.1.0"