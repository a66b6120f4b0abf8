"""Grid-based snake game.

The game logic (``engine``, ``snake``, ``food``, ``achievements``) has no
pygame dependency. The window is exported lazily so external code can do::

	from gridsnake import SnakeGame

without importing pygame at package import time.
"""

__version__ = "0.2"

__all__ = ["SnakeGame"]

def __getattr__(name: str):
	if name == "SnakeGame":
		from .app import SnakeGame

		return SnakeGame
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
