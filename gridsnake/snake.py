from .config import *

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}


class Snake:
    """Grid snake: body cells head first plus the current heading."""

    def __init__(self, body=None, heading=START_HEADING):
        self.reset(body, heading)

    def reset(self, body=None, heading=START_HEADING):
        """Reset snake to the starting body and heading."""
        if heading not in DIRECTIONS:
            raise ValueError(f"unknown heading {heading!r}")
        self.body = list(body if body is not None else START_BODY)
        self.heading = heading
        # direction of the last completed move; a turn may not reverse it either
        self.moved = heading

    @property
    def head(self):
        return self.body[0]

    @property
    def tail(self):
        return self.body[-1]

    def __len__(self):
        return len(self.body)

    def turn(self, heading):
        """Change heading unless it would reverse the snake.

        Returns True when the heading was accepted. Reversals are ignored,
        not errors.
        """
        if heading not in DIRECTIONS:
            raise ValueError(f"unknown heading {heading!r}")
        # stricter than a plain reversal check: a turn that would undo the
        # last completed move is refused even when it is 90 degrees off the
        # queued heading
        if OPPOSITES[heading] in (self.heading, self.moved):
            return False
        self.heading = heading
        return True

    def next_head(self):
        dx, dy = DIRECTIONS[self.heading]
        x, y = self.head
        return (x + dx, y + dy)

    def advance(self, keep_tail=False):
        """Move one cell along the heading. Returns the new head."""
        new_head = self.next_head()
        self.moved = self.heading
        self.body.insert(0, new_head)
        if not keep_tail:
            self.body.pop()
        return new_head

    def grow(self, amount=GROW_AMOUNT):
        """Append copies of the tail cell; they unfold on the next moves."""
        tail = self.tail
        self.body.extend([tail] * amount)

    def shrink(self, amount=SHRINK_AMOUNT, min_length=MIN_LENGTH):
        """Drop up to amount tail cells without going below min_length.

        Returns the number of cells removed.
        """
        removed = max(0, min(amount, len(self.body) - min_length))
        if removed:
            del self.body[-removed:]
        return removed

    def occupies(self, cell):
        return cell in self.body

    def check_self_collision(self):
        """Check if the head sits on any other body cell."""
        return self.head in self.body[1:]

    def check_wall_collision(self, width=GRID_WIDTH, height=GRID_HEIGHT):
        """Check if the head left the grid."""
        x, y = self.head
        return x < 0 or x >= width or y < 0 or y >= height
