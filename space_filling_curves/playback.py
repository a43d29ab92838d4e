import math

from .utils import Point


class PathPlayback:
    """
    Step-by-step cursor over a generated path, for progressive display.
    Holds the only mutable state in the package; the curves themselves stay pure.
    """

    def __init__(self, path):
        if len(path) == 0:
            raise ValueError("Cannot play back an empty path")
        self.path = path
        self.current_step = 0

    def step(self) -> bool:
        """Advances one point. Returns False once the last point is reached."""
        if self.current_step < len(self.path) - 1:
            self.current_step += 1
            return True
        return False

    def reset(self):
        self.current_step = 0

    @property
    def finished(self) -> bool:
        return self.current_step == len(self.path) - 1

    def progress(self) -> int:
        """Percent of the path walked, rounded to an integer."""
        if len(self.path) == 1:
            return 100
        # Halves round up.
        return math.floor(self.current_step / (len(self.path) - 1) * 100 + 0.5)

    def current_point(self) -> Point:
        x, y = self.path[self.current_step]
        return Point(int(x), int(y))

    def current_coord(self) -> str:
        x, y = self.current_point()
        return f"({x}, {y})"

    def visible(self):
        return self.path[:self.current_step + 1]

    def drawn_until(self, animate: bool = True) -> int:
        """Last step drawn: the current step while animating, else the whole path."""
        return self.current_step if animate else len(self.path) - 1

    def markers(self, animate: bool = True) -> dict:
        """
        Steps that get the start, current and end markers, or None when a
        marker is not drawn. The current marker shows on every step past the
        first while animating, the last one included.
        """
        end_step = self.drawn_until(animate)
        return {
            "start": 0,
            "current": end_step if animate and end_step > 0 else None,
            "end": end_step if end_step == len(self.path) - 1 else None,
        }
