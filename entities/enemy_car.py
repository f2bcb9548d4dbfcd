"""Enemy car entity."""


class EnemyCar:
    def __init__(self, x: float, y: float, passed: bool = False) -> None:
        self.x = x
        self.y = y
        self.passed = passed  # Already counted toward the score

    def advance(self, speed: float) -> None:
        """Scroll the car toward the viewer."""
        self.y -= speed

    def __repr__(self) -> str:
        return f"EnemyCar(x={self.x}, y={self.y:.3f}, passed={self.passed})"
