# brickbreaker/vec2.py
# Vetor 2D inteiro usado para posições e tamanhos em células do terminal.
# Diferente de pygame.math.Vector2 (float), aqui tudo fica em inteiros:
# a grade de caracteres não tem meia célula.

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """Vetor imutável (x, y) em células."""
    x: int = 0
    y: int = 0

    @classmethod
    def xy(cls, x, y):
        return cls(int(x), int(y))

    @classmethod
    def zero(cls):
        return cls(0, 0)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        # Vec2 * Vec2 multiplica componente a componente; Vec2 * int escala
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def with_x(self, x):
        return Vec2(x, self.y)

    def with_y(self, y):
        return Vec2(self.x, y)

    def __iter__(self):
        # permite desempacotar: x, y = vec
        yield self.x
        yield self.y
