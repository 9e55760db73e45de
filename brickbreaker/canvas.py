# brickbreaker/canvas.py
# Superfície de desenho em grade de caracteres:
# - Canvas: matriz de células (caractere + cor de frente/fundo + estilo)
# - Pencil: "lápis" com estado (origem, cores, estilo) que escreve no Canvas
# - RectCharset: conjuntos de caracteres para contornos (linha dupla, simples, arredondada)
#
# Nada aqui depende do pygame; o App (app.py) só lê as células para
# desenhar a janela a cada frame.

from dataclasses import dataclass
from enum import Enum

from brickbreaker.vec2 import Vec2

# 16 cores básicas do xterm (0..15)
XTERM_BASE = [
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
    (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
]
XTERM_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


class Color:
    """Cor indexada na paleta xterm-256 (ou None = padrão do terminal)."""
    def __init__(self, index=None):
        if index is not None and not 0 <= index <= 255:
            raise ValueError(f"índice xterm fora da paleta: {index}")
        self.index = index

    @classmethod
    def xterm(cls, index):
        return cls(index)

    @classmethod
    def default(cls):
        return cls(None)

    def rgb(self, fallback=(255, 255, 255)):
        """Converte o índice xterm para (r, g, b)."""
        if self.index is None:
            return fallback
        i = self.index
        if i < 16:
            return XTERM_BASE[i]
        if i < 232:
            i -= 16
            return (XTERM_CUBE_LEVELS[i // 36],
                    XTERM_CUBE_LEVELS[(i // 6) % 6],
                    XTERM_CUBE_LEVELS[i % 6])
        level = 8 + (i - 232) * 10
        return (level, level, level)

    def __eq__(self, other):
        return isinstance(other, Color) and other.index == self.index

    def __hash__(self):
        return hash(self.index)

    def __repr__(self):
        return f"Color({self.index})"


class Style(Enum):
    PLAIN = "plain"
    BOLD = "bold"


@dataclass(frozen=True)
class RectCharset:
    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

    @classmethod
    def from_string(cls, chars):
        # ordem: top, bottom, left, right, top_left, top_right, bottom_left, bottom_right
        if len(chars) != 8:
            raise ValueError("RectCharset precisa de exatamente 8 caracteres")
        return cls(*chars)

    @classmethod
    def double_lines(cls):
        return cls.from_string("══║║╔╗╚╝")

    @classmethod
    def simple_lines(cls):
        return cls.from_string("──││┌┐└┘")

    @classmethod
    def simple_round_lines(cls):
        return cls.from_string("──││╭╮╰╯")


@dataclass
class Cell:
    value: str = " "
    foreground: Color = None
    background: Color = None
    style: Style = Style.PLAIN


class Canvas:
    """Grade de células width x height. Escritas fora da grade são ignoradas."""
    def __init__(self, size):
        self.size = size
        self._cells = [[Cell() for _ in range(size.x)] for _ in range(size.y)]

    def contains(self, pos):
        return 0 <= pos.x < self.size.x and 0 <= pos.y < self.size.y

    def cell(self, pos):
        if not self.contains(pos):
            return None
        return self._cells[pos.y][pos.x]

    def set_cell(self, pos, cell):
        if self.contains(pos):
            self._cells[pos.y][pos.x] = cell

    def clear(self):
        for row in self._cells:
            for x in range(len(row)):
                row[x] = Cell()

    def rows(self):
        """Itera (y, lista de células); usado pelo App para desenhar."""
        for y, row in enumerate(self._cells):
            yield y, row

    def text_at(self, y):
        """Linha y como string (útil em testes e depuração)."""
        return "".join(cell.value for cell in self._cells[y])


class Pencil:
    """
    Escreve no Canvas usando estado persistente: origem, cor de frente,
    cor de fundo e estilo ficam valendo até serem trocados.
    Os setters retornam o próprio Pencil para permitir encadear chamadas.
    """
    def __init__(self, canvas):
        self.canvas = canvas
        self.origin = Vec2.zero()
        self.foreground = Color.default()
        self.background = Color.default()
        self.style = Style.PLAIN

    def set_origin(self, origin):
        self.origin = origin
        return self

    def set_foreground(self, color):
        self.foreground = color
        return self

    def set_background(self, color):
        self.background = color
        return self

    def set_style(self, style):
        self.style = style
        return self

    def draw_char(self, value, pos):
        self.canvas.set_cell(self.origin + pos,
                             Cell(value, self.foreground, self.background, self.style))
        return self

    def draw_text(self, text, pos):
        for i, ch in enumerate(text):
            self.draw_char(ch, pos + Vec2.xy(i, 0))
        return self

    def draw_hline(self, value, pos, length):
        for i in range(length):
            self.draw_char(value, pos + Vec2.xy(i, 0))
        return self

    def draw_vline(self, value, pos, length):
        for i in range(length):
            self.draw_char(value, pos + Vec2.xy(0, i))
        return self

    def draw_rect(self, charset, pos, size):
        """Contorno ocupando size.x x size.y células; cantos em pos e pos + size - 1."""
        if size.x <= 0 or size.y <= 0:
            return self
        right = pos.x + size.x - 1
        bottom = pos.y + size.y - 1

        self.draw_hline(charset.top, Vec2.xy(pos.x + 1, pos.y), size.x - 2)
        self.draw_hline(charset.bottom, Vec2.xy(pos.x + 1, bottom), size.x - 2)
        self.draw_vline(charset.left, Vec2.xy(pos.x, pos.y + 1), size.y - 2)
        self.draw_vline(charset.right, Vec2.xy(right, pos.y + 1), size.y - 2)

        self.draw_char(charset.top_left, Vec2.xy(pos.x, pos.y))
        self.draw_char(charset.top_right, Vec2.xy(right, pos.y))
        self.draw_char(charset.bottom_left, Vec2.xy(pos.x, bottom))
        self.draw_char(charset.bottom_right, Vec2.xy(right, bottom))
        return self
