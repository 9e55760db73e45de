# brickbreaker/game_state.py
# Estado da partida e física em grade inteira:
# - GameState(win_size): monta campo, raquete, bola e a grade 4x5 de tijolos
# - update(): avança um tick (chamado a cada 2 frames pelo driver em game.py)
# - render(pencil): desenha borda, raquete, tijolos inteiros e bola
#
# Colisão é teste de ponto (posição da bola) contra retângulos com limites inclusivos,
# então a bola pode acertar dois tijolos vizinhos no mesmo tick (cada um inverte vy).

from brickbreaker.canvas import Color, RectCharset, Style
from brickbreaker.vec2 import Vec2

# ---------- PARÂMETROS ----------
PADDLE_WIDTH = 12
PADDLE_HEIGHT = 2

BRICK_WIDTH = 15
BRICK_HEIGHT = 2
BRICK_ROWS = 4
BRICK_COLUMNS = 5
BRICK_GAP = 5       # espaço horizontal entre colunas de tijolos
MARGIN = 5          # distância da borda até a grade / da base até a raquete
BALL_OFFSET = 5     # bola começa essa quantidade de linhas acima da raquete

BORDER_COLOR = Color.default()
PADDLE_COLOR = Color.xterm(3)
BRICK_COLOR = Color.xterm(1)
BALL_COLOR = Color.xterm(2)
BALL_CHAR = "o"
# ---------------------------------


class Brick:
    def __init__(self, position, size=Vec2(BRICK_WIDTH, BRICK_HEIGHT)):
        self.position = position  # canto superior esquerdo
        self.size = size
        self.broken = False

    def contains(self, point):
        return contains(self.position, self.size, point)

    def __repr__(self):
        return f"Brick({self.position}, broken={self.broken})"


def contains(position, size, point):
    """Teste de ponto com limites inclusivos nos quatro lados (x em [px, px+w], y em [py, py+h])."""
    return (position.x <= point.x <= position.x + size.x
            and position.y <= point.y <= position.y + size.y)


def playfield_width():
    return MARGIN + (BRICK_WIDTH + BRICK_GAP) * BRICK_COLUMNS


def make_bricks():
    """Grade fixa BRICK_ROWS x BRICK_COLUMNS a partir de (MARGIN, MARGIN), linha por linha."""
    bricks = []
    for row in range(BRICK_ROWS):
        for col in range(BRICK_COLUMNS):
            x = MARGIN + (BRICK_WIDTH + BRICK_GAP) * col
            y = MARGIN + BRICK_HEIGHT * row
            bricks.append(Brick(Vec2.xy(x, y)))
    return bricks


class GameState:
    def __init__(self, win_size):
        self.dimensions = Vec2.xy(playfield_width(), win_size.y)

        self.paddle_position = Vec2.xy(MARGIN, win_size.y - MARGIN)
        self.paddle_size = Vec2.xy(PADDLE_WIDTH, PADDLE_HEIGHT)

        self.ball_position = self.paddle_position - Vec2.xy(0, BALL_OFFSET)
        self.ball_speed = Vec2.xy(1, -1)

        self.bricks = make_bricks()

    # ----------------- input -----------------
    def move_paddle(self, dx):
        # sem limite aqui: o clamp acontece no próximo update()
        self.paddle_position = self.paddle_position + Vec2.xy(dx, 0)

    # ----------------- física -----------------
    def bounce_x(self):
        self.ball_speed = Vec2.xy(-self.ball_speed.x, self.ball_speed.y)

    def bounce_y(self):
        self.ball_speed = Vec2.xy(self.ball_speed.x, -self.ball_speed.y)

    def update(self):
        self.ball_position = self.ball_position + self.ball_speed

        # mantém a raquete dentro do campo (o clamp da esquerda vem por último e prevalece)
        width = self.dimensions.x
        if self.paddle_position.x + self.paddle_size.x >= width - 1:
            self.paddle_position = self.paddle_position.with_x(width - self.paddle_size.x - 1)
        if self.paddle_position.x <= 1:
            self.paddle_position = self.paddle_position.with_x(1)

        # paredes laterais e teto; sem parede embaixo
        if self.ball_position.x >= width:
            self.bounce_x()
        if self.ball_position.x <= 1:
            self.bounce_x()
        if self.ball_position.y <= 1:
            self.bounce_y()

        for brick in self.bricks:
            if not brick.broken and brick.contains(self.ball_position):
                brick.broken = True
                self.bounce_y()

        if contains(self.paddle_position, self.paddle_size, self.ball_position):
            self.bounce_y()

    def is_over(self):
        """A bola passou da base do campo."""
        return self.ball_position.y >= self.dimensions.y

    def remaining_bricks(self):
        return [b for b in self.bricks if not b.broken]

    # ----------------- render -----------------
    def render(self, pencil):
        pencil.set_origin(Vec2.zero()).set_foreground(BORDER_COLOR).draw_rect(
            RectCharset.double_lines(), Vec2.zero(), self.dimensions)

        pencil.set_foreground(PADDLE_COLOR).draw_rect(
            RectCharset.simple_round_lines(), self.paddle_position, self.paddle_size)

        for brick in self.bricks:
            if not brick.broken:
                pencil.set_foreground(BRICK_COLOR).draw_rect(
                    RectCharset.simple_lines(), brick.position, brick.size)

        pencil.set_foreground(BALL_COLOR).set_style(Style.BOLD).draw_char(
            BALL_CHAR, self.ball_position)
        # volta ao estilo normal para quem desenhar depois
        pencil.set_style(Style.PLAIN)
