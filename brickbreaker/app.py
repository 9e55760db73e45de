# brickbreaker/app.py
# "Terminal" em janela pygame: uma grade de caracteres desenhada com fonte monoespaçada.
# - App abre a janela, controla o clock e roda o loop principal
# - a cada frame: lê eventos -> limpa o Canvas -> chama frame(state, canvas) -> desenha o Canvas
# - State é o que o frame enxerga: teclado, contador de frames (step) e pedido de parada
#
# O loop só verifica a parada ENTRE frames: o frame em andamento sempre termina (inclusive o desenho).

import pygame

from brickbreaker.canvas import Canvas, Style
from brickbreaker.keyboard import Keyboard
from brickbreaker.vec2 import Vec2

# ---------- PARÂMETROS ----------
FPS = 30
WINDOW_CELLS = (110, 36)          # tamanho da janela em células (colunas, linhas)
WINDOW_TITLE = "Brick Breaker"
FONT_NAME = "dejavusansmono,liberationmono,couriernew,monospace"
FONT_SIZE = 18
BACKGROUND_COLOR = (0, 0, 0)
DEFAULT_FOREGROUND = (220, 220, 220)
# ---------------------------------


def load_fonts(name=FONT_NAME, size=FONT_SIZE):
    """Retorna (fonte normal, fonte negrito). Sem fonte monoespaçada no sistema, usa a padrão do pygame."""
    path = None
    try:
        path = pygame.font.match_font(name)
    except Exception as e:
        print(f"Aviso: falha ao procurar fonte '{name}': {e}")
    if path is None:
        print(f"Aviso: fonte monoespaçada '{name}' não encontrada; usando fonte padrão.")

    regular = pygame.font.Font(path, size)
    bold = pygame.font.Font(path, size)
    bold.set_bold(True)
    return regular, bold


class State:
    """Estado da sessão visto pelo callback de frame."""
    def __init__(self, keyboard=None):
        self._keyboard = keyboard if keyboard is not None else Keyboard()
        self._step = 0
        self.stopped = False

    def keyboard(self):
        return self._keyboard

    def step(self):
        # 0 no primeiro frame, +1 depois de cada frame
        return self._step

    def stop(self):
        self.stopped = True

    def advance(self):
        self._step += 1


class App:
    def __init__(self, size=None, fps=FPS):
        pygame.init()
        self.fps = fps
        self.font, self.bold_font = load_fonts()

        # dimensão da célula a partir da fonte (largura de um caractere, altura de linha)
        self.cell_w = max(1, self.font.size("M")[0])
        self.cell_h = max(1, self.font.get_linesize())

        cells = Vec2.xy(*(size or WINDOW_CELLS))
        # pygame.error aqui (sem display, por ex.) é fatal e sobe para quem chamou
        self.screen = pygame.display.set_mode((cells.x * self.cell_w, cells.y * self.cell_h))
        pygame.display.set_caption(WINDOW_TITLE)

        self.clock = pygame.time.Clock()
        self.canvas = Canvas(cells)
        self.state = State()

        # cache de glifos renderizados: (char, rgb, negrito) -> Surface
        self._glyphs = {}

    def window_size(self):
        return self.canvas.size

    # ----------------- main loop -----------------
    def run(self, frame):
        try:
            while not self.state.stopped:
                self.clock.tick(self.fps)
                self.handle_events()

                self.canvas.clear()
                frame(self.state, self.canvas)
                self.draw()

                self.state.advance()
        finally:
            self.quit()

    # ----------------- events -----------------
    def handle_events(self):
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                self.state.stop()
            elif event.type == pygame.WINDOWFOCUSLOST:
                # sem foco o pygame não entrega KEYUP; evita tecla "presa"
                self.state.keyboard().release_all()
        self.state.keyboard().consume(events)

    # ----------------- draw -----------------
    def glyph(self, value, cell):
        rgb = cell.foreground.rgb(DEFAULT_FOREGROUND) if cell.foreground is not None else DEFAULT_FOREGROUND
        bold = cell.style == Style.BOLD
        key = (value, rgb, bold)
        surf = self._glyphs.get(key)
        if surf is None:
            font = self.bold_font if bold else self.font
            surf = font.render(value, True, rgb)
            self._glyphs[key] = surf
        return surf

    def draw(self):
        self.screen.fill(BACKGROUND_COLOR)
        for y, row in self.canvas.rows():
            for x, cell in enumerate(row):
                px, py = x * self.cell_w, y * self.cell_h
                if cell.background is not None and cell.background.index is not None:
                    self.screen.fill(cell.background.rgb(), (px, py, self.cell_w, self.cell_h))
                if cell.value == " ":
                    continue
                self.screen.blit(self.glyph(cell.value, cell), (px, py))
        pygame.display.flip()

    def quit(self):
        pygame.quit()
