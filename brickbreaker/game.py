# brickbreaker/game.py
# Driver do jogo: o callback de frame que o App chama a cada frame.
# Ordem dentro de um frame:
#   1. entrada (Q encerra; H/L movem a raquete 1 célula por frame enquanto seguradas)
#   2. física: GameState.update() só nos frames pares (metade da taxa de frames)
#   3. fim de jogo: bola passou da base -> pede parada
#   4. desenho (sempre, mesmo no frame em que a parada foi pedida)

from brickbreaker.app import App
from brickbreaker.canvas import Pencil
from brickbreaker.game_state import GameState
from brickbreaker.keyboard import Key

# ---------- CONTROLES ----------
KEY_QUIT = Key.Q
KEY_LEFT = Key.H
KEY_RIGHT = Key.L
UPDATE_EVERY = 2    # física roda 1 vez a cada UPDATE_EVERY frames
# --------------------------------


class Game:
    def __init__(self, win_size):
        self.state = GameState(win_size)
        # depois de pedir parada, frames extras (se houver) só desenham
        self.finished = False

    # ----------------- events -----------------
    def handle_input(self, app_state):
        keyboard = app_state.keyboard()
        for event in keyboard.last_key_events():
            if event.pressed and event.key == KEY_QUIT:
                self.stop(app_state)

        # as duas teclas seguradas se anulam
        for key in keyboard.get_keys_down():
            if key == KEY_LEFT:
                self.state.move_paddle(-1)
            elif key == KEY_RIGHT:
                self.state.move_paddle(1)

    def stop(self, app_state, reason=None):
        if not self.finished and reason:
            print(reason)
        self.finished = True
        app_state.stop()

    # ----------------- frame -----------------
    def frame(self, app_state, canvas):
        if not self.finished:
            # o frame em que Q foi pressionado ainda roda até o fim
            self.handle_input(app_state)

            if app_state.step() % UPDATE_EVERY == 0:
                self.state.update()

            if self.state.is_over():
                remaining = len(self.state.remaining_bricks())
                self.stop(app_state, f"Fim de jogo! Tijolos restantes: {remaining}")

        self.state.render(Pencil(canvas))

    def run(self, app):
        app.run(self.frame)


def main():
    # App() falha com pygame.error se não houver display; o erro sobe sem tratamento
    app = App()
    game = Game(app.window_size())
    game.run(app)
