# brickbreaker/keyboard.py
# Estado do teclado por frame, alimentado pelos eventos do pygame:
# - last_key_events(): transições (pressionou/soltou) deste frame, em ordem (edge-triggered)
# - get_keys_down(): teclas seguradas agora (level-triggered, vale todo frame enquanto segurar)
#
# Teclas que não estão em Key são ignoradas.

import string
from dataclasses import dataclass
from enum import Enum

import pygame

Key = Enum(
    "Key",
    list(string.ascii_uppercase)
    + ["LEFT", "RIGHT", "UP", "DOWN", "ESCAPE", "SPACE", "ENTER"],
)

PYGAME_KEYS = {getattr(pygame, f"K_{c.lower()}"): Key[c] for c in string.ascii_uppercase}
PYGAME_KEYS.update({
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_RETURN: Key.ENTER,
})


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    pressed: bool  # True = pressionada, False = solta

    @classmethod
    def press(cls, key):
        return cls(key, True)

    @classmethod
    def release(cls, key):
        return cls(key, False)


class Keyboard:
    def __init__(self):
        self._events = []
        self._down = set()

    def consume(self, events):
        """
        Processa os eventos pygame de um frame.
        Descarta as transições do frame anterior; as teclas seguradas continuam.
        """
        self._events = []
        for event in events:
            if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
                continue
            key = PYGAME_KEYS.get(event.key)
            if key is None:
                continue
            if event.type == pygame.KEYDOWN:
                self._events.append(KeyEvent.press(key))
                self._down.add(key)
            else:
                self._events.append(KeyEvent.release(key))
                self._down.discard(key)

    def last_key_events(self):
        return list(self._events)

    def get_keys_down(self):
        # ordem estável (ordem de declaração de Key) para o jogo ser determinístico
        return [key for key in Key if key in self._down]

    def is_down(self, key):
        return key in self._down

    def release_all(self):
        # usado quando a janela perde o foco: o pygame não manda KEYUP nesse caso
        self._down.clear()
