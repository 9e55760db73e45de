# Ponto de entrada do jogo
# Mantemos esse arquivo mínimo para separar inicialização da lógica do jogo em brickbreaker/game.py.

from brickbreaker.game import main

if __name__ == "__main__":
    # main() abre a janela (App) e roda o loop até Q ou até a bola cair.
    # Isso permite importar Game/GameState em testes sem disparar o loop automaticamente.
    main()
