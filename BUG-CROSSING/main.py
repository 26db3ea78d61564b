"""
Bug Crossing - get across the road without touching a bug.

    pip install -e .
    python BUG-CROSSING/main.py        (or: bug-crossing)

Files:
  main.py        - entry point
  config.py      - constants
  entities.py    - Body, Enemy, Player
  difficulty.py  - level → spawn gap
  engine.py      - game loop, state, commands
  world.py       - background board
  resources.py   - image loading / placeholder art
  renderer.py    - drawing surface
  ui.py          - settings sidebar, win panel
  game.py        - pygame app
"""
import logging

from config import LOG_LEVEL, LOG_FORMAT


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    from game import Game
    Game().run()


if __name__ == "__main__":
    main()
