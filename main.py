# main.py
import argparse
import logging
import random

import pygame

from game import Game
from ui import AppUI

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)


def create_icon():
    """Dark square with a 5x5 dot grid, one dot blue and one red."""
    size = 64
    icon = pygame.Surface((size, size), pygame.SRCALPHA)
    icon.fill((30, 30, 35, 255))

    step = size // 5
    for r in range(5):
        for c in range(5):
            col = (210, 210, 210)
            if (r, c) == (1, 1):
                col = (70, 120, 220)
            elif (r, c) == (3, 3):
                col = (220, 70, 70)
            center = (c * step + step // 2, r * step + step // 2)
            pygame.draw.circle(icon, col, center, step // 3)
    return icon


def parse_size(text: str):
    w, h = text.lower().split("x")
    return int(w), int(h)


def main():
    parser = argparse.ArgumentParser(description="Reverse Chess 5x5")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the blocked-cell choice")
    parser.add_argument("--size", type=parse_size, default=(800, 600),
                        help="Window size as WxH")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    pygame.init()
    screen = pygame.display.set_mode(args.size)
    pygame.display.set_caption("Reverse Chess 5x5")
    pygame.display.set_icon(create_icon())

    AppUI(screen, Game(random.Random(args.seed))).run()


if __name__ == "__main__":
    main()
