# ui.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import pygame
import pygame_gui

from board import BLOCKED, Player, Pos
from game import Game


@dataclass
class Theme:
    bg: Tuple[int, int, int] = (30, 30, 35)
    panel: Tuple[int, int, int] = (24, 24, 28)
    panel_border: Tuple[int, int, int] = (60, 60, 70)

    empty: Tuple[int, int, int] = (210, 210, 210)
    blocked: Tuple[int, int, int] = (55, 55, 62)
    grid: Tuple[int, int, int] = (70, 70, 80)

    blue: Tuple[int, int, int] = (70, 120, 220)
    red: Tuple[int, int, int] = (220, 70, 70)
    highlight: Tuple[int, int, int] = (250, 210, 70)

    text: Tuple[int, int, int] = (235, 235, 235)
    muted: Tuple[int, int, int] = (180, 180, 190)


class AppUI:
    HUD_H = 140
    CELL = 72
    GAP = 6

    def __init__(self, screen: pygame.Surface, game: Optional[Game] = None):
        self.screen = screen
        self.clock = pygame.time.Clock()

        self.manager = pygame_gui.UIManager(screen.get_size())
        self.ui_elems = []

        self.font = pygame.font.SysFont("consolas", 18)
        self.big_font = pygame.font.SysFont("consolas", 30)
        self.cell_font = pygame.font.SysFont("consolas", 28, bold=True)

        self.theme = Theme()

        self.state = "menu"  # menu/how/game
        self.game = game or Game()

        self.origin = (40, self.HUD_H + 30)
        self.cells = []  # (r, c, rect)

        self._build_cells()
        self._build_menu()

    # ---------- UI build ----------
    def _clear_ui(self):
        for el in self.ui_elems:
            el.kill()
        self.ui_elems.clear()

    def _button(self, rect, text, oid):
        self.ui_elems.append(pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect(rect),
            text=text,
            manager=self.manager,
            object_id=oid,
        ))

    def _build_menu(self):
        self._clear_ui()
        w, _ = self.screen.get_size()
        self._button(((w // 2 - 140, 190), (280, 55)), "Play", "#btn_play")
        self._button(((w // 2 - 140, 260), (280, 55)), "How to play", "#btn_how")
        self._button(((w // 2 - 140, 330), (280, 55)), "Exit", "#btn_exit")

    def _build_how(self):
        self._clear_ui()
        self._button(((20, 20), (120, 40)), "Back", "#btn_back")

    def _build_game(self):
        self._clear_ui()

        w, _ = self.screen.get_size()
        pad = 20
        btn_w, btn_h = 160, 40
        x = w - pad - btn_w
        gap = 10

        for i, (text, oid) in enumerate([
            ("Menu", "#btn_menu"),
            ("New game", "#btn_new"),
            ("Reset", "#btn_reset"),
            ("Undo", "#btn_undo"),
        ]):
            self._button(((x, self.HUD_H + 30 + i * (btn_h + gap)), (btn_w, btn_h)), text, oid)

    # ---------- geometry ----------
    def _build_cells(self):
        self.cells.clear()
        n = self.game.state.board.size
        ox, oy = self.origin
        step = self.CELL + self.GAP
        for r in range(n):
            for c in range(n):
                rect = pygame.Rect(ox + c * step, oy + r * step, self.CELL, self.CELL)
                self.cells.append((r, c, rect))

    def _pick_cell(self, pos) -> Optional[Pos]:
        for r, c, rect in self.cells:
            if rect.collidepoint(pos):
                return (r, c)
        return None

    # ---------- main loop ----------
    def run(self):
        running = True
        while running:
            dt = self.clock.tick(60) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                self.manager.process_events(event)

                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if self.state == "game" and not self.game.state.game_over:
                        cell = self._pick_cell(event.pos)
                        if cell is not None:
                            self.game.place(cell)

                if event.type == pygame_gui.UI_BUTTON_PRESSED:
                    oid = event.ui_object_id

                    if oid.endswith("#btn_exit"):
                        running = False

                    elif oid.endswith("#btn_play"):
                        self.state = "game"
                        self._build_game()
                        self.game.new_game()

                    elif oid.endswith("#btn_how"):
                        self.state = "how"
                        self._build_how()

                    elif oid.endswith("#btn_back") or oid.endswith("#btn_menu"):
                        self.state = "menu"
                        self._build_menu()

                    elif oid.endswith("#btn_new"):
                        self.game.new_game()

                    elif oid.endswith("#btn_reset"):
                        self.game.reset_same_block()

                    elif oid.endswith("#btn_undo"):
                        self.game.undo()

            self.manager.update(dt)
            self._render()

        pygame.quit()

    # ---------- rendering ----------
    def _render(self):
        self.screen.fill(self.theme.bg)

        if self.state == "menu":
            title = self.big_font.render("REVERSE CHESS 5x5", True, self.theme.text)
            self.screen.blit(title, (self.screen.get_width() // 2 - title.get_width() // 2, 120))

        elif self.state == "how":
            lines = [
                "One random cell is blocked.",
                "Blue and Red take turns placing pieces 1..12, in order.",
                "When all 24 pieces are down, each player scores",
                "the sum of their largest connected group",
                "(up/down/left/right, no diagonals).",
                "Equal size: the group with the larger sum counts.",
                "Higher score wins; equal scores is a draw.",
            ]
            y = 80
            for s in lines:
                txt = self.font.render(s, True, self.theme.text)
                self.screen.blit(txt, (20, y))
                y += 26

        elif self.state == "game":
            self._draw_top_panel()
            self._draw_board()
            self._draw_game_hud()

        self.manager.draw_ui(self.screen)
        pygame.display.flip()

    def _draw_top_panel(self):
        panel = pygame.Rect(0, 0, self.screen.get_width(), self.HUD_H)
        pygame.draw.rect(self.screen, self.theme.panel, panel)
        pygame.draw.rect(self.screen, self.theme.panel_border, panel, 1)

    def _player_color(self, p: Player):
        return self.theme.blue if p == Player.BLUE else self.theme.red

    def _draw_board(self):
        st = self.game.state
        lit = set()
        if st.game_over:
            for p in Player:
                lit |= st.highlight[p]

        for r, c, rect in self.cells:
            cell = st.board[(r, c)]
            if cell.is_empty:
                col = self.theme.empty
            elif cell == BLOCKED:
                col = self.theme.blocked
            else:
                col = self._player_color(cell.player)

            pygame.draw.rect(self.screen, col, rect, border_radius=8)
            pygame.draw.rect(self.screen, self.theme.grid, rect, width=1, border_radius=8)

            if cell.value:
                txt = self.cell_font.render(str(cell.value), True, self.theme.text)
                self.screen.blit(txt, txt.get_rect(center=rect.center))

            if (r, c) in lit:
                pygame.draw.rect(self.screen, self.theme.highlight, rect, width=4, border_radius=8)

    def _draw_game_hud(self):
        x = 20
        y = 70

        if self.game.state.game_over:
            msg = self.game.result_label()
        else:
            msg = self.game.player_label()
        self.screen.blit(self.big_font.render(msg, True, self.theme.text), (x, 18))

        self.screen.blit(self.font.render(self.game.turn_label(), True, self.theme.text), (x, y))
        self.screen.blit(self.font.render(self.game.next_piece_label(), True, self.theme.muted), (x, y + 24))

        if self.game.state.game_over:
            score = self.game.state.score
            line = f"Blue: {score[Player.BLUE]}   Red: {score[Player.RED]}"
            self.screen.blit(self.font.render(line, True, self.theme.text), (x, y + 48))

        sw1 = pygame.Rect(430, 22, 26, 26)
        sw2 = pygame.Rect(430, 54, 26, 26)
        pygame.draw.rect(self.screen, self.theme.blue, sw1)
        pygame.draw.rect(self.screen, self.theme.red, sw2)
        pygame.draw.rect(self.screen, self.theme.panel_border, sw1, 1)
        pygame.draw.rect(self.screen, self.theme.panel_border, sw2, 1)
        self.screen.blit(self.font.render("Blue", True, self.theme.text), (465, 25))
        self.screen.blit(self.font.render("Red", True, self.theme.text), (465, 57))
