"""
Menu identity and navigation history.

MenuState is a value: two states are equal when they name the same menu and,
for the deck detail menu, the same deck. The Navigator owns the history stack.
Its first entry is the floor, so going back never empties it.
"""

import logging
from dataclasses import dataclass

from utils.constants import Menu


@dataclass(frozen=True)
class MenuState:
    menu: Menu
    deck_id: int | None = None

    def __post_init__(self) -> None:
        if (self.menu == Menu.DECK_DETAIL) != (self.deck_id is not None):
            raise ValueError(f"deck_id is required for, and only for, the deck detail menu: {self!r}")

    @classmethod
    def main(cls) -> 'MenuState':
        return cls(Menu.MAIN)

    @classmethod
    def decks(cls) -> 'MenuState':
        return cls(Menu.DECK)

    @classmethod
    def deck_detail(cls, deck_id: int) -> 'MenuState':
        return cls(Menu.DECK_DETAIL, deck_id)

    @classmethod
    def cards(cls) -> 'MenuState':
        return cls(Menu.CARD)

    @classmethod
    def card_fields(cls) -> 'MenuState':
        return cls(Menu.CARD_SUB)

    def __str__(self) -> str:
        name = self.menu.name.lower()
        return f"{name}({self.deck_id})" if self.deck_id is not None else name


class Navigator:
    def __init__(self, initial: MenuState | None = None) -> None:
        initial = initial or MenuState.main()
        self.current = initial
        self._history: list[MenuState] = [initial]

    @property
    def history(self) -> tuple[MenuState, ...]:
        return tuple(self._history)

    def navigate(self, new_state: MenuState) -> None:
        """Move to new_state; re-entering the current state is a no-op."""
        if new_state == self.current:
            return
        self._history.append(new_state)
        self.current = new_state
        logging.info(f"Navigated to {new_state}, depth={len(self._history)}")

    def get_previous_menu(self) -> MenuState:
        """Drop the menu being left and land on the one beneath it."""
        if len(self._history) > 1:
            self._history.pop()
        self.current = self._history[-1]
        logging.info(f"Went back to {self.current}, depth={len(self._history)}")
        return self.current

    def __repr__(self) -> str:
        trail = ' > '.join(str(state) for state in self._history)
        return f"Navigator(current={self.current}, history=[{trail}])"
