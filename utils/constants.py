from enum import auto, IntEnum

DECK_NAME_MAX = 50
CARD_SIDE_MAX = 1000
ID_MAX = 2**63 - 1  # largest SQLite INTEGER


class Menu(IntEnum):
    MAIN = auto()
    DECK = auto()
    DECK_DETAIL = auto()
    CARD = auto()
    CARD_SUB = auto()


MENU_TITLES = {
    Menu.MAIN: "Main menu",
    Menu.DECK: "Decks",
    Menu.DECK_DETAIL: "Deck",
    Menu.CARD: "Cards",
    Menu.CARD_SUB: "Edit card fields",
}

PROMPT = "Please enter a command: "
INVALID_CHOICE = "\u274c Invalid choice. Enter a number between 1 and {count}."
