"""
Closed option sets, one per menu.

Each option's value is the label shown to the user; its position in the enum
is the number the user types. Reordering members reorders the menu.
"""

from dataclasses import dataclass, replace
from enum import Enum

from menus.state import MenuState
from utils.constants import Menu, PROMPT, INVALID_CHOICE
from utils.utils import Option, parse_choice


class MainOption(Enum):
    DECKS = "Decks"
    CARDS = "Cards"
    QUIT = "Quit"


class DeckOption(Enum):
    CREATE = "Create a deck"
    LIST = "List decks"
    CHOOSE = "Choose a deck"
    GO_BACK = "Go back"
    QUIT = "Quit"


class DeckDetailOption(Enum):
    VIEW = "View deck info"
    LIST_CARDS = "List cards in deck"
    ADD_CARD = "Add existing card to deck"
    CREATE_CARD = "Create card and add to deck"
    UPDATE = "Update deck"
    DELETE = "Delete deck"
    REVIEW = "Review"
    REPORT = "Report"
    VIEW_CARD = "View a card in deck"
    GO_BACK = "Go back"
    QUIT = "Quit"


class CardOption(Enum):
    CREATE = "Create a card"
    LIST = "List cards"
    UPDATE = "Update a card"
    DELETE = "Delete a card"
    GO_TO_MAIN_MENU = "Go to main menu"
    EDIT_FIELDS = "Edit a single field"
    GO_BACK = "Go back"
    QUIT = "Quit"


class CardFieldOption(Enum):
    FRONT = "Change front"
    BACK = "Change back"
    GO_TO_CARD_MENU = "Go to card menu"
    QUIT = "Quit"


OPTIONS_BY_MENU: dict[Menu, type[Enum]] = {
    Menu.MAIN: MainOption,
    Menu.DECK: DeckOption,
    Menu.DECK_DETAIL: DeckDetailOption,
    Menu.CARD: CardOption,
    Menu.CARD_SUB: CardFieldOption,
}

# Options that act on the deck of the enclosing DECK_DETAIL state.
DECK_BOUND_OPTIONS = frozenset({
    DeckDetailOption.VIEW,
    DeckDetailOption.LIST_CARDS,
    DeckDetailOption.ADD_CARD,
    DeckDetailOption.CREATE_CARD,
    DeckDetailOption.UPDATE,
    DeckDetailOption.DELETE,
    DeckDetailOption.REVIEW,
    DeckDetailOption.REPORT,
    DeckDetailOption.VIEW_CARD,
})


@dataclass(frozen=True)
class Selection:
    """A chosen option plus the data it acts on."""
    option: Enum
    deck_id: int | None = None


def stamp(selection: Selection, state: MenuState) -> Selection:
    """Thread the enclosing state's deck id into a freshly parsed selection."""
    if selection.option in DECK_BOUND_OPTIONS:
        return replace(selection, deck_id=state.deck_id)
    return selection


def options_for(menu: Menu) -> type[Enum]:
    return OPTIONS_BY_MENU[menu]


def render_menu(io, options: type[Option], title: str) -> None:
    io.write_line()
    io.write_line(f"== {title} ==")
    io.write_line("What would you like to do?")
    for position, option in enumerate(options, start=1):
        io.write_line(f"{position}. {option.value}")


def choose(io, options: type[Option], title: str) -> Option:
    """Render the menu and keep asking until the input names an option."""
    render_menu(io, options, title)
    while True:
        choice = parse_choice(options, io.read_line(PROMPT))
        if choice is not None:
            return choice
        io.write_line(INVALID_CHOICE.format(count=len(options)))
