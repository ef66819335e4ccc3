import logging

from menus.options import MainOption, Selection
from menus.state import MenuState, Navigator


def process_main(selection: Selection, conn, io, nav: Navigator) -> tuple[MenuState, bool]:
    option = selection.option

    if option is MainOption.DECKS:
        return MenuState.decks(), True
    if option is MainOption.CARDS:
        return MenuState.cards(), True
    if option is MainOption.QUIT:
        logging.info("Quit from main menu")
        return nav.current, False

    raise ValueError(f"Unhandled main menu option: {option!r}")
