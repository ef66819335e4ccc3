"""
Routes the current menu state to its option set and handler.

resolve() renders the menu for a state, reads a choice, threads the state's
data into it and hands it to the matching process_* function. Every handler
returns (next_state, keep_running); keep_running only says whether the outer
loop goes on, not where it lands.
"""

import logging
from typing import Callable

import database.database as db
from menus.card import process_card, process_card_fields
from menus.deck import process_deck, process_deck_detail
from menus.main import process_main
from menus.options import Selection, choose, options_for, stamp
from menus.state import MenuState, Navigator
from utils.constants import Menu, MENU_TITLES

Processor = Callable[[Selection, object, object, Navigator], tuple[MenuState, bool]]

PROCESSORS: dict[Menu, Processor] = {
    Menu.MAIN: process_main,
    Menu.DECK: process_deck,
    Menu.DECK_DETAIL: process_deck_detail,
    Menu.CARD: process_card,
    Menu.CARD_SUB: process_card_fields,
}


def menu_title(conn, state: MenuState) -> str:
    title = MENU_TITLES[state.menu]
    if state.menu == Menu.DECK_DETAIL:
        deck = db.get_deck(conn, state.deck_id)
        name = deck['name'] if deck else 'unknown'
        return f"{title}: {name} (#{state.deck_id})"
    return title


def process(selection: Selection, state: MenuState, conn, io, nav: Navigator) -> tuple[MenuState, bool]:
    selection = stamp(selection, state)
    logging.info(f"Processing {selection.option.name} in {state}")
    return PROCESSORS[state.menu](selection, conn, io, nav)


def resolve(state: MenuState, conn, io, nav: Navigator) -> tuple[MenuState, bool]:
    options = options_for(state.menu)
    choice = choose(io, options, menu_title(conn, state))
    return process(Selection(choice), state, conn, io, nav)
