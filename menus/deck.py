import logging
import random
import sqlite3

import database.database as db
from config import SHUFFLE_REVIEW
from menus.options import DeckOption, DeckDetailOption, Selection
from menus.prompts import prompt_for_deck_details, prompt_for_id, prompt_for_side
from menus.state import MenuState, Navigator
from services.report import build_report, format_report
from services.review import review_deck, summary
from utils.errors import MissingDeckError


def _print_cards(io, cards, empty_text: str) -> None:
    if not cards:
        io.write_line(empty_text)
        return
    for card in cards:
        io.write_line(f"{card['id']}: | {card['front']} | {card['back']} |")


# ── Deck menu ────────────────────────────────────────────────

def process_deck(selection: Selection, conn, io, nav: Navigator) -> tuple[MenuState, bool]:
    option = selection.option
    here = MenuState.decks()

    if option is DeckOption.CREATE:
        io.write_line("Creating a deck")
        name, description = prompt_for_deck_details(io)
        try:
            deck_id = db.create_deck(conn, name, description)
        except sqlite3.IntegrityError:
            io.write_line(f"\u26a0\ufe0f A deck named '{name}' already exists")
        else:
            io.write_line(f"\u2705 Created deck {deck_id}: {name}")
        return here, True

    if option is DeckOption.LIST:
        decks = db.list_decks(conn)
        if not decks:
            io.write_line("\U0001f4da No decks yet")
        for deck in decks:
            io.write_line(f"{deck['id']}: | {deck['name']} | {deck['description'] or ''} |")
        return here, True

    if option is DeckOption.CHOOSE:
        deck_id = prompt_for_id(io, "Deck ID")
        if not db.deck_exists(conn, deck_id):
            io.write_line("Deck does not exist")
            return here, True
        logging.info(f"Chose deck {deck_id}")
        return MenuState.deck_detail(deck_id), True

    if option is DeckOption.GO_BACK:
        return nav.get_previous_menu(), True

    if option is DeckOption.QUIT:
        return nav.current, False

    raise ValueError(f"Unhandled deck menu option: {option!r}")


# ── Deck detail menu ─────────────────────────────────────────

def process_deck_detail(selection: Selection, conn, io, nav: Navigator) -> tuple[MenuState, bool]:
    option = selection.option

    if option is DeckDetailOption.GO_BACK:
        return nav.get_previous_menu(), True
    if option is DeckDetailOption.QUIT:
        return nav.current, False

    deck_id = selection.deck_id
    if deck_id is None:
        raise MissingDeckError(option)
    here = MenuState.deck_detail(deck_id)

    if option is DeckDetailOption.VIEW:
        io.write_line(f"Deck info: {db.deck_info(conn, deck_id)}")
        return here, True

    if option is DeckDetailOption.LIST_CARDS:
        _print_cards(io, db.list_cards_for_deck(conn, deck_id), "No cards in this deck yet")
        return here, True

    if option is DeckDetailOption.ADD_CARD:
        card_id = prompt_for_id(io, "Card ID")
        if db.get_card(conn, card_id) is None:
            io.write_line(f"Card not found: {card_id}")
        elif db.add_card_to_deck(conn, card_id, deck_id):
            io.write_line(f"\u2705 Added card {card_id} to deck")
        else:
            io.write_line(f"Card {card_id} is already in this deck")
        return here, True

    if option is DeckDetailOption.CREATE_CARD:
        front = prompt_for_side(io, "Front")
        back = prompt_for_side(io, "Back")
        card_id = db.create_card(conn, front, back)
        db.add_card_to_deck(conn, card_id, deck_id)
        io.write_line(f"\u2705 Created card {card_id} and added it to the deck")
        return here, True

    if option is DeckDetailOption.UPDATE:
        name, description = prompt_for_deck_details(io)
        try:
            rows = db.update_deck(conn, deck_id, name, description)
        except sqlite3.IntegrityError:
            io.write_line(f"\u26a0\ufe0f A deck named '{name}' already exists")
            return here, True
        io.write_line("\u2705 Deck updated" if rows else f"No deck with id: {deck_id} found")
        return here, True

    if option is DeckDetailOption.DELETE:
        answer = io.read_line("\U0001f5d1\ufe0f Delete this deck? Cards stay in the card list. (y/N): ")
        if answer.strip().lower() != 'y':
            return here, True
        rows = db.delete_deck(conn, deck_id)
        io.write_line(f"Deleted deck with id: {deck_id}" if rows else f"No deck with id: {deck_id} found")
        # no deck, no deck menu
        return nav.get_previous_menu(), True

    if option is DeckDetailOption.REVIEW:
        shuffle = random.shuffle if SHUFFLE_REVIEW else None
        result = review_deck(conn, io, deck_id, shuffle=shuffle)
        io.write_line(summary(result))
        return here, True

    if option is DeckDetailOption.REPORT:
        io.write_line(format_report(build_report(conn, deck_id)))
        return here, True

    if option is DeckDetailOption.VIEW_CARD:
        cards = db.list_cards_for_deck(conn, deck_id)
        _print_cards(io, cards, "No cards in this deck yet")
        if not cards:
            return here, True
        card_id = prompt_for_id(io, "Card ID")
        card = db.get_card(conn, card_id) if any(c['id'] == card_id for c in cards) else None
        if card is None:
            io.write_line(f"Card not found in this deck: {card_id}")
        else:
            io.write_line(f"Front: {card['front']}")
            io.write_line(f"Back: {card['back']}")
        return here, True

    raise ValueError(f"Unhandled deck detail option: {option!r}")
