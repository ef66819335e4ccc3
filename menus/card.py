import database.database as db
from menus.options import CardOption, CardFieldOption, Selection
from menus.prompts import prompt_for_card_details, prompt_for_id, prompt_for_side
from menus.state import MenuState, Navigator


def _report_rows(io, rows: int, card_id: int, done: str) -> None:
    if rows == 0:
        io.write_line(f"No card with id: {card_id} found")
    else:
        io.write_line(f"{done} card with id: {card_id}")


def process_card(selection: Selection, conn, io, nav: Navigator) -> tuple[MenuState, bool]:
    option = selection.option
    here = MenuState.cards()

    if option is CardOption.CREATE:
        io.write_line("Creating a card")
        front = prompt_for_side(io, "Front")
        back = prompt_for_side(io, "Back")
        card_id = db.create_card(conn, front, back)
        io.write_line(f"\u2705 Created card {card_id}")
        return here, True

    if option is CardOption.LIST:
        cards = db.list_cards(conn)
        if not cards:
            io.write_line("No cards yet")
        for card in cards:
            io.write_line(f"{card['id']}: | {card['front']} | {card['back']} |")
        return here, True

    if option is CardOption.UPDATE:
        card_id = prompt_for_id(io, "Card ID")
        io.write_line("Leave a side blank to keep it.")
        front, back = prompt_for_card_details(io)
        if front is None and back is None:
            io.write_line("No changes to make")
            return here, True
        _report_rows(io, db.update_card(conn, card_id, front, back), card_id, "Updated")
        return here, True

    if option is CardOption.DELETE:
        card_id = prompt_for_id(io, "Card ID")
        _report_rows(io, db.delete_card(conn, card_id), card_id, "Deleted")
        return here, True

    if option is CardOption.GO_TO_MAIN_MENU:
        return MenuState.main(), True

    if option is CardOption.EDIT_FIELDS:
        return MenuState.card_fields(), True

    if option is CardOption.GO_BACK:
        return nav.get_previous_menu(), True

    if option is CardOption.QUIT:
        return nav.current, False

    raise ValueError(f"Unhandled card menu option: {option!r}")


def process_card_fields(selection: Selection, conn, io, nav: Navigator) -> tuple[MenuState, bool]:
    option = selection.option
    here = MenuState.card_fields()

    if option is CardFieldOption.FRONT:
        card_id = prompt_for_id(io, "Card ID")
        front = prompt_for_side(io, "New front")
        _report_rows(io, db.update_card(conn, card_id, front=front), card_id, "Updated")
        return here, True

    if option is CardFieldOption.BACK:
        card_id = prompt_for_id(io, "Card ID")
        back = prompt_for_side(io, "New back")
        _report_rows(io, db.update_card(conn, card_id, back=back), card_id, "Updated")
        return here, True

    if option is CardFieldOption.GO_TO_CARD_MENU:
        return MenuState.cards(), True

    if option is CardFieldOption.QUIT:
        return nav.current, False

    raise ValueError(f"Unhandled card field option: {option!r}")
