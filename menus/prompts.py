from utils.constants import DECK_NAME_MAX, CARD_SIDE_MAX
from utils.utils import parse_id, optional_text


def prompt_for_id(io, label: str = "ID") -> int:
    while True:
        value = parse_id(io.read_line(f"{label}: "))
        if value is not None:
            return value
        io.write_line("\u274c Not a valid id. Enter a positive number:")


def prompt_for_deck_details(io) -> tuple[str, str | None]:
    while True:
        name = io.read_line("Name: ").strip()
        if not name:
            io.write_line("\u26a0\ufe0f Deck name can't be empty.")
        elif len(name) > DECK_NAME_MAX:
            io.write_line(f"\u26a0\ufe0f Too long. Up to {DECK_NAME_MAX} characters.")
        else:
            break

    description = optional_text(io.read_line("Description (optional): "))
    return name, description


def prompt_for_card_details(io) -> tuple[str | None, str | None]:
    """Read front and back; a blank answer comes back as None."""
    front = _read_side(io, "Front: ")
    back = _read_side(io, "Back: ")
    return front, back


def prompt_for_side(io, label: str) -> str:
    """Read one non-empty card side."""
    while True:
        text = _read_side(io, f"{label}: ")
        if text is not None:
            return text
        io.write_line("\u26a0\ufe0f Card side can't be empty.")


def _read_side(io, prompt: str) -> str | None:
    while True:
        text = optional_text(io.read_line(prompt))
        if text is None or len(text) <= CARD_SIDE_MAX:
            return text
        io.write_line(f"\u26a0\ufe0f Too long. Each side can be up to {CARD_SIDE_MAX} characters.")
