"""
Self-graded review of one deck.

The deck's cards are shuffled into a queue. Cards are taken from the tail;
a wrong answer sends the card back to the head, so it is asked again after
the rest of the queue. The run ends once every card has been answered
correctly at least once.

Every attempt is stored as an answer row under a single review session.
'incorrect' counts attempts, not cards, and can exceed the deck size.

A storage error while recording aborts the whole run. Nothing is resumable:
the caller's unit-of-work rolls back, session row included.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

import database.database as db


@dataclass(frozen=True)
class ReviewResult:
    session_id: int
    correct: int
    incorrect: int

    @property
    def attempts(self) -> int:
        return self.correct + self.incorrect


def is_correct(submitted: str, expected: str) -> bool:
    """Case-sensitive match that ignores surrounding whitespace only."""
    return submitted.strip() == expected.strip()


def review_deck(
    conn,
    io,
    deck_id: int,
    shuffle: Callable[[list[dict[str, Any]]], None] | None = random.shuffle,
) -> ReviewResult:
    cards = db.list_cards_for_deck(conn, deck_id)
    if shuffle is not None:
        shuffle(cards)
    queue: deque[dict[str, Any]] = deque(cards)

    session_id = db.create_review_session(conn, deck_id)
    logging.info(f"Review session {session_id} started: deck={deck_id}, cards={len(cards)}")

    correct = 0
    incorrect = 0

    if not queue:
        io.write_line("\U0001f4ed This deck has no cards yet.")

    while queue:
        card = queue.pop()
        io.write_line()
        io.write_line(f"\u2753 {card['front']}")
        submitted = io.read_line("Answer: ")

        db.record_answer(conn, session_id, card['id'], deck_id, submitted, card['back'])

        if is_correct(submitted, card['back']):
            correct += 1
            io.write_line("\u2705 Correct!")
        else:
            incorrect += 1
            io.write_line(f"\u274c Incorrect. The answer is: {card['back']}")
            queue.appendleft(card)

    result = ReviewResult(session_id, correct, incorrect)
    logging.info(f"Review session {session_id} finished: correct={correct}, incorrect={incorrect}")
    return result


def summary(result: ReviewResult) -> str:
    return f"\U0001f389 Done! {result.correct} correct, {result.incorrect} incorrect"
