from typing import Any

import database.database as db
from services.review import is_correct


def build_report(conn, deck_id: int) -> list[dict[str, Any]]:
    """Answer history for a deck grouped per session, with per-session tallies."""
    sessions: dict[int, dict[str, Any]] = {}

    for row in db.deck_report(conn, deck_id):
        session = sessions.setdefault(row['session_id'], {
            'session_id': row['session_id'],
            'started_at': row['session_started_at'],
            'correct': 0,
            'incorrect': 0,
            'answers': [],
        })
        ok = is_correct(row['submitted'], row['correct_answer'])
        session['correct' if ok else 'incorrect'] += 1
        session['answers'].append({**row, 'is_correct': ok})

    return list(sessions.values())


def format_report(sessions: list[dict[str, Any]]) -> str:
    if not sessions:
        return "\U0001f4ca No reviews recorded for this deck yet."

    lines = ["\U0001f4ca Report"]
    for session in sessions:
        lines.append(
            f"\nSession {session['session_id']} \u00b7 {session['started_at']} \u00b7 "
            f"{session['correct']} correct, {session['incorrect']} incorrect"
        )
        for answer in session['answers']:
            mark = '\u2705' if answer['is_correct'] else '\u274c'
            lines.append(
                f"  {mark} card {answer['card_id']}: "
                f"'{answer['submitted']}' (expected '{answer['correct_answer']}')"
            )
    return '\n'.join(lines)
