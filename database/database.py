import logging
import sqlite3
from contextlib import contextmanager

from database.schema import ALL_SCHEMAS
from config import DB_PATH


# USER COMMANDS ============================================

def create_user(conn, username, password_hash):
    cursor = conn.cursor()
    cursor.execute(
        'INSERT INTO users (username, password_hash) VALUES (?, ?)',
        (username, password_hash)
    )
    logging.info(f"Created user: {username}")
    return cursor.lastrowid


def get_user_by_username(conn, username):
    cursor = conn.cursor()
    cursor.execute(
        'SELECT user_id, username, password_hash FROM users WHERE username = ?',
        (username,)
    )
    row = cursor.fetchone()
    if row:
        return {'id': row['user_id'], 'username': row['username'], 'password_hash': row['password_hash']}
    return None


# DECKS COMMANDS =============================================

def create_deck(conn, name, description=None):
    cursor = conn.cursor()
    cursor.execute(
        'INSERT INTO decks (deck_name, description) VALUES (?, ?)',
        (name, description)
    )
    logging.info(f"Created deck {cursor.lastrowid}: {name}")
    return cursor.lastrowid


def list_decks(conn):
    cursor = conn.cursor()
    cursor.execute('SELECT deck_id, deck_name, description FROM decks ORDER BY deck_id')
    rows = cursor.fetchall()
    return [
        {'id': row['deck_id'], 'name': row['deck_name'], 'description': row['description']}
        for row in rows
    ]


def get_deck(conn, deck_id):
    cursor = conn.cursor()
    cursor.execute(
        'SELECT deck_id, deck_name, description FROM decks WHERE deck_id = ?',
        (deck_id,)
    )
    row = cursor.fetchone()
    if row:
        return {'id': row['deck_id'], 'name': row['deck_name'], 'description': row['description']}
    return None


def deck_exists(conn, deck_id):
    cursor = conn.cursor()
    cursor.execute('SELECT 1 FROM decks WHERE deck_id = ?', (deck_id,))
    return cursor.fetchone() is not None


def deck_info(conn, deck_id):
    """One-line summary of a deck: name, description and card count."""
    cursor = conn.cursor()
    cursor.execute(
        """SELECT d.deck_name, d.description, COUNT(dc.card_id) AS card_count
           FROM decks d
           LEFT JOIN deck_cards dc ON dc.deck_id = d.deck_id
           WHERE d.deck_id = ?
           GROUP BY d.deck_id
        """,
        (deck_id,)
    )
    row = cursor.fetchone()
    if not row:
        return f"No deck with id {deck_id}"

    count = row['card_count']
    description = f" - {row['description']}" if row['description'] else ''
    return f"{row['deck_name']}{description} ({count} card{'s' if count != 1 else ''})"


def update_deck(conn, deck_id, name, description=None):
    cursor = conn.cursor()
    cursor.execute(
        'UPDATE decks SET deck_name = ?, description = ? WHERE deck_id = ?',
        (name, description, deck_id)
    )
    logging.info(f"Updated deck {deck_id}: rows={cursor.rowcount}")
    return cursor.rowcount


def delete_deck(conn, deck_id):
    cursor = conn.cursor()
    cursor.execute('DELETE FROM decks WHERE deck_id = ?', (deck_id,))
    logging.info(f"Deleted deck {deck_id}: rows={cursor.rowcount}")
    return cursor.rowcount


def add_card_to_deck(conn, card_id, deck_id):
    """Returns False when the card was already in the deck."""
    cursor = conn.cursor()
    cursor.execute(
        'INSERT OR IGNORE INTO deck_cards (deck_id, card_id) VALUES (?, ?)',
        (deck_id, card_id)
    )
    return cursor.rowcount == 1


# CARDS COMMANDS =============================================

def create_card(conn, front, back):
    cursor = conn.cursor()
    cursor.execute(
        'INSERT INTO cards (front, back) VALUES (?, ?)',
        (front, back)
    )
    logging.info(f"Created card {cursor.lastrowid}")
    return cursor.lastrowid


def get_card(conn, card_id):
    cursor = conn.cursor()
    cursor.execute('SELECT card_id, front, back FROM cards WHERE card_id = ?', (card_id,))
    row = cursor.fetchone()
    if row:
        return {'id': row['card_id'], 'front': row['front'], 'back': row['back']}
    return None


def list_cards(conn):
    cursor = conn.cursor()
    cursor.execute('SELECT card_id, front, back FROM cards ORDER BY card_id')
    return [
        {'id': row['card_id'], 'front': row['front'], 'back': row['back']}
        for row in cursor.fetchall()
    ]


def list_cards_for_deck(conn, deck_id):
    cursor = conn.cursor()
    cursor.execute(
        """SELECT c.card_id, c.front, c.back
           FROM cards c
           JOIN deck_cards dc ON dc.card_id = c.card_id
           WHERE dc.deck_id = ?
           ORDER BY c.card_id
        """,
        (deck_id,)
    )
    return [
        {'id': row['card_id'], 'front': row['front'], 'back': row['back']}
        for row in cursor.fetchall()
    ]


def update_card(conn, card_id, front=None, back=None):
    """Partial update: a side passed as None keeps its stored value."""
    cursor = conn.cursor()
    if front is None and back is None:
        return 0

    cursor.execute(
        """UPDATE cards
           SET front = COALESCE(?, front),
               back = COALESCE(?, back),
               updated_at = datetime('now')
           WHERE card_id = ?
        """,
        (front, back, card_id)
    )
    logging.info(f"Updated card {card_id}: rows={cursor.rowcount}")
    return cursor.rowcount


def delete_card(conn, card_id):
    cursor = conn.cursor()
    cursor.execute('DELETE FROM cards WHERE card_id = ?', (card_id,))
    logging.info(f"Deleted card {card_id}: rows={cursor.rowcount}")
    return cursor.rowcount


# REVIEW COMMANDS ============================================

def create_review_session(conn, deck_id):
    cursor = conn.cursor()
    cursor.execute('INSERT INTO review_sessions (deck_id) VALUES (?)', (deck_id,))
    return cursor.lastrowid


def record_answer(conn, session_id, card_id, deck_id, submitted, correct_answer):
    cursor = conn.cursor()
    cursor.execute(
        """INSERT INTO answers (session_id, card_id, deck_id, submitted, correct_answer)
           VALUES (?, ?, ?, ?, ?)
        """,
        (session_id, card_id, deck_id, submitted, correct_answer)
    )
    return cursor.lastrowid


def deck_report(conn, deck_id):
    """Every recorded answer for a deck, oldest first."""
    cursor = conn.cursor()
    cursor.execute(
        """SELECT a.answer_id, a.session_id, a.card_id, a.deck_id,
                  a.submitted, a.correct_answer, a.answered_at,
                  s.started_at AS session_started_at
           FROM answers a
           LEFT JOIN review_sessions s ON a.session_id = s.session_id
           WHERE a.deck_id = ?
           ORDER BY a.answer_id
        """,
        (deck_id,)
    )
    return [dict(row) for row in cursor.fetchall()]


# DB CONNECTION ==============================================

@contextmanager
def get_db():
    """One unit-of-work: commit on success, rollback on any exception."""
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    conn.execute('PRAGMA foreign_keys = ON')

    try:
        yield conn
        conn.commit()
    except BaseException:
        conn.rollback()
        logging.info("Rolled back unit of work")
        raise
    finally:
        conn.close()


def init_db():
    with get_db() as conn:
        for schema in ALL_SCHEMAS:
            conn.execute(schema)
