# ======================= USERS ==========================

user_schema = '''
    CREATE TABLE IF NOT EXISTS users (
        user_id INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT UNIQUE NOT NULL,
        password_hash TEXT NOT NULL,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
'''

# ======================= DECKS ==========================

deck_schema = '''
    CREATE TABLE IF NOT EXISTS decks (
        deck_id INTEGER PRIMARY KEY AUTOINCREMENT,
        deck_name TEXT UNIQUE NOT NULL,
        description TEXT,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
'''

# ======================= CARDS ==========================

card_schema = '''
    CREATE TABLE IF NOT EXISTS cards (
        card_id INTEGER PRIMARY KEY AUTOINCREMENT,
        front TEXT NOT NULL,
        back TEXT NOT NULL,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
'''

# =================== DECK <-> CARD ======================

deck_card_schema = '''
    CREATE TABLE IF NOT EXISTS deck_cards (
        deck_id INTEGER NOT NULL,
        card_id INTEGER NOT NULL,
        added_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,

        PRIMARY KEY (deck_id, card_id),
        FOREIGN KEY (deck_id) REFERENCES decks(deck_id) ON DELETE CASCADE,
        FOREIGN KEY (card_id) REFERENCES cards(card_id) ON DELETE CASCADE
    )
'''

# ==================== REVIEW HISTORY ====================

session_schema = '''
    CREATE TABLE IF NOT EXISTS review_sessions (
        session_id INTEGER PRIMARY KEY AUTOINCREMENT,
        deck_id INTEGER NOT NULL,
        started_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
'''

# Answers outlive the cards they refer to, so card_id carries no foreign key.
answer_schema = '''
    CREATE TABLE IF NOT EXISTS answers (
        answer_id INTEGER PRIMARY KEY AUTOINCREMENT,
        session_id INTEGER NOT NULL,
        card_id INTEGER NOT NULL,
        deck_id INTEGER NOT NULL,
        submitted TEXT NOT NULL,
        correct_answer TEXT NOT NULL,
        answered_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,

        FOREIGN KEY (session_id) REFERENCES review_sessions(session_id)
    )
'''

ALL_SCHEMAS = (
    user_schema,
    deck_schema,
    card_schema,
    deck_card_schema,
    session_schema,
    answer_schema,
)
