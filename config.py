import logging
import os
from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.getenv(
    'FLASHCARDS_DB_PATH',
    os.path.join(os.path.dirname(os.path.abspath(__file__)), 'flashcards.db')
)
LOG_LEVEL = os.getenv('FLASHCARDS_LOG_LEVEL', 'WARNING').upper()
SHUFFLE_REVIEW = os.getenv('FLASHCARDS_SHUFFLE', '1').lower() not in ('0', 'false', 'no')

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, LOG_LEVEL, logging.WARNING)
)
