"""
Shared fixtures: a throwaway SQLite file per test and a scripted terminal.
"""
import pytest

import database.database as db


class ScriptedIO:
    """Feeds canned lines to read_line and records everything written."""

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.prompts = []
        self.output = []

    def read_line(self, prompt=''):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("script exhausted")
        return self.lines.pop(0)

    def read_secret(self, prompt=''):
        return self.read_line(prompt)

    def write_line(self, text=''):
        self.output.append(text)

    def clear(self):
        pass

    @property
    def text(self):
        return '\n'.join(self.output)


@pytest.fixture()
def tdb(tmp_path, monkeypatch):
    """Patch DB_PATH to a fresh temp file and initialise the schema."""
    db_path = str(tmp_path / "test.db")
    monkeypatch.setattr(db, 'DB_PATH', db_path)
    db.init_db()
    return db_path


@pytest.fixture()
def conn(tdb):
    """An open unit-of-work on the temp DB, committed at teardown."""
    with db.get_db() as connection:
        yield connection


@pytest.fixture()
def scripted():
    return ScriptedIO
