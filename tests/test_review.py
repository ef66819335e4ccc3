"""
Tests for services/review.py and services/report.py.

Shuffling is switched off (shuffle=None) so the queue order is the load order:
cards come out from the tail, i.e. highest id first.
"""
import sqlite3

import pytest

import database.database as db
from services.report import build_report, format_report
from services.review import ReviewResult, is_correct, review_deck, summary


def _deck(conn, *pairs):
    deck_id = db.create_deck(conn, 'Capitals')
    ids = []
    for front, back in pairs:
        card_id = db.create_card(conn, front, back)
        db.add_card_to_deck(conn, card_id, deck_id)
        ids.append(card_id)
    return deck_id, ids


def _count(conn, table):
    return conn.execute(f'SELECT COUNT(*) FROM {table}').fetchone()[0]


class TestIsCorrect:
    def test_exact(self):
        assert is_correct('Paris', 'Paris')

    def test_surrounding_whitespace_ignored(self):
        assert is_correct('  Paris \n', 'Paris')

    def test_case_sensitive(self):
        assert not is_correct('paris', 'Paris')

    def test_inner_whitespace_matters(self):
        assert not is_correct('New  York', 'New York')


class TestReviewDeck:
    def test_one_retry_then_done(self, conn, scripted):
        deck_id, (x, y) = _deck(conn, ('France', 'Paris'), ('Japan', 'Tokyo'))
        # Y comes first (tail); X answered wrong once, then right.
        io = scripted(['Tokyo', 'Lyon', 'Paris'])

        result = review_deck(conn, io, deck_id, shuffle=None)

        assert (result.correct, result.incorrect) == (2, 1)
        assert result.attempts == 3
        rows = db.deck_report(conn, deck_id)
        assert len(rows) == 3
        assert [(r['card_id'], r['submitted']) for r in rows] == [(y, 'Tokyo'), (x, 'Lyon'), (x, 'Paris')]
        assert all(r['session_id'] == result.session_id for r in rows)
        assert rows[1]['correct_answer'] == 'Paris'

    def test_wrong_answer_reveals_back(self, conn, scripted):
        deck_id, _ = _deck(conn, ('France', 'Paris'))
        io = scripted(['Nice', 'Paris'])
        review_deck(conn, io, deck_id, shuffle=None)
        assert any('Paris' in line and 'Incorrect' in line for line in io.output)

    def test_front_is_shown(self, conn, scripted):
        deck_id, _ = _deck(conn, ('France', 'Paris'))
        io = scripted(['Paris'])
        review_deck(conn, io, deck_id, shuffle=None)
        assert any('France' in line for line in io.output)

    def test_failed_card_goes_behind_the_rest(self, conn, scripted):
        deck_id, (a, b, c) = _deck(conn, ('a', '1'), ('b', '2'), ('c', '3'))
        # c wrong -> requeued at head, then b, a, then c again
        io = scripted(['x', '2', '1', '3'])
        result = review_deck(conn, io, deck_id, shuffle=None)
        assert [r['card_id'] for r in db.deck_report(conn, deck_id)] == [c, b, a, c]
        assert (result.correct, result.incorrect) == (3, 1)

    def test_incorrect_counts_attempts(self, conn, scripted):
        deck_id, _ = _deck(conn, ('France', 'Paris'))
        io = scripted(['no', 'nope', 'still no', 'Paris'])
        result = review_deck(conn, io, deck_id, shuffle=None)
        assert (result.correct, result.incorrect) == (1, 3)
        assert _count(conn, 'answers') == 4

    def test_empty_deck(self, conn, scripted):
        deck_id = db.create_deck(conn, 'Empty')
        io = scripted([])
        result = review_deck(conn, io, deck_id, shuffle=None)
        assert (result.correct, result.incorrect) == (0, 0)
        assert _count(conn, 'review_sessions') == 1
        assert _count(conn, 'answers') == 0
        assert io.prompts == []

    def test_each_run_is_a_new_session(self, conn, scripted):
        deck_id, _ = _deck(conn, ('France', 'Paris'))
        first = review_deck(conn, scripted(['Paris']), deck_id, shuffle=None)
        second = review_deck(conn, scripted(['Paris']), deck_id, shuffle=None)
        assert second.session_id != first.session_id

    def test_uses_given_shuffle(self, conn, scripted):
        deck_id, (x, y) = _deck(conn, ('France', 'Paris'), ('Japan', 'Tokyo'))
        io = scripted(['Paris', 'Tokyo'])
        review_deck(conn, io, deck_id, shuffle=lambda cards: cards.reverse())
        assert [r['card_id'] for r in db.deck_report(conn, deck_id)] == [x, y]

    def test_only_deck_cards_are_asked(self, conn, scripted):
        deck_id, _ = _deck(conn, ('France', 'Paris'))
        db.create_card(conn, 'Loose', 'card')
        io = scripted(['Paris'])
        review_deck(conn, io, deck_id, shuffle=None)
        assert not any('Loose' in line for line in io.output)

    def test_storage_failure_aborts(self, conn, scripted, monkeypatch):
        deck_id, _ = _deck(conn, ('France', 'Paris'))

        def broken(*args):
            raise sqlite3.OperationalError("disk I/O error")

        monkeypatch.setattr(db, 'record_answer', broken)
        with pytest.raises(sqlite3.OperationalError):
            review_deck(conn, scripted(['Paris']), deck_id, shuffle=None)

    def test_summary(self):
        assert summary(ReviewResult(1, 2, 1)) == "\U0001f389 Done! 2 correct, 1 incorrect"


class TestReport:
    def test_groups_by_session(self, conn, scripted):
        deck_id, _ = _deck(conn, ('France', 'Paris'))
        review_deck(conn, scripted(['Lyon', 'Paris']), deck_id, shuffle=None)
        review_deck(conn, scripted(['Paris']), deck_id, shuffle=None)

        sessions = build_report(conn, deck_id)
        assert len(sessions) == 2
        assert (sessions[0]['correct'], sessions[0]['incorrect']) == (1, 1)
        assert (sessions[1]['correct'], sessions[1]['incorrect']) == (1, 0)
        assert [a['is_correct'] for a in sessions[0]['answers']] == [False, True]

    def test_format_lists_answers(self, conn, scripted):
        deck_id, _ = _deck(conn, ('France', 'Paris'))
        review_deck(conn, scripted(['Lyon', 'Paris']), deck_id, shuffle=None)
        text = format_report(build_report(conn, deck_id))
        assert "1 correct, 1 incorrect" in text
        assert "'Lyon' (expected 'Paris')" in text

    def test_format_empty(self):
        assert 'No reviews' in format_report([])
