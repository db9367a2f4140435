# utils/verse_of_day.py
import logging
import random
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from models.bible import VerseRecord
from models.daily_verse import DailyVerse
from utils.resolver import make_verse

logger = logging.getLogger(__name__)


def pick_random_verse(books, translation, rng=None):
    """Random book, then chapter, then verse. Empty books and chapters are never picked."""
    rng = rng or random
    candidates = [b for b in books if any(b.chapters)]
    if not candidates:
        return None

    book = rng.choice(candidates)
    chapter_numbers = [idx + 1 for idx, chapter in enumerate(book.chapters) if chapter]
    chapter = rng.choice(chapter_numbers)
    verses = book.chapters[chapter - 1]
    verse_idx = rng.randrange(len(verses))
    return make_verse(book, chapter, verse_idx + 1, verses[verse_idx], translation)


def today_utc():
    """Calendar date the daily cache is keyed on, in UTC."""
    return datetime.now(timezone.utc).date()


def get_verse_of_day(library, session, translation=None, today=None, rng=None):
    """
    Return today's verse, choosing and caching a new one on the first call of each day.

    Args:
        library: BibleLibrary to draw from
        session: SQLAlchemy session holding the daily cache
        translation: translation used when a new verse is drawn
        today: calendar date used as the cache key (defaults to the UTC date)
        rng: random source, for deterministic picks
    """
    day = (today or today_utc()).isoformat()

    cached = session.get(DailyVerse, day)
    if cached:
        return VerseRecord.from_dict(cached.payload)

    translation = library.resolve_translation(translation)
    verse = pick_random_verse(library.get_books(translation), translation, rng)
    if verse is None:
        logger.warning(f"No verses available in '{translation}' for verse of the day")
        return None

    try:
        with session.begin_nested():
            session.add(DailyVerse(day=day, payload=verse.to_dict()))
    except IntegrityError:
        # Another request stored a verse for this day first; serve that one
        logger.info(f"Verse of the day for {day} already stored, using it")
        cached = session.get(DailyVerse, day, populate_existing=True)
        return VerseRecord.from_dict(cached.payload)

    logger.info(f"Verse of the day for {day}: {verse.reference}")
    return verse
