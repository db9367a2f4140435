# This file makes the models directory a Python package
from .bible import Translation, BookEntry, VerseRecord
from .bookmark import Bookmark
from .daily_verse import DailyVerse

__all__ = [
    'Translation',
    'BookEntry',
    'VerseRecord',
    'Bookmark',
    'DailyVerse',
]
