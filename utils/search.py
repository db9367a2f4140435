# utils/search.py
import logging
from dataclasses import dataclass, field
from typing import List

from models.bible import VerseRecord
from utils.resolver import make_verse

logger = logging.getLogger(__name__)


@dataclass
class SearchPage:
    verses: List[VerseRecord] = field(default_factory=list)
    total: int = 0
    page: int = 1
    has_more: bool = False

    def to_dict(self):
        return {
            "verses": [v.to_dict() for v in self.verses],
            "total": self.total,
            "page": self.page,
            "hasMore": self.has_more
        }


class BibleSearchEngine:
    def __init__(self, library):
        self.library = library

    def scan(self, books, term, translation):
        """Every verse whose text contains term, case-insensitively, in canonical order"""
        needle = term.lower()
        results = []
        for book in books:
            for chapter_idx, chapter in enumerate(book.chapters):
                for verse_idx, text in enumerate(chapter):
                    if needle in text.lower():
                        results.append(make_verse(book, chapter_idx + 1, verse_idx + 1, text, translation))
        return results

    def search(self, term, translation=None):
        """Main search method. A blank term matches nothing."""
        if not term or not term.strip():
            return []

        translation = self.library.resolve_translation(translation)
        books = self.library.get_books(translation)
        results = self.scan(books, term, translation)
        logger.info(f"Search for '{term}' in '{translation}' returned {len(results)} verses")
        return results


def paginate(results, page=1, page_size=20):
    page = max(page, 1)
    page_size = max(page_size, 1)
    start = (page - 1) * page_size
    return SearchPage(
        verses=results[start:start + page_size],
        total=len(results),
        page=page,
        has_more=start + page_size < len(results)
    )
