# utils/reference.py
import re
from typing import NamedTuple

# ASCII digits only; \d would also accept other Unicode numerals
REFERENCE_PATTERN = re.compile(r'(.+)\s([0-9]+):([0-9]+)')


class MalformedReference(ValueError):
    """Raised when a reference string is not of the form 'Book Chapter:Verse'."""

    def __init__(self, reference):
        self.reference = reference
        super().__init__(f'Invalid reference format: "{reference}". Use "Book Chapter:Verse"')


class ParsedReference(NamedTuple):
    book: str
    chapter: int
    verse: int


def parse_reference(reference):
    """Parse a reference like 'João 3:16' into (book, chapter, verse)"""
    if not isinstance(reference, str):
        raise MalformedReference(reference)

    match = REFERENCE_PATTERN.fullmatch(reference)
    if not match:
        raise MalformedReference(reference)

    book, chapter, verse = match.groups()
    book = book.strip()
    if not book:
        raise MalformedReference(reference)

    return ParsedReference(book, int(chapter), int(verse))


def format_reference(book, chapter, verse):
    return f"{book} {chapter}:{verse}"
