# utils/resolver.py
from models.bible import VerseRecord
from utils.bible_index import find_book
from utils.reference import parse_reference, format_reference


def make_verse(book, chapter, verse, text, translation):
    reference = format_reference(book.name, chapter, verse)
    return VerseRecord(
        id=f"{translation}:{reference}",
        reference=reference,
        text=text,
        book=book.name,
        chapter=chapter,
        verse=verse,
        translation=translation
    )


def resolve_verse(books, book, chapter, verse, translation):
    """Return the VerseRecord at book/chapter/verse (1-based), or None."""
    book_entry = find_book(books, book)
    if not book_entry:
        return None

    # Guard explicitly so 0 or negative numbers never wrap around to the end
    if chapter < 1 or chapter > book_entry.chapter_count:
        return None
    verses = book_entry.chapters[chapter - 1]
    if verse < 1 or verse > len(verses):
        return None

    return make_verse(book_entry, chapter, verse, verses[verse - 1], translation)


def get_chapter(books, book, chapter, translation):
    """All verses of a chapter, numbered by position. Empty list if not found."""
    book_entry = find_book(books, book)
    if not book_entry or chapter < 1 or chapter > book_entry.chapter_count:
        return []

    return [
        make_verse(book_entry, chapter, idx + 1, text, translation)
        for idx, text in enumerate(book_entry.chapters[chapter - 1])
    ]


def get_verse(library, reference, translation=None):
    """
    Look up a verse from a reference string like 'João 3:16'.

    Raises MalformedReference when the string can't be parsed;
    returns None when the verse doesn't exist.
    """
    parsed = parse_reference(reference)
    translation = library.resolve_translation(translation)
    books = library.get_books(translation)
    return resolve_verse(books, parsed.book, parsed.chapter, parsed.verse, translation)
