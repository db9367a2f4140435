# utils/bible_index.py
import logging

from models.bible import BookEntry

logger = logging.getLogger(__name__)

# Map of abbreviations to book names
BOOK_NAMES = {
    'gn': 'Gênesis',
    'ex': 'Êxodo',
    'lv': 'Levítico',
    'nm': 'Números',
    'dt': 'Deuteronômio',
    'js': 'Josué',
    'jz': 'Juízes',
    'rt': 'Rute',
    '1sm': '1 Samuel',
    '2sm': '2 Samuel',
    '1rs': '1 Reis',
    '2rs': '2 Reis',
    '1cr': '1 Crônicas',
    '2cr': '2 Crônicas',
    'ed': 'Esdras',
    'ne': 'Neemias',
    'et': 'Ester',
    'jó': 'Jó',
    'sl': 'Salmos',
    'pv': 'Provérbios',
    'ec': 'Eclesiastes',
    'ct': 'Cânticos',
    'is': 'Isaías',
    'jr': 'Jeremias',
    'lm': 'Lamentações',
    'ez': 'Ezequiel',
    'dn': 'Daniel',
    'os': 'Oséias',
    'jl': 'Joel',
    'am': 'Amós',
    'ob': 'Obadias',
    'jn': 'Jonas',
    'mq': 'Miquéias',
    'na': 'Naum',
    'hc': 'Habacuque',
    'sf': 'Sofonias',
    'ag': 'Ageu',
    'zc': 'Zacarias',
    'ml': 'Malaquias',
    'mt': 'Mateus',
    'mc': 'Marcos',
    'lc': 'Lucas',
    'jo': 'João',
    'at': 'Atos',
    'rm': 'Romanos',
    '1co': '1 Coríntios',
    '2co': '2 Coríntios',
    'gl': 'Gálatas',
    'ef': 'Efésios',
    'fp': 'Filipenses',
    'cl': 'Colossenses',
    '1ts': '1 Tessalonicenses',
    '2ts': '2 Tessalonicenses',
    '1tm': '1 Timóteo',
    '2tm': '2 Timóteo',
    'tt': 'Tito',
    'fm': 'Filemom',
    'hb': 'Hebreus',
    'tg': 'Tiago',
    '1pe': '1 Pedro',
    '2pe': '2 Pedro',
    '1jo': '1 João',
    '2jo': '2 João',
    '3jo': '3 João',
    'jd': 'Judas',
    'ap': 'Apocalipse'
}

OLD_TESTAMENT = frozenset([
    'gn', 'ex', 'lv', 'nm', 'dt', 'js', 'jz', 'rt', '1sm', '2sm', '1rs', '2rs',
    '1cr', '2cr', 'ed', 'ne', 'et', 'jó', 'sl', 'pv', 'ec', 'ct', 'is', 'jr',
    'lm', 'ez', 'dn', 'os', 'jl', 'am', 'ob', 'jn', 'mq', 'na', 'hc', 'sf',
    'ag', 'zc', 'ml'
])


def book_name(abbreviation):
    """Display name for an abbreviation, or the uppercased abbreviation if unknown."""
    return BOOK_NAMES.get(abbreviation.lower(), abbreviation.upper())


def book_testament(abbreviation):
    return 'old' if abbreviation.lower() in OLD_TESTAMENT else 'new'


def build_index(raw_books, translation):
    """
    Normalize a raw translation dataset into an ordered list of BookEntry.

    Args:
        raw_books: list of {"abbrev": ..., "chapters": [[verse, ...], ...]}
        translation: translation identifier the dataset belongs to

    The raw chapter lists are referenced, never copied or mutated.
    """
    books = []
    for raw in raw_books:
        abbreviation = raw['abbrev']
        books.append(BookEntry(
            id=abbreviation.lower(),
            name=book_name(abbreviation),
            abbreviation=abbreviation,
            testament=book_testament(abbreviation),
            chapters=tuple(raw.get('chapters') or ())
        ))

    logger.debug(f"Built index for '{translation}' with {len(books)} books")
    return books


def find_book(books, token):
    """Case-insensitive match against name, abbreviation or id. First match wins."""
    if not token:
        return None
    needle = token.strip().lower()
    for book in books:
        if needle in (book.name.lower(), book.abbreviation.lower(), book.id):
            return book
    return None
