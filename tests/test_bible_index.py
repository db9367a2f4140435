# ./tests/test_bible_index.py
# Tests for building the per-translation book index.

import copy

from utils.bible_index import BOOK_NAMES, OLD_TESTAMENT, build_index, find_book, book_testament


def test_preserves_input_order(acf_books):
    assert [b.id for b in acf_books] == ['gn', 'sl', 'jo', '1jo', 'xx']


def test_resolves_names_and_falls_back_to_uppercase(acf_books):
    names = {b.id: b.name for b in acf_books}
    assert names['jo'] == 'João'
    assert names['1jo'] == '1 João'
    assert names['xx'] == 'XX'


def test_chapter_count_matches_chapters(acf_books):
    for book in acf_books:
        assert book.chapter_count == len(book.chapters)
    john = find_book(acf_books, 'jo')
    assert john.chapter_count == 3
    assert john.to_dict() == {
        'id': 'jo', 'name': 'João', 'abbreviation': 'jo', 'testament': 'new', 'chapters': 3
    }


def test_testament_partition():
    old = {abbrev for abbrev in BOOK_NAMES if book_testament(abbrev) == 'old'}
    new = {abbrev for abbrev in BOOK_NAMES if book_testament(abbrev) == 'new'}
    assert len(OLD_TESTAMENT) == 39
    assert old == set(OLD_TESTAMENT)
    assert old.isdisjoint(new)
    assert old | new == set(BOOK_NAMES)
    assert len(new) == 27


def test_no_partial_testament_matches():
    # 'g' and 'gnx' share characters with 'gn' but aren't in the set
    assert book_testament('g') == 'new'
    assert book_testament('gnx') == 'new'


def test_raw_dataset_is_not_mutated():
    original = [{"abbrev": "jo", "chapters": [["No princípio era o Verbo."], ["Bodas em Caná."]]}]
    raw = copy.deepcopy(original)
    books = build_index(raw, 'acf')
    assert raw == original
    assert books[0].chapters[0] is raw[0]['chapters'][0]


def test_unknown_abbreviation_never_fails():
    books = build_index([{"abbrev": "Zz", "chapters": []}], 'acf')
    assert books[0].id == 'zz'
    assert books[0].name == 'ZZ'
    assert books[0].chapter_count == 0


def test_find_book_matches_name_abbreviation_or_id(acf_books):
    assert find_book(acf_books, 'JOÃO').id == 'jo'
    assert find_book(acf_books, 'Jo').id == 'jo'
    assert find_book(acf_books, '1 joão').id == '1jo'
    assert find_book(acf_books, 'xx').name == 'XX'
    assert find_book(acf_books, 'Mateus') is None
    assert find_book(acf_books, '') is None


def test_find_book_first_match_wins():
    # 'jo' is both the id of the first book and the abbreviation of the second
    books = build_index([
        {"abbrev": "jo", "chapters": [["a"]]},
        {"abbrev": "JO", "chapters": [["b"]]},
    ], 'acf')
    assert find_book(books, 'jo') is books[0]
