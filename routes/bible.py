# routes/bible.py
from flask import Blueprint, jsonify, request
import logging

from config import Config
from database import get_db_session
from utils.bible_data import get_library
from utils.reference import MalformedReference
from utils.resolver import resolve_verse, get_chapter, get_verse
from utils.search import BibleSearchEngine, paginate
from utils.verse_of_day import get_verse_of_day
from utils.bible_index import find_book

bible_bp = Blueprint('bible', __name__)
logger = logging.getLogger(__name__)

def _translation():
    return get_library().resolve_translation(request.args.get('translation'))

@bible_bp.route('/translations', methods=['GET'])
def get_translations():
    return jsonify([t.to_dict() for t in get_library().translations()])

@bible_bp.route('/books', methods=['GET'])
def get_books():
    try:
        translation = _translation()
        books = get_library().get_books(translation)
        logger.info(f"Returning {len(books)} books for '{translation}'")
        return jsonify([book.to_dict() for book in books])
    except Exception as e:
        logger.error(f"Error in get_books: {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500

@bible_bp.route('/chapters/<book>', methods=['GET'])
def get_chapters(book):
    try:
        book_entry = find_book(get_library().get_books(_translation()), book)
        if not book_entry:
            return jsonify({"error": "Book not found"}), 404

        return jsonify(list(range(1, book_entry.chapter_count + 1)))
    except Exception as e:
        logger.error(f"Error in get_chapters: {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500

@bible_bp.route('/verses/<book>/<int:chapter>', methods=['GET'])
def get_verses(book, chapter):
    try:
        translation = _translation()
        verses = get_chapter(get_library().get_books(translation), book, chapter, translation)

        if not verses:
            return jsonify({"error": "Chapter not found"}), 404

        return jsonify([verse.to_dict() for verse in verses])
    except Exception as e:
        logger.error(f"Error in get_verses: {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500

@bible_bp.route('/verse/<book>/<int:chapter>/<int:verse>', methods=['GET'])
def get_single_verse(book, chapter, verse):
    try:
        translation = _translation()
        verse_obj = resolve_verse(get_library().get_books(translation), book, chapter, verse, translation)

        if not verse_obj:
            return jsonify({"error": "Verse not found"}), 404

        return jsonify(verse_obj.to_dict())
    except Exception as e:
        logger.error(f"Error in get_single_verse: {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500

@bible_bp.route('/reference', methods=['GET'])
def get_by_reference():
    ref = request.args.get('ref', '')
    try:
        verse_obj = get_verse(get_library(), ref, request.args.get('translation'))
    except MalformedReference as e:
        logger.info(f"Rejected reference '{ref}'")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.error(f"Error resolving reference '{ref}': {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500

    if not verse_obj:
        return jsonify({"error": "Verse not found"}), 404
    return jsonify(verse_obj.to_dict())

@bible_bp.route('/search', methods=['GET'])
def search_bible():
    query_str = request.args.get('q', '')
    page = request.args.get('page', 1, type=int)
    page_size = request.args.get('page_size', Config.SEARCH_PAGE_SIZE, type=int)

    try:
        engine = BibleSearchEngine(get_library())
        results = engine.search(query_str, request.args.get('translation'))
        return jsonify(paginate(results, page, page_size).to_dict())
    except Exception as e:
        logger.error(f"Search error: {str(e)}", exc_info=True)
        return jsonify({'error': str(e)}), 500

@bible_bp.route('/verse-of-the-day', methods=['GET'])
def verse_of_the_day():
    try:
        with get_db_session() as db:
            verse_obj = get_verse_of_day(get_library(), db, request.args.get('translation'))

        if not verse_obj:
            return jsonify({"error": "No verse available"}), 404
        return jsonify(verse_obj.to_dict())
    except Exception as e:
        logger.error(f"Error fetching verse of the day: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch verse of the day"}), 500
