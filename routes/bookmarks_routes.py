# routes/bookmarks_routes.py
from flask import Blueprint, request, jsonify
from pydantic import ValidationError
from database import get_db_session
from models import Bookmark
from schemas.bookmark_schemas import BookmarkCreate, BookmarkRead
from utils.auth import token_required
from utils.bible_data import get_library
from utils.reference import MalformedReference
from utils.resolver import get_verse
import logging

logger = logging.getLogger(__name__)
bookmarks_bp = Blueprint('bookmarks_bp', __name__, url_prefix='/api/bookmarks')

def _serialize(bookmark):
    return BookmarkRead.model_validate(bookmark).model_dump(mode='json', by_alias=True)

@bookmarks_bp.route("/", methods=['POST'])
@token_required
def create_bookmark(current_user_id):
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "Invalid JSON payload"}), 400

    try:
        payload = BookmarkCreate.model_validate(data)
    except ValidationError as e:
        return jsonify({"error": "Invalid bookmark data", "details": e.errors(include_url=False)}), 400

    try:
        verse = get_verse(get_library(), payload.reference, payload.translation)
    except MalformedReference as e:
        return jsonify({"error": str(e)}), 400

    if not verse:
        return jsonify({"error": "Verse not found"}), 404

    bookmark_id = Bookmark.make_id(current_user_id, verse.id)
    try:
        with get_db_session() as db:
            # Saving the same verse again replaces the note and tags
            bookmark = db.get(Bookmark, bookmark_id)
            created = bookmark is None
            if created:
                bookmark = Bookmark(
                    id=bookmark_id,
                    user_id=current_user_id,
                    verse_id=verse.id,
                    reference=verse.reference
                )
                db.add(bookmark)
            bookmark.note = payload.note
            bookmark.tags = payload.tags
            db.commit()
            db.refresh(bookmark) # To get created_at

            logger.info(f"{'Created' if created else 'Updated'} bookmark {bookmark_id}")
            return jsonify(_serialize(bookmark)), 201 if created else 200

    except Exception as e:
        logger.error(f"Error saving bookmark: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to save bookmark"}), 500

@bookmarks_bp.route("/", methods=['GET'])
@token_required
def get_bookmarks(current_user_id):
    try:
        with get_db_session() as db:
            bookmarks = db.query(Bookmark).filter_by(user_id=current_user_id).order_by(Bookmark.created_at.desc(), Bookmark.id).all()
            results = [_serialize(b) for b in bookmarks]
        return jsonify(results), 200
    except Exception as e:
        logger.error(f"Error fetching bookmarks: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch bookmarks"}), 500

@bookmarks_bp.route("/<path:bookmark_id>", methods=['DELETE'])
@token_required
def delete_bookmark(current_user_id, bookmark_id):
    try:
        with get_db_session() as db:
            bookmark_to_delete = db.query(Bookmark).filter_by(id=bookmark_id, user_id=current_user_id).first()

            if not bookmark_to_delete:
                return jsonify({"error": "Bookmark not found or not owned by user"}), 404

            db.delete(bookmark_to_delete)
        return jsonify({"message": "Bookmark deleted successfully"}), 200

    except Exception as e:
        logger.error(f"Error deleting bookmark {bookmark_id}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to delete bookmark"}), 500
