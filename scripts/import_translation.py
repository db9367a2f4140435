# scripts/import_translation.py
import json
import sys
from pathlib import Path

# Add the parent directory to the Python path properly
current_dir = Path(__file__).resolve().parent
backend_dir = current_dir.parent
sys.path.insert(0, str(backend_dir))

from config import Config
from utils.bible_data import TRANSLATIONS, dataset_filename
from utils.bible_index import BOOK_NAMES, build_index

def clean_verse_text(text):
    """Clean verse text by trimming whitespace"""
    return text.strip()

def clean_dataset(raw_books):
    """Keep only abbrev and chapters, with cleaned verse text. Returns (books, skipped)."""
    books = []
    skipped = []
    for raw in raw_books:
        abbrev = raw.get('abbrev')
        chapters = raw.get('chapters')
        if not abbrev or not isinstance(chapters, list):
            skipped.append(raw.get('name') or repr(abbrev))
            continue
        books.append({
            'abbrev': abbrev.strip().lower(),
            'chapters': [[clean_verse_text(v) for v in chapter] for chapter in chapters]
        })
    return books, skipped

def import_translation(translation, json_path, data_dir=None):
    """Validate a source JSON file and write it into the Bible data directory"""
    if translation not in TRANSLATIONS:
        raise ValueError(f"Unsupported translation '{translation}'. Valid: {', '.join(TRANSLATIONS)}")

    print(f"Reading JSON file from: {json_path}")
    # utf-8-sig: the published datasets ship with a BOM
    with open(json_path, 'r', encoding='utf-8-sig') as f:
        raw_books = json.load(f)

    books, skipped = clean_dataset(raw_books)
    index = build_index(books, translation)

    verse_count = sum(len(chapter) for book in index for chapter in book.chapters)
    unknown = [book.abbreviation for book in index if book.abbreviation.lower() not in BOOK_NAMES]
    old_count = sum(1 for book in index if book.testament == 'old')

    data_dir = Path(data_dir or Config.BIBLE_DATA_DIR)
    data_dir.mkdir(parents=True, exist_ok=True)
    out_path = data_dir / dataset_filename(translation)
    with open(out_path, 'w', encoding='utf-8') as f:
        json.dump(books, f, ensure_ascii=False)

    print(f"\nImport complete!")
    print(f"Wrote {len(index)} books ({old_count} Old Testament), {verse_count} verses to {out_path}")
    if skipped:
        print(f"Skipped {len(skipped)} malformed book records: {', '.join(skipped)}")
    if unknown:
        print(f"Warning: Unknown abbreviations {', '.join(unknown)} will be shown uppercased")
    if len(index) != len(BOOK_NAMES):
        print(f"\nWarning: Expected {len(BOOK_NAMES)} books but found {len(index)}")

    return out_path

if __name__ == '__main__':
    if len(sys.argv) not in (3, 4):
        print("Usage: python import_translation.py <translation> <path_to_source.json> [data_dir]")
        sys.exit(1)

    import_translation(sys.argv[1], sys.argv[2], sys.argv[3] if len(sys.argv) == 4 else None)
