# ./tests/test_import_translation.py
# Tests for the dataset import script.

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'scripts')))

from import_translation import clean_dataset, import_translation
from utils.bible_data import BibleLibrary


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / 'source.json'
    books = [
        {"abbrev": " GN ", "name": "Gênesis", "chapters": [["  No princípio criou Deus os céus e a terra. "]]},
        {"name": "Sem abreviação", "chapters": [["x"]]},
        {"abbrev": "jo", "name": "João", "chapters": [["No princípio era o Verbo."]]},
    ]
    # Published datasets start with a BOM
    path.write_text(json.dumps(books, ensure_ascii=False), encoding='utf-8-sig')
    return path


def test_clean_dataset():
    books, skipped = clean_dataset([
        {"abbrev": "Gn", "chapters": [[" a "]]},
        {"abbrev": "", "chapters": []},
        {"abbrev": "ex", "chapters": None},
    ])
    assert books == [{"abbrev": "gn", "chapters": [["a"]]}]
    assert len(skipped) == 2


def test_import_writes_loadable_dataset(source_file, tmp_path):
    data_dir = tmp_path / 'data'
    out_path = import_translation('nvi', str(source_file), str(data_dir))
    assert out_path == data_dir / 'bible-data-nvi.json'

    library = BibleLibrary(str(data_dir), default_translation='nvi')
    books = library.get_books('nvi')
    assert [b.name for b in books] == ['Gênesis', 'João']
    assert books[0].chapters[0][0] == 'No princípio criou Deus os céus e a terra.'


def test_import_rejects_unsupported_translation(source_file, tmp_path):
    with pytest.raises(ValueError):
        import_translation('kjv', str(source_file), str(tmp_path))
