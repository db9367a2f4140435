# ./tests/conftest.py
# Shared fixtures: small translation datasets on disk and a throwaway SQLite database.

import os
import json
import tempfile

import pytest

TMP_DIR = tempfile.mkdtemp(prefix='bible-tests-')
DATA_DIR = os.path.join(TMP_DIR, 'data')
JWT_SECRET = 'test-secret-key-that-is-long-enough-for-hs256'

# Config reads the environment on import, so this must run before any project import
os.environ['BIBLE_DATA_DIR'] = DATA_DIR
os.environ['DATABASE_URL'] = f"sqlite:///{os.path.join(TMP_DIR, 'test.db')}"
os.environ['JWT_SECRET'] = JWT_SECRET
os.environ['DEFAULT_TRANSLATION'] = 'acf'

JOHN_3 = [f"Versículo {i} do capítulo três." for i in range(1, 16)] + [
    "Porque Deus amou o mundo de tal maneira que deu o seu Filho unigênito."
]

ACF = [
    {"abbrev": "gn", "name": "Gênesis", "chapters": [
        ["No princípio criou Deus os céus e a terra.", "E a terra era sem forma e vazia."],
        ["Assim os céus, a terra e todo o seu exército foram acabados."],
    ]},
    {"abbrev": "sl", "name": "Salmos", "chapters": [
        ["Bem-aventurado o homem que não anda segundo o conselho dos ímpios.",
         "Antes tem o seu prazer na lei do SENHOR."],
    ]},
    {"abbrev": "jo", "name": "João", "chapters": [
        ["No princípio era o Verbo, e o Verbo estava com Deus, e o Verbo era Deus.",
         "Ele estava no princípio com Deus."],
        ["E, ao terceiro dia, fizeram-se umas bodas em Caná da Galiléia."],
        JOHN_3,
    ]},
    {"abbrev": "1jo", "name": "1 João", "chapters": [
        ["O que era desde o princípio, o que vimos com os nossos olhos.",
         "Aquele que não ama não conhece a Deus; porque Deus é amor."],
    ]},
    {"abbrev": "xx", "chapters": [
        ["Um livro que não está na tabela."],
    ]},
]

AA = [
    {"abbrev": "gn", "chapters": [["No princípio criou DEUS os céus e a terra."]]},
    {"abbrev": "jo", "chapters": [["No princípio era o Verbo."]]},
]

NVI = [
    {"abbrev": "gn", "chapters": [["No princípio Deus criou os céus e a terra."]]},
]


def write_dataset(data_dir, translation, books):
    os.makedirs(data_dir, exist_ok=True)
    path = os.path.join(data_dir, f"bible-data-{translation}.json")
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(books, f, ensure_ascii=False)
    return path


for _translation, _books in (('acf', ACF), ('aa', AA), ('nvi', NVI)):
    write_dataset(DATA_DIR, _translation, _books)


@pytest.fixture
def library():
    from utils.bible_data import BibleLibrary
    return BibleLibrary(DATA_DIR)


@pytest.fixture
def acf_books(library):
    return library.get_books('acf')


@pytest.fixture
def db_session():
    from database import SessionLocal, init_db
    from models import Bookmark, DailyVerse

    init_db()
    session = SessionLocal()
    yield session
    session.rollback()
    session.query(Bookmark).delete()
    session.query(DailyVerse).delete()
    session.commit()
    session.close()


@pytest.fixture
def client(db_session):
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    import jwt

    def make(user_id='user-1'):
        token = jwt.encode({'sub': user_id, 'aud': 'authenticated'}, JWT_SECRET, algorithm='HS256')
        return {'Authorization': f'Bearer {token}'}

    return make
