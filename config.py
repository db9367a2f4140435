# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

class Config:
    SQLITE_DB_PATH = os.path.join(BASE_DIR, 'bible.db')
    DATABASE_URL = os.getenv('DATABASE_URL', f"sqlite:///{SQLITE_DB_PATH}")
    BIBLE_DATA_DIR = os.getenv('BIBLE_DATA_DIR', os.path.join(BASE_DIR, 'data'))
    DEFAULT_TRANSLATION = os.getenv('DEFAULT_TRANSLATION', 'acf')
    JWT_SECRET = os.getenv('JWT_SECRET', 'your-secret-key')  # In production, use a proper secret key
    SEARCH_PAGE_SIZE = int(os.getenv('SEARCH_PAGE_SIZE', 20))
