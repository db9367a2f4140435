# utils/bible_data.py
import json
import logging
import os
import threading

from config import Config
from models.bible import Translation
from utils.bible_index import build_index

logger = logging.getLogger(__name__)

TRANSLATIONS = {
    'acf': Translation('acf', 'Almeida Corrigida Fiel', 'pt-BR', 'ACF'),
    'aa': Translation('aa', 'Almeida Revisada Imprensa Bíblica', 'pt-BR', 'AA'),
    'nvi': Translation('nvi', 'Nova Versão Internacional', 'pt-BR', 'NVI'),
}

DEFAULT_TRANSLATION = 'acf'


def dataset_filename(translation):
    return f"bible-data-{translation}.json"


class BibleLibrary:
    """Loads the bundled translation datasets and builds their book index on demand."""

    def __init__(self, data_dir, default_translation=DEFAULT_TRANSLATION):
        if default_translation not in TRANSLATIONS:
            raise ValueError(f"Unsupported default translation: {default_translation}")
        self.data_dir = data_dir
        self.default_translation = default_translation
        self._raw = {}
        self._lock = threading.Lock()

    def translations(self):
        return list(TRANSLATIONS.values())

    def resolve_translation(self, translation):
        """Return a supported translation id, substituting the default for unknown ones."""
        if translation:
            key = translation.strip().lower()
            if key in TRANSLATIONS:
                return key
            logger.warning(f"Unknown translation '{translation}', falling back to '{self.default_translation}'")
        return self.default_translation

    def load_raw(self, translation):
        """Raw dataset for a supported translation id, read from disk once."""
        with self._lock:
            if translation not in self._raw:
                path = os.path.join(self.data_dir, dataset_filename(translation))
                logger.info(f"Loading Bible dataset from: {path}")
                # utf-8-sig: the published datasets ship with a BOM
                with open(path, 'r', encoding='utf-8-sig') as f:
                    self._raw[translation] = json.load(f)
                logger.info(f"Loaded {len(self._raw[translation])} books for '{translation}'")
            return self._raw[translation]

    def get_books(self, translation=None):
        """Build a fresh index for the translation. Never cached; rebuilt on each selection."""
        translation = self.resolve_translation(translation)
        return build_index(self.load_raw(translation), translation)


_library_instance = None

def get_library():
    """Get the process-wide BibleLibrary configured from Config."""
    global _library_instance
    if _library_instance is None:
        _library_instance = BibleLibrary(Config.BIBLE_DATA_DIR, Config.DEFAULT_TRANSLATION)
    return _library_instance
