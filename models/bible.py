# models/bible.py
from dataclasses import dataclass, asdict
from typing import Tuple


@dataclass(frozen=True)
class Translation:
    id: str
    name: str
    language: str
    abbreviation: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class BookEntry:
    """A book of one translation, normalized from the raw dataset."""
    id: str
    name: str
    abbreviation: str
    testament: str
    chapters: Tuple[list, ...]

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "abbreviation": self.abbreviation,
            "testament": self.testament,
            "chapters": self.chapter_count
        }


@dataclass(frozen=True)
class VerseRecord:
    id: str
    reference: str
    text: str
    book: str
    chapter: int
    verse: int
    translation: str

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            reference=data['reference'],
            text=data['text'],
            book=data['book'],
            chapter=int(data['chapter']),
            verse=int(data['verse']),
            translation=data['translation']
        )
