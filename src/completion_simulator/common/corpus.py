"""Static text corpus used as the pool of completion texts."""
from __future__ import annotations
import random
from dataclasses import dataclass, field
from pathlib import Path

PARAGRAPH_DELIMITER = "\n\n"

@dataclass(frozen=True)
class TextCorpus:
    """Ordered, read-only paragraphs with uniform random sampling."""
    paragraphs: tuple[str, ...]
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @classmethod
    def from_text(cls, text: str, rng: random.Random | None = None) -> "TextCorpus":
        """
        Split text on blank lines. Empty paragraphs are kept.

        Args:
            text: Raw corpus text.
            rng: Optional random source, mainly for tests.
        """
        paragraphs = tuple(text.split(PARAGRAPH_DELIMITER))
        if rng is None:
            return cls(paragraphs)
        return cls(paragraphs, rng)

    def __len__(self) -> int:
        return len(self.paragraphs)

    def sample(self) -> str:
        """Return one paragraph drawn uniformly at random."""
        return self.paragraphs[self.rng.randrange(len(self.paragraphs))]

def load_corpus(path: str = "data/corpus.txt", rng: random.Random | None = None) -> TextCorpus:
    """
    Load a corpus file.

    Args:
        path: Path to a UTF-8 text file.
        rng: Optional random source.

    Raises:
        OSError: if the file cannot be read.
    """
    return TextCorpus.from_text(Path(path).read_text(encoding="utf-8"), rng=rng)
