"""An English-to-Chinese word dictionary loaded from a text file."""

from __future__ import annotations

import os
from pathlib import Path

from threadnet.logger import LogLevel, log

DEFAULT_DICT_PATH = "./Dict.txt"
SEPARATOR = ": "
UNKNOWN_WORD = "未知"


class DictionaryError(OSError):
    """Raised when the dictionary file cannot be read."""


class Dictionary:
    """Maps words to translations read from ``word: translation`` lines.

    Lines without the separator are reported and skipped.  When a word
    appears more than once, its first entry is kept.
    """

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_DICT_PATH) -> None:
        self.path = Path(path)
        self._entries: dict[str, str] = {}
        self._load()

    def _load(self) -> None:
        try:
            with self.path.open(encoding="utf-8") as source:
                for raw in source:
                    line = raw.rstrip("\n")
                    key, sep, value = line.partition(SEPARATOR)
                    if not sep:
                        log(LogLevel.WARNING, "load error: ", line)
                        continue
                    self._entries.setdefault(key, value)
        except OSError as exc:
            log(LogLevel.FATAL, "open ", self.path, " error")
            raise DictionaryError(f"cannot open dictionary {self.path}: {exc}") from exc

    def translate(self, word: str) -> str:
        """Return the translation of ``word``, or ``未知`` if it is not known."""
        return self._entries.get(word, UNKNOWN_WORD)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries