"""Word list loading and the built-in default list."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Set

import pandas as pd

from ..core.exceptions import WordListLoadError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

TABLE_SUFFIXES = {".csv": ",", ".tsv": "\t"}

DEFAULT_WORDS: tuple = (
    "ALGORITHM", "ARRAY", "BINARY", "BOOLEAN", "BROWSER", "BUFFER", "CACHE",
    "CLASS", "CLIENT", "CLOUD", "CODE", "COMPILER", "CONSOLE", "CURSOR",
    "DATABASE", "DEBUG", "DEPLOY", "DOMAIN", "ENGINE", "FIREWALL", "FUNCTION",
    "GATEWAY", "HARDWARE", "INDEX", "INPUT", "INTERNET", "KERNEL", "KEYBOARD",
    "LIBRARY", "LINUX", "LOGIC", "MEMORY", "MODULE", "MONITOR", "NETWORK",
    "OBJECT", "OUTPUT", "PACKET", "PIXEL", "PROCESSOR", "PROGRAM", "PROTOCOL",
    "PYTHON", "QUERY", "ROUTER", "RUNTIME", "SCRIPT", "SERVER", "SOFTWARE",
    "STACK", "STRING", "SYNTAX", "THREAD", "TOKEN", "VARIABLE", "VECTOR",
    "VIRTUAL", "WIDGET",
)


def prepare_word_list(words: Iterable[str], max_length: Optional[int] = None) -> List[str]:
    """Clean and deduplicate ``words``, keeping first occurrences in order."""

    prepared: List[str] = []
    seen: Set[str] = set()
    for raw in words:
        word = clean_word(raw)
        if not word or word in seen:
            continue
        if max_length is not None and len(word) > max_length:
            LOGGER.debug("Dropping '%s': longer than %d letters", word, max_length)
            continue
        seen.add(word)
        prepared.append(word)
    return prepared


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""

    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def load_word_list(path: Path | str) -> List[str]:
    """Load raw words from a text file or from a CSV/TSV table.

    Tables use the ``word`` column when present, otherwise the first column.
    """

    source = Path(path)
    if not source.is_file():
        raise WordListLoadError(f"Missing word list: {source}")

    sep = TABLE_SUFFIXES.get(source.suffix.lower())
    if sep is None:
        try:
            words = parse_words_file(source)
        except (UnicodeDecodeError, OSError) as exc:
            raise WordListLoadError(f"Unreadable word list {source}: {exc}") from exc
    else:
        try:
            df = pd.read_csv(source, sep=sep, dtype=str, keep_default_na=False)
        except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError, OSError) as exc:
            raise WordListLoadError(f"Unreadable word table {source}: {exc}") from exc
        if df.columns.empty:
            raise WordListLoadError(f"Word table {source} has no columns")
        column = "word" if "word" in df.columns else df.columns[0]
        words = [value for value in df[column].tolist() if value]

    LOGGER.info("Loaded %d words from %s", len(words), source)
    return words
