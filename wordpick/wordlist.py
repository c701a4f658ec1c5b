"""Loads the word list the picker ranks."""

from pathlib import Path
from typing import List, Union

from wordpick.logger import get_logger

logger = get_logger(__name__)

DEFAULT_WORDLIST = Path("/usr/share/dict/words")


class WordListError(Exception):
    """The word list could not be found, read or decoded."""

    def __init__(self, path, reason):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not find or read the word list at {self.path}: {reason}")


def load_words(path: Union[str, Path] = DEFAULT_WORDLIST) -> List[str]:
    """
    Read a newline-delimited word list.

    Each non-empty line is one candidate, kept in file order. Line endings
    are stripped; any other whitespace is part of the word.

    Raises:
        WordListError: if the file is missing, unreadable or not UTF-8.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WordListError(path, "no such file") from None
    except UnicodeDecodeError as e:
        raise WordListError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise WordListError(path, e.strerror or str(e)) from e

    words = [line for line in text.splitlines() if line]
    logger.info(f"Loaded {len(words):,} words from {path}")
    return words
