"""Interactive terminal fuzzy word picker ranked by edit distance."""

from wordpick.ranking import distance, rank
from wordpick.selection import Selection
from wordpick.session import RunningFlag, Session, SessionState
from wordpick.wordlist import WordListError, load_words

__version__ = "0.1.0"

__all__ = [
    "RunningFlag",
    "Selection",
    "Session",
    "SessionState",
    "WordListError",
    "distance",
    "load_words",
    "rank",
]
