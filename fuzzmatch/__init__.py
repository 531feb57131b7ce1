import importlib.metadata
import warnings

from fuzzmatch.models import CaseMode, Match
from fuzzmatch.ranking import RankedCandidate, rank_candidates
from fuzzmatch.rendering import format_simple, highlight
from fuzzmatch.scoring import Scoring
from fuzzmatch.search import FuzzySearch, best_match

try:
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError as e:  # pragma: no cover
    warnings.warn(f"Could not determine version of {__name__}\n{e!s}", stacklevel=2)
    __version__ = "unknown"

__all__ = [
    "CaseMode",
    "FuzzySearch",
    "Match",
    "RankedCandidate",
    "Scoring",
    "best_match",
    "format_simple",
    "highlight",
    "rank_candidates",
]
