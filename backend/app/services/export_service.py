"""CSV export of the leaderboard"""

import csv
import io
from typing import Iterable

from backend.app.models.candidate import Candidate
from backend.app.services.ranking import RankedCandidate
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

CSV_HEADER = [
    "Name", "Title", "Location", "Company",
    "Overall Score", "Skills Score", "Experience Score", "Global Rank",
]


def _row(candidate: Candidate) -> list:
    return [
        candidate.name,
        candidate.title,
        candidate.location,
        candidate.company or "",
        candidate.overall_score,
        candidate.skills_score,
        candidate.experience_score,
        candidate.global_rank if candidate.global_rank is not None else "",
    ]


def export_candidates_csv(leaderboard: Iterable[RankedCandidate]) -> str:
    """
    Render leaderboard entries as CSV

    Text columns are always double-quoted (embedded quotes doubled), numbers
    are written bare, so names like ``O'Brien, Jr.`` keep the columns aligned.

    Args:
        leaderboard: (candidate, percentile) pairs in leaderboard order

    Returns:
        CSV document with a header row and one row per candidate
    """
    output = io.StringIO()

    header_writer = csv.writer(output, lineterminator="\n")
    header_writer.writerow(CSV_HEADER)

    writer = csv.writer(output, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    rows = 0
    for candidate, _percentile in leaderboard:
        writer.writerow(_row(candidate))
        rows += 1

    logger.info(f"Exported {rows} candidates to CSV")
    return output.getvalue()
