"""
Ranker and Reporter

Filters a result ScoreSet down to its matches, orders them by score and
renders the ranked report.
"""

import sys
from collections import namedtuple

from .constants import NO_URL, SEPARATOR

DocScore = namedtuple('DocScore', ['doc_id', 'score'])


def rank(results):
    """
    Rank the documents that actually matched.

    Entries with a zero score are dropped. Equal scores are ordered by
    ascending document ID.

    Args:
        results (ScoreSet): Scores produced by the evaluator

    Returns:
        list: DocScore tuples, highest score first
    """
    matches = [DocScore(doc_id, score) for doc_id, score in results.items() if score > 0]
    return sorted(matches, key=lambda d: (-d.score, d.doc_id))


def format_report(ranked, page_directory):
    """
    Render ranked matches as report lines.

    Args:
        ranked (list): DocScore tuples from rank()
        page_directory (PageDirectory): Resolves document IDs to URLs

    Returns:
        list: Report lines without trailing newlines
    """
    if not ranked:
        return ["No documents match.", SEPARATOR]

    lines = [f"Matches {len(ranked)} documents (ranked):"]
    for doc in ranked:
        url = page_directory.get_url(doc.doc_id)
        lines.append(f"score {doc.score:3d}  doc {doc.doc_id:3d}: {url if url is not None else NO_URL}")
    lines.append(SEPARATOR)
    return lines


def print_report(results, page_directory, out=None):
    """Rank results and write the report to out (stdout by default)."""
    out = out or sys.stdout
    for line in format_report(rank(results), page_directory):
        print(line, file=out)
