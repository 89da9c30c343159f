"""
Document Store access for the crawler's page directory.

The crawler leaves a '.crawler' marker file in the directory and writes one
file per page, named by its document ID, whose first line is the page URL.
"""

import logging
import os

from .constants import CRAWLER_MARKER

logger = logging.getLogger('querier.pagedir')


def is_crawler_directory(path):
    """
    Check that path was produced by the crawler.

    Args:
        path (str): Candidate page directory

    Returns:
        bool: True if the marker file exists and can be opened for reading
    """
    try:
        with open(os.path.join(path, CRAWLER_MARKER), 'r'):
            return True
    except OSError:
        return False


class PageDirectory:
    """Resolves document IDs to URLs using the crawler's page files."""

    def __init__(self, path):
        self.path = path

    def get_url(self, doc_id):
        """
        Read the URL stored on the first line of a page file.

        Args:
            doc_id (int): Document ID, which is also the page file name

        Returns:
            str: The URL without its trailing newline, or None if the file is
                missing, empty or unreadable
        """
        if doc_id < 1:
            return None
        filepath = os.path.join(self.path, str(doc_id))
        try:
            with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
                line = f.readline()
        except OSError as e:
            logger.debug(f"Cannot read page file {filepath}: {e}")
            return None
        if not line:
            return None
        return line.rstrip('\n')
