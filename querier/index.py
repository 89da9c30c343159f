# querier/index.py
"""
Index Store
Read-only word -> ScoreSet lookup loaded from the indexer's output.

The index file holds one word per line followed by docID/count pairs:

    word docID count [docID count]...

A malformed line is skipped and counted, the rest of the file still loads.
"""
import heapq
import logging
from collections import defaultdict
from typing import List, Optional, Tuple

from querier.counters import ScoreSet

logger = logging.getLogger('querier.index')


class Index:
    """
    An inverted index mapping each word to the documents it occurs in.

    Attributes:
        index (dict): {word: ScoreSet(doc_id -> occurrence count)}
    """
    def __init__(self):
        self.index = defaultdict(ScoreSet)

    @property
    def vocab_size(self) -> int:
        return len(self.index)

    @property
    def doc_count(self) -> int:
        doc_ids = set()
        for counts in self.index.values():
            doc_ids.update(counts.keys())
        return len(doc_ids)

    def find(self, word: str) -> Optional[ScoreSet]:
        """Return the ScoreSet for word, or None if the word was never indexed."""
        return self.index.get(word)

    def add(self, word: str, doc_id: int, count: int) -> None:
        self.index[word].set(doc_id, count)

    def get_most_frequent_words(self, n: int = 10) -> List[Tuple[str, int]]:
        totals = {}
        for word, counts in self.index.items():
            totals[word] = sum(count for _, count in counts.items())
        # Highest total first, ties in alphabetical order
        return heapq.nsmallest(n, totals.items(), key=lambda x: (-x[1], x[0]))

    def load(self, fp) -> int:
        """
        Load index lines from an open text file.

        Args:
            fp: A file object positioned at the start of the index.

        Returns:
            int: The number of malformed lines skipped; 0 means a clean load.
        """
        errors = 0
        for line_number, line in enumerate(fp, 1):
            fields = line.split()
            if not fields:
                continue
            word, numbers = fields[0], fields[1:]
            try:
                if "\ufffd" in word:
                    raise ValueError("word is not valid UTF-8")
                pairs = self._parse_pairs(numbers)
            except ValueError as e:
                logger.warning(f"Skipping index line {line_number} ('{word}'): {e}")
                errors += 1
                continue
            for doc_id, count in pairs:
                self.add(word, doc_id, count)
        logger.info(f"Loaded {self.vocab_size} words covering {self.doc_count} documents")
        return errors

    @staticmethod
    def _parse_pairs(numbers):
        if not numbers:
            raise ValueError("no document counts")
        if len(numbers) % 2 != 0:
            raise ValueError("odd number of docID/count fields")
        values = [int(n) for n in numbers]
        pairs = list(zip(values[0::2], values[1::2]))
        for doc_id, count in pairs:
            if doc_id < 1 or count < 0:
                raise ValueError(f"invalid pair {doc_id} {count}")
        return pairs

    def save(self, fp) -> None:
        """
        Write the index in the same line format that load() reads.

        Words and document IDs are written in ascending order.
        """
        for word in sorted(self.index):
            pairs = " ".join(f"{doc_id} {count}"
                             for doc_id, count in sorted(self.index[word].items()))
            fp.write(f"{word} {pairs}\n")

    @classmethod
    def from_file(cls, filepath: str):
        """
        Build an Index from an index file on disk.

        Returns:
            Tuple[Index, int]: The loaded index and the number of malformed lines.

        Raises:
            OSError: If the file cannot be opened.
        """
        index = cls()
        with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
            errors = index.load(f)
        return index, errors
