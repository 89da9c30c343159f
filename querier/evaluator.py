"""
Query Evaluator

Evaluates a validated token list against the index. 'and' binds tighter than
'or': each and-sequence is reduced by intersection, and the and-sequence
results are then combined by union.
"""
import logging
from typing import List, Tuple

from querier.constants import AND, OR
from querier.counters import ScoreSet, intersect, union, zero_fill
from querier.index import Index

logger = logging.getLogger('querier.evaluator')


class QueryEvaluator:
    """
    Recursive descent evaluation of boolean queries.

    The index is only read. Every result is a freshly allocated ScoreSet.

    Attributes:
        index (Index): Word -> ScoreSet lookup
    """
    def __init__(self, index: Index):
        self.index = index

    def evaluate(self, tokens: List[str]) -> ScoreSet:
        """
        Evaluate a full query.

        Args:
            tokens (list): A validated token list, possibly empty

        Returns:
            ScoreSet: Accumulated scores for every document in the result
        """
        result = None
        position = 0
        while position < len(tokens):
            and_result, position = self.evaluate_and_sequence(tokens, position)
            if result is None:
                result = and_result
            else:
                union(result, and_result)
            if position < len(tokens) and tokens[position] == OR:
                position += 1
        return result if result is not None else ScoreSet()

    def evaluate_and_sequence(self, tokens: List[str], start: int) -> Tuple[ScoreSet, int]:
        """
        Evaluate one and-sequence beginning at start.

        Args:
            tokens (list): A validated token list
            start (int): Position of the first token of the sequence

        Returns:
            Tuple[ScoreSet, int]: The intersected scores and the position of
                the 'or' that ended the sequence, or len(tokens)
        """
        result = None
        position = start
        while position < len(tokens) and tokens[position] != OR:
            word = tokens[position]
            position += 1
            if word == AND:
                continue

            counts = self.index.find(word)
            if result is None:
                result = counts.copy() if counts is not None else ScoreSet()
            elif counts is None:
                # Unknown word: keep the keys, zero the scores.
                logger.debug(f"'{word}' is not in the index")
                zero_fill(result)
            else:
                intersect(result, counts)

        if result is None:
            result = ScoreSet()
        return result, position
