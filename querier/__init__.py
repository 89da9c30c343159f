# querier/__init__.py
from querier.counters import ScoreSet
from querier.index import Index
from querier.pagedir import PageDirectory
from querier.query_parser import QueryParser, QuerySyntaxError
from querier.evaluator import QueryEvaluator
from querier.core import Querier

__all__ = [
    'ScoreSet',
    'Index',
    'PageDirectory',
    'QueryParser',
    'QuerySyntaxError',
    'QueryEvaluator',
    'Querier'
]
