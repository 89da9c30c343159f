"""
Constants and configuration values for the querier.
"""

# Crawler output
CRAWLER_MARKER = '.crawler'

# Query language
AND = 'and'
OR = 'or'
OPERATORS = frozenset({AND, OR})

# Report formatting
PROMPT = 'Query? '
SEPARATOR = '-' * 47
NO_URL = '(no-url)'

# Settings
DEFAULT_CONFIG_FILE = 'querier.json'
DEFAULT_LOG_LEVEL = 'WARNING'
DEFAULT_TOP_N = 10
