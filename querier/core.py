"""
Core module that orchestrates the querier components.
Loads the index, validates the page directory and runs the query loop.
"""

import argparse
import logging
import sys
import time

from .constants import DEFAULT_CONFIG_FILE, PROMPT
from .evaluator import QueryEvaluator
from .index import Index
from .pagedir import PageDirectory, is_crawler_directory
from .query_parser import QueryParser, QuerySyntaxError
from .ranker import print_report
from .utils import LOG_LEVELS, configure_logging, display_index_statistics, load_config


class Querier:
    """
    Answers one query per input line against a loaded index.
    """

    def __init__(self, index, page_directory, config=None):
        """
        Initialize the querier.

        Args:
            index (Index): Read-only word -> ScoreSet lookup
            page_directory (PageDirectory): Resolves document IDs to URLs
            config (dict, optional): Settings; 'prompt' overrides the prompt text
        """
        self.config = config or {}
        self.index = index
        self.page_directory = page_directory
        self.parser = QueryParser()
        self.evaluator = QueryEvaluator(index)
        self.logger = logging.getLogger('querier.core')

    def prompt(self, infile, out):
        """Print a prompt only when reading from a terminal."""
        if infile.isatty():
            out.write(self.config.get('prompt', PROMPT))
            out.flush()

    def process_line(self, line, out=None, err=None):
        """
        Parse, evaluate and report a single query line.

        Args:
            line (str): Raw input line
            out: Stream for the query echo and report
            err: Stream for syntax errors

        Returns:
            bool: False if the line was rejected, True otherwise
        """
        out = out or sys.stdout
        err = err or sys.stderr

        try:
            tokens = self.parser.parse(line)
        except QuerySyntaxError as e:
            self.logger.debug(f"Rejected query {line.strip()!r}: {e}")
            print(e, file=err)
            return False

        if not tokens:
            return True

        query = " ".join(tokens)
        print(f"Query: {query}", file=out)
        start_time = time.time()
        results = self.evaluator.evaluate(tokens)
        print_report(results, self.page_directory, out)
        self.logger.info(f"Answered '{query}' in {time.time() - start_time:.4f} seconds")
        return True

    def run(self, infile=None, out=None, err=None):
        """
        Read queries until end of input.

        Args:
            infile: Stream of query lines (stdin by default)
            out: Stream for reports (stdout by default)
            err: Stream for syntax errors (stderr by default)
        """
        infile = infile or sys.stdin
        out = out or sys.stdout
        err = err or sys.stderr

        self.prompt(infile, out)
        for line in infile:
            self.process_line(line, out, err)
            self.prompt(infile, out)
        print(file=out)


def parse_arguments(argv=None):
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace: The parsed command-line arguments
    """
    parser = argparse.ArgumentParser(
        prog='querier',
        description='Answer and/or keyword queries against a crawler page directory and its index.')
    parser.add_argument('pageDirectory',
                        help='Directory produced by the crawler')
    parser.add_argument('indexFilename',
                        help='Index file produced by the indexer')
    parser.add_argument('--config', default=DEFAULT_CONFIG_FILE,
                        help=f"Path to JSON configuration file (default: {DEFAULT_CONFIG_FILE})")
    parser.add_argument('--log_level', default=None,
                        choices=LOG_LEVELS,
                        help='Logging level (overrides the configuration file)')
    parser.add_argument('--log_file', default=None,
                        help='Also write log records to this file')
    parser.add_argument('--stats', action='store_true',
                        help='Display index statistics before reading queries')
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point: validate arguments, load the index and answer queries.

    Returns:
        int: Process exit status
    """
    args = parse_arguments(argv)
    config = load_config(args.config)
    if args.log_level:
        config['log_level'] = args.log_level
    if args.log_file:
        config['log_file'] = args.log_file
    logger = configure_logging(config['log_level'], config['log_file'])

    if not is_crawler_directory(args.pageDirectory):
        print(f"querier: '{args.pageDirectory}' is not a crawler directory", file=sys.stderr)
        sys.exit(1)

    try:
        try:
            index, errors = Index.from_file(args.indexFilename)
        except OSError as e:
            logger.debug(f"Index load failed: {e}")
            print(f"querier: cannot read index file '{args.indexFilename}'", file=sys.stderr)
            sys.exit(1)
        if errors:
            print("querier: errors encountered while loading index file", file=sys.stderr)

        if args.stats:
            display_index_statistics(index, config['top_n'])

        querier = Querier(index, PageDirectory(args.pageDirectory), config)
        querier.run()
    except MemoryError:
        print("querier: out of memory", file=sys.stderr)
        sys.exit(2)

    return 0


if __name__ == "__main__":
    sys.exit(main())
