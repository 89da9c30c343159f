import io
import sys

import pytest

from querier.core import Querier, main
from querier.index import Index

SEPARATOR = "-" * 47

CAT_REPORT = (
    "Query: cat\n"
    "Matches 3 documents (ranked):\n"
    "score   5  doc   2: http://example.com/2\n"
    "score   2  doc   1: http://example.com/1\n"
    "score   1  doc   3: http://example.com/3\n"
    + SEPARATOR + "\n"
)


class TerminalInput(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture
def querier(index, pages):
    return Querier(index, pages)


def run_queries(querier, text, infile_cls=io.StringIO):
    out, err = io.StringIO(), io.StringIO()
    querier.run(infile_cls(text), out, err)
    return out.getvalue(), err.getvalue()


def test_query_loop_output(querier):
    out, err = run_queries(querier, "cat\n\nc@t\ndog and fish\nzzz\nCat OR fish\n")
    assert out == (
        CAT_REPORT
        + "Query: dog and fish\n"
        "Matches 1 documents (ranked):\n"
        "score   1  doc   4: (no-url)\n"
        + SEPARATOR + "\n"
        "Query: zzz\n"
        "No documents match.\n"
        + SEPARATOR + "\n"
        "Query: cat or fish\n"
        "Matches 4 documents (ranked):\n"
        "score   6  doc   4: (no-url)\n"
        "score   5  doc   2: http://example.com/2\n"
        "score   2  doc   1: http://example.com/1\n"
        "score   1  doc   3: http://example.com/3\n"
        + SEPARATOR + "\n"
        "\n"
    )
    assert err == "Error: bad character '@' in query\n"


def test_syntax_errors_go_to_error_stream(querier):
    out, err = run_queries(querier, "and dog\ncat and\ndog and or cat\n")
    assert out == "\n"
    assert err.splitlines() == [
        "Error: 'and' cannot be first",
        "Error: 'and' cannot be last",
        "Error: 'and' and 'or' cannot be adjacent",
    ]


def test_blank_lines_print_nothing(querier):
    out, err = run_queries(querier, "\n   \n\t\n")
    assert out == "\n"
    assert err == ""


def test_requery_is_identical(querier):
    out, _ = run_queries(querier, "cat or dog and a\ncat or dog and a\n")
    body = out[:-1]
    half = len(body) // 2
    assert body[:half].startswith("Query: cat or dog and a\n")
    assert body[:half] == body[half:]


def test_prompt_only_for_terminals(querier):
    out, _ = run_queries(querier, "cat\n")
    assert "Query?" not in out

    out, _ = run_queries(querier, "cat\n", TerminalInput)
    assert out == "Query? " + CAT_REPORT + "Query? \n"


def test_prompt_comes_from_config(index, pages):
    querier = Querier(index, pages, {"prompt": "> "})
    out, _ = run_queries(querier, "", TerminalInput)
    assert out == "> \n"


def test_process_line_reports_rejection(querier):
    out, err = io.StringIO(), io.StringIO()
    assert querier.process_line("c#t", out, err) is False
    assert querier.process_line("cat", out, err) is True


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_main_answers_queries(workdir, page_dir, index_file, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("cat\n"))
    assert main([str(page_dir), str(index_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == CAT_REPORT + "\n"


def test_main_usage(workdir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code != 0
    assert capsys.readouterr().err.startswith("usage:")


def test_main_rejects_extra_arguments(workdir, page_dir, index_file, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(page_dir), str(index_file), "extra"])
    assert excinfo.value.code != 0
    assert capsys.readouterr().err.startswith("usage:")


def test_main_not_a_crawler_directory(workdir, index_file, capsys):
    plain = workdir / "plain"
    plain.mkdir()
    with pytest.raises(SystemExit) as excinfo:
        main([str(plain), str(index_file)])
    assert excinfo.value.code == 1
    assert "is not a crawler directory" in capsys.readouterr().err


def test_main_unreadable_index(workdir, page_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(page_dir), str(workdir / "nope.idx")])
    assert excinfo.value.code == 1
    assert "cannot read index file" in capsys.readouterr().err


def test_main_index_errors_are_not_fatal(workdir, page_dir, monkeypatch, capsys):
    bad_index = workdir / "bad.index"
    bad_index.write_text("cat 2 5\nbroken 1\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO("cat\n"))
    assert main([str(page_dir), str(bad_index)]) == 0
    captured = capsys.readouterr()
    assert "errors encountered while loading index file" in captured.err
    assert "score   5  doc   2: http://example.com/2" in captured.out


def test_main_stats(workdir, page_dir, index_file, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([str(page_dir), str(index_file), "--stats"]) == 0
    out = capsys.readouterr().out
    assert "The number of unique words is: 4" in out
    assert "    1. cat (8)" in out


def test_main_reads_config_file(workdir, page_dir, index_file, monkeypatch, capsys):
    (workdir / "custom.json").write_text('{"top_n": 1}')
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([str(page_dir), str(index_file), "--config", "custom.json", "--stats"]) == 0
    out = capsys.readouterr().out
    assert "    1. cat (8)" in out
    assert "    2." not in out


def test_main_non_utf8_index_is_not_fatal(workdir, page_dir, monkeypatch, capsys):
    latin_index = workdir / "latin.index"
    latin_index.write_bytes(b"cat 2 5\ncaf\xe9 1 1\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO("cat\n"))
    assert main([str(page_dir), str(latin_index)]) == 0
    captured = capsys.readouterr()
    assert "errors encountered while loading index file" in captured.err
    assert "score   5  doc   2: http://example.com/2" in captured.out


def test_main_out_of_memory(workdir, page_dir, index_file, monkeypatch, capsys):
    def exhausted(filepath):
        raise MemoryError

    monkeypatch.setattr(Index, "from_file", exhausted)
    with pytest.raises(SystemExit) as excinfo:
        main([str(page_dir), str(index_file)])
    assert excinfo.value.code == 2
    assert capsys.readouterr().err == "querier: out of memory\n"


def test_main_out_of_memory_while_querying(workdir, page_dir, index_file, monkeypatch, capsys):
    def exhausted(self, *args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(Querier, "run", exhausted)
    with pytest.raises(SystemExit) as excinfo:
        main([str(page_dir), str(index_file)])
    assert excinfo.value.code == 2
    assert "querier: out of memory" in capsys.readouterr().err


def test_main_ignores_invalid_config_values(workdir, page_dir, index_file, monkeypatch, capsys):
    (workdir / "bad.json").write_text('{"log_level": "verbose", "top_n": "ten"}')
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([str(page_dir), str(index_file), "--config", "bad.json", "--stats"]) == 0
    captured = capsys.readouterr()
    assert "Using default configuration" in captured.err
    assert "The top 10 most frequent words are:" in captured.out
