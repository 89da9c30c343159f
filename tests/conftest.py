import pytest

from querier.index import Index
from querier.pagedir import PageDirectory

POSTINGS = {
    "cat": {1: 2, 2: 5, 3: 1},
    "dog": {2: 3, 3: 4, 4: 1},
    "fish": {4: 6},
    "a": {1: 2, 2: 5},
}

URLS = {
    1: "http://example.com/1",
    2: "http://example.com/2",
    3: "http://example.com/3",
}


@pytest.fixture
def index():
    idx = Index()
    for word, counts in POSTINGS.items():
        for doc_id, count in counts.items():
            idx.add(word, doc_id, count)
    return idx


@pytest.fixture
def page_dir(tmp_path):
    pages = tmp_path / "pages"
    pages.mkdir()
    (pages / ".crawler").write_text("")
    for doc_id, url in URLS.items():
        (pages / str(doc_id)).write_text(f"{url}\n1\n<html>page {doc_id}</html>\n")
    # doc 4 has no page file; doc 5 has an empty one
    (pages / "5").write_text("")
    return pages


@pytest.fixture
def pages(page_dir):
    return PageDirectory(str(page_dir))


@pytest.fixture
def index_file(tmp_path, index):
    path = tmp_path / "letters.index"
    with open(path, "w") as f:
        index.save(f)
    return path
