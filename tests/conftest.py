"""
Shared fixtures for the unidiffr test suite.
"""

import pytest

SAMPLE_DIFF = """\
--- a/foo/bar/baz 1981-03-14 01:23:45.010101 +0800
+++ b/foo/baz 2030-03-14 01:23:45.010101 +0600
@@ -1,3 +1,4 @@
 abc
-def
+egh
+ijk
 lmn
"""


@pytest.fixture
def sample_diff_text() -> str:
    """Single-chunk diff with a header in `diff -u` form."""
    return SAMPLE_DIFF


@pytest.fixture
def sample_diff_lines() -> list:
    """The sample diff as newline-stripped lines."""
    return SAMPLE_DIFF.splitlines()


@pytest.fixture
def header_lines() -> list:
    return SAMPLE_DIFF.splitlines()[:2]


@pytest.fixture
def multi_chunk_lines(header_lines) -> list:
    """Header followed by two chunks with context, removals and additions."""
    return header_lines + [
        "@@ -1,2 +1,2 @@",
        " first",
        "-second",
        "+2nd",
        "@@ -10,3 +10,2 @@",
        " ten",
        "-eleven",
        " twelve",
    ]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep UNIDIFFR_* variables from the host out of every test."""
    for name in ("UNIDIFFR_OUTPUT_FORMAT", "UNIDIFFR_JSON_INDENT", "UNIDIFFR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
