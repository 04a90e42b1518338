"""Tests for line markers and the patch classifier."""

import pytest

from splitpatch.classifier import LineType, PatchClassifier, PatchMode, classify_line
from splitpatch.markers import is_hunk_header, match_line


@pytest.mark.parametrize("line, expected", [
    ("Index: foo/bar.c\n", "INDEX_LINE"),
    ("--- a/foo.c\n", "FILE_HEADER_START"),
    ("@@ -1,3 +1,4 @@\n", "HUNK_HEADER"),
    ("@@ -10,5 +12,7 @@ def main():\n", "HUNK_HEADER"),
    ("+++ b/foo.c\n", None),
    (" context\n", None),
    ("-removed\n", None),
    ("Index:foo\n", None),
    ("---\n", None),
])
def test_match_line(line, expected):
    assert match_line(line) == expected


def test_hunk_header_needs_both_markers():
    assert not is_hunk_header("@@ -1,3 +1,4\n")
    assert not is_hunk_header(" @@ -1 +1 @@\n")
    assert not is_hunk_header("@@ @@\n")
    assert is_hunk_header("@@  @@\n")


class TestClassifyLine:

    def test_unified_header_sets_unified_mode(self):
        line_type, mode = classify_line("--- a/x.c\n", PatchMode.UNDETERMINED)
        assert line_type is LineType.NEW_UNIFIED_SECTION
        assert mode is PatchMode.UNIFIED

    def test_index_line_sets_legacy_mode(self):
        for mode in PatchMode:
            line_type, new_mode = classify_line("Index: x.c\n", mode)
            assert line_type is LineType.NEW_LEGACY_SECTION
            assert new_mode is PatchMode.LEGACY

    def test_unified_header_is_body_in_legacy_mode(self):
        line_type, mode = classify_line("--- x.c\n", PatchMode.LEGACY)
        assert line_type is LineType.BODY
        assert mode is PatchMode.LEGACY

    def test_hunk_keeps_mode(self):
        for mode in PatchMode:
            line_type, new_mode = classify_line("@@ -1 +1 @@\n", mode)
            assert line_type is LineType.NEW_HUNK
            assert new_mode is mode

    def test_body(self):
        line_type, mode = classify_line("+added\n", PatchMode.UNIFIED)
        assert line_type is LineType.BODY
        assert mode is PatchMode.UNIFIED


class TestPatchClassifier:

    def test_starts_undetermined(self):
        assert PatchClassifier().mode is PatchMode.UNDETERMINED

    def test_legacy_freezes_mode(self):
        classifier = PatchClassifier()
        assert classifier.classify("--- a/x.c\n") is LineType.NEW_UNIFIED_SECTION
        assert classifier.mode is PatchMode.UNIFIED

        assert classifier.classify("Index: y.c\n") is LineType.NEW_LEGACY_SECTION
        assert classifier.legacy

        # every later --- line is plain content
        assert classifier.classify("--- a/z.c\n") is LineType.BODY
        assert classifier.classify("@@ -1 +1 @@\n") is LineType.NEW_HUNK
        assert classifier.classify("--- a/w.c\n") is LineType.BODY
        assert classifier.mode is PatchMode.LEGACY
