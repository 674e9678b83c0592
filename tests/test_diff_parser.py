from hunkreview.core.diff import parse_diff
from hunkreview.core.schema.diff import ChangeKind

FULL_DIFF = """diff --git a/a.go b/a.go
index 1111111..2222222 100644
--- a/a.go
+++ b/a.go
@@ -40,3 +40,4 @@ func main() {
 	x := items[0]
-	y := items[1]
+	y := items[i]
+	z := items[j]
 	return x
diff --git a/old.txt b/old.txt
deleted file mode 100644
index 3333333..0000000
--- a/old.txt
+++ /dev/null
@@ -1,2 +0,0 @@
-first
-second
diff --git a/new.py b/new.py
new file mode 100644
index 0000000..4444444
--- /dev/null
+++ b/new.py
@@ -0,0 +1,2 @@
+import os
+print(os.getcwd())
"""


class TestParseDiffStructure:
    def test_empty_and_absent_text_yield_no_files(self) -> None:
        assert parse_diff(None) == []
        assert parse_diff("") == []
        assert parse_diff("   \n") == []

    def test_garbage_text_yields_no_files(self) -> None:
        assert parse_diff("this is not a diff\nat all\n") == []

    def test_parses_files_in_order(self) -> None:
        files = parse_diff(FULL_DIFF)

        assert [file.path for file in files] == ["a.go", "old.txt", "new.py"]

    def test_strips_prefixes_from_paths(self) -> None:
        modified = parse_diff(FULL_DIFF)[0]

        assert modified.source_path == "a.go"
        assert modified.target_path == "a.go"
        assert modified.deleted is False

    def test_deleted_file_has_no_target(self) -> None:
        deleted = parse_diff(FULL_DIFF)[1]

        assert deleted.deleted is True
        assert deleted.target_path is None
        assert deleted.source_path == "old.txt"
        assert deleted.path == "old.txt"

    def test_added_file_has_no_source(self) -> None:
        added = parse_diff(FULL_DIFF)[2]

        assert added.source_path is None
        assert added.target_path == "new.py"
        assert added.deleted is False

    def test_hunk_header_and_ranges(self) -> None:
        hunk = parse_diff(FULL_DIFF)[0].hunks[0]

        assert hunk.header == "@@ -40,3 +40,4 @@ func main() {"
        assert (hunk.old_start, hunk.old_count) == (40, 3)
        assert (hunk.new_start, hunk.new_count) == (40, 4)
        assert len(hunk.changes) == 5

    def test_change_content_keeps_marker(self) -> None:
        hunk = parse_diff(FULL_DIFF)[0].hunks[0]

        assert [change.content for change in hunk.changes] == [
            " \tx := items[0]",
            "-\ty := items[1]",
            "+\ty := items[i]",
            "+\tz := items[j]",
            " \treturn x",
        ]


class TestParseDiffLineNumbers:
    def test_line_numbers_per_kind(self) -> None:
        changes = parse_diff(FULL_DIFF)[0].hunks[0].changes

        assert [change.kind for change in changes] == [
            ChangeKind.CONTEXT,
            ChangeKind.DELETED,
            ChangeKind.ADDED,
            ChangeKind.ADDED,
            ChangeKind.CONTEXT,
        ]
        assert [(c.old_line_number, c.new_line_number) for c in changes] == [
            (40, 40),
            (41, None),
            (None, 41),
            (None, 42),
            (42, 43),
        ]

    def test_effective_line_prefers_new_file_number(self) -> None:
        for file in parse_diff(FULL_DIFF):
            for hunk in file.hunks:
                for change in hunk.changes:
                    expected = (
                        change.new_line_number
                        if change.new_line_number is not None
                        else change.old_line_number
                    )
                    assert change.line_number == expected

    def test_hunk_line_numbers_set(self) -> None:
        hunk = parse_diff(FULL_DIFF)[0].hunks[0]

        assert hunk.line_numbers == frozenset({40, 41, 42, 43})

    def test_omitted_counts_default_to_one(self) -> None:
        files = parse_diff("--- a/x.txt\n+++ b/x.txt\n@@ -3 +3 @@\n-old\n+new\n")

        hunk = files[0].hunks[0]
        assert (hunk.old_count, hunk.new_count) == (1, 1)
        assert [change.line_number for change in hunk.changes] == [3, 3]


class TestParseDiffTolerance:
    def test_dash_content_inside_hunk_is_a_change(self) -> None:
        diff = (
            "--- a/notes.md\n"
            "+++ b/notes.md\n"
            "@@ -1,2 +1,2 @@\n"
            "--- heading\n"
            "+++ heading\n"
            " tail\n"
        )

        files = parse_diff(diff)

        assert len(files) == 1
        kinds = [change.kind for change in files[0].hunks[0].changes]
        assert kinds == [ChangeKind.DELETED, ChangeKind.ADDED, ChangeKind.CONTEXT]

    def test_ignores_no_newline_marker(self) -> None:
        diff = (
            "--- a/x.txt\n"
            "+++ b/x.txt\n"
            "@@ -1 +1 @@\n"
            "-old\n"
            "\\ No newline at end of file\n"
            "+new\n"
            "\\ No newline at end of file\n"
        )

        changes = parse_diff(diff)[0].hunks[0].changes

        assert [change.content for change in changes] == ["-old", "+new"]

    def test_blank_line_inside_hunk_is_context(self) -> None:
        diff = "--- a/x.txt\n+++ b/x.txt\n@@ -1,3 +1,3 @@\n a\n\n-b\n+c\n"

        changes = parse_diff(diff)[0].hunks[0].changes

        assert changes[1].kind is ChangeKind.CONTEXT
        assert changes[1].line_number == 2

    def test_bare_hunk_produces_pathless_file(self) -> None:
        files = parse_diff("@@ -1 +1 @@\n-old\n+new")

        assert len(files) == 1
        assert files[0].path is None
        assert len(files[0].hunks) == 1

    def test_concatenated_patches_with_headers(self) -> None:
        diff = (
            "--- a/one.py\n+++ b/one.py\n@@ -1 +1 @@\n-a\n+b\n"
            "--- a/two.py\n+++ b/two.py\n@@ -5,2 +5,3 @@\n x\n+y\n z"
        )

        files = parse_diff(diff)

        assert [file.path for file in files] == ["one.py", "two.py"]
        assert [change.line_number for change in files[1].hunks[0].changes] == [5, 6, 7]

    def test_multiple_hunks_in_one_file(self) -> None:
        diff = (
            "--- a/x.py\n+++ b/x.py\n"
            "@@ -1 +1 @@\n-a\n+b\n"
            "@@ -10,1 +10,2 @@\n c\n+d\n"
        )

        hunks = parse_diff(diff)[0].hunks

        assert [hunk.header for hunk in hunks] == ["@@ -1 +1 @@", "@@ -10,1 +10,2 @@"]

    def test_strips_timestamps_from_paths(self) -> None:
        diff = "--- x.txt\t2024-01-01 10:00:00\n+++ x.txt\t2024-01-02 10:00:00\n@@ -1 +1 @@\n-a\n+b\n"

        assert parse_diff(diff)[0].path == "x.txt"

    def test_binary_file_has_no_hunks(self) -> None:
        diff = (
            "diff --git a/logo.png b/logo.png\n"
            "index 1..2 100644\n"
            "Binary files a/logo.png and b/logo.png differ\n"
        )

        files = parse_diff(diff)

        assert len(files) == 1
        assert files[0].path == "logo.png"
        assert files[0].hunks == ()
