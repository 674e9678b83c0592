from hunkreview.core.acquisition import DiffAcquirer
from hunkreview.core.diff import parse_diff
from hunkreview.core.exceptions import SourceError, SourceNotFoundError
from hunkreview.core.schema.host import ComparedFile
from hunkreview.core.schema.revision import (
    Opened,
    OtherEvent,
    RevisionContext,
    Synchronized,
)
from tests.fakes import FakeLogger, FakePullRequestHost

CONTEXT = RevisionContext(
    owner="test-owner",
    repo="test-repo",
    pull_number=7,
    title="Fix indexing",
    description="",
)


class TestFullDiffStrategy:
    def test_opened_event_fetches_full_diff(self, logger: FakeLogger) -> None:
        host = FakePullRequestHost(diff="--- a/a.go\n+++ b/a.go\n@@ -1 +1 @@\n-a\n+b\n")
        acquirer = DiffAcquirer(host, logger)

        diff = acquirer.acquire(CONTEXT, Opened())

        assert diff.startswith("--- a/a.go")
        assert host.calls == [
            ("diff", {"owner": "test-owner", "repo": "test-repo", "number": 7})
        ]

    def test_host_error_becomes_unavailable(self, logger: FakeLogger) -> None:
        host = FakePullRequestHost(diff_error=SourceError("boom"))
        acquirer = DiffAcquirer(host, logger)

        assert acquirer.acquire(CONTEXT, Opened()) is None
        assert "Error getting diff" in logger.messages("error")

    def test_not_found_is_also_contained(self, logger: FakeLogger) -> None:
        host = FakePullRequestHost(
            diff_error=SourceNotFoundError("missing", "test-owner/test-repo#7")
        )

        assert DiffAcquirer(host, logger).acquire(CONTEXT, Opened()) is None


class TestIncrementalDiffStrategy:
    def test_compares_before_and_after(self, logger: FakeLogger) -> None:
        host = FakePullRequestHost()
        acquirer = DiffAcquirer(host, logger)

        acquirer.acquire(CONTEXT, Synchronized(before="abc", after="def"))

        assert host.calls == [
            (
                "compare",
                {"owner": "test-owner", "repo": "test-repo", "base": "abc", "head": "def"},
            )
        ]

    def test_joins_patches_with_file_headers(self, logger: FakeLogger) -> None:
        host = FakePullRequestHost(
            compared=[
                ComparedFile("src/a.py", "modified", "@@ -1 +1 @@\n-a\n+b"),
                ComparedFile("logo.png", "modified", None),
                ComparedFile("src/b.py", "added", "@@ -0,0 +1 @@\n+new"),
            ]
        )
        acquirer = DiffAcquirer(host, logger)

        diff = acquirer.acquire(CONTEXT, Synchronized(before="abc", after="def"))

        assert diff == (
            "--- a/src/a.py\n+++ b/src/a.py\n@@ -1 +1 @@\n-a\n+b\n"
            "--- /dev/null\n+++ b/src/b.py\n@@ -0,0 +1 @@\n+new"
        )

    def test_removed_and_renamed_files(self, logger: FakeLogger) -> None:
        host = FakePullRequestHost(
            compared=[
                ComparedFile("gone.txt", "removed", "@@ -1 +0,0 @@\n-bye"),
                ComparedFile("new_name.py", "renamed", "@@ -1 +1 @@\n-a\n+b", "old_name.py"),
            ]
        )

        diff = DiffAcquirer(host, logger).acquire(
            CONTEXT, Synchronized(before="abc", after="def")
        )
        files = parse_diff(diff)

        assert files[0].deleted is True
        assert files[1].source_path == "old_name.py"
        assert files[1].path == "new_name.py"

    def test_result_is_addressable_after_parsing(self, logger: FakeLogger) -> None:
        host = FakePullRequestHost(
            compared=[
                ComparedFile("one.py", "modified", "@@ -1 +1 @@\n-a\n+b"),
                ComparedFile("two.py", "modified", "@@ -3,1 +3,2 @@\n x\n+y"),
            ]
        )

        diff = DiffAcquirer(host, logger).acquire(
            CONTEXT, Synchronized(before="abc", after="def")
        )

        assert [file.path for file in parse_diff(diff)] == ["one.py", "two.py"]

    def test_comparison_error_becomes_unavailable(self, logger: FakeLogger) -> None:
        host = FakePullRequestHost(compare_error=SourceError("boom"))

        diff = DiffAcquirer(host, logger).acquire(
            CONTEXT, Synchronized(before="abc", after="def")
        )

        assert diff is None
        assert "Error getting diff" in logger.messages("error")


class TestOtherEvents:
    def test_other_event_makes_no_call(self, logger: FakeLogger) -> None:
        host = FakePullRequestHost()

        diff = DiffAcquirer(host, logger).acquire(CONTEXT, OtherEvent(action="closed"))

        assert diff is None
        assert host.calls == []
