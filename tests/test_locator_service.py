"""Tests for gowork.services.locator_service."""

import shutil
import threading

import pytest

from gowork.domain import Author, Distributor, MatchKind, Project, ProjectMatch
from gowork.infra import DirectoryReader
from gowork.services import HierarchyService, LocatorService, best_match
from gowork.services.locator_service import classify, term_matches

from tests.conftest import make_tree


def pm(identifier, kind):
    return ProjectMatch(Project.parse(identifier), kind)


class TestBestMatch:

    def test_table(self):
        assert best_match(True, False, False) == MatchKind.DISTRO
        assert best_match(False, True, False) == MatchKind.AUTHOR
        assert best_match(True, True, False) == MatchKind.AUTHOR
        assert best_match(False, False, True) == MatchKind.PROJECT
        assert best_match(True, False, True) == MatchKind.PROJECT
        assert best_match(False, True, True) == MatchKind.PROJECT
        assert best_match(True, True, True) == MatchKind.PROJECT

    @pytest.mark.parametrize("distro_hit", [True, False])
    @pytest.mark.parametrize("author_hit", [True, False])
    def test_project_hit_always_wins(self, distro_hit, author_hit):
        assert best_match(distro_hit, author_hit, True) == MatchKind.PROJECT

    def test_no_hit_is_an_error(self):
        with pytest.raises(ValueError):
            best_match(False, False, False)


class TestTermMatches:

    def test_substring_case_insensitive(self):
        assert term_matches("OOL", "tool")
        assert term_matches("tool", "MyTool")
        assert not term_matches("tools", "tool")

    def test_exact_case_insensitive(self):
        assert term_matches("Alice", "alice", substring=False)
        assert not term_matches("ali", "alice", substring=False)

    def test_empty_term(self):
        assert term_matches("", "anything")
        assert not term_matches("", "anything", substring=False)
        assert not term_matches("", "", substring=False)

    def test_classify_skips_projects_without_hits(self):
        project = Project.parse("github.com/alice/tool")
        assert classify(project, "zzz") is None
        assert classify(project, "hub") == ProjectMatch(project, MatchKind.DISTRO)


class TestSearch:

    def test_empty_term_finds_everything(self, locator):
        assert locator.search_all("", True) == [
            pm("aaa/user/project", MatchKind.PROJECT),
            pm("bbb/user/project", MatchKind.PROJECT),
            pm("ccc/user/project", MatchKind.PROJECT),
            pm("code.google.com/p/cascadia", MatchKind.PROJECT),
            pm("github.com/alice/gowork", MatchKind.PROJECT),
            pm("github.com/alice/termui-widgets", MatchKind.PROJECT),
            pm("github.com/stretchr/testify", MatchKind.PROJECT),
        ]

    def test_exact_mode_needs_whole_names(self, locator):
        assert locator.search_all("proj", False) == []
        assert locator.search_all("", False) == []

    def test_substring_project(self, locator):
        assert locator.search_all("proj", True) == [
            pm("aaa/user/project", MatchKind.PROJECT),
            pm("bbb/user/project", MatchKind.PROJECT),
            pm("ccc/user/project", MatchKind.PROJECT),
        ]

    def test_distro_hit(self, locator):
        assert locator.search_all("github.com", True) == [
            pm("github.com/alice/gowork", MatchKind.DISTRO),
            pm("github.com/alice/termui-widgets", MatchKind.DISTRO),
            pm("github.com/stretchr/testify", MatchKind.DISTRO),
        ]

    def test_author_hit_exact(self, locator):
        assert locator.search_all("alice", False) == [
            pm("github.com/alice/gowork", MatchKind.AUTHOR),
            pm("github.com/alice/termui-widgets", MatchKind.AUTHOR),
        ]

    def test_case_insensitive(self, locator):
        assert locator.search_all("ALICE", False) == locator.search_all("alice", False)

    def test_term_matching_every_level_is_a_project_match(self, tmp_path):
        make_tree(tmp_path, projects=[("github.com", "gitter", "git")])
        locator = LocatorService(HierarchyService(str(tmp_path)))
        assert locator.search_all("git", True) == [pm("github.com/gitter/git", MatchKind.PROJECT)]

    def test_same_project_name_on_two_distributors(self, tmp_path):
        make_tree(tmp_path, projects=[("github.com", "alice", "tool"), ("bitbucket.org", "bob", "tool")])
        locator = LocatorService(HierarchyService(str(tmp_path)))

        matches = locator.search_all("tool", True)
        assert sorted(str(m.project) for m in matches) == ["bitbucket.org/bob/tool", "github.com/alice/tool"]
        assert all(m.kind == MatchKind.PROJECT for m in matches)

    def test_author_only_match_is_not_a_project_match(self, tmp_path):
        make_tree(tmp_path, projects=[("github.com", "alice", "tool")])
        locator = LocatorService(HierarchyService(str(tmp_path)))
        assert locator.search_all("alice", False) == [pm("github.com/alice/tool", MatchKind.AUTHOR)]

    def test_hidden_levels_are_invisible(self, tmp_path):
        make_tree(tmp_path, projects=[("github.com", ".alice", "tool"), ("github.com", "bob", ".cache")])
        locator = LocatorService(HierarchyService(str(tmp_path)))
        assert locator.search_all("", True) == []

    def test_streams_lazily(self, locator):
        stream = locator.search("", True)
        first = next(stream)
        assert first == pm("aaa/user/project", MatchKind.PROJECT)
        stream.close()


class TestSearchErrors:

    def test_missing_root_emits_only_the_error(self, missing_root):
        locator = LocatorService(HierarchyService(missing_root))
        stream = locator.search("", True)

        with pytest.raises(FileNotFoundError) as exc_info:
            next(stream)
        assert missing_root in str(exc_info.value)

        # Terminated: nothing follows the error
        assert list(stream) == []
        stream.close(timeout=5)
        assert not stream._thread.is_alive()

    def test_search_all_raises(self, missing_root):
        with pytest.raises(FileNotFoundError):
            LocatorService(HierarchyService(missing_root)).search_all("x")

    def test_matches_before_failure_are_kept_and_nothing_after(self, workspace):
        class FailingReader(DirectoryReader):
            def list_dirs(self, path):
                if path.endswith("bbb/user"):
                    raise PermissionError(13, "Permission denied", path)
                return super().list_dirs(path)

        locator = LocatorService(HierarchyService(str(workspace), reader=FailingReader()))
        stream = locator.search("", True)

        received = []
        with pytest.raises(PermissionError):
            for match in stream:
                received.append(match)

        assert received == [pm("aaa/user/project", MatchKind.PROJECT)]
        assert list(stream) == []

    def test_failure_stops_enumeration(self, workspace):
        calls = []

        class CountingReader(DirectoryReader):
            def list_dirs(self, path):
                calls.append(path)
                if path.endswith("src/aaa"):
                    raise PermissionError(13, "Permission denied", path)
                return super().list_dirs(path)

        locator = LocatorService(HierarchyService(str(workspace), reader=CountingReader()))
        with pytest.raises(PermissionError):
            locator.search_all("")

        assert len(calls) == 2
        assert calls[-1].endswith("src/aaa")


class TestSearchStreamLifecycle:

    def test_abandoned_stream_does_not_leak_producer(self, locator):
        stream = locator.search("", True)
        stream.close(timeout=5)
        assert not stream._thread.is_alive()

    def test_context_manager_closes(self, locator):
        with locator.search("alice", False) as stream:
            matches = list(stream)
        assert len(matches) == 2
        assert not stream._thread.is_alive()

    def test_producer_is_a_daemon_thread(self, locator):
        with locator.search("") as stream:
            assert stream._thread.daemon
            assert stream._thread is not threading.current_thread()

    def test_every_search_rereads_the_tree(self, workspace, locator):
        assert len(locator.search_all("alice", False)) == 2
        shutil.rmtree(workspace / "src" / "github.com" / "alice" / "gowork")
        assert locator.search_all("alice", False) == [
            pm("github.com/alice/termui-widgets", MatchKind.AUTHOR),
        ]
