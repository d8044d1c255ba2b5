"""
Tests for gowork.services.hierarchy_service.

Enumeration and exact lookup run against a fake filesystem (pyfakefs), the
same way the repository discovery tests build their trees.
"""

import pytest

from gowork.domain import Author, Distributor, Project
from gowork.exceptions import AuthorNotFoundError
from gowork.infra import DirectoryReader
from gowork.services import HierarchyService

ROOT = "/gopath"


@pytest.fixture
def fake_workspace(fs):
    """Populate /gopath/src on the fake filesystem."""
    for project in [
        "aaa/user/project",
        "bbb/user/project",
        "ccc/user/project",
        "github.com/alice/gowork",
        "github.com/alice/termui-widgets",
        "github.com/stretchr/testify",
        "code.google.com/p/cascadia",
        ".hidden",
    ]:
        fs.create_dir(f"{ROOT}/src/{project}")
    fs.create_file(f"{ROOT}/src/test.go")
    return HierarchyService(ROOT)


class TestEnumeration:

    def test_distributors(self, fake_workspace):
        assert fake_workspace.distributors() == [
            Distributor("aaa"),
            Distributor("bbb"),
            Distributor("ccc"),
            Distributor("code.google.com"),
            Distributor("github.com"),
        ]

    def test_hidden_distributor_is_excluded(self, fake_workspace):
        names = [d.name for d in fake_workspace.distributors()]
        assert ".hidden" not in names
        assert "test.go" not in names

    def test_authors(self, fake_workspace):
        distro = Distributor("github.com")
        assert fake_workspace.authors(distro) == [
            Author(distro, "alice"),
            Author(distro, "stretchr"),
        ]

    def test_projects(self, fake_workspace):
        author = Author(Distributor("github.com"), "alice")
        assert fake_workspace.projects(author) == [
            Project(author, "gowork"),
            Project(author, "termui-widgets"),
        ]

    def test_missing_root_raises_with_path(self, fs):
        service = HierarchyService("/not-exist")
        with pytest.raises(FileNotFoundError) as exc_info:
            service.distributors()
        assert "/not-exist/src" in str(exc_info.value)

    def test_missing_author_raises(self, fs):
        service = HierarchyService("not-exist")
        with pytest.raises(OSError):
            service.projects(Author(Distributor("github.com"), "alice"))

    def test_unreadable_distributor_raises(self, fake_workspace):
        with pytest.raises(FileNotFoundError):
            fake_workspace.authors(Distributor("gitlab.com"))

    def test_uses_injected_reader(self):
        class StubReader(DirectoryReader):
            def __init__(self):
                self.calls = []

            def list_dirs(self, path):
                self.calls.append(path)
                return ["x"]

        reader = StubReader()
        service = HierarchyService("/r", reader=reader)
        assert service.distributors() == [Distributor("x")]
        assert reader.calls == ["/r/src"]


class TestFindAuthorIn:

    @pytest.mark.parametrize("distro", ["aaa", "bbb", "ccc"])
    def test_found(self, fake_workspace, distro):
        assert fake_workspace.find_author_in("user", Distributor(distro)) == Author(Distributor(distro), "user")

    def test_case_insensitive_returns_on_disk_name(self, fake_workspace):
        author = fake_workspace.find_author_in("ALICE", Distributor("github.com"))
        assert author == Author(Distributor("github.com"), "alice")

    def test_not_found(self, fake_workspace):
        with pytest.raises(AuthorNotFoundError):
            fake_workspace.find_author_in("not-exist", Distributor("github.com"))

    def test_substring_is_not_enough(self, fake_workspace):
        with pytest.raises(AuthorNotFoundError):
            fake_workspace.find_author_in("ali", Distributor("github.com"))

    def test_unreadable_distributor_propagates(self, fake_workspace):
        with pytest.raises(FileNotFoundError):
            fake_workspace.find_author_in("user", Distributor("not-exist"))


class TestFindAuthor:

    def test_found(self, fake_workspace):
        assert fake_workspace.find_author("alice") == Author(Distributor("github.com"), "alice")

    def test_first_distributor_in_order_wins(self, fake_workspace):
        assert fake_workspace.find_author("user") == Author(Distributor("aaa"), "user")

    def test_not_found_after_trying_every_distributor(self, fake_workspace):
        tried = []
        original = fake_workspace.find_author_in

        def spy(name, distro):
            tried.append(distro)
            return original(name, distro)

        fake_workspace.find_author_in = spy
        with pytest.raises(AuthorNotFoundError) as exc_info:
            fake_workspace.find_author("zz")

        assert str(exc_info.value) == "Author could not be found"
        assert tried == fake_workspace.distributors()

    def test_unreadable_distributor_is_skipped(self, fake_workspace):
        class DeniedReader(DirectoryReader):
            def list_dirs(self, path):
                if path == f"{ROOT}/src/aaa":
                    raise PermissionError(13, "Permission denied", path)
                return super().list_dirs(path)

        service = HierarchyService(ROOT, reader=DeniedReader())
        assert service.find_author("user") == Author(Distributor("bbb"), "user")

    def test_missing_root_raises_io_error(self, fs):
        with pytest.raises(FileNotFoundError) as exc_info:
            HierarchyService("not-exist").find_author("barfoo")
        assert "not-exist/src" in str(exc_info.value)
