"""Unit tests for the FilterEngine, using an in-memory directory listing."""

import pytest

from aidump.config import Config, RuleSet
from aidump.file_system_tree.walker import walk
from aidump.filter_engine import FilterEngine
from aidump.selection.selector import Selector
from aidump.types import Entry


def d(path):
    return Entry(path.rsplit("/", 1)[-1], path, True)


def f(path):
    return Entry(path.rsplit("/", 1)[-1], path, False)


@pytest.fixture
def engine_for(fake_lister):
    def _engine_for(paths, exclude=None, include=None):
        config = Config(exclude=RuleSet.from_mapping(exclude or {}), include=RuleSet.from_mapping(include or {}))
        lister = fake_lister(paths)
        return FilterEngine(Selector(config), lister), lister

    return _engine_for


def visible(engine, lister):
    return [entry.relative_path + ("/" if entry.is_directory else "") for entry, _ in walk(lister, engine)]


class TestExcludeOnly:
    def test_vacuous_include_shows_everything_not_excluded(self, engine_for):
        engine, lister = engine_for(["a/", "a/x.txt", "empty/", "b.log"], exclude={"extensions": ["log"]})
        assert visible(engine, lister) == ["a/", "a/x.txt", "empty/"]

    def test_excluded_directory_prunes_subtree(self, engine_for):
        engine, lister = engine_for(
            ["vendor/", "vendor/lib/", "vendor/lib/a.php", "main.php"], exclude={"folders": ["vendor"]}
        )
        assert visible(engine, lister) == ["main.php"]
        assert "vendor" not in lister.listed

    def test_root_anchoring(self, engine_for):
        paths = ["build/", "build/out.js", "src/", "src/build/", "src/build/gen.js"]
        engine, lister = engine_for(paths, exclude={"folders": ["/build"]})
        assert visible(engine, lister) == ["src/", "src/build/", "src/build/gen.js"]

        engine, lister = engine_for(paths, exclude={"folders": ["build"]})
        assert visible(engine, lister) == ["src/"]

    def test_substring_filename(self, engine_for):
        engine, lister = engine_for(
            ["src/", "src/vendor/", "src/vendor/autoload.php", "src/app.php"], exclude={"filenames": ["vendor"]}
        )
        # The directory itself is only subject to folder rules
        assert visible(engine, lister) == ["src/", "src/app.php", "src/vendor/"]

    def test_directory_named_like_excluded_extension(self, engine_for):
        engine, lister = engine_for(
            ["cache.bin/", "cache.bin/data.bin", "cache.bin/x.BIN"], exclude={"extensions": ["bin"]}
        )
        assert visible(engine, lister) == ["cache.bin/", "cache.bin/x.BIN"]

    def test_should_descend(self, engine_for):
        engine, _ = engine_for(["vendor/", "src/", "src/a.txt"], exclude={"folders": ["vendor"]})
        assert engine.should_descend(d("src"))
        assert not engine.should_descend(d("vendor"))
        assert not engine.should_descend(f("src/a.txt"))

    def test_no_lookahead_without_include_rules(self, engine_for):
        engine, lister = engine_for(["a/", "a/b/", "a/b/c.txt"])
        assert engine.should_visit(d("a"))
        assert lister.listed == []


class TestIncludeFirst:
    def test_descendant_visibility(self, engine_for):
        paths = ["a/", "a/b/", "a/b/c/", "a/b/c/readme.md", "a/x/", "a/x/y.txt", "a/b/z.txt", "top.py"]
        engine, lister = engine_for(paths, include={"extensions": ["md"]})
        assert visible(engine, lister) == ["a/", "a/b/", "a/b/c/", "a/b/c/readme.md"]

    def test_exclude_wins_over_include(self, engine_for):
        engine, _ = engine_for(["secret.md"], exclude={"filenames": ["secret.md"]}, include={"extensions": ["md"]})
        assert not engine.should_visit(f("secret.md"))

    def test_excluded_ancestor_is_never_revived(self, engine_for):
        paths = ["a/", "a/vendor/", "a/vendor/x.php"]
        engine, lister = engine_for(paths, exclude={"folders": ["vendor"]}, include={"extensions": ["php"]})
        assert not engine.should_visit(d("a"))
        assert not engine.should_visit(d("a/vendor"))
        assert "a/vendor" not in lister.listed

    def test_excluded_file_does_not_make_parent_visible(self, engine_for):
        engine, _ = engine_for(["a/", "a/x.log"], exclude={"extensions": ["log"]}, include={"extensions": ["log"]})
        assert not engine.should_visit(d("a"))

    def test_include_filenames(self, engine_for):
        paths = ["docs/", "docs/README.md", "docs/guide.md", "README.md"]
        engine, lister = engine_for(paths, include={"filenames": ["README.md"]})
        assert visible(engine, lister) == ["README.md", "docs/", "docs/README.md"]

    def test_lookahead_is_memoised(self, engine_for):
        engine, lister = engine_for(["a/", "a/b/", "a/b/c.txt"], include={"extensions": ["md"]})
        assert not engine.has_included_descendant(d("a"))
        assert not engine.has_included_descendant(d("a"))
        assert not engine.should_visit(d("a/b"))
        assert lister.listed == ["a", "a/b"]


class TestIncludeFolders:
    PATHS = [
        "README.md",
        "lib/",
        "lib/other.py",
        "lib/src/",
        "lib/src/gen/",
        "lib/src/x.py",
        "src/",
        "src/a.py",
        "src/empty/",
        "src/notes.txt",
    ]

    def test_files_outside_included_folders_still_pass(self, engine_for):
        paths = ["README.md", "lib/", "lib/other.py", "src/", "src/a.py"]
        engine, lister = engine_for(paths, include={"folders": ["src"]})
        assert visible(engine, lister) == ["README.md", "lib/", "lib/other.py", "src/", "src/a.py"]

    def test_folder_rules_only(self, engine_for):
        engine, lister = engine_for(self.PATHS, include={"folders": ["src"]})
        assert visible(engine, lister) == [
            "README.md",
            "lib/",
            "lib/other.py",
            "lib/src/",
            "lib/src/gen/",
            "lib/src/x.py",
            "src/",
            "src/a.py",
            "src/empty/",
            "src/notes.txt",
        ]

    def test_folder_rules_with_extensions(self, engine_for):
        engine, lister = engine_for(self.PATHS, include={"folders": ["src"], "extensions": ["py"]})
        assert visible(engine, lister) == ["lib/", "lib/other.py", "lib/src/", "lib/src/x.py", "src/", "src/a.py"]

    def test_anchored_include_folder(self, engine_for):
        # Empty directories are only shown inside the anchored folder
        engine, lister = engine_for(self.PATHS, include={"folders": ["/src"]})
        assert visible(engine, lister) == [
            "README.md",
            "lib/",
            "lib/other.py",
            "lib/src/",
            "lib/src/x.py",
            "src/",
            "src/a.py",
            "src/empty/",
            "src/notes.txt",
        ]

    def test_excluded_folder_inside_included_folder(self, engine_for):
        engine, lister = engine_for(self.PATHS, include={"folders": ["src"]}, exclude={"folders": ["empty"]})
        assert "src/empty/" not in visible(engine, lister)
