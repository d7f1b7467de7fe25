"""Tests for target file discovery."""

from pathlib import Path

import pytest

from parallint.infrastructure.discovery.file_discovery import (
    expand_ignore_patterns,
    is_ignored,
    parse_extensions,
    resolve_targets,
)


def _touch(root: Path, *relative_paths: str):
    for relative in relative_paths:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("// file\n")


def _relative(root: Path, paths):
    return [p.relative_to(root).as_posix() for p in paths]


class TestParseExtensions:

    def test_strips_dots_and_spaces(self):
        assert parse_extensions(".js, ts,,.jsx") == ("js", "ts", "jsx")

    def test_deduplicates(self):
        assert parse_extensions("js,js,.js") == ("js",)


class TestIgnorePatterns:

    def test_expansion_covers_subtree(self):
        assert expand_ignore_patterns(["dist/", "vendor"]) == [
            "dist", "dist/**", "vendor", "vendor/**",
        ]

    @pytest.mark.parametrize("path,ignored", [
        ("node_modules/lib/index.js", True),
        ("packages/app/node_modules/x.js", True),
        ("src/node_modules_helper.js", False),
        ("src/app.js", False),
    ])
    def test_bare_name_matches_at_any_depth(self, path, ignored):
        assert is_ignored(path, expand_ignore_patterns(["node_modules"])) is ignored

    def test_pattern_with_slash_is_relative_to_root(self):
        patterns = expand_ignore_patterns(["src/generated"])

        assert is_ignored("src/generated/api.js", patterns)
        assert not is_ignored("lib/src/generated/api.js", patterns)

    def test_leading_slash_anchors(self):
        patterns = expand_ignore_patterns(["/build"])

        assert is_ignored("build/out.js", patterns)
        assert not is_ignored("src/build/out.js", patterns)

    def test_file_glob(self):
        assert is_ignored("public/jquery.min.js", expand_ignore_patterns(["*.min.js"]))


class TestResolveTargets:

    def test_matches_extensions_recursively(self, temp_dir):
        _touch(temp_dir, "a.js", "b.ts", "c.py", "src/d.js", "src/deep/e.ts", "README.md")

        files = resolve_targets(temp_dir, ["js", "ts"])

        assert _relative(temp_dir, files) == ["a.js", "b.ts", "src/d.js", "src/deep/e.ts"]
        assert all(f.is_absolute() for f in files)

    def test_results_are_sorted_and_unique(self, temp_dir):
        _touch(temp_dir, "z.js", "m.js", "a.js")

        files = resolve_targets(temp_dir, ["js", ".js"])

        assert _relative(temp_dir, files) == ["a.js", "m.js", "z.js"]

    def test_ignore_patterns_exclude_subtrees(self, temp_dir):
        _touch(
            temp_dir,
            "src/app.js",
            "node_modules/pkg/index.js",
            "dist/bundle.js",
            "src/vendor.min.js",
        )

        files = resolve_targets(temp_dir, ["js"], ["node_modules", "dist/", "*.min.js"])

        assert _relative(temp_dir, files) == ["src/app.js"]

    def test_missing_root_gives_nothing(self, temp_dir):
        assert resolve_targets(temp_dir / "missing", ["js"]) == []

    def test_no_extensions_gives_nothing(self, temp_dir):
        _touch(temp_dir, "a.js")

        assert resolve_targets(temp_dir, []) == []

    def test_hidden_files_and_directories_are_skipped(self, temp_dir):
        _touch(
            temp_dir,
            ".eslintrc.js",
            ".hidden/x.js",
            ".git/hooks/pre-commit.js",
            "src/.cache/y.js",
            "src/app.js",
        )

        files = resolve_targets(temp_dir, ["js"])

        assert _relative(temp_dir, files) == ["src/app.js"]
