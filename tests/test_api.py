"""Tests for the LineCounter facade and module-level API."""

from __future__ import annotations

import pytest

import locc
from locc.api import LineCounter, aggregate, classify
from locc.config import LoccConfig
from locc.exceptions import FileSkippedError, UnknownLanguageError
from locc.models.counts import Counts


class TestClassify:
    def test_module_level_classify(self):
        stats = classify("main.c", "// hello\ncode();\n")
        assert stats.path == "main.c"
        assert stats.language == "c"
        assert stats.counts == Counts(code=1, comment=1, blank=0)

    def test_empty_content(self):
        stats = classify("main.c", "")
        assert stats.lines == ()
        assert stats.counts == Counts()

    def test_language_override(self):
        stats = classify("notes.txt", "# heading\n", language="python")
        assert stats.language == "python"
        assert stats.counts == Counts(comment=1)

    def test_unknown_override_raises(self):
        with pytest.raises(UnknownLanguageError):
            classify("main.c", "x", language="klingon")

    def test_shebang_from_first_line(self):
        stats = classify("tool", "#!/usr/bin/env python3\n# c\nprint(1)\n")
        assert stats.language == "python"
        assert stats.counts == Counts(code=1, comment=2)

    def test_config_extensions(self):
        counter = LineCounter(LoccConfig(extensions={"tpl": "html"}))
        assert counter.classify("page.tpl", "<p>\n").language == "html"

    def test_doc_strings_config(self):
        counter = LineCounter(LoccConfig(count_doc_strings=False))
        assert counter.classify("a.py", '"""Doc."""\n').counts == Counts(code=1)

    def test_aggregate_and_package_exports(self):
        summary = aggregate([classify("a.py", "x\n"), classify("b.py", "# y\n")])
        assert summary.totals == Counts(code=1, comment=1)
        assert locc.list_supported_languages() == locc.default_registry().language_ids()
        assert locc.aggregate is aggregate


class TestCountFiles:
    @pytest.fixture
    def project(self, tmp_path):
        (tmp_path / "app.py").write_text("# app\nimport os\n\nprint(os.name)\n")
        (tmp_path / "util.c").write_text("/* util */\nint add(int a, int b) { return a + b; }\n")
        (tmp_path / "README").write_text("read me\n")
        (tmp_path / "blob.c").write_bytes(b"\x00\x01\x02int x;\n")
        return tmp_path

    def test_counts_and_skips(self, project):
        counter = LineCounter()
        summary = counter.count_files(sorted(project.iterdir()))
        assert summary.file_count == 3
        assert summary.languages["python"].counts == Counts(code=2, comment=1, blank=1)
        assert summary.languages["c"].counts == Counts(code=1, comment=1)
        assert [f.path for f in summary.unrecognized] == [str(project / "README")]
        assert [(s.path, s.reason) for s in summary.skipped] == [
            (str(project / "blob.c"), "binary file")
        ]

    def test_too_large(self, project):
        counter = LineCounter(LoccConfig(max_file_size=20))
        summary = counter.count_files([project / "app.py", project / "README"])
        assert [f.path for f in summary.files] == [str(project / "README")]
        assert summary.skipped[0].reason.startswith("file too large")

    def test_unrecognized_skipped_when_disabled(self, project):
        counter = LineCounter(LoccConfig(count_unrecognized=False))
        summary = counter.count_files([project / "README", project / "app.py"])
        assert summary.file_count == 1
        assert summary.skipped[0].reason == "unrecognized language"

    def test_missing_file_is_isolated(self, project):
        counter = LineCounter()
        summary = counter.count_files([project / "gone.py", project / "app.py"])
        assert summary.file_count == 1
        assert summary.skipped[0].path == str(project / "gone.py")
        assert summary.skipped[0].reason == "No such file or directory"

    def test_unknown_language_override_is_per_file(self, project):
        counter = LineCounter()
        summary = counter.count_files([project / "app.py"], language="klingon")
        assert summary.file_count == 0
        assert summary.skipped[0].reason == "Unknown language 'klingon'"

    def test_duplicate_paths_counted_once(self, project):
        counter = LineCounter()
        summary = counter.count_files([project / "app.py", project / "app.py"])
        assert summary.file_count == 1

    def test_paths_relative_to_root(self, project):
        (project / "sub").mkdir()
        (project / "sub" / "mod.py").write_text("x = 1\n")
        summary = LineCounter().count_files([project / "sub" / "mod.py", project / "blob.c"], root=project)
        assert [f.path for f in summary.files] == ["sub/mod.py"]
        assert summary.skipped[0].path == "blob.c"

    def test_path_outside_root_kept_as_given(self, project, tmp_path_factory):
        other = tmp_path_factory.mktemp("other") / "x.py"
        other.write_text("x\n")
        summary = LineCounter().count_files([other], root=project)
        assert [f.path for f in summary.files] == [str(other)]

    def test_concurrent_counting_shares_classifiers(self, project):
        counter = LineCounter(LoccConfig(workers=8))
        paths = []
        for i in range(32):
            path = project / f"m{i}.py"
            path.write_text("x = 1\n")
            paths.append(path)
        summary = counter.count_files(paths)
        assert summary.file_count == 32
        assert list(counter._classifiers) == ["python"]

    def test_bom_is_ignored(self, tmp_path):
        path = tmp_path / "bom.py"
        path.write_bytes("\ufeff# c\n".encode("utf-8"))
        assert LineCounter().count_file(path).counts == Counts(comment=1)

    def test_count_file_raises_skip(self, project):
        with pytest.raises(FileSkippedError, match="binary"):
            LineCounter().count_file(project / "blob.c")
