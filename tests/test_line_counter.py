import pytest

from fleet_lib import CodeLineCounter, LineCounts

SOURCE = """\
// header comment
#include <iostream>

class Foo {
    /* block
     * continued
     */
    int x;
public:
\tint get() { return x; }
};
"""


class TestCodeLineCounter:

    def test_counts(self):
        counts = CodeLineCounter.count_lines(SOURCE.splitlines(keepends=True))
        # Blank line skipped; "#include" and "public:" are neither comment nor logical
        assert counts == LineCounts(physical=10, logical=4, comments=4)

    def test_whitespace_only_lines_are_skipped(self):
        counts = CodeLineCounter.count_lines(["   \n", "\t\n", "x;\n"])
        assert counts == LineCounts(1, 1, 0)

    def test_comment_wins_over_logical(self):
        counts = CodeLineCounter.count_lines(["// return x;\n"])
        assert counts == LineCounts(1, 0, 1)

    def test_analyze_file(self, tmp_path):
        path = tmp_path / "main.cpp"
        path.write_text(SOURCE, encoding='utf-8')
        assert CodeLineCounter.analyze(str(path)) == LineCounts(10, 4, 4)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CodeLineCounter.analyze(str(tmp_path / "nope.cpp"))

    def test_report(self):
        assert LineCounts(3, 2, 1).report() == (
            "=== Code Analysis ===\n"
            "Physical lines: 3\n"
            "Logical lines: 2\n"
            "Comments: 1"
        )
