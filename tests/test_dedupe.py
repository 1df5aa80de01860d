import os

import pytest

from mlopskit.dedupe import checksum, checksum_parallel, find_duplicates, main, walk

EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "sub").mkdir()
    first = tmp_path / "a.txt"
    second = tmp_path / "sub" / "c.txt"
    other = tmp_path / "d.txt"
    first.write_text("same contents")
    second.write_text("same contents")
    other.write_text("different contents")
    return tmp_path, sorted([str(first), str(second)]), str(other)


def test_walk_finds_all_files(tree):
    root, dupes, other = tree
    assert sorted(walk(str(root))) == sorted(dupes + [other])


def test_walk_on_a_file_returns_it(tree):
    _root, _dupes, other = tree
    assert walk(other) == [other]


def test_walk_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        walk(str(tmp_path / "missing"))


def test_checksum_of_empty_file(tmp_path):
    empty = tmp_path / "empty"
    empty.write_bytes(b"")
    assert checksum([str(empty)]) == {EMPTY_MD5: [str(empty)]}


def test_checksum_groups_identical_files(tree):
    root, dupes, other = tree
    groups = checksum(walk(str(root)))
    assert len(groups) == 2
    assert all(len(key) == 32 for key in groups)
    assert sorted(sorted(files) for files in groups.values()) == sorted([dupes, [other]])


def test_checksum_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        checksum([str(tmp_path / "missing")])


def test_parallel_matches_serial(tree):
    root, _dupes, _other = tree
    files = walk(str(root))
    serial = {k: sorted(v) for k, v in checksum(files).items()}
    parallel = {k: sorted(v) for k, v in checksum_parallel(files).items()}
    assert parallel == serial


def test_find_duplicates(tree):
    root, dupes, _other = tree
    duplicates = find_duplicates(checksum(walk(str(root))))
    assert [sorted(group) for group in duplicates] == [dupes]


def test_find_duplicates_none():
    assert find_duplicates({"x": ["one"], "y": ["two"]}) == []


def test_main_reports(tree, capsys):
    root, dupes, _other = tree
    assert main(["--path", str(root)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f'Searching path: "{root}"'
    assert lines[1] == "Found 3 files"
    assert lines[2] == "Found 1 duplicates"
    assert lines[3].startswith("Duplicate files: [")
    assert all(f'"{path}"' in lines[3] for path in dupes)
    assert len(lines) == 4


def test_main_requires_path():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_main_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--path", str(tmp_path / os.sep.join(["no", "such"]))])