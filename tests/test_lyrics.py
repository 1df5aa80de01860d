import pytest

from mlopskit.lyrics import get_all_zeroshotcandidates, main, read_lyrics


def test_candidates_in_insertion_order():
    assert get_all_zeroshotcandidates() == ["rock", "pop", "hip hop", "country", "latin"]


def test_candidates_fresh_each_call():
    first = get_all_zeroshotcandidates()
    first.append("jazz")
    assert get_all_zeroshotcandidates() == ["rock", "pop", "hip hop", "country", "latin"]


def test_read_lyrics_strips_line_endings(tmp_path):
    path = tmp_path / "song.txt"
    path.write_bytes(b"first line\r\nsecond line\nthird")
    assert read_lyrics(str(path)) == ["first line", "second line", "third"]


def test_read_lyrics_keeps_blank_lines(tmp_path):
    lines = ["verse one", "", "chorus"]
    path = tmp_path / "song.txt"
    path.write_text("\n".join(lines) + "\n")
    assert read_lyrics(str(path)) == lines


def test_read_lyrics_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert read_lyrics(str(path)) == []


def test_read_lyrics_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lyrics(str(tmp_path / "absent.txt"))


def test_main_candidates(capsys):
    assert main(["candidates"]) == 0
    assert capsys.readouterr().out.splitlines() == get_all_zeroshotcandidates()


def test_main_lyrics(tmp_path, capsys):
    path = tmp_path / "song.txt"
    path.write_text("la la\nna na\n")
    assert main(["lyrics", "--file", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == [f"Lyrics {path}", "la la", "na na"]


def test_main_without_command(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "No command given\n"