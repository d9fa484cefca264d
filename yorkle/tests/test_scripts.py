import io
import json

import pytest

from yorkle.scripts import gen_vocab, play, show_stats


@pytest.fixture
def game_files(tmp_path):
    (tmp_path / "words.txt").write_text("crane\nslate\nbread\nerase\n")
    (tmp_path / "answer.txt").write_text("bread\n")
    return tmp_path


def play_args(tmp_path) -> list[str]:
    return [
        "--words_path", str(tmp_path / "words.txt"),
        "--answer_path", str(tmp_path / "answer.txt"),
        "--stats_path", str(tmp_path / "stats.txt"),
    ]


def test_play_records_win(game_files, monkeypatch, capsys) -> None:
    (game_files / "stats.txt").write_text("0 1 0 0 0 0 0\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("erase\nbread\n"))

    assert play.main(play_args(game_files)) == 0
    assert (game_files / "stats.txt").read_text() == "0 2 0 0 0 0 0\n"

    out = capsys.readouterr().out
    assert "You guessed the word in 2 attempts!" in out
    assert "Played: 2\nWin %: 100.0%" in out
    assert "2: ** 2" in out


def test_play_records_loss(game_files, monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("crane\n" * 6))

    assert play.main(play_args(game_files) + ["--report"]) == 0
    assert (game_files / "stats.txt").read_text() == "0 0 0 0 0 0 1\n"

    out = capsys.readouterr().out
    assert "The word was 'bread'" in out
    assert "Win %: 0.0%" in out
    report = json.loads(out[out.index("{"):])
    assert report["attempts_count"] == 6


def test_play_without_word_list(tmp_path, capsys) -> None:
    (tmp_path / "answer.txt").write_text("bread\n")

    assert play.main(play_args(tmp_path)) == 1
    assert "words.txt" in capsys.readouterr().err
    assert not (tmp_path / "stats.txt").exists()


def test_play_unfinished_game(game_files, monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("crane\n"))

    assert play.main(play_args(game_files)) == 1
    assert not (game_files / "stats.txt").exists()
    assert "stats were not updated" in capsys.readouterr().err


def test_play_save_failure(game_files, monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("bread\n"))
    args = play_args(game_files)
    args[-1] = str(game_files / "missing_dir" / "stats.txt")

    assert play.main(args) == 0
    captured = capsys.readouterr()
    assert "Warning: could not save stats" in captured.err
    assert "Played: 1" in captured.out


def test_show_stats(tmp_path, capsys) -> None:
    (tmp_path / "stats.txt").write_text("1 0 0 0 0 0 1\n")

    show_stats.main(["--stats_path", str(tmp_path / "stats.txt")])
    assert capsys.readouterr().out.startswith("Played: 2\nWin %: 50.0%\n")


def test_gen_vocab(tmp_path) -> None:
    (tmp_path / "raw.txt").write_text("crane Slate bread crane it's ab3de blood plant\n")

    gen_vocab.main([
        "--input_path", str(tmp_path / "raw.txt"),
        "--output_path", str(tmp_path / "words.txt"),
        "--max_words", "3",
    ])
    assert (tmp_path / "words.txt").read_text() == "crane\nbread\nblood\n"
