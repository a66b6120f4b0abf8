import json
import os

from gridsnake.storage import Storage, default_data_dir


def test_missing_files_default_to_empty(storage):
    assert storage.load_high_score() == 0
    assert storage.load_achievements() == set()


def test_high_score_round_trip(storage):
    storage.save_high_score(42)
    assert storage.load_high_score() == 42
    with open(storage.highscore_file) as f:
        assert json.load(f) == {"highscore": 42}


def test_achievements_round_trip(storage):
    storage.save_achievements({"ach-scorer", "ach-beginner"})
    assert storage.load_achievements() == {"ach-scorer", "ach-beginner"}


def test_malformed_files_are_ignored(storage):
    with open(storage.highscore_file, "w") as f:
        f.write("{not json")
    with open(storage.achievements_file, "w") as f:
        f.write('{"ach-scorer": true}')
    assert storage.load_high_score() == 0
    assert storage.load_achievements() == set()


def test_wrong_value_types_are_ignored(storage):
    with open(storage.highscore_file, "w") as f:
        json.dump({"highscore": "lots"}, f)
    with open(storage.achievements_file, "w") as f:
        json.dump(["ach-scorer", 3, "ach-unknown"], f)
    assert storage.load_high_score() == 0
    assert storage.load_achievements() == {"ach-scorer"}


def test_write_failure_is_swallowed(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    storage = Storage(data_dir=str(blocker / "sub"))
    storage.save_high_score(5)
    assert storage.load_high_score() == 0


def test_data_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("GRIDSNAKE_DATA_DIR", str(tmp_path))
    assert default_data_dir() == os.path.abspath(str(tmp_path))
    assert Storage().highscore_file == os.path.join(str(tmp_path), "highscore.json")
