"""
Unit tests for best-time storage.
"""
import json
from dataclasses import replace
from pathlib import Path

from minefield import Difficulty, GameStatus, HighscoreEntry, HighscoreTable

from conftest import build_state


def _entry(time: int, name: str = "p") -> HighscoreEntry:
    return HighscoreEntry(name=name, time=time, date="2026-01-01T00:00:00")


# ============================================================================
# In-memory Tests
# ============================================================================

class TestHighscoreTable:
    """Test ordering, trimming and bucket independence."""

    def test_new_table_is_empty(self) -> None:
        table = HighscoreTable()
        for difficulty in Difficulty:
            assert table.get(difficulty) == []

    def test_sorted_fastest_first(self) -> None:
        table = HighscoreTable()
        for time in (30, 10, 20):
            table.save(Difficulty.BEGINNER, _entry(time))
        assert [e.time for e in table.get(Difficulty.BEGINNER)] == [10, 20, 30]

    def test_keeps_top_n(self) -> None:
        table = HighscoreTable(max_entries=3)
        for time in (50, 40, 30, 20, 10):
            table.save(Difficulty.EXPERT, _entry(time))
        assert [e.time for e in table.get(Difficulty.EXPERT)] == [10, 20, 30]

    def test_duplicate_times_are_kept_in_order(self) -> None:
        table = HighscoreTable()
        table.save(Difficulty.BEGINNER, _entry(15, "first"))
        table.save(Difficulty.BEGINNER, _entry(15, "second"))
        names = [e.name for e in table.get(Difficulty.BEGINNER)]
        assert names == ["first", "second"]

    def test_buckets_are_independent(self) -> None:
        table = HighscoreTable()
        table.save(Difficulty.BEGINNER, _entry(5))
        table.save(Difficulty.CUSTOM, _entry(7))
        assert len(table.get(Difficulty.BEGINNER)) == 1
        assert len(table.get(Difficulty.CUSTOM)) == 1
        assert table.get(Difficulty.INTERMEDIATE) == []

    def test_clear_one_or_all(self) -> None:
        table = HighscoreTable()
        table.save(Difficulty.BEGINNER, _entry(5))
        table.save(Difficulty.EXPERT, _entry(9))
        table.clear(Difficulty.BEGINNER)
        assert table.get(Difficulty.BEGINNER) == []
        assert len(table.get(Difficulty.EXPERT)) == 1
        table.clear()
        assert table.get(Difficulty.EXPERT) == []

    def test_get_returns_copy(self) -> None:
        table = HighscoreTable()
        table.save(Difficulty.BEGINNER, _entry(5))
        table.get(Difficulty.BEGINNER).clear()
        assert len(table.get(Difficulty.BEGINNER)) == 1

    def test_record_win(self) -> None:
        table = HighscoreTable()
        won = replace(
            build_state(
                2, 2, mines=[], status=GameStatus.WON, start_time=10.0,
                difficulty=Difficulty.INTERMEDIATE,
            ),
            end_time=31.2,
        )
        entry = table.record_win(won, name="ada")
        assert entry.time == 21
        assert entry.name == "ada"
        assert table.get(Difficulty.INTERMEDIATE) == [entry]

    def test_record_win_ignores_unfinished(self) -> None:
        table = HighscoreTable()
        playing = build_state(2, 2, mines=[])
        assert table.record_win(playing) is None
        assert table.get(Difficulty.CUSTOM) == []


# ============================================================================
# Persistence Tests
# ============================================================================

class TestHighscorePersistence:
    """Test JSON persistence."""

    def test_saves_and_reloads(self, tmp_path: Path) -> None:
        path = tmp_path / "scores" / "highscores.json"
        table = HighscoreTable(path)
        table.save(Difficulty.EXPERT, _entry(99, "zed"))

        data = json.loads(path.read_text())
        assert data["EXPERT"][0]["name"] == "zed"
        assert set(data) == {d.value for d in Difficulty}

        reloaded = HighscoreTable(path)
        assert reloaded.get(Difficulty.EXPERT) == [_entry(99, "zed")]

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        table = HighscoreTable(tmp_path / "nope.json")
        assert table.get(Difficulty.BEGINNER) == []

    def test_corrupt_file_is_empty(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "highscores.json"
        path.write_text("{not json")
        table = HighscoreTable(path)
        assert table.get(Difficulty.BEGINNER) == []
        assert "Could not load highscores" in caplog.text
