"""
Tests for grand.core.logging

Verify seed events are written and printed.
"""

import json

from grand.core.logging import create_seed_logger
from grand.core.rng import RandomSource


def read_events(tmp_path):
    lines = (tmp_path / "logs" / "seeding.log").read_text().splitlines()
    return [json.loads(line) for line in lines]


class TestCreateSeedLogger:
    """Tests for create_seed_logger."""
    
    def test_writes_json_lines(self, tmp_path):
        log = create_seed_logger(tmp_path)
        log({"event": "seed", "origin": "explicit", "seed": 1})
        log({"event": "seed", "origin": "entropy", "seed": 2})
        
        assert read_events(tmp_path) == [
            {"event": "seed", "origin": "explicit", "seed": 1},
            {"event": "seed", "origin": "entropy", "seed": 2},
        ]
    
    def test_creates_logs_directory(self, tmp_path):
        out = tmp_path / "run"
        create_seed_logger(out)({"event": "seed", "origin": "explicit", "seed": 3})
        assert (out / "logs" / "seeding.log").exists()
    
    def test_quiet_by_default(self, tmp_path, capsys):
        create_seed_logger(tmp_path)({"event": "seed", "origin": "explicit", "seed": 3})
        assert capsys.readouterr().out == ""
    
    def test_verbose_prints(self, tmp_path, capsys):
        create_seed_logger(tmp_path, verbose=True)(
            {"event": "seed", "origin": "entropy", "seed": 77}
        )
        out = capsys.readouterr().out
        assert "entropy" in out
        assert "77" in out
    
    def test_attached_to_random_source(self, tmp_path, counting_entropy):
        r = RandomSource(
            entropy_source=counting_entropy,
            on_seed=create_seed_logger(tmp_path),
        )
        r.next_int()
        r.reseed(8)
        
        assert read_events(tmp_path) == [
            {"event": "seed", "origin": "entropy", "seed": 12345},
            {"event": "seed", "origin": "explicit", "seed": 8},
        ]
