import pytest

from levelgen.level import ConfigError, GenerationExhausted, LevelConfig, LevelGenerator
from levelgen.level.validator import check_level


def test_density_ceiling_at_floor_exhausts_attempts():
    cfg = LevelConfig(max_empty_spaces=0.05, seed=11, max_attempts=8)
    gen = LevelGenerator(cfg)
    with pytest.raises(GenerationExhausted) as exc_info:
        gen.generate()
    err = exc_info.value
    assert err.attempts == 8 == gen.attempts
    m = err.metrics
    assert m["attempts"] == 8
    assert m["rejected_density_low"] + m["rejected_density_high"] + m["rejected_disconnected"] == 8


def test_rejected_attempts_never_accepted():
    gen = LevelGenerator(LevelConfig(max_empty_spaces=0.05, seed=3))
    for _ in range(20):
        full, report, _digger = gen.attempt()
        assert not report.ok
        # the verdict agrees with an independent re-check of the grid
        assert not check_level(full, 0.05, 0.05).ok


def test_cap_allows_success_before_limit():
    cfg = LevelConfig(seed=1234, max_attempts=10_000)
    level = LevelGenerator(cfg).generate()
    assert 1 <= level.attempts <= 10_000


def test_invalid_config_rejected_before_generation():
    with pytest.raises(ConfigError):
        LevelGenerator(LevelConfig(half_height=0))
    with pytest.raises(ConfigError):
        LevelGenerator(LevelConfig(max_empty_spaces=1.5))


def test_each_generate_call_gets_full_budget():
    gen = LevelGenerator(LevelConfig(max_empty_spaces=0.05, seed=11, max_attempts=3))
    for _ in range(2):
        with pytest.raises(GenerationExhausted) as exc_info:
            gen.generate()
        assert exc_info.value.attempts == 3
        assert exc_info.value.metrics["attempts"] == 3


def test_repeated_generate_reports_its_own_run():
    gen = LevelGenerator(LevelConfig(seed=1234))
    gen.generate()
    second = gen.generate()
    m = second.metrics
    assert m["attempts"] == second.attempts
    assert m["rejected_density_low"] + m["rejected_density_high"] + m["rejected_disconnected"] == second.attempts - 1
