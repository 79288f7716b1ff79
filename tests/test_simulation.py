"""Tests for the simulation configuration and runner."""

import logging

import pytest
from ndlife.core.errors import (
    InvalidRuleError,
    RuleStringError,
    TooHighRuleError,
    ZeroNeighbourBirthRuleError,
)
from ndlife.patterns.shapes import BLOCK, GLIDER, translate
from ndlife.simulation import SimulationConfig, run_simulation


class TestSimulationConfig:
    """Test configuration validation."""

    def test_defaults_are_conway(self):
        config = SimulationConfig()
        assert config.dimension == 2
        assert config.birth == {3}
        assert config.survival == {2, 3}
        assert config.rule_string == "B3/S23"

    def test_from_rule_string(self):
        config = SimulationConfig.from_rule_string("B36/S23", generations=5)
        assert config.birth == {3, 6}
        assert config.generations == 5

    def test_rules_validated(self):
        with pytest.raises(ZeroNeighbourBirthRuleError):
            SimulationConfig(birth={0})
        with pytest.raises(TooHighRuleError):
            SimulationConfig(dimension=1, survival={3})

    def test_bad_rule_string(self):
        with pytest.raises(RuleStringError):
            SimulationConfig.from_rule_string("Conway")

    def test_negative_generations(self):
        with pytest.raises(ValueError, match="generations"):
            SimulationConfig(generations=-1)

    @pytest.mark.parametrize("birth,survival", [({2.5}, {2, 3}), ({-1}, {-5}), ({3}, {"3"})])
    def test_invalid_rule_values(self, birth, survival):
        """Rules are not coerced to int."""
        with pytest.raises(InvalidRuleError):
            SimulationConfig(birth=birth, survival=survival)

    def test_rules_normalised(self):
        config = SimulationConfig(birth=[3, 3], survival=(2, 3))
        assert config.birth == frozenset({3})
        assert config.survival == frozenset({2, 3})


class TestRunSimulation:
    """Test metrics collection."""

    def test_glider_run(self):
        config = SimulationConfig(generations=8, log_interval=0)
        results = run_simulation(config, GLIDER)

        assert results["final_age"] == 8
        assert results["initial_live_count"] == 5
        assert results["final_live_count"] == 5
        assert len(results["live_count_history"]) == 9
        assert not results["extinct"]

        start_x, start_y = results["com_trajectory"][0]
        end_x, end_y = results["com_trajectory"][-1]
        assert end_x - start_x == pytest.approx(2.0)
        assert end_y - start_y == pytest.approx(-2.0)

    def test_block_stable(self):
        results = run_simulation(SimulationConfig(generations=20), BLOCK)
        assert results["live_count_history"] == [4] * 21
        assert results["final_cells"] == BLOCK

    def test_stops_when_extinct(self):
        results = run_simulation(SimulationConfig(generations=50), {(0, 0)})
        assert results["extinct"]
        assert results["final_age"] == 1
        assert results["live_count_history"] == [1, 0]

    def test_logs_progress(self, caplog):
        with caplog.at_level(logging.INFO, logger="ndlife.simulation"):
            run_simulation(SimulationConfig(generations=3, log_interval=1), GLIDER)
        assert "B3/S23" in caplog.text
        assert "Generation 3" in caplog.text

    def test_three_dimensional(self):
        config = SimulationConfig(dimension=3, birth={3}, survival={0}, generations=1)
        results = run_simulation(config, {(0, 0, 0)})
        assert results["final_cells"] == {(0, 0, 0)}
        assert results["com_trajectory"][-1] == (0.0, 0.0, 0.0)

    def test_glider_far_from_origin(self):
        """Metrics work for coordinates beyond the int64 range."""
        far = 2 ** 70
        config = SimulationConfig(generations=8, log_interval=0)
        results = run_simulation(config, translate(GLIDER, (far, far)))

        assert results["final_live_count"] == 5
        assert results["final_cells"] == translate(GLIDER, (far + 2, far - 2))
        assert len(results["com_trajectory"]) == 9
        assert results["com_trajectory"][-1] == pytest.approx((float(far), float(far)))
