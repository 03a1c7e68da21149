"""
Tests for the ABM simulation pipeline.
"""

import pytest
import numpy as np
from abm import ABM, ConfigurationError, PathSummary


class TestABM:
    """Test suite for the ABM class."""

    @pytest.fixture
    def abm_instance(self):
        """Create an ABM instance for testing."""
        return ABM(drift=0.05, volatility=0.4, seed=42)

    def test_abm_initialization(self):
        """Test ABM initialization with default and custom parameters."""
        abm1 = ABM(0.05, 0.4)
        assert abm1.simulator.path_count == 50
        assert abm1.simulator.step_count == 200
        assert abm1.simulator.horizon == 1.0
        assert abm1.simulator.initial_value == 200.0
        assert abm1.seed is None
        assert abm1.paths is None
        assert abm1.summary is None

        abm2 = ABM(0.1, 0.2, path_count=10, step_count=5, horizon=2.0, initial_value=50.0, seed=3)
        assert abm2.simulator.path_count == 10
        assert abm2.simulator.step_count == 5
        assert abm2.simulator.dt == 0.4
        assert abm2.seed == 3

    def test_invalid_parameters(self):
        """Test that invalid configuration surfaces at construction."""
        with pytest.raises(ConfigurationError, match="horizon"):
            ABM(0.05, 0.4, horizon=0.0)

    def test_simulate(self, abm_instance):
        """Test simulate stores and returns the batch."""
        paths = abm_instance.simulate()

        assert paths.shape == (50, 201)
        assert abm_instance.paths is paths
        assert np.all(paths[:, 0] == 200.0)

    def test_summarize_without_paths(self, abm_instance):
        """Test that summarize raises error before simulate."""
        with pytest.raises(ValueError, match="Paths not available"):
            abm_instance.summarize()

    def test_summarize(self, abm_instance):
        """Test the summary is indexed by simulation time."""
        abm_instance.simulate()

        summary = abm_instance.summarize()

        assert isinstance(summary, PathSummary)
        assert abm_instance.summary is summary
        assert summary.time_index[0] == 0.0
        assert summary.time_index[-1] == pytest.approx(1.0)

    def test_simulate_resets_summary(self, abm_instance):
        abm_instance.run()

        abm_instance.simulate()

        assert abm_instance.summary is None

    def test_run_complete_pipeline(self, abm_instance):
        """Test the complete run pipeline."""
        summary = abm_instance.run()

        assert abm_instance.paths is not None
        assert abm_instance.summary is summary
        assert summary.num_paths == 50
        assert summary.num_points == 201

    def test_run_reproducibility(self):
        """Test that equal seeds give equal pipelines."""
        stats1 = ABM(0.05, 0.4, seed=11).run().to_dict()
        stats2 = ABM(0.05, 0.4, seed=11).run().to_dict()

        assert stats1 == stats2
