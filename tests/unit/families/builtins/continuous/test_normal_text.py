"""
Tests for the canonical text form of normal parameters and distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_normal.families import NormalDistribution, NormalParameters
from pysatl_normal.textio import ParseError


class TestNormalParametersText:
    def test_serialize(self):
        assert NormalParameters(6.0, 2.0).serialize() == (
            "(6.000000000000000000 2.000000000000000000)"
        )
        assert str(NormalParameters(-0.5, 0.25)) == (
            "(-0.500000000000000000 0.250000000000000000)"
        )

    def test_serialize_float32(self):
        params = NormalParameters(6.0, 2.0, dtype=np.float32)
        assert params.serialize() == "(6.0000000000 2.0000000000)"

    def test_parse_example(self):
        params = NormalParameters.parse("(6.000000000000000 2.000000000000000)")

        assert params.mu == 6.0
        assert params.sigma == 2.0
        assert params.dtype is np.float64

    @pytest.mark.parametrize(
        "text, mu, sigma",
        [
            ("(0 1)", 0.0, 1.0),
            ("(-1.5 2.5e-1)", -1.5, 0.25),
            ("( 3 4)", 3.0, 4.0),
            ("(3  4)", 3.0, 4.0),
            ("(1 2)\n", 1.0, 2.0),
        ],
    )
    def test_parse_accepts_stream_extraction_whitespace(self, text, mu, sigma):
        assert NormalParameters.parse(text) == NormalParameters(mu, sigma)

    @pytest.mark.parametrize(
        "text",
        [
            "6.0 2.0)",
            " (6.0 2.0)",
            "(6.0,2.0)",
            "(6.0\t2.0)",
            "(6.0 2.0",
            "(6.0 two)",
            "(inf 1.0)",
            "()",
            "",
            "(6.0 2.0) extra",
            "[6.0 2.0]",
        ],
    )
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ParseError):
            NormalParameters.parse(text)

    def test_load_replaces_both_fields(self):
        params = NormalParameters(1.0, 1.0)
        params.load("(6.0 2.0)")

        assert params == NormalParameters(6.0, 2.0)

    @pytest.mark.parametrize("text", ["6.0 2.0)", "(6.0 2.0", "(6.0 x)"])
    def test_failed_load_leaves_target_unchanged(self, text):
        params = NormalParameters(-3.0, 0.5)

        with pytest.raises(ParseError):
            params.load(text)

        assert params == NormalParameters(-3.0, 0.5)

    def test_load_keeps_dtype(self):
        params = NormalParameters(dtype=np.float32)
        params.load("(0.1 2)")

        assert isinstance(params.mu, np.float32)
        assert params.mu == np.float32(0.1)


class TestNormalDistributionText:
    def test_serialize(self):
        assert NormalDistribution(6.0, 2.0).serialize() == (
            "[normal (6.000000000000000000 2.000000000000000000)]"
        )
        assert str(NormalDistribution()) == "[normal (0.000000000000000000 1.000000000000000000)]"

    def test_parse_example(self):
        distr = NormalDistribution.parse("[normal (6.000000000000000 2.000000000000000)]")
        assert distr == NormalDistribution(6.0, 2.0)

    def test_parse_skips_leading_whitespace(self):
        assert NormalDistribution.parse(" \n\t[normal (1 2)]") == NormalDistribution(1.0, 2.0)

    @pytest.mark.parametrize(
        "mu, sigma",
        [
            (0.0, 1.0),
            (6.0, 2.0),
            (-1.5, 0.25),
            (1234.5678, 3.0),
            (1 / 3, 2 / 3),
            (-1e6, 1e3),
            (0.1 + 0.2, 1.0),
            (0.7000000000000001, 0.1 + 0.7),
            (-0.012345678901234567, 0.0987654321),
        ],
    )
    def test_round_trip(self, mu, sigma):
        distr = NormalDistribution(mu, sigma)
        assert NormalDistribution.parse(distr.serialize()) == distr

    @pytest.mark.parametrize(
        "mu, sigma",
        [(0.0, 1.0), (6.0, 2.0), (-1.5, 0.25), (0.1, 3.7), (np.float32(0.1) * 3, 0.0123)],
    )
    def test_round_trip_float32(self, mu, sigma):
        distr = NormalDistribution(mu, sigma, dtype=np.float32)
        parsed = NormalDistribution.parse(distr.serialize(), dtype=np.float32)

        assert parsed == distr
        assert parsed.dtype is np.float32

    @pytest.mark.parametrize(
        "text",
        [
            "normal (6.0 2.0)]",
            "[Normal (6.0 2.0)]",
            "[normal(6.0 2.0)]",
            "[normal  (6.0 2.0)]",
            "[normal (6.0 2.0)",
            "[normal (6.0 2.0]",
            "[normal 6.0 2.0]",
            "[normal (6.0 2.0)] trailing",
            "(6.0 2.0)",
        ],
    )
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ParseError):
            NormalDistribution.parse(text)

    def test_failed_load_leaves_target_unchanged(self):
        distr = NormalDistribution(6.0, 2.0)

        with pytest.raises(ParseError):
            distr.load("[normal (1.0 2.0")

        assert distr == NormalDistribution(6.0, 2.0)

    def test_load(self):
        distr = NormalDistribution()
        distr.load("[normal (-2.5 0.5)]")

        assert distr == NormalDistribution(-2.5, 0.5)

    def test_digits_beyond_sixteen_decimals_survive(self):
        distr = NormalDistribution(0.1 + 0.2, 1.0)
        parsed = NormalDistribution.parse(distr.serialize())

        assert parsed.mu == 0.30000000000000004
        assert parsed.mu != 0.3
