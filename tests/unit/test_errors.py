"""Tests for the exception hierarchy and validation utilities."""

import math

import numpy as np
import pytest
import torch

from synapto.errors import (
    ConfigurationError,
    InvalidParameterError,
    ShapeMismatchError,
    SynaptoError,
    validate_broadcast_into,
    validate_finite,
    validate_positive,
    validate_same_shape,
)


class TestHierarchy:
    """Exception classes derive from the expected bases."""

    def test_invalid_parameter_is_configuration_error(self):
        assert issubclass(InvalidParameterError, ConfigurationError)
        assert issubclass(InvalidParameterError, SynaptoError)
        assert issubclass(InvalidParameterError, ValueError)

    def test_shape_mismatch_is_value_error(self):
        assert issubclass(ShapeMismatchError, SynaptoError)
        assert issubclass(ShapeMismatchError, ValueError)
        assert not issubclass(ShapeMismatchError, ConfigurationError)


class TestScalarValidators:
    """Tests for validate_positive / validate_finite."""

    @pytest.mark.parametrize("value", [0.01, 1, 20.0, np.float32(3.5), np.float64(1e-9)])
    def test_positive_accepts(self, value):
        validate_positive(value, "x")

    @pytest.mark.parametrize("value", [0, 0.0, -1, -1e-12])
    def test_positive_rejects_non_positive(self, value):
        with pytest.raises(InvalidParameterError, match="must be positive"):
            validate_positive(value, "tau_plus")

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, value):
        with pytest.raises(InvalidParameterError, match="finite"):
            validate_positive(value, "eta")

    @pytest.mark.parametrize("value", ["0.1", None, True, [1.0]])
    def test_rejects_non_numeric(self, value):
        with pytest.raises(InvalidParameterError, match="real number"):
            validate_finite(value, "eta")

    def test_message_names_parameter(self):
        with pytest.raises(InvalidParameterError, match="tau_minus=-1"):
            validate_positive(-1, "tau_minus")


class TestShapeValidators:
    """Tests for tensor shape validation."""

    def test_same_shape_passes(self):
        validate_same_shape(torch.zeros(3), torch.ones(3))

    def test_same_shape_rejects_length_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="element-aligned"):
            validate_same_shape(torch.zeros(3), torch.zeros(4), names=("post", "arrival"))

    def test_broadcast_scalar(self):
        assert validate_broadcast_into(torch.tensor(5.0), torch.zeros(7)) == (7,)

    def test_broadcast_column(self):
        assert validate_broadcast_into(torch.zeros(4, 1), torch.zeros(4, 3)) == (4, 3)

    def test_broadcast_incompatible(self):
        with pytest.raises(ShapeMismatchError, match="cannot be broadcast"):
            validate_broadcast_into(torch.zeros(3), torch.zeros(4))

    def test_broadcast_would_enlarge(self):
        with pytest.raises(ShapeMismatchError, match="would enlarge"):
            validate_broadcast_into(torch.zeros(2, 5), torch.zeros(5))
