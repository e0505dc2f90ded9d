"""
Tests for ToleranceConfig (Pydantic model)

Covers:
1. Defaults mirror the numerical-safeguards constants
2. Field constraints (gt=0, finite, no extra keys)
3. Immutability (frozen=True)
4. Presets and plain-mapping loading
5. Passing tolerances explicitly into operations
"""

import math

import pytest
from pydantic import ValidationError

from lars import (
    DEFAULT_TOLERANCES,
    EPS_COMPARE,
    EPS_DEGENERATE,
    EPS_DIVISION,
    EPS_SINGULAR,
    DegenerateVectorError,
    Mat2,
    SingularMatrixError,
    ToleranceConfig,
    Vec2,
)


class TestDefaults:
    def test_defaults_match_constants(self) -> None:
        cfg = ToleranceConfig()
        assert cfg.compare == EPS_COMPARE
        assert cfg.division == EPS_DIVISION
        assert cfg.degenerate == EPS_DEGENERATE
        assert cfg.singular == EPS_SINGULAR

    def test_default_instance(self) -> None:
        assert DEFAULT_TOLERANCES == ToleranceConfig()


class TestValidation:
    def test_non_positive_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ToleranceConfig(singular=0.0)
        with pytest.raises(ValidationError):
            ToleranceConfig(compare=-1e-9)

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ToleranceConfig(division=math.inf)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ToleranceConfig(epsilon=1e-9)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        cfg = ToleranceConfig()
        with pytest.raises(ValidationError):
            cfg.compare = 1.0  # type: ignore[misc]

    def test_model_copy_creates_new_instance(self) -> None:
        cfg = ToleranceConfig()
        looser = cfg.model_copy(update={"singular": 1e-6})
        assert looser.singular == 1e-6
        assert cfg.singular == EPS_SINGULAR


class TestPresets:
    def test_loose(self) -> None:
        cfg = ToleranceConfig.loose(10.0)
        assert cfg.compare == pytest.approx(EPS_COMPARE * 10.0)
        assert cfg.singular == pytest.approx(EPS_SINGULAR * 10.0)

    def test_loose_invalid_scale(self) -> None:
        with pytest.raises(ValueError, match="scale must be positive"):
            ToleranceConfig.loose(0.0)

    def test_strict_accepts_tiny_values(self) -> None:
        cfg = ToleranceConfig.strict()
        assert Vec2(2.0**-300, 0.0).normalize(eps=cfg.degenerate) == Vec2(1.0, 0.0)

    def test_from_mapping(self) -> None:
        cfg = ToleranceConfig.from_mapping({"singular": 1e-6, "compare": 1e-6})
        assert cfg.singular == 1e-6
        assert cfg.division == EPS_DIVISION

    def test_from_mapping_invalid(self) -> None:
        with pytest.raises(ValidationError):
            ToleranceConfig.from_mapping({"singular": "tiny"})


class TestExplicitUse:
    def test_inverse_with_config(self) -> None:
        cfg = ToleranceConfig(singular=1e-3)
        m = Mat2(1e-2, 0.0, 0.0, 1e-2)
        with pytest.raises(SingularMatrixError):
            m.inverse(eps=cfg.singular)
        assert m.inverse(eps=DEFAULT_TOLERANCES.singular).approx_eq(
            Mat2(100.0, 0.0, 0.0, 100.0), eps=1e-6
        )

    def test_normalize_with_config(self) -> None:
        cfg = ToleranceConfig(degenerate=1.0)
        with pytest.raises(DegenerateVectorError):
            Vec2(0.5, 0.0).normalize(eps=cfg.degenerate)
