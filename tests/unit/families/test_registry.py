"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_dens.families import ParametricFamily
from pysatl_dens.families.builtins import configure_lognormal_family
from pysatl_dens.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_dens.families.registry import ParametricFamilyRegister
from pysatl_dens.types import FamilyName, UnivariateContinuous


def _dummy_family(name: str) -> ParametricFamily:
    return ParametricFamily(
        name=name,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["base"],
        distr_characteristics={},
    )


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        """Test that configure_families_register returns a ParametricFamilyRegister."""
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        """Test that configure_families_register returns the same instance."""
        assert configure_families_register() is self.registry
        assert ParametricFamilyRegister() is self.registry

    def test_families_registered(self):
        """Test that all built-in families are registered."""
        assert FamilyName.LOGNORMAL in self.registry.families()
        assert self.registry.contains(FamilyName.LOGNORMAL)
        assert self.registry.get(FamilyName.LOGNORMAL).name == FamilyName.LOGNORMAL

    def test_reset_families_register(self):
        """Test that reset_families_register drops the registry."""
        reset_families_register()

        assert not ParametricFamilyRegister.contains(FamilyName.LOGNORMAL)
        registry = configure_families_register()
        assert registry is not self.registry
        assert registry.contains(FamilyName.LOGNORMAL)

    def test_configure_lognormal_family_is_idempotent(self):
        """Test that repeated configuration keeps the registered family."""
        family = self.registry.get(FamilyName.LOGNORMAL)

        configure_lognormal_family()

        assert self.registry.get(FamilyName.LOGNORMAL) is family
        assert self.registry.families().count(FamilyName.LOGNORMAL) == 1


class TestRegister:
    def test_unknown_family(self):
        with pytest.raises(ValueError, match="No family Missing found"):
            ParametricFamilyRegister.get("Missing")
        assert not ParametricFamilyRegister.contains("Missing")

    def test_register_and_get(self):
        family = _dummy_family("Dummy")
        ParametricFamilyRegister.register(family)

        assert ParametricFamilyRegister.get("Dummy") is family
        assert "Dummy" in ParametricFamilyRegister.families()

    def test_duplicate_family_rejected(self):
        ParametricFamilyRegister.register(_dummy_family("Dummy"))

        with pytest.raises(ValueError, match="already found in register"):
            ParametricFamilyRegister.register(_dummy_family("Dummy"))

    def test_reset_drops_families(self):
        ParametricFamilyRegister.register(_dummy_family("Dummy"))

        ParametricFamilyRegister._reset()

        assert ParametricFamilyRegister.families() == []
