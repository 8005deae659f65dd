"""Tests for vector factory."""
import pytest

from sparsevec.core.exceptions import UnsortedEntriesError
from sparsevec.vectors import (
    SparseVector,
    SpVec32,
    SpVec64,
    VectorFactory,
    get_registered_vectors,
    register_vector,
)
from sparsevec.vectors import factory as factory_module


class TestVectorRegistry:
    """Test vector registration."""

    def test_builtin_precisions_registered(self):
        """f32 and f64 are registered."""
        registered = get_registered_vectors()

        assert "f32" in registered
        assert "f64" in registered

    def test_register_custom(self, monkeypatch):
        """Custom classes can be registered."""
        monkeypatch.setattr(factory_module, "_VECTOR_REGISTRY", dict(factory_module._VECTOR_REGISTRY))

        @register_vector("custom")
        class CustomVector(SparseVector):
            pass

        assert VectorFactory.get_class("custom") is CustomVector

    def test_overwrite_logs_warning(self, monkeypatch, caplog):
        """Re-registering a name logs a warning."""
        monkeypatch.setattr(factory_module, "_VECTOR_REGISTRY", dict(factory_module._VECTOR_REGISTRY))

        with caplog.at_level("WARNING"):
            register_vector("f64")(SpVec64)

        assert "Overwriting existing vector type: f64" in caplog.text


class TestVectorFactory:
    """Test VectorFactory."""

    def test_create_f64(self):
        """Creates double precision vector from pairs."""
        vec = VectorFactory.create("f64", [(3, 1.0), (1, 2.0)])

        assert isinstance(vec, SpVec64)
        assert list(vec.dimensions()) == [1, 3]

    def test_create_f32(self):
        """Creates single precision vector."""
        assert isinstance(VectorFactory.create("f32", [(1, 1.0)]), SpVec32)

    def test_create_empty(self):
        """No pairs gives an empty vector."""
        assert VectorFactory.create("f64").is_empty()

    def test_create_with_length_trusts_order(self):
        """Passing length routes through create_from_sorted."""
        vec = VectorFactory.create("f64", [(1, 1.0), (2, 1.0)], length=10.0)

        assert vec.get_length() == 10.0

    def test_unknown_precision(self):
        """Unknown precision lists available names."""
        with pytest.raises(ValueError) as exc_info:
            VectorFactory.create("f16", [])

        assert "Unknown vector precision" in str(exc_info.value)
        assert "f64" in str(exc_info.value)

    def test_from_config(self):
        """Reads precision from the vectors section."""
        vec = VectorFactory.from_config({"precision": "f32"}, pairs=[(1, 1.0)])

        assert isinstance(vec, SpVec32)

    def test_from_config_defaults(self):
        """Missing keys default to f64."""
        assert isinstance(VectorFactory.from_config({}, pairs=[(1, 1.0)]), SpVec64)

    def test_from_config_validates_sorted(self):
        """validate_sorted turns on ordering checks for trusted pairs."""
        config = {"precision": "f64", "validate_sorted": True}

        with pytest.raises(UnsortedEntriesError):
            VectorFactory.from_config(config, pairs=[(2, 1.0), (1, 1.0)], length=1.0)
