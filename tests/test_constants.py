"""Tests for the named constant table."""

from types import MappingProxyType

import pytest
from sci_calc import Const, constant, ZERO, PI, E
from sci_calc.expression_tree import constants
from sci_calc.expression_tree.constants import (
    get_constant, get_constant_table, get_named_constants, constant_name,
)


class TestConstantTable:
    """The lazily built, read-only table."""

    def test_built_once(self):
        """Repeated lookups return the same table."""
        assert get_constant_table() is get_constant_table()

    def test_covers_enumeration(self):
        """Every Const member has an entry."""
        assert set(get_constant_table()) == set(Const)

    def test_read_only(self):
        """The table cannot be modified."""
        table = get_constant_table()
        assert isinstance(table, MappingProxyType)
        with pytest.raises(TypeError):
            table[Const.PI] = constant(Const.E)

    def test_names(self):
        """Constants are published under their upper-snake names."""
        assert set(get_named_constants()) == {"ZERO", "PI", "E"}
        assert constant_name(Const.PI) == "PI"


class TestModuleAttributes:
    """Module-level access resolves through the table."""

    def test_attribute_lookup(self):
        """constants.PI is the table entry."""
        assert constants.PI is get_constant(Const.PI)
        assert PI is get_constant(Const.PI)
        assert ZERO is get_constant(Const.ZERO)
        assert E is get_constant(Const.E)

    def test_unknown_attribute(self):
        """Unknown names raise AttributeError."""
        with pytest.raises(AttributeError):
            constants.TAU

    def test_equal_to_constructed(self):
        """Table entries are ordinary constant nodes."""
        assert constant(Const.PI) == PI
        assert "PI" in dir(constants)
