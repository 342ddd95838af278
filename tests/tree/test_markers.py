"""
Tests for node markers and padding lookups.
"""

from uuid import uuid4

from rewrite_py.tree.markers import (
  BuiltinDesugar,
  ExtraPadding,
  GroupedStatement,
  MagicMethodDesugar,
  Markers,
  PaddingLocation,
  padding_of,
  padding_or_default,
  set_padding,
)
from rewrite_py.tree.space import Space


def test_add_find_and_remove():
  markers = Markers.EMPTY.add(MagicMethodDesugar()).add(BuiltinDesugar())
  assert markers.has(MagicMethodDesugar)
  assert isinstance(markers.find_first(BuiltinDesugar), BuiltinDesugar)
  assert len(markers) == 2

  removed = markers.remove(MagicMethodDesugar)
  assert not removed.has(MagicMethodDesugar)
  assert removed.has(BuiltinDesugar)
  # original is untouched
  assert markers.has(MagicMethodDesugar)


def test_add_replaces_same_key():
  first, second = uuid4(), uuid4()
  markers = Markers.EMPTY.add(GroupedStatement(first)).add(GroupedStatement(second))
  assert markers.find_all(GroupedStatement) == [GroupedStatement(second)]


def test_padding_locations_are_keyed_separately():
  markers = set_padding(Markers.EMPTY, PaddingLocation.IMPORT_PARENS_PREFIX, Space("  "))
  markers = set_padding(markers, PaddingLocation.IMPORT_PARENS_SUFFIX, Space(""))
  assert len(markers.find_all(ExtraPadding)) == 2
  assert padding_of(markers, PaddingLocation.IMPORT_PARENS_PREFIX) == Space("  ")
  assert padding_of(markers, PaddingLocation.IMPORT_PARENS_SUFFIX) == Space("")


def test_padding_defaults():
  assert PaddingLocation.BEFORE_COMPOUND_BLOCK_COLON.default is None
  assert PaddingLocation.IMPORT_PARENS_PREFIX.default == Space(" ")
  assert PaddingLocation.IMPORT_PARENS_SUFFIX.default == Space("\n")
  assert PaddingLocation.WITHIN_OPERATOR_NAME.default == Space(" ")
  assert PaddingLocation.EMPTY_INITIALIZER.default is None


def test_set_padding_skips_default_values():
  markers = set_padding(Markers.EMPTY, PaddingLocation.WITHIN_OPERATOR_NAME, Space(" "))
  assert padding_of(markers, PaddingLocation.WITHIN_OPERATOR_NAME) is None
  assert padding_or_default(markers, PaddingLocation.WITHIN_OPERATOR_NAME) == Space(" ")

  # an empty space equals the "none" default
  markers = set_padding(Markers.EMPTY, PaddingLocation.EMPTY_INITIALIZER, Space.EMPTY)
  assert len(markers) == 0


def test_set_padding_keep_default():
  markers = set_padding(Markers.EMPTY, PaddingLocation.IMPORT_PARENS_PREFIX, Space(" "), keep_default=True)
  assert padding_of(markers, PaddingLocation.IMPORT_PARENS_PREFIX) == Space(" ")


def test_set_padding_back_to_default_removes_entry():
  markers = set_padding(Markers.EMPTY, PaddingLocation.WITHIN_OPERATOR_NAME, Space("   "))
  assert padding_of(markers, PaddingLocation.WITHIN_OPERATOR_NAME) == Space("   ")
  markers = set_padding(markers, PaddingLocation.WITHIN_OPERATOR_NAME, Space(" "))
  assert padding_of(markers, PaddingLocation.WITHIN_OPERATOR_NAME) is None
