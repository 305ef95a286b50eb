"""Tests for selective data requests"""

import dataclasses

import pytest

from dsdoc import DataRequest

CATEGORIES = ["layers", "lib", "groups", "kerning", "features", "data", "images"]


def all_fields_are(request: DataRequest, value: bool) -> bool:
    return all(getattr(request, name) is value for name in CATEGORIES)


class TestDataRequestConstructors:
    """Test the all/none/default constructors"""

    def test_default_requests_everything(self):
        """Default construction equals all()"""
        assert all_fields_are(DataRequest(), True)
        assert DataRequest() == DataRequest.all()

    def test_all(self):
        assert all_fields_are(DataRequest.all(), True)

    def test_none(self):
        assert all_fields_are(DataRequest.none(), False)

    def test_categories_in_declaration_order(self):
        assert DataRequest.categories() == CATEGORIES


class TestDataRequestBuilders:
    """Test the chained with_* builders"""

    def test_builder_turns_everything_off(self):
        """Chaining every builder with False gives none()"""
        request = (
            DataRequest()
            .with_layers(False)
            .with_lib(False)
            .with_groups(False)
            .with_kerning(False)
            .with_features(False)
            .with_data(False)
            .with_images(False)
        )
        assert all_fields_are(request, False)
        assert request == DataRequest.none()

    @pytest.mark.parametrize("name", CATEGORIES)
    def test_each_builder_sets_only_its_flag(self, name):
        """Flags are independent of each other"""
        request = getattr(DataRequest.none(), f"with_{name}")(True)
        assert request.requested() == [name]

    def test_builder_leaves_receiver_unchanged(self):
        original = DataRequest.all()
        changed = original.with_kerning(False)
        assert original.kerning is True
        assert changed.kerning is False
        assert changed is not original

    def test_request_is_immutable(self):
        request = DataRequest.all()
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.layers = False

    def test_requested_lists_enabled_categories(self):
        request = DataRequest.none().with_images(True).with_groups(True)
        assert request.requested() == ["groups", "images"]


class TestDataRequestFromCategories:
    """Test building requests from category names"""

    def test_from_categories(self):
        request = DataRequest.from_categories(["kerning", "groups"])
        assert request == DataRequest.none().with_groups(True).with_kerning(True)

    def test_from_empty_categories(self):
        assert DataRequest.from_categories([]) == DataRequest.none()

    def test_unknown_category_rejected(self):
        with pytest.raises(ValueError, match="Unknown data category 'glyphs'"):
            DataRequest.from_categories(["glyphs"])
