"""Tests for reading the custom settings of the domain."""

import pytest
from protean.utils.globals import current_domain
from storefront.shared.settings import setting


class TestSetting:
    def test_values_come_from_domain_toml(self):
        assert setting("default_image") == "default.png"
        assert setting("page_size") == 50
        assert setting("sort_order") == "asc"

    def test_reads_the_active_configuration(self, monkeypatch):
        monkeypatch.setitem(current_domain.config["custom"], "default_image", "placeholder.webp")
        assert setting("default_image") == "placeholder.webp"

    def test_unknown_setting(self):
        with pytest.raises(KeyError):
            setting("colour_scheme")
