from __future__ import annotations

import dataclasses

from webcontrib.config import Settings, get_settings


def test_settings_expose_localization_and_membership_options():
    names = {field.name for field in dataclasses.fields(Settings)}

    assert names == {
        "online_window_minutes",
        "localization_resource_path",
        "localization_redis_url",
        "localization_redis_prefix",
        "localization_culture",
    }


def test_settings_are_cached():
    assert get_settings() is get_settings()
