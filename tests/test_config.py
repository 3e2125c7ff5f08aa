from rastervis.config import ViewSettings, UNITS_PER_AXIS, LINE_REVEAL_INTERVAL_MS


def test_defaults_without_environment():
    settings = ViewSettings.from_env({})
    assert settings == ViewSettings()
    assert settings.units_per_axis == UNITS_PER_AXIS
    assert settings.include_endpoints is False


def test_environment_overrides():
    settings = ViewSettings.from_env({
        "RASTERVIS_UNITS_PER_AXIS": "40",
        "RASTERVIS_GRID_ENABLED": "off",
        "RASTERVIS_POINT_RADIUS": "0.5",
        "RASTERVIS_INCLUDE_ENDPOINTS": "true",
        "RASTERVIS_GRID_COLOR": "#FF0000",
    })
    assert settings.units_per_axis == 40
    assert settings.grid_enabled is False
    assert settings.point_radius == 0.5
    assert settings.include_endpoints is True
    assert settings.grid_color == "#FF0000"


def test_invalid_values_are_ignored():
    settings = ViewSettings.from_env({
        "RASTERVIS_LINE_INTERVAL_MS": "fast",
        "RASTERVIS_UNITS_PER_AXIS": "-4",
        "RASTERVIS_GRID_ENABLED": "maybe",
    })
    assert settings.line_interval_ms == LINE_REVEAL_INTERVAL_MS
    assert settings.units_per_axis == UNITS_PER_AXIS
    assert settings.grid_enabled is True
