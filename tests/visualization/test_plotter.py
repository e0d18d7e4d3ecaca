"""Test trellis rendering with the Agg backend."""

import numpy as np
import pytest
from matplotlib.figure import Figure

from climraster.pipeline import prepare_raster
from climraster.visualization.plotter import ClimatologyPlotter
from climraster.visualization.style import StyleOptions
from tests.helpers.fake_grid import make_climatology

pytestmark = pytest.mark.unit


@pytest.fixture
def raster(internal_config):
    return prepare_raster(make_climatology({"member": 3, "lat": 3, "lon": 4}), internal_config)


@pytest.fixture
def style(internal_config):
    return StyleOptions().with_defaults(internal_config)


def _titles(fig):
    return [ax.get_title() for ax in fig.axes if ax.get_visible() and ax.get_title()]


def test_render_returns_figure(internal_config, raster, style):
    fig = ClimatologyPlotter(internal_config).render(raster, style)

    assert isinstance(fig, Figure)
    assert _titles(fig) == ["Member_1", "Member_2", "Member_3"]


def test_panel_subset_by_index_and_name(internal_config, raster, style):
    style = style.model_copy(update={"panels": [3, "Member_1"]})
    fig = ClimatologyPlotter(internal_config).render(raster, style)

    assert _titles(fig) == ["Member_3", "Member_1"]


@pytest.mark.parametrize("panels", [[0], [4], ["Member_9"], []])
def test_bad_panel_selection(internal_config, raster, style, panels):
    style = style.model_copy(update={"panels": panels})
    with pytest.raises(ValueError):
        ClimatologyPlotter(internal_config).render(raster, style)


def test_layout_respects_max_columns(make_config, raster, style):
    config = make_config(max_columns=2)
    fig = ClimatologyPlotter(config).render(raster, style)

    # 2x2 panel grid, one hidden, plus the colorbar axes
    assert len(fig.axes) == 5
    assert sum(not ax.get_visible() for ax in fig.axes) == 1


def test_render_hints(internal_config, raster, style):
    hints = {
        "title": "tas July mean",
        "vmin": 0.0,
        "vmax": 50.0,
        "contour": True,
        "xlim": (-10, -5),
        "draw_scales": True,
        "unused": 1,
    }
    style = style.model_copy(update={"extra_render_hints": hints})
    fig = ClimatologyPlotter(internal_config).render(raster, style)

    assert fig._suptitle.get_text() == "tas July mean"
    first = fig.axes[0]
    assert first.get_xlim() == (-10, -5)
    mesh = first.collections[0]
    assert mesh.get_clim() == (0.0, 50.0)


def test_color_limits_from_data(internal_config, raster, style):
    fig = ClimatologyPlotter(internal_config).render(raster, style)
    mesh = fig.axes[0].collections[0]

    values = raster.columns.to_numpy()
    assert mesh.get_clim() == (values.min(), values.max())


def test_panels_drawn_north_up(internal_config, raster, style):
    fig = ClimatologyPlotter(internal_config).render(raster, style)
    mesh = fig.axes[0].collections[0]

    drawn = np.asarray(mesh.get_array()).reshape(raster.geometry.dims[::-1])
    np.testing.assert_array_equal(drawn, raster.panel("Member_1"))


def test_save(internal_config, raster, style, tmp_path):
    plotter = ClimatologyPlotter(internal_config)
    fig = plotter.render(raster, style)
    path = plotter.save(fig, tmp_path / "plots" / "clim.png")

    assert path.exists()
    assert path.stat().st_size > 0
