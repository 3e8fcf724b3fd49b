import pandas as pd
import pytest

from irisplot.analysis.quartiles import QuartileSummary
from irisplot.geometry.layout import get_layout
from irisplot.geometry.mapper import FALLBACK_COLOR, GeometryMapper, PlotPoint
from irisplot.utils.errors import DataFormatError


def test_wide_layout_dimensions():
    scatter = get_layout('wide', 'scatter')
    boxplot = get_layout('wide', 'boxplot')

    assert (scatter.width, scatter.height) == (790, 430)
    assert scatter.legend_x == 810
    assert (boxplot.width, boxplot.height) == (910, 430)


def test_compact_layout_puts_legend_inside():
    scatter = get_layout('compact', 'scatter')

    assert (scatter.width, scatter.height) == (410, 330)
    assert scatter.legend_x == 330
    assert scatter.x_domain_padding == 0.0


def test_unknown_layout():
    with pytest.raises(ValueError):
        get_layout('poster', 'scatter')
    with pytest.raises(ValueError):
        GeometryMapper(layout='poster')


def test_scatter_points_follow_record_order(records):
    points = GeometryMapper().scatter_points(records)

    assert len(points) == len(records)
    assert all(isinstance(p, PlotPoint) for p in points)
    assert [p.species for p in points] == list(records['species'])


def test_scatter_points_hit_axis_bounds(records):
    points = GeometryMapper().scatter_points(records)

    shortest = points[3]  # petal length 1.0, petal width 0.1
    widest = points[8]    # petal width 2.5

    assert shortest.x == 0
    assert shortest.y == 430
    assert widest.y == 0


def test_wide_scatter_leaves_legend_margin(records):
    points = GeometryMapper().scatter_points(records)
    longest = max(points, key=lambda p: p.x)

    assert longest.x == pytest.approx(790 * 5.9 / 6.4)


def test_compact_scatter_uses_full_width(records):
    points = GeometryMapper(layout='compact').scatter_points(records)

    assert max(p.x for p in points) == 410


def test_scatter_colors_by_species(records):
    points = GeometryMapper().scatter_points(records)

    assert points[0].color == '#1f77b4'
    assert points[4].color == '#ff7f0e'
    assert points[8].color == '#2ca02c'


def test_color_for_both_label_styles():
    mapper = GeometryMapper()

    assert mapper.color_for('setosa') == mapper.color_for('Iris-setosa')
    assert mapper.color_for('virginica') == '#2ca02c'
    assert mapper.color_for('Iris-unknown') == FALLBACK_COLOR


def test_palette_override():
    mapper = GeometryMapper({'chart': {'palette': {'setosa': '#000000'}}})

    assert mapper.color_for('setosa') == '#000000'
    assert mapper.color_for('versicolor') == '#ff7f0e'


def test_species_domain_matches_label_style(records):
    mapper = GeometryMapper()
    plain = records.assign(species=records['species'].str.replace('Iris-', '', regex=False))

    assert mapper.species_domain(records) == ['Iris-setosa', 'Iris-versicolor', 'Iris-virginica']
    assert mapper.species_domain(plain) == ['setosa', 'versicolor', 'virginica']


def test_box_geometries_are_separate_bands(records):
    geometries = GeometryMapper().box_geometries(records)
    boxes = list(geometries.values())

    assert list(geometries) == ['Iris-setosa', 'Iris-versicolor', 'Iris-virginica']
    for left, right in zip(boxes, boxes[1:]):
        assert left.x + left.width <= right.x
    assert boxes[0].x >= 0
    assert boxes[-1].x + boxes[-1].width <= 910
    assert all(box.width == pytest.approx(227.5) for box in boxes)


def test_box_geometry_vertical_order(records):
    for box in GeometryMapper().box_geometries(records).values():
        assert box.whisker_top <= box.box_top <= box.median_y <= box.box_bottom <= box.whisker_bottom
        assert box.box_height >= 0
        assert box.center == pytest.approx(box.x + box.width / 2)


def test_box_geometry_uses_quartile_pixels(records):
    mapper = GeometryMapper()
    _, y = mapper.box_scales(records)
    setosa = mapper.box_geometries(records)['Iris-setosa']

    assert setosa.summary.q3 == pytest.approx(1.425)
    assert setosa.box_top == pytest.approx(y(1.425))
    assert setosa.box_bottom == pytest.approx(y(1.225))
    assert setosa.median_y == pytest.approx(y(1.35))


def test_box_geometries_with_precomputed_summaries(records):
    summary = QuartileSummary(q1=2.0, median=3.0, q3=4.0, iqr=2.0, count=3)
    geometries = GeometryMapper().box_geometries(records, {'Iris-versicolor': summary})

    assert list(geometries) == ['Iris-versicolor']
    assert geometries['Iris-versicolor'].summary is summary


def test_degenerate_domain_is_reported():
    flat = pd.DataFrame({
        'petal_length': [1.5, 1.5],
        'petal_width': [0.2, 0.3],
        'species': ['setosa', 'setosa'],
    })

    with pytest.raises(DataFormatError):
        GeometryMapper().box_geometries(flat)


def test_box_scales_follow_analysed_column(records):
    mapper = GeometryMapper({'analysis': {'value_column': 'petal_width'}})
    _, y = mapper.box_scales(records)

    assert y.domain == (records['petal_width'].min(), records['petal_width'].max())
    assert set(mapper.box_geometries(records)) == set(records['species'])
