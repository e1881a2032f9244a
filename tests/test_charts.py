import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from ecovalue.charts import render_chart


def _table():
    return pd.DataFrame({
        'biome': ["Coastal", "Coastal", "Grassland"],
        'service_category': ["Human Happiness", "Health", "Food and Water"],
        'value_per_area': [100.0, 20.0, 111.0],
    })


def test_render_chart_labels_and_bars():
    fig = render_chart(_table(), 'biome', 'value_per_area', 'service_category',
                       "Top Biomes", "Value (USD/ha/yr)")
    ax = fig.axes[0]

    assert ax.get_title() == "Top Biomes"
    assert ax.get_ylabel() == "Value (USD/ha/yr)"
    assert [t.get_text() for t in ax.get_xticklabels()] == ["Coastal", "Grassland"]
    # one bar container per stacked segment, one bar per biome in each
    assert len(ax.containers) == 3
    assert all(len(c) == 2 for c in ax.containers)
    plt.close(fig)


def test_render_chart_saves_png(tmp_path):
    out = tmp_path / "figures" / "chart.png"
    fig = render_chart(_table(), 'service_category', 'value_per_area', 'biome',
                       "By Service", "Value", out_path=out)
    assert out.exists()
    assert out.read_bytes()[:4] == b"\x89PNG"
    plt.close(fig)


def test_render_chart_empty_table():
    empty = _table().iloc[0:0]
    fig = render_chart(empty, 'biome', 'value_per_area', 'service_category', "Empty", "Value")
    assert fig.axes[0].get_title() == "Empty"
    plt.close(fig)
