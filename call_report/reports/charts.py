"""Chart drawings for the PDF report."""

from reportlab.graphics.charts.barcharts import VerticalBarChart
from reportlab.graphics.charts.legends import Legend
from reportlab.graphics.charts.linecharts import HorizontalLineChart
from reportlab.graphics.charts.piecharts import Pie
from reportlab.graphics.shapes import Drawing
from reportlab.lib import colors

from ..constants import BAR_COLOR
from ..presentation import PieSlice, SeriesPoint, TrendLine, TrendPoint

CHART_WIDTH = 440
CHART_HEIGHT = 220


def _value_max(values: list[float]) -> float:
    # reportlab needs a non-empty value range
    peak = max(values, default=0)
    return peak * 1.1 if peak > 0 else 1


def bar_chart(points: list[SeriesPoint]) -> Drawing:
    """Call volume breakdown as a vertical bar chart."""
    drawing = Drawing(CHART_WIDTH, CHART_HEIGHT)
    chart = VerticalBarChart()
    chart.x = 50
    chart.y = 40
    chart.width = CHART_WIDTH - 80
    chart.height = CHART_HEIGHT - 60
    chart.data = [tuple(point.value for point in points)]
    chart.categoryAxis.categoryNames = [str(point.name) for point in points]
    chart.categoryAxis.labels.angle = 30
    chart.categoryAxis.labels.boxAnchor = "ne"
    chart.valueAxis.valueMin = 0
    chart.valueAxis.valueMax = _value_max([point.value for point in points])
    chart.bars[0].fillColor = colors.HexColor(BAR_COLOR)
    drawing.add(chart)
    return drawing


def pie_chart(slices: list[PieSlice]) -> Drawing | None:
    """Call disposition summary as a pie chart.

    Returns None when every slice is zero, since there is nothing to draw.
    """
    if not any(slice_.value for slice_ in slices):
        return None

    drawing = Drawing(CHART_WIDTH, CHART_HEIGHT)
    chart = Pie()
    chart.x = 60
    chart.y = 20
    chart.width = CHART_HEIGHT - 40
    chart.height = CHART_HEIGHT - 40
    chart.data = [slice_.value for slice_ in slices]
    chart.labels = [str(slice_.value) for slice_ in slices]
    for index, slice_ in enumerate(slices):
        chart.slices[index].fillColor = colors.HexColor(slice_.color)
    drawing.add(chart)

    legend = Legend()
    legend.x = CHART_HEIGHT + 60
    legend.y = CHART_HEIGHT - 60
    legend.colorNamePairs = [
        (colors.HexColor(slice_.color), str(slice_.name)) for slice_ in slices
    ]
    drawing.add(legend)
    return drawing


def trend_chart(points: list[TrendPoint], lines: tuple[TrendLine, ...]) -> Drawing | None:
    """Weekly answered/abandoned/missed trend as a line chart.

    Returns None when there are no weeks to plot.
    """
    if not points:
        return None

    drawing = Drawing(CHART_WIDTH, CHART_HEIGHT)
    chart = HorizontalLineChart()
    chart.x = 50
    chart.y = 50
    chart.width = CHART_WIDTH - 170
    chart.height = CHART_HEIGHT - 70
    chart.data = [tuple(getattr(point, line.key) for point in points) for line in lines]
    chart.categoryAxis.categoryNames = [point.week for point in points]
    chart.categoryAxis.labels.angle = 30
    chart.categoryAxis.labels.boxAnchor = "ne"
    chart.valueAxis.valueMin = 0
    chart.valueAxis.valueMax = _value_max(
        [value for series in chart.data for value in series]
    )
    for index, line in enumerate(lines):
        chart.lines[index].strokeColor = colors.HexColor(line.color)
        chart.lines[index].strokeWidth = 2
    drawing.add(chart)

    legend = Legend()
    legend.x = CHART_WIDTH - 110
    legend.y = CHART_HEIGHT - 30
    legend.colorNamePairs = [(colors.HexColor(line.color), line.name) for line in lines]
    drawing.add(legend)
    return drawing
