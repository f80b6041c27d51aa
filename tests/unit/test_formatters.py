"""Unit tests for CLI formatters."""

import json
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from subway_path.cli.formatters import (
    format_result,
    format_station_table,
    format_stations_json,
)
from subway_path.core.line import Line


class TestFormatters:
    """Test CLI formatters."""

    def test_format_station_table(self, line_ref, two_segment_path):
        """Test table formatting lists stations in travel order."""
        line = Line(line_ref, two_segment_path.segments)
        console = Console(file=StringIO(), width=120)
        with patch("subway_path.cli.formatters.console", console):
            format_station_table(line)
            output = console.file.getvalue()

        assert "Line: 2호선" in output
        assert output.index("강남") < output.index("역삼") < output.index("선릉")
        assert "Total distance: 8" in output

    def test_format_station_table_empty(self, line_ref):
        """Test an empty line."""
        console = Console(file=StringIO())
        with patch("subway_path.cli.formatters.console", console):
            format_station_table(Line(line_ref))
            output = console.file.getvalue()

        assert "has no stations" in output

    def test_format_stations_json(self, line_ref, two_segment_path):
        """Test JSON formatting."""
        line = Line(line_ref, two_segment_path.segments)
        data = json.loads(format_stations_json(line))

        assert data["line"] == {"id": 2, "name": "2호선", "color": "bg-green-600"}
        assert [s["id"] for s in data["stations"]] == [1, 2, 3]
        assert data["stations"][0]["name"] == "강남"
        assert data["total_distance"] == 8

    def test_format_result(self, two_segment_path, segment):
        """Test changes are listed as removed and added segments."""
        result = two_segment_path.insert(segment("A", "D", 2))
        console = Console(file=StringIO())
        with patch("subway_path.cli.formatters.console", console):
            format_result(result)
            output = console.file.getvalue()

        assert "- 강남 → 역삼 (5)" in output
        assert "+ 삼성 → 역삼 (3)" in output
        assert "+ 강남 → 삼성 (2)" in output
