"""Performance benchmarks using pytest-benchmark for automatic tracking."""

import pytest

from spectrbar import Bar, ConstantColorizer, FileRetriever, TrinaryColorizer
from spectrbar.parsers.digits import parse_number


@pytest.mark.performance
class TestPerformanceBenchmarks:
    """Benchmarks using pytest-benchmark fixture for automatic stats and history."""

    def test_parse_noisy_output(self, benchmark):
        """Benchmark digit scraping on a line of acpi style output."""
        raw = "Battery 0: Discharging, 87%, 03:12 remaining\n"
        result = benchmark(parse_number, raw)
        assert result == 870312

    def test_file_bar_render(self, benchmark, tmp_path):
        """Benchmark rendering a bar of ten file widgets."""
        bar = Bar()
        for i in range(10):
            path = tmp_path / f"value{i}"
            path.write_text(f"{i * 10}\n")
            bar.add_widget(
                f"w{i}", FileRetriever(str(path)), TrinaryColorizer(1, 3, 2, 30, 70), True
            )
        bar.add_widget("label", FileRetriever(str(tmp_path / "value0")), ConstantColorizer(7))

        result = benchmark(bar.render)
        assert result.count(" | ") == 11
