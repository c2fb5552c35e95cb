"""Integration tests for building bars from configuration."""

import pytest

from pydantic import ValidationError

from spectrbar.colorizers import BinaryColorizer, ConstantColorizer, TrinaryColorizer
from spectrbar.config import BarConfig, build_bar, get_default_config
from spectrbar.markup import AnsiMarkup, SpectrwmMarkup
from spectrbar.retrievers import ExternRetriever, FileRetriever


@pytest.fixture
def sample_config(hello_file):
    """Configuration mirroring the two-widget bar scenario."""
    return {
        "widgets": [
            {
                "id": "text",
                "source": "file",
                "target": str(hello_file),
                "colorizer": {"type": "constant", "color": 1},
            },
            {
                "id": "num",
                "source": "file",
                "target": str(hello_file),
                "numeric": True,
                "colorizer": {
                    "type": "binary",
                    "null_color": 0,
                    "active_color": 1,
                    "null_value": "31",
                },
            },
        ]
    }


@pytest.mark.integration
class TestBuildBar:
    """Tests for build_bar."""

    def test_builds_from_dict(self, sample_config):
        bar = build_bar(sample_config)
        assert [w.id for w in bar] == ["text", "num"]
        assert bar.render() == "text: +@fg=1;hello 32+@fg=0; | num: +@fg=1;32+@fg=0; | "

    def test_builds_from_model(self, sample_config):
        bar = build_bar(BarConfig(**sample_config))
        assert len(bar) == 2

    def test_widget_types(self, sample_config):
        text, num = build_bar(sample_config).widgets
        assert isinstance(text.retriever, FileRetriever)
        assert isinstance(text.colorizer, ConstantColorizer)
        assert isinstance(num.colorizer, BinaryColorizer)
        assert num.colorizer.null_value == "31"
        assert num.is_numeric is True

    def test_extern_timeout(self):
        bar = build_bar(
            {
                "widgets": [
                    {"id": "up", "source": "extern", "target": "uptime", "timeout": 3}
                ]
            }
        )
        retriever = bar.widgets[0].retriever
        assert isinstance(retriever, ExternRetriever)
        assert retriever.command_line == "uptime"
        assert retriever.timeout == 3

    def test_markup_and_separator(self, sample_config):
        sample_config["markup"] = "ansi"
        sample_config["separator"] = " "
        bar = build_bar(sample_config)
        assert isinstance(bar.markup, AnsiMarkup)
        assert bar.separator == " "

    def test_default_colorizer(self):
        bar = build_bar({"widgets": [{"id": "x", "source": "file", "target": "/x"}]})
        assert isinstance(bar.widgets[0].colorizer, ConstantColorizer)

    def test_rejects_unknown_source(self):
        with pytest.raises(ValidationError):
            build_bar({"widgets": [{"id": "x", "source": "http", "target": "u"}]})

    def test_rejects_unknown_colorizer(self):
        with pytest.raises(ValidationError):
            build_bar(
                {
                    "widgets": [
                        {
                            "id": "x",
                            "source": "file",
                            "target": "/x",
                            "colorizer": {"type": "rainbow"},
                        }
                    ]
                }
            )

    def test_requires_widget_id(self):
        with pytest.raises(ValidationError):
            build_bar({"widgets": [{"source": "file", "target": "/x"}]})

    def test_rejects_timeout_for_file_source(self):
        with pytest.raises(ValidationError, match="timeout"):
            build_bar(
                {
                    "widgets": [
                        {"id": "x", "source": "file", "target": "/x", "timeout": 2}
                    ]
                }
            )

    def test_rejects_extra_keys(self):
        with pytest.raises(ValidationError):
            build_bar({"widgets": [], "refresh": 5})


@pytest.mark.integration
class TestDefaultConfig:
    """Tests for the sample configuration."""

    def test_default_config_builds(self):
        bar = build_bar(get_default_config())
        assert [w.id for w in bar] == ["time", "load", "bat"]
        assert isinstance(bar.markup, SpectrwmMarkup)
        assert isinstance(bar.widgets[2].colorizer, TrinaryColorizer)
        assert bar.widgets[2].is_numeric is True
