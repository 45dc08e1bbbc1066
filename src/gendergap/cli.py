#!/usr/bin/env python3
"""CLI for rendering the gendergap charts to HTML files."""

import logging
import os
import sys

from omegaconf import DictConfig, OmegaConf

from gendergap.constants import (
    DEFAULT_EMPTY_GROUP_POLICY,
    DEFAULT_TOP_N,
    EDUCATION_LEVELS,
    EDUCATION_PATH,
    EMPTY_GROUP_POLICIES,
    INDICATORS_PATH,
    OUTPUT_DIR,
)
from gendergap.data_utils import DatasetError, load_education_table, load_indicator_table
from gendergap.pipelines import CHART_NAMES, ChartSelection, recompute, resolve_region
from gendergap.visualization.charts import create_all_charts

# Output formatting constants
SECTION_WIDTH = 50
CHART_NAME_WIDTH = 28
HTML_EXTENSION = ".html"


def create_config() -> DictConfig:
    """Create default configuration."""
    return OmegaConf.create(
        {
            "indicators": INDICATORS_PATH,
            "education": EDUCATION_PATH,
            "output_dir": OUTPUT_DIR,
            "region": None,
            "education_level": EDUCATION_LEVELS[0],
            "empty_group_policy": DEFAULT_EMPTY_GROUP_POLICY,
            "top_n": DEFAULT_TOP_N,
            "log_level": "WARNING",
        }
    )


def parse_config(args=None) -> DictConfig:
    """Merge defaults, an optional YAML file (config=...) and CLI overrides."""
    try:
        cli_config = OmegaConf.from_cli(args) if args is not None else OmegaConf.from_cli()
    except Exception as e:
        raise RuntimeError(f"Failed to parse CLI arguments: {e}") from e

    config = create_config()
    config_file = cli_config.pop("config", None)
    if config_file:
        config = OmegaConf.merge(config, OmegaConf.load(config_file))
    config = OmegaConf.merge(config, cli_config)

    validate_config(config)
    return config


def validate_config(config: DictConfig) -> None:
    """Reject settings the pipelines cannot honor."""
    if config.empty_group_policy not in EMPTY_GROUP_POLICIES:
        raise ValueError(
            f"empty_group_policy must be one of {EMPTY_GROUP_POLICIES}, "
            f"got '{config.empty_group_policy}'"
        )
    if not isinstance(config.top_n, int) or config.top_n < 1:
        raise ValueError(f"top_n must be a positive integer, got {config.top_n!r}")


def print_configuration(config: DictConfig) -> None:
    """Print render configuration."""
    print(f"Indicator table: {config.indicators}")
    print(f"Education table: {config.education}")
    print(f"Region: {config.region or '(first available)'}")
    print(f"Education level: {config.education_level}")
    print(f"Empty group policy: {config.empty_group_policy}")
    print(f"Output directory: {config.output_dir}")
    print("-" * SECTION_WIDTH)


def render_charts(config: DictConfig) -> dict:
    """Load both tables, run every pipeline and write one HTML file per chart.

    Returns a mapping of chart name to the written path, or None when the
    chart had no data and was skipped.
    """
    print("🔄 Loading datasets...")
    indicators = load_indicator_table(config.indicators)
    education = load_education_table(config.education)

    region = resolve_region(education, config.region)

    selection = ChartSelection(region=region, education_level=config.education_level)
    summaries = recompute(
        indicators,
        education,
        selection,
        empty_group_policy=config.empty_group_policy,
        top_n=config.top_n,
    )
    figures = create_all_charts(summaries, region, config.education_level)

    os.makedirs(config.output_dir, exist_ok=True)
    written = {}
    for name in CHART_NAMES:
        if summaries[name].empty:
            print(f"  ⚠️  {name:<{CHART_NAME_WIDTH}} no data, skipped")
            written[name] = None
            continue
        path = os.path.join(config.output_dir, f"{name}{HTML_EXTENSION}")
        figures[name].write_html(path, include_plotlyjs="cdn")
        print(f"  ✅ {name:<{CHART_NAME_WIDTH}} → {path}")
        written[name] = path
    return written


def main(args=None):
    """Main CLI function."""
    print("🚀 Starting gendergap")

    try:
        config = parse_config(args)
        logging.basicConfig(
            level=getattr(logging, str(config.log_level).upper(), logging.WARNING),
            format="%(levelname)s %(name)s: %(message)s",
        )
        print_configuration(config)

        written = render_charts(config)
        rendered = sum(1 for path in written.values() if path)
        print(f"\n✅ Rendered {rendered} of {len(written)} charts")

    except KeyboardInterrupt:
        print("\n❌ Interrupted by user")
        sys.exit(1)
    except (ValueError, RuntimeError, FileNotFoundError, DatasetError) as e:
        print(f"❌ Error rendering charts: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        print("Please report this issue with the full error message.")
        sys.exit(1)


if __name__ == "__main__":
    main()
