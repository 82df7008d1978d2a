"""
pointclust CLI - online clustering of 2D points.

Usage:
    pointclust points.txt
    pointclust points.txt --threshold 2.5 --merge
    pointclust points.txt --config run.yaml --format json --log-dir ./logs
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config import (
    ClusteringConfig,
    OUTPUT_FORMATS,
    load_config,
    apply_env_overrides,
)
from .core.logger import RunLogger
from .core.point_parser import PointFileError, PointParseError, load_points
from .core.report import clusters_to_json, format_clusters
from .runner import ClusteringRunner


def build_config(args) -> ClusteringConfig:
    """Config file, then environment, then command-line flags."""
    config = load_config(Path(args.config)) if args.config else ClusteringConfig()
    config = apply_env_overrides(config)

    if args.threshold is not None:
        config.threshold = args.threshold
    if args.merge is not None:
        config.merge = args.merge
    if args.format:
        config.output_format = args.format
    if args.log_dir:
        config.log_dir = args.log_dir
    if args.quiet or config.output_format == "json":
        config.verbose = False

    config.validate()
    return config


def cmd_cluster(args) -> int:
    """Cluster the points in the input file and print the result."""
    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logger: Optional[RunLogger] = RunLogger(Path(config.log_dir)) if config.log_dir else None

    try:
        if logger:
            logger.log_run_start(config.to_dict(), input_path=str(args.input))

        try:
            points = load_points(Path(args.input))
        except PointFileError as e:
            if logger:
                logger.log_error(str(e), error_type="file_error")
            print(str(e), file=sys.stderr)
            return 1
        except PointParseError as e:
            if logger:
                logger.log_error(str(e), error_type="parse_error")
            print(str(e), file=sys.stderr)
            return 1

        runner = ClusteringRunner(config, logger=logger)
        result = runner.run(points)
    finally:
        if logger:
            logger.close()

    if config.output_format == "json":
        print(clusters_to_json(result.clusters))
        return 0

    if config.verbose:
        print(f"work time: {result.elapsed_seconds:.6f}s")
    if result.clusters:
        print(format_clusters(result.clusters))

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pointclust",
        description="Single-pass online clustering of 2D points",
    )
    parser.add_argument("input", help="Text file of whitespace-separated x y pairs, one per line")
    parser.add_argument("--threshold", type=float, default=None,
                        help="Max centroid distance to join or merge clusters (default: 3.0)")
    parser.add_argument("--merge", action=argparse.BooleanOptionalAction, default=None,
                        help="Merge nearby clusters after classification")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None,
                        help="Output format")
    parser.add_argument("--log-dir", help="Directory for the JSONL run log")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Only print the clusters")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return cmd_cluster(args)


if __name__ == "__main__":
    sys.exit(main())
