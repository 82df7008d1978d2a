"""
Structured logging for clustering runs.

Single JSONL file with typed events for streaming and analysis.

Event types:
- run_start: Config, input path
- points_loaded: Number of points read
- classification_done: Points classified, clusters formed
- merge_done: Cluster counts around the merge pass
- error: Abort scenarios
- run_end: Final clusters, elapsed time
"""

import json
from pathlib import Path
from datetime import datetime
from typing import Any, Optional


class RunLogger:
    def __init__(self, output_dir: Path):
        """
        Initialize logger for a run.

        Args:
            output_dir: Directory for the log file
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.output_dir / "run.jsonl"

        self.file_handle = open(self.log_file, 'a')

    def _write_event(self, event_type: str, data: dict[str, Any]) -> None:
        """Write typed event to JSONL log."""
        event = {
            "type": event_type,
            "timestamp": datetime.now().isoformat(),
            **data
        }
        self.file_handle.write(json.dumps(event) + '\n')
        self.file_handle.flush()

    def log_run_start(self, config: dict[str, Any], input_path: Optional[str] = None) -> None:
        """
        Log run initialization.

        Args:
            config: Run configuration
            input_path: Point file being clustered, if any
        """
        self._write_event("run_start", {
            "config": config,
            "input_path": input_path,
        })

    def log_points_loaded(self, num_points: int) -> None:
        self._write_event("points_loaded", {"num_points": num_points})

    def log_classification_done(self, num_points: int, num_clusters: int) -> None:
        self._write_event("classification_done", {
            "num_points": num_points,
            "num_clusters": num_clusters,
        })

    def log_merge_done(self, clusters_before: int, clusters_after: int) -> None:
        """
        Log result of the merge pass.

        Args:
            clusters_before: Cluster count going into the pass
            clusters_after: Cluster count after collapsing
        """
        self._write_event("merge_done", {
            "clusters_before": clusters_before,
            "clusters_after": clusters_after,
        })

    def log_error(self, message: str, error_type: str = "error") -> None:
        """
        Log error event (aborts the run).

        Args:
            message: Error description
            error_type: Error category (error, parse_error, file_error)
        """
        self._write_event("error", {
            "message": message,
            "error_type": error_type,
        })

    def log_run_end(self, clusters: list[dict], elapsed_seconds: float) -> None:
        """
        Log run completion.

        Args:
            clusters: Final clusters as dicts (x, y, count)
            elapsed_seconds: Time spent classifying and merging
        """
        self._write_event("run_end", {
            "num_clusters": len(clusters),
            "clusters": clusters,
            "elapsed_seconds": elapsed_seconds,
        })

    def close(self) -> None:
        """Close log file."""
        if hasattr(self, 'file_handle') and self.file_handle:
            self.file_handle.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
