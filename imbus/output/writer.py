"""
imbus/output/writer.py

Writes a ProxyResult to an output directory: the proxy table as CSV and a
small YAML summary of how it was produced.
"""
import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


class OutputWriter:
    """
    Writes proxy results under ``output_dir``.

    ``write_result`` produces ``<name>.csv`` and ``<name>.yaml``. The summary
    records the calculation path, the proxies in the table and its row count.
    """
    def __init__(self, output_dir):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write_result(self, result, name: str = "proxies") -> Path:
        """Write the table and summary of a ProxyResult; return the CSV path."""
        csv_path = self.output_dir / f"{name}.csv"
        result.table.to_csv(csv_path, index=False)

        summary = {
            "path": result.path.value,
            "proxies": list(result.proxies),
            "rows": len(result),
            "columns": [str(c) for c in result.table.columns],
        }
        with open(self.output_dir / f"{name}.yaml", "w") as f:
            yaml.safe_dump(summary, f, sort_keys=False)

        logger.info("Wrote %d rows to %s", len(result), csv_path)
        return csv_path
