"""Base parser class for saved provider data files."""

import polars as pl
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from abc import ABC, abstractmethod
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn

from ..models import Config
from ..utils.file_utils import ensure_directory, get_file_size, read_json_entries

# Output format -> writer; the format name is also the file suffix
WRITERS: Dict[str, Callable[[pl.DataFrame, Path], None]] = {
    'parquet': lambda df, path: df.write_parquet(path),
    'csv': lambda df, path: df.write_csv(path),
    'json': lambda df, path: df.write_json(path),
}


class BaseParser(ABC):
    """Map every entry of a saved response file into one row of a DataFrame.

    Subclasses implement :meth:`build_rows`; reading, progress display and
    writing the configured output format are shared.
    """

    def __init__(self, config: Config, input_path: Path, console: Optional[Console] = None):
        self.config = config
        self.input_path = Path(input_path)
        self.console = console or Console()

    @abstractmethod
    def build_rows(self, entries: List[Any], progress: Progress, task_id) -> List[Dict[str, Any]]:
        """Turn decoded entries into output rows, advancing ``task_id`` once per entry."""

    def parse_file(self, output_path: Optional[Path] = None) -> pl.DataFrame:
        if not self.input_path.exists():
            raise FileNotFoundError(f"Input file not found: {self.input_path}")

        self.console.print(f"[bold green]Mapping responses in {self.input_path.name}...[/bold green]")

        columns = (
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
        )
        with Progress(*columns, console=self.console) as progress:
            task = progress.add_task("Reading entries...", total=None)

            try:
                entries = read_json_entries(self.input_path)
                progress.update(task, total=len(entries), description=f"Mapping {len(entries):,} entries")

                df = pl.DataFrame(self.build_rows(entries, progress, task))

                if output_path:
                    target = self.save(df, Path(output_path))
                    progress.update(task, description=f"Wrote {len(df):,} rows to {target}")
                else:
                    progress.update(task, description=f"Mapped {len(df):,} rows")

            except Exception as e:
                progress.update(task, description=f"❌ Failed: {e}")
                raise

        return df

    def save(self, df: pl.DataFrame, output_path: Path) -> Path:
        """Write ``df`` in the configured output format; the suffix follows the format."""

        output_format = self.config.output_format.lower()
        if output_format not in WRITERS:
            raise ValueError(f"Unsupported output format: {output_format}")

        ensure_directory(output_path.parent)
        target = output_path.with_suffix(f".{output_format}")
        WRITERS[output_format](df, target)
        return target

    def get_file_info(self) -> Dict[str, Any]:
        size = get_file_size(self.input_path)
        if "error" in size:
            return size

        return {
            "file_name": self.input_path.name,
            "file_path": str(self.input_path),
            "file_size_mb": size["size_mb"],
            "exists": True,
        }
