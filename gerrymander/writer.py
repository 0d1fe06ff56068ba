# gerrymander/writer.py
from pathlib import Path
from typing import Iterable, List
import pandas as pd
from .config import OUTPUT_CSV
from .models import FairnessResult


class StatsWriter:
    def __init__(self, path: Path = OUTPUT_CSV):
        self.path = Path(path)
        self.buffer: List[dict] = []

    def add_results(self, results: Iterable[FairnessResult]) -> None:
        self.buffer.extend(r.to_row() for r in results)

    def flush(self) -> Path:
        """Write every buffered row (headers included) and empty the buffer."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        df = pd.DataFrame(self.buffer, columns=self.columns())
        df.to_csv(self.path, index=False)
        self.buffer.clear()
        return self.path

    @staticmethod
    def columns() -> List[str]:
        return [
            "Region",
            "Districts",
            "Gerrymandered",
            "Disadvantaged",
            "Efficiency Gap",
            "Wasted Democratic",
            "Wasted Republican",
            "Total Votes",
            "Eligible Voters",
        ]
