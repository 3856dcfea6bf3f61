"""Files written by a generation run."""
from __future__ import annotations

from enum import Enum
from pathlib import Path


class OutputFile(str, Enum):
    ASSETS = "asset_data.txt"
    PRICES = "price_series.txt"
    USERS = "users.txt"
    TRANSACTIONS = "transactions.txt"
    HOLDINGS = "user_holdings.txt"

    def path_in(self, directory: Path) -> Path:
        return Path(directory) / self.value
