"""
Base price store and holiday calendar.

Both are seeded from CSV files with pandas. The price store keeps the
latest administrative write in memory and, when persistence is on,
writes the table back to its CSV.
"""
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import pandas as pd

from .exceptions import MissingBasePriceError
from .models import PassType

logger = logging.getLogger(__name__)


class BasePriceStore:
    """Base price per pass type, backed by a DataFrame indexed by type."""

    COLUMNS = ['type', 'cost']

    def __init__(self, prices: pd.DataFrame, path: Optional[Path] = None, persist: bool = False):
        self._prices = prices
        self.path = path
        self.persist = persist and path is not None

    @classmethod
    def from_csv(cls, path: Path, persist: bool = False) -> 'BasePriceStore':
        """Load base prices from a `type,cost` CSV file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Base price file not found at {path}.")

        df = pd.read_csv(path, dtype={'type': str})
        missing = [c for c in cls.COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"{path} is missing columns: {', '.join(missing)}")

        df['type'] = df['type'].astype(str).str.strip()
        known = df['type'].isin(PassType.identifiers())
        for unknown in df.loc[~known, 'type']:
            logger.warning("Ignoring base price for unknown pass type '%s' in %s", unknown, path)

        df = df[known].drop_duplicates('type', keep='last').set_index('type')
        logger.info("Loaded %d base prices from %s", len(df), path)
        return cls(df[['cost']], path=path, persist=persist)

    @classmethod
    def from_mapping(cls, prices: dict) -> 'BasePriceStore':
        """Build an in-memory store from {pass type: cost}."""
        df = pd.DataFrame({
            'type': [PassType.parse(k).value for k in prices],
            'cost': [int(v) for v in prices.values()],
        }).set_index('type')
        return cls(df)

    def get(self, pass_type: PassType) -> int:
        """Current base price for a pass type."""
        key = PassType.parse(pass_type).value
        if key not in self._prices.index or pd.isna(self._prices.at[key, 'cost']):
            raise MissingBasePriceError(key)
        return int(self._prices.at[key, 'cost'])

    def set(self, pass_type: PassType, cost: int):
        """Replace the base price for a pass type."""
        key = PassType.parse(pass_type).value
        cost = int(cost)
        if cost < 0:
            raise ValueError(f"Base price must be non-negative, got {cost}")

        self._prices.loc[key, 'cost'] = cost
        if self.persist:
            self._write()

    def as_dict(self) -> dict[str, int]:
        return {
            key: int(row['cost'])
            for key, row in self._prices.iterrows()
            if pd.notna(row['cost'])
        }

    def _write(self):
        """Write prices back to CSV."""
        self._prices.reset_index().to_csv(self.path, columns=self.COLUMNS, index=False)
        logger.debug("Base prices written to %s", self.path)


class HolidayCalendar:
    """Fixed set of holiday dates, with optional descriptions."""

    def __init__(self, holidays: dict[date, str]):
        self._holidays = dict(holidays)

    @classmethod
    def from_csv(cls, path: Path) -> 'HolidayCalendar':
        """Load holidays from a `holiday[,description]` CSV file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Holiday file not found at {path}.")

        df = pd.read_csv(path, dtype=str).fillna('')
        if 'holiday' not in df.columns:
            raise ValueError(f"{path} is missing column: holiday")

        days = pd.to_datetime(df['holiday'].str.strip()).dt.date
        if 'description' in df.columns:
            descriptions = df['description'].str.strip()
        else:
            descriptions = pd.Series([''] * len(df))

        calendar = cls(dict(zip(days, descriptions)))
        logger.info("Loaded %d holidays from %s", len(calendar), path)
        return calendar

    @classmethod
    def from_dates(cls, days) -> 'HolidayCalendar':
        return cls({d: '' for d in days})

    def is_holiday(self, day: date) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        return day in self._holidays

    def describe(self, day: date) -> Optional[str]:
        return self._holidays.get(day)

    def dates(self) -> list[date]:
        return sorted(self._holidays)

    def __contains__(self, day) -> bool:
        return self.is_holiday(day)

    def __len__(self) -> int:
        return len(self._holidays)
