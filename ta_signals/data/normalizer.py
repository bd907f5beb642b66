"""
Price series normalization from raw market data payloads.

Turns the two shapes price history arrives in into validated PriceSeries:

- market-chart payloads: ``{"prices": [[ts_ms, price], ...],
  "total_volumes": [[ts_ms, volume], ...]}``
- flat records: ``[{"timestamp": ts_ms, "price": p, "volume": v}, ...]``,
  where ``timestamp`` may also be a datetime
"""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Optional

from ..errors import MalformedDataError
from ..utils.time import datetime_to_ms, format_label
from .models import PricePoint
from .validators import SeriesValidator


class PriceSeriesNormalizer:
    """Normalizes raw price history into PricePoint lists."""

    def __init__(self, validator: Optional[SeriesValidator] = None):
        self.validator = validator or SeriesValidator()

    def normalize_market_chart(self, payload: Mapping[str, Any]) -> list[PricePoint]:
        """
        Normalize a market-chart payload.

        Volume is paired with prices by position. Rows missing from
        ``total_volumes`` get volume 0.

        Args:
            payload: Dict with a ``prices`` list and optional ``total_volumes`` list

        Returns:
            Validated list of PricePoint

        Raises:
            MalformedDataError: Payload or a row has the wrong shape
            TemporalDataError: Timestamps are out of order
        """
        if not isinstance(payload, Mapping) or "prices" not in payload:
            raise MalformedDataError(
                "Market chart payload missing 'prices'",
                raw_data=str(payload)[:100],
                expected_format="{'prices': [[ts, price], ...]}",
            )

        prices = payload["prices"] or []
        volumes = payload.get("total_volumes") or []

        series = []
        for index, row in enumerate(prices):
            timestamp, price = self._unpack_pair(row, index, "prices")
            volume = 0.0
            if index < len(volumes):
                _, volume = self._unpack_pair(volumes[index], index, "total_volumes")
            series.append(PricePoint(
                timestamp=timestamp,
                label=format_label(timestamp),
                price=price,
                volume=volume,
            ))

        self.validator.validate(series)
        return series

    def normalize_records(self, records: Iterable[Mapping[str, Any]]) -> list[PricePoint]:
        """
        Normalize flat price records.

        Each record needs ``timestamp`` and ``price``; ``volume`` defaults to 0
        and the label comes from ``label`` or ``date`` when present.
        """
        series = []
        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise MalformedDataError(
                    f"Record {index} is not a mapping",
                    raw_data=repr(record)[:100],
                    index=index,
                )

            missing = [key for key in ("timestamp", "price") if key not in record]
            if missing:
                raise MalformedDataError(
                    f"Record {index} missing fields: {', '.join(missing)}",
                    raw_data=repr(record)[:100],
                    index=index,
                )

            timestamp = self._to_timestamp(record["timestamp"], index)
            label = record.get("label") or record.get("date") or format_label(timestamp)
            series.append(PricePoint(
                timestamp=timestamp,
                label=str(label),
                price=self._to_float(record["price"], index, "price"),
                volume=self._to_float(record.get("volume", 0.0), index, "volume"),
            ))

        self.validator.validate(series)
        return series

    def _unpack_pair(self, row: Any, index: int, column: str) -> tuple[int, float]:
        if not isinstance(row, (list, tuple)) or len(row) < 2:
            raise MalformedDataError(
                f"Row {index} of '{column}' is not a [timestamp, value] pair",
                raw_data=repr(row)[:100],
                expected_format="[ts_ms, value]",
                index=index,
            )
        return self._to_timestamp(row[0], index), self._to_float(row[1], index, column)

    @staticmethod
    def _to_timestamp(value: Any, index: int) -> int:
        if isinstance(value, bool):
            raise MalformedDataError(f"Invalid timestamp at row {index}: {value!r}", index=index)
        if isinstance(value, datetime):
            return datetime_to_ms(value)
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise MalformedDataError(
                f"Invalid timestamp at row {index}: {value!r}",
                raw_data=repr(value),
                index=index,
            ) from e

    @staticmethod
    def _to_float(value: Any, index: int, column: str) -> float:
        if isinstance(value, bool):
            raise MalformedDataError(f"Invalid {column} at row {index}: {value!r}", index=index)
        try:
            return float(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise MalformedDataError(
                f"Invalid {column} at row {index}: {value!r}",
                raw_data=repr(value),
                index=index,
            ) from e


def normalize_market_chart(payload: Mapping[str, Any]) -> list[PricePoint]:
    """Normalize a market-chart payload with default validation."""
    return PriceSeriesNormalizer().normalize_market_chart(payload)


def normalize_records(records: Iterable[Mapping[str, Any]]) -> list[PricePoint]:
    """Normalize flat records with default validation."""
    return PriceSeriesNormalizer().normalize_records(records)
