"""Value transformer for HBaseSearch - binds one extractor to one value mapper."""

from typing import Any, Dict, List

from loguru import logger

from core.exceptions import ValueDecodingError
from core.models import Record
from interfaces.value_extractor import ByteArrayExtractor
from interfaces.value_mapper import ByteArrayValueMapper


class RecordValueTransformer:
    """Produces the typed values of one index field from a record.

    A value that fails to decode is logged and skipped; the remaining
    values of the field and every other field of the record are kept.
    """

    def __init__(
        self,
        field_name: str,
        extractor: ByteArrayExtractor,
        value_mapper: ByteArrayValueMapper
    ):
        """Initialize value transformer.

        Args:
            field_name: Index field the values belong to
            extractor: Extractor locating the raw values
            value_mapper: Mapper decoding the raw values
        """
        self._field_name = field_name
        self._extractor = extractor
        self._value_mapper = value_mapper

    @property
    def field_name(self) -> str:
        return self._field_name

    @property
    def extractor(self) -> ByteArrayExtractor:
        return self._extractor

    @property
    def value_mapper(self) -> ByteArrayValueMapper:
        return self._value_mapper

    def extract_and_transform(self, record: Record) -> Dict[str, List[Any]]:
        """Extract and decode the field values of a record.

        Args:
            record: Record to read from

        Returns:
            ``{field_name: values}``, or an empty dict if no value survived
        """
        try:
            raw_values = self._extractor.extract(record)
        except Exception as e:
            logger.warning(
                f"Skipping field '{self._field_name}' for row {record.row!r}: extraction failed: {e}"
            )
            return {}

        values = []
        for raw in raw_values:
            try:
                values.append(self._value_mapper.map(raw))
            except ValueDecodingError as e:
                logger.warning(
                    f"Skipping value of field '{self._field_name}' for row {record.row!r}: {e}"
                )
            except Exception as e:
                logger.warning(
                    f"Skipping value of field '{self._field_name}' for row {record.row!r}: "
                    f"unexpected error decoding as '{self._value_mapper.type_name}': {e}"
                )

        if not values:
            return {}
        return {self._field_name: values}

    def __repr__(self) -> str:
        return (
            f"RecordValueTransformer({self._field_name!r}, {self._extractor!r}, "
            f"{self._value_mapper!r})"
        )
