"""Record mapper for HBaseSearch - turns stored records into index documents.

The mapper is built once from the configured field definitions. Building
it parses every column expression, resolves every type name and derives
the fetch descriptor; afterwards it holds only immutable state and is used
concurrently on the record and mutation-notification paths.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, TYPE_CHECKING

from loguru import logger

from core.exceptions import ConfigurationError
from core.models import Cell, Document, FetchDescriptor, FieldDefinition, Record
from core.types import BytesLike
from interfaces.value_extractor import ByteArrayExtractor
from providers.extraction import create_extractor
from .value_transformer import RecordValueTransformer

if TYPE_CHECKING:
    from registry import ValueMapperRegistry


class RecordToDocumentMapper:
    """Parses records into fields and values according to field definitions."""

    def __init__(
        self,
        field_definitions: Sequence[FieldDefinition],
        registry: "ValueMapperRegistry"
    ):
        """Build the mapper from field definitions.

        Args:
            field_definitions: Ordered definitions of the fields to index
            registry: ValueMapperRegistry resolving type names to mappers

        Raises:
            ConfigurationError: If any expression or type name is invalid
        """
        definitions = tuple(field_definitions)
        transformers = []
        extractors = []

        for definition in definitions:
            try:
                extractor = create_extractor(definition.value_expression, definition.value_source)
                value_mapper = registry.get_mapper(definition.type_name)
            except ConfigurationError as e:
                raise e.add_context("field", definition.name)

            transformers.append(RecordValueTransformer(definition.name, extractor, value_mapper))
            extractors.append(extractor)
            logger.debug(f"Configured field {definition}")

        self._field_definitions: Tuple[FieldDefinition, ...] = definitions
        self._transformers: Tuple[RecordValueTransformer, ...] = tuple(transformers)
        self._extractors: Tuple[ByteArrayExtractor, ...] = tuple(extractors)
        self._fetch_descriptor = FetchDescriptor.from_addresses(x.address for x in extractors)

        logger.info(
            f"Record mapper configured with {len(self._transformers)} fields, "
            f"fetching {self._fetch_descriptor}"
        )

    @property
    def field_definitions(self) -> Tuple[FieldDefinition, ...]:
        return self._field_definitions

    @property
    def field_names(self) -> List[str]:
        """Get the distinct configured field names in configuration order."""
        return list(dict.fromkeys(d.name for d in self._field_definitions))

    @property
    def extractors(self) -> Tuple[ByteArrayExtractor, ...]:
        return self._extractors

    def parse(self, record: Record) -> Dict[str, List[Any]]:
        """Parse a record into field names and their ordered values.

        Fields without any value have no entry. Fields configured more than
        once collect the values of every definition, in configuration order.

        Args:
            record: Record to parse

        Returns:
            Mapping of field name to decoded values
        """
        parsed: Dict[str, List[Any]] = {}
        for transformer in self._transformers:
            for field_name, values in transformer.extract_and_transform(record).items():
                parsed.setdefault(field_name, []).extend(values)
        return parsed

    def map(self, record: Record) -> Document:
        """Map a record into an index document, one occurrence per value."""
        document = Document()
        for field_name, values in self.parse(record).items():
            for value in values:
                document.add_field(field_name, value)
        return document

    def is_relevant(self, cell: Cell) -> bool:
        """Check whether a changed cell could affect the indexed document."""
        for extractor in self._extractors:
            if extractor.is_applicable(cell):
                return True
        return False

    def get_fetch_descriptor(self, row: Optional[BytesLike] = None) -> FetchDescriptor:
        """Get the columns to fetch for a row.

        The descriptor does not depend on the row; the argument is accepted
        so that callers do not need to change for row-dependent strategies.
        """
        return self._fetch_descriptor

    def __repr__(self) -> str:
        return f"RecordToDocumentMapper(fields={self.field_names})"
