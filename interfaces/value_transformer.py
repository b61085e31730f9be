"""IndexValueTransformer protocol for HBaseSearch - produces typed field values from a record."""

from typing import Any, Dict, List, Protocol

from core.models import Record

from .value_extractor import ByteArrayExtractor
from .value_mapper import ByteArrayValueMapper


class IndexValueTransformer(Protocol):
    """Abstract protocol binding one extractor to one value mapper."""
    
    @property
    def field_name(self) -> str:
        """Index field the produced values belong to."""
        ...
    
    @property
    def extractor(self) -> ByteArrayExtractor:
        """Extractor locating the raw values."""
        ...
    
    @property
    def value_mapper(self) -> ByteArrayValueMapper:
        """Mapper decoding the raw values."""
        ...
    
    def extract_and_transform(self, record: Record) -> Dict[str, List[Any]]:
        """Extract and decode the field values of a record.
        
        Values that fail to decode are skipped; they never abort the record.
        
        Args:
            record: Record to read from
            
        Returns:
            Mapping of field name to decoded values, empty if none were found
        """
        ...
