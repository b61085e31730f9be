"""ByteArrayValueMapper protocol for HBaseSearch - decodes raw bytes into typed values."""

from typing import Any, Protocol


class ByteArrayValueMapper(Protocol):
    """Abstract protocol for converting raw bytes into a typed value.
    
    Mappers are stateless and may be shared by any number of transformers
    and threads.
    """
    
    @property
    def type_name(self) -> str:
        """Canonical type name handled by this mapper (e.g., "long")."""
        ...
    
    def map(self, raw: bytes) -> Any:
        """Decode raw bytes.
        
        Args:
            raw: Raw stored bytes
            
        Returns:
            Decoded value
            
        Raises:
            ValueDecodingError: If the bytes are malformed for this type
        """
        ...
