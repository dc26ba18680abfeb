"""Text notation: parsing and serialization."""
from gradiol.dsl.parser import parse_dsl
from gradiol.dsl.serializer import serialize_to_text

__all__ = ["parse_dsl", "serialize_to_text"]
