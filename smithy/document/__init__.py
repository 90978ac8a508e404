from .frontmatter import FRONT_MATTER_DELIMITER, parse_document, parse_front_matter, split_front_matter
from .models import Document

__all__ = [
    "FRONT_MATTER_DELIMITER",
    "Document",
    "parse_document",
    "parse_front_matter",
    "split_front_matter",
]
