from typing import Any, Dict, Optional

from janseva.domain.section_types import (
    dump_section_content,
    normalize_section_type,
    parse_section_content,
)


def assert_section(section_type: Any, content: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Validate a section payload and return the content as it should be stored.
    """
    section_type = normalize_section_type(section_type)
    return dump_section_content(parse_section_content(section_type, content))
