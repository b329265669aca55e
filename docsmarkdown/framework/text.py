"""Text helpers shared by services and modules."""

_BOM = "\ufeff"


def strip_bom_from_string(original_text):
    """Drop a leading byte order mark so the text parses as JSON/YAML."""
    if original_text is None:
        return None
    if original_text.startswith(_BOM):
        return original_text[len(_BOM):]
    return original_text
