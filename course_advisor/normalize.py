def normalize_code(code):
    """Trims and upper-cases a course code, e.g. " csci200 " -> "CSCI200"."""
    return code.strip().upper()
