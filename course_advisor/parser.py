# === parser.py ===
from course_advisor.course import Course
from course_advisor.issues import MISSING_FIELD
from course_advisor.normalize import normalize_code


def parse_line(line, line_no, tally, delimiter=","):
    """Turns one input line into a Course, or None.

    Blank lines are skipped without an issue. Malformed lines add a
    MissingField issue at ``line_no`` to ``tally``. Prerequisite existence
    and duplicate codes are checked by later passes.
    """
    if not line.strip():
        return None

    parts = line.split(delimiter)
    if len(parts) < 2:
        tally.add_issue(MISSING_FIELD, "Missing course number or title", line_no)
        return None

    code = normalize_code(parts[0])
    title = parts[1].strip()
    if not code:
        tally.add_issue(MISSING_FIELD, "Empty course number", line_no)
        return None
    if not title:
        tally.add_issue(MISSING_FIELD, f"Empty course title for {code}", line_no)
        return None

    prereqs = []
    for raw in parts[2:]:
        prereq = normalize_code(raw)
        if prereq:
            prereqs.append(prereq)
    return Course(code, title, prereqs)
