# === report.py ===
from course_advisor.issues import TIMING
from course_advisor.normalize import normalize_code


def format_summary(summary):
    lines = [
        "=== Load Summary ===",
        f"Lines read:        {summary.lines_read}",
        f"Courses parsed:    {summary.parsed}",
        f"Inserted:          {summary.inserted}",
        f"Duplicates:        {summary.duplicates}",
        f"Unknown prereqs:   {summary.unknown_prereqs}",
        f"Self prereqs:      {summary.self_prereqs}",
        f"Cycles detected:   {summary.cycles}",
    ]
    for issue in summary.issues:
        if issue.kind == TIMING:
            lines.append(f"* {issue.detail}")
        elif issue.line_no is not None:
            lines.append(f"* [line {issue.line_no}] {issue.kind}: {issue.detail}")
        else:
            lines.append(f"* {issue.kind}: {issue.detail}")
    lines.append("====================")
    return "\n".join(lines)


def format_course_list(courses):
    return "\n".join(f"{course.code}, {course.title}" for course in courses)


def format_course(catalog, code):
    course = catalog.lookup(code)
    if course is None:
        return f"Course not found: {normalize_code(code)}"

    lines = [f"{course.code}, {course.title}"]
    if not course.prereqs:
        lines.append("Prerequisites: None")
        return "\n".join(lines)

    # A prereq can be missing when it was dropped as part of a cycle
    found = {p: catalog.lookup(p) for p in course.prereqs}
    names = [p if found[p] else f"{p} (Not found)" for p in course.prereqs]
    lines.append("Prerequisites: " + ", ".join(names))
    for p in course.prereqs:
        if found[p]:
            lines.append(f"  - {p}: {found[p].title}")
        else:
            lines.append(f"  - {p}: [Title not found]")
    return "\n".join(lines)
