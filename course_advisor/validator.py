# === validator.py ===
import logging

from course_advisor.issues import DUPLICATE, SELF_PREREQ, UNKNOWN_PREREQ

logger = logging.getLogger(__name__)


def add_course(courses, course, line_no, tally):
    # First occurrence of a code wins
    if course.code in courses:
        tally.duplicates += 1
        tally.add_issue(DUPLICATE, f"Duplicate course number: {course.code}", line_no)
        return False
    courses[course.code] = course
    tally.parsed += 1
    return True


def validate_prereqs(courses, tally):
    """Drops self-references and unknown codes from every prerequisite list.

    Line numbers are gone by this point, so the issues carry none.
    """
    for code, course in courses.items():
        keep = []
        for prereq in course.prereqs:
            if prereq == code:
                tally.self_prereqs += 1
                tally.add_issue(SELF_PREREQ, f"Self prerequisite removed: {code}")
                continue
            if prereq not in courses:
                tally.unknown_prereqs += 1
                tally.add_issue(UNKNOWN_PREREQ, f"Unknown prereq '{prereq}' for {code}")
                continue
            keep.append(prereq)
        course.prereqs[:] = keep

    logger.debug(
        "validated %d courses: %d self prereqs, %d unknown prereqs removed",
        len(courses), tally.self_prereqs, tally.unknown_prereqs,
    )
