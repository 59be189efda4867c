# === loader.py ===
import logging
import time

from course_advisor.catalog import CourseCatalog
from course_advisor.config import AdvisorConfig
from course_advisor.cycles import detect_cycles
from course_advisor.issues import SOURCE_ERROR, TIMING, LoadTally
from course_advisor.parser import parse_line
from course_advisor.validator import add_course, validate_prereqs

logger = logging.getLogger(__name__)


def read_lines(path, encoding="utf-8"):
    # Only "\n" ends a line; form feeds or U+2028 inside a title stay put
    with open(path, encoding=encoding, newline="") as f:
        text = f.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_courses(path, config=None):
    """Runs parse -> validate -> cycle check -> insert over one course file.

    Returns ``(summary, catalog)``. If the file cannot be read the catalog is
    None and the summary holds a single SourceError issue.
    """
    config = config or AdvisorConfig()
    tally = LoadTally()
    start = time.perf_counter()

    try:
        lines = read_lines(path, config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("cannot open course file %s: %s", path, e)
        tally.add_issue(SOURCE_ERROR, f"Cannot open file: {path}")
        return tally.freeze(), None

    # Pass 1: parse lines into the working set, first occurrence of a code wins
    delimiter = config.delimiter
    courses = {}
    for line_no, line in enumerate(lines, 1):
        tally.lines_read += 1
        course = parse_line(line, line_no, tally, delimiter)
        if course is not None:
            add_course(courses, course, line_no, tally)
    logger.debug("parsed %d courses from %d lines", tally.parsed, tally.lines_read)

    # Pass 2: prune bad prerequisite edges, then find cycles
    validate_prereqs(courses, tally)
    in_cycle = detect_cycles(courses, tally)

    catalog = CourseCatalog(config.sort_threshold)
    for code, course in courses.items():
        if code in in_cycle:
            continue
        if catalog.insert(course):
            tally.inserted += 1
        else:
            tally.duplicates += 1

    elapsed = time.perf_counter() - start
    tally.elapsed_ms = int(elapsed * 1000)
    tally.add_issue(TIMING, f"Load completed in {tally.elapsed_ms} ms")
    logger.info(
        "loaded %s: %d inserted, %d excluded by cycles, %d issues",
        path, tally.inserted, len(in_cycle), len(tally.issues),
    )
    return tally.freeze(), catalog


class CourseAdvisor:
    """Owns the live catalog and swaps it out on every readable load."""

    def __init__(self, config=None):
        self.config = config or AdvisorConfig()
        self.catalog = CourseCatalog(self.config.sort_threshold)
        self.last_summary = None

    def load(self, path):
        summary, catalog = load_courses(path, self.config)
        # An unreadable file leaves the previous catalog in place
        if catalog is not None:
            self.catalog = catalog
        self.last_summary = summary
        return summary

    def lookup(self, code):
        return self.catalog.lookup(code)

    def list_all_sorted(self):
        return self.catalog.all_sorted()

    @property
    def has_courses(self):
        return len(self.catalog) > 0
