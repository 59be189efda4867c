# === issues.py ===
from collections import namedtuple
from dataclasses import dataclass, field, fields

MISSING_FIELD = "MissingField"
DUPLICATE = "Duplicate"
UNKNOWN_PREREQ = "UnknownPrerequisite"
SELF_PREREQ = "SelfPrerequisite"
CYCLE = "Cycle"
SOURCE_ERROR = "SourceError"
TIMING = "Timing"

ISSUE_KINDS = (MISSING_FIELD, DUPLICATE, UNKNOWN_PREREQ, SELF_PREREQ, CYCLE, SOURCE_ERROR, TIMING)

# line_no is None when the issue is not tied to an input line
Issue = namedtuple("Issue", ["line_no", "kind", "detail"])

COUNTERS = ("lines_read", "parsed", "inserted", "duplicates", "unknown_prereqs", "self_prereqs", "cycles")


@dataclass(frozen=True)
class LoadSummary:
    """Result of one load; built by LoadTally.freeze()."""

    lines_read: int = 0
    parsed: int = 0
    inserted: int = 0
    duplicates: int = 0
    unknown_prereqs: int = 0
    self_prereqs: int = 0
    cycles: int = 0
    issues: tuple = ()
    elapsed_ms: int = None

    def issues_of(self, kind):
        return [issue for issue in self.issues if issue.kind == kind]

    def counts(self):
        return {name: getattr(self, name) for name in COUNTERS}


@dataclass
class LoadTally:
    """Counters and issues the passes update while a load runs."""

    lines_read: int = 0
    parsed: int = 0
    inserted: int = 0
    duplicates: int = 0
    unknown_prereqs: int = 0
    self_prereqs: int = 0
    cycles: int = 0
    issues: list = field(default_factory=list)
    elapsed_ms: int = None

    def add_issue(self, kind, detail, line_no=None):
        if kind not in ISSUE_KINDS:
            raise ValueError(f"unknown issue kind: {kind!r}")
        self.issues.append(Issue(line_no, kind, detail))

    def issues_of(self, kind):
        return [issue for issue in self.issues if issue.kind == kind]

    def freeze(self):
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values["issues"] = tuple(self.issues)
        return LoadSummary(**values)
