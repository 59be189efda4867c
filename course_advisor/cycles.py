# === cycles.py ===
import logging

from course_advisor.issues import CYCLE

logger = logging.getLogger(__name__)

WHITE, GRAY, BLACK = 0, 1, 2


class CycleSearch:
    """Depth-first search over course -> prerequisite edges.

    Uses an explicit stack of [code, next_edge] frames instead of recursion so
    long prerequisite chains do not hit the interpreter's recursion limit.
    ``step()`` advances by one edge, which lets tests look at ``color``,
    ``parent`` and ``stack`` between moves.
    """

    def __init__(self, courses):
        self.courses = courses
        self.color = {code: WHITE for code in courses}
        self.parent = {}
        self.stack = []
        self.cycle = None

    def start(self, root):
        self.color[root] = GRAY
        self.stack = [[root, 0]]
        self.cycle = None

    def step(self):
        """Explores one edge of the top frame. Returns False once the current root is done."""
        if not self.stack:
            return False

        frame = self.stack[-1]
        code, pos = frame
        course = self.courses.get(code)
        prereqs = course.prereqs if course is not None else ()

        if pos >= len(prereqs):
            self.color[code] = BLACK
            self.stack.pop()
            return bool(self.stack)

        frame[1] += 1
        prereq = prereqs[pos]
        state = self.color.get(prereq, WHITE)
        if state == WHITE:
            self.parent[prereq] = code
            self.color[prereq] = GRAY
            self.stack.append([prereq, 0])
        elif state == GRAY:
            # Back edge: stop this root, frames still on the stack stay gray
            self.cycle = self._path(code, prereq)
            self.stack = []
            return False
        return True

    def _path(self, code, target):
        path = [target]
        node = code
        while node is not None and node != target:
            path.append(node)
            node = self.parent.get(node)
        path.append(target)
        path.reverse()
        return path

    def run_from(self, root):
        self.start(root)
        while self.step():
            pass
        return self.cycle

    def run(self):
        cycles = []
        for code in self.courses:
            if self.color[code] != WHITE:
                continue
            path = self.run_from(code)
            if path:
                cycles.append(path)
        return cycles


def format_path(path):
    return " -> ".join(path)


def detect_cycles(courses, tally):
    """Returns the set of codes that sit on a detected cycle."""
    in_cycle = set()
    for path in CycleSearch(courses).run():
        tally.cycles += 1
        in_cycle.update(path)
        tally.add_issue(CYCLE, f"Cycle detected: {format_path(path)}")

    logger.debug("cycle search found %d cycles covering %d courses", tally.cycles, len(in_cycle))
    return in_cycle
