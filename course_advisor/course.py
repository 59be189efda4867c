# === course.py ===
class Course:
    def __init__(self, code, title, prereqs=None):
        self.code = code
        self.title = title
        self.prereqs = list(prereqs or [])  # list of normalized codes

    def __eq__(self, other):
        if not isinstance(other, Course):
            return NotImplemented
        return (self.code, self.title, self.prereqs) == (other.code, other.title, other.prereqs)

    def __repr__(self):
        return f"Course({self.code!r}, {self.title!r}, {self.prereqs!r})"
