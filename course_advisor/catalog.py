# === catalog.py ===
from course_advisor.normalize import normalize_code

SORT_THRESHOLD = 50


def insertion_sort(courses):
    for i in range(1, len(courses)):
        key = courses[i]
        j = i
        # strict > keeps equal codes in their original order
        while j > 0 and courses[j - 1].code > key.code:
            courses[j] = courses[j - 1]
            j -= 1
        courses[j] = key
    return courses


class CourseCatalog:
    def __init__(self, sort_threshold=SORT_THRESHOLD):
        self.courses = {}  # code -> Course
        self.sort_threshold = sort_threshold

    def insert(self, course):
        if course.code in self.courses:
            return False
        self.courses[course.code] = course
        return True

    def lookup(self, code):
        return self.courses.get(normalize_code(code))

    def all_sorted(self):
        courses = list(self.courses.values())
        # Small lists are cheaper to insertion sort; both paths are stable
        if len(courses) < self.sort_threshold:
            return insertion_sort(courses)
        return sorted(courses, key=lambda c: c.code)

    def __len__(self):
        return len(self.courses)

    def __contains__(self, code):
        return normalize_code(code) in self.courses

    def __iter__(self):
        return iter(self.courses.values())
