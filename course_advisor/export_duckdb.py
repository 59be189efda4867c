# === export_duckdb.py ===
import logging
import os

import duckdb

logger = logging.getLogger(__name__)

TABLES = ["courses", "prerequisites"]


def export_catalog(catalog, db_path):
    """Writes a fresh DuckDB snapshot of the catalog and returns the row counts."""
    db_path = str(db_path)
    parent = os.path.dirname(db_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    if os.path.exists(db_path):
        os.remove(db_path)

    con = duckdb.connect(db_path)
    try:
        con.execute("CREATE TABLE courses (course_id TEXT PRIMARY KEY, title TEXT)")
        con.execute("CREATE TABLE prerequisites (course_id TEXT, prereq_id TEXT, position INT)")

        course_rows = 0
        prereq_rows = 0
        for course in catalog.all_sorted():
            con.execute("INSERT INTO courses VALUES (?, ?)", (course.code, course.title))
            course_rows += 1
            for position, prereq in enumerate(course.prereqs):
                con.execute("INSERT INTO prerequisites VALUES (?, ?, ?)", (course.code, prereq, position))
                prereq_rows += 1
    finally:
        con.close()

    logger.info("exported %d courses and %d prerequisites to %s", course_rows, prereq_rows, db_path)
    return {"courses": course_rows, "prerequisites": prereq_rows}


def print_tables(db_path, limit=1000):
    con = duckdb.connect(str(db_path), read_only=True)
    try:
        for table in TABLES:
            print(f"\n=== {table.upper()} ===")
            results = con.execute(f"SELECT * FROM {table} ORDER BY ALL LIMIT {int(limit)}").fetchall()
            for row in results:
                print(row)
    finally:
        con.close()
