#!/usr/bin/env python
"""Seed the student roster from a JSON file.

Run from the repository root, for example:

        python scripts/seed_students.py data/students.json

Equivalent to ``flask seed-students FILE``; kept as a script for
environments where the Flask CLI is not configured.
"""

import json
import os
import sys

# Ensure project root is on sys.path so `import roster` works when invoking
# this script as `python scripts/seed_students.py` from the repo root
proj_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if proj_root not in sys.path:
    sys.path.insert(0, proj_root)

from marshmallow import ValidationError  # noqa: E402

from roster import create_app, db  # noqa: E402
from roster.cli import seed_students  # noqa: E402
from roster.repositories.student_repository import StudentRepository  # noqa: E402


def main(argv):
    if len(argv) != 2:
        print("usage: seed_students.py FILE", file=sys.stderr)
        return 2

    with open(argv[1], encoding="utf-8") as fh:
        records = json.load(fh)

    if not isinstance(records, list):
        print("Error: Expected a JSON array of students", file=sys.stderr)
        return 1

    app = create_app(os.environ.get("FLASK_CONFIG", "production"))
    with app.app_context():
        db.create_all()
        try:
            created, skipped = seed_students(StudentRepository(db.session), records)
        except ValidationError as err:
            print(f"Error: Invalid student data: {err.messages}", file=sys.stderr)
            return 1

    print(f"[Seed] {created} students created, {skipped} skipped")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
