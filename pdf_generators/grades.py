"""Grade helpers for the student list report: activity columns, averages and outcome summaries"""

import math
from dataclasses import dataclass

PLACEHOLDER = '-'


def student_activities(student):
    """Yield every graded activity of a student across all grade groups"""
    for group in student.get('calificaciones') or ():
        for activity in group.get('actividades') or ():
            yield activity


def infer_columns(records, extract_activities=student_activities):
    """
    Compute the activity columns of the student list

    Args:
        records: Students, each with ``calificaciones`` -> ``actividades``
        extract_activities: Callable yielding the activities of one record

    Returns:
        tuple: Distinct activity names sorted lexicographically
    """
    names = set()
    for record in records:
        for activity in extract_activities(record):
            name = activity.get('nombreActividad')
            if name is not None:
                names.add(name)
    return tuple(sorted(names))


def find_activity_grade(student, activity_name, placeholder=PLACEHOLDER):
    """Return the student's grade for an activity, or the placeholder if there is none"""
    for activity in student_activities(student):
        if activity.get('nombreActividad') == activity_name:
            grade = activity.get('calificacionActividad')
            return placeholder if grade is None else grade
    return placeholder


def compute_average(grade_groups):
    """
    Average of the unit averages of a student's grade groups

    Groups without ``promedioUnidad`` count as 0. A student with no grade
    groups has no average and gets None.
    """
    grade_groups = list(grade_groups or ())
    if not grade_groups:
        return None
    total = sum(group.get('promedioUnidad') or 0 for group in grade_groups)
    return total / len(grade_groups)


def format_average(value):
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return PLACEHOLDER
    return f"{value:.2f}"


@dataclass(frozen=True)
class OutcomeSummary:
    passed: object = 0
    failed: object = 0
    dropped: object = 0
    passed_pct: object = 0
    failed_pct: object = 0
    dropped_pct: object = 0
    total: object = 0

    def rows(self):
        return [
            ("Alumnos aprobados", self.passed, self.passed_pct),
            ("Alumnos reprobados", self.failed, self.failed_pct),
            ("Alumnos desertados", self.dropped, self.dropped_pct),
            ("Total", self.total, "100%"),
        ]


def compute_outcome_summary(percentages, total):
    """
    Collect pass/fail/dropout counts and percentages for the summary table

    Values are taken as supplied by the caller; they are not cross-checked
    against the total.
    """
    percentages = percentages or {}
    return OutcomeSummary(
        passed=percentages.get('aprobados', 0),
        failed=percentages.get('reprobados', 0),
        dropped=percentages.get('desertados', 0),
        passed_pct=percentages.get('aprobadosPorcentaje', 0),
        failed_pct=percentages.get('reprobadosPorcentaje', 0),
        dropped_pct=percentages.get('desertadosPorcentaje', 0),
        total=total if total is not None else 0,
    )
