"""Example: use the metrics engine and services directly (no Flask).

Controllers are a thin layer; the numbers come from the calculator.
"""

from src.bunksmart.bunksmart.core.enums import AttendanceKind
from src.bunksmart.bunksmart.metrics.calculator.standard_calculator import StandardMetricsCalculator
from src.bunksmart.bunksmart.subjects.model import AttendanceEvent, Subject


def main():
    history = tuple(
        AttendanceEvent(event_id=str(i), timestamp=i, kind=AttendanceKind.PRESENT if i % 10 < 7 else AttendanceKind.ABSENT)
        for i in range(20)
    )
    subject = Subject(subject_id="ds", name="Data Structures", color="#4f46e5", history=history)

    calc = StandardMetricsCalculator()
    print(calc.for_subject(subject, 75).to_dict())
    print(calc.for_subjects([subject], 75).to_dict())


if __name__ == "__main__":
    main()
