"""
Unit tests for grading and student status transitions.
"""

import pytest

from ums.core.enums import StudentStatus, Grade
from ums.core.exceptions import InvalidReferenceError, NotRegisteredError, IllegalTransitionError
from tests.helpers import student_data, course_data


@pytest.fixture
def registered(registry):
    """A student registered for one course."""
    student = registry.enroll_student(student_data())
    course = registry.add_course(course_data())
    registry.register_for_course(student.id, course.id)
    return student, course


class TestSetGrade:
    """Test grading of registered students"""

    def test_sets_grade_and_refreshes_date(self, registry, registered):
        """Test grading overwrites the grade and moves the date forward"""
        student, course = registered
        before = registry.get_student_grades(student.id)[0].date

        record = registry.set_grade(student.id, course.id, Grade.EXCELLENT)

        assert record.grade == Grade.EXCELLENT
        assert record.is_graded
        assert record.date >= before
        assert registry.get_student_grades(student.id) == [record]

    def test_regrading_overwrites(self, registry, registered):
        """Test repeated grading keeps only the latest grade"""
        student, course = registered

        registry.set_grade(student.id, course.id, Grade.UNSATISFACTORY)
        registry.set_grade(student.id, course.id, Grade.GOOD)

        grades = registry.get_student_grades(student.id)
        assert [g.grade for g in grades] == [Grade.GOOD]

    def test_accepts_integer_grade(self, registry, registered):
        """Test an integer on the grade scale is converted to Grade"""
        student, course = registered

        record = registry.set_grade(student.id, course.id, 3)

        assert record.grade == Grade.SATISFACTORY

    def test_off_scale_grade_is_rejected(self, registry, registered):
        """Test values outside the scale raise ValueError without changing the record"""
        student, course = registered

        with pytest.raises(ValueError):
            registry.set_grade(student.id, course.id, 7)

        assert registry.get_student_grades(student.id)[0].grade is None

    def test_not_registered(self, registry, registered):
        """Test grading a pair without registration raises NotRegisteredError"""
        student, course = registered
        other_course = registry.add_course(course_data(name="Algorithms"))

        with pytest.raises(NotRegisteredError) as exc_info:
            registry.set_grade(student.id, other_course.id, Grade.GOOD)

        assert exc_info.value.error_code == "NOT_REGISTERED"
        assert exc_info.value.details == {'student_id': student.id, 'course_id': other_course.id}

    def test_not_registered_for_unknown_ids(self, registry):
        """Test unknown ids are reported as a missing registration"""
        with pytest.raises(NotRegisteredError):
            registry.set_grade(1, 1, Grade.GOOD)


class TestUpdateStudentStatus:
    """Test student status transitions"""

    def test_unknown_student(self, registry):
        """Test unknown student raises InvalidReferenceError"""
        with pytest.raises(InvalidReferenceError):
            registry.update_student_status(5, StudentStatus.GRADUATED)

    @pytest.mark.parametrize("new_status", list(StudentStatus))
    def test_active_student_may_move_anywhere(self, registry, new_status):
        """Test a non-expelled student accepts every status"""
        student = registry.enroll_student(student_data())

        updated = registry.update_student_status(student.id, new_status)

        assert updated is student
        assert student.status == new_status

    def test_accepts_status_value(self, registry):
        """Test a status given by its value is converted to StudentStatus"""
        student = registry.enroll_student(student_data())

        registry.update_student_status(student.id, "Graduated")

        assert student.status == StudentStatus.GRADUATED
        assert registry.get_statistics()['students_by_status']["Graduated"] == 1
        assert student.to_dict()['status'] == "Graduated"

    def test_expelled_to_academic_leave_by_value(self, registry):
        """Test the legal transition out of Expelled also works with a value"""
        student = registry.enroll_student(student_data(status=StudentStatus.EXPELLED))

        registry.update_student_status(student.id, "Academic_Leave")

        assert student.status == StudentStatus.ACADEMIC_LEAVE

    def test_unknown_status_is_rejected(self, registry):
        """Test a value outside StudentStatus raises ValueError and leaves the status alone"""
        student = registry.enroll_student(student_data())

        with pytest.raises(ValueError):
            registry.update_student_status(student.id, "Suspended")

        assert student.status == StudentStatus.ACTIVE

    def test_graduated_back_to_active(self, registry):
        """Test Graduated -> Active is permitted"""
        student = registry.enroll_student(student_data(status=StudentStatus.GRADUATED))

        registry.update_student_status(student.id, StudentStatus.ACTIVE)

        assert student.status == StudentStatus.ACTIVE

    def test_expelled_to_academic_leave(self, registry):
        """Test an expelled student can move to academic leave"""
        student = registry.enroll_student(student_data(status=StudentStatus.EXPELLED))

        registry.update_student_status(student.id, StudentStatus.ACADEMIC_LEAVE)

        assert student.status == StudentStatus.ACADEMIC_LEAVE

    @pytest.mark.parametrize("new_status", [
        StudentStatus.ACTIVE, StudentStatus.GRADUATED, StudentStatus.EXPELLED
    ])
    def test_expelled_other_transitions_fail(self, registry, new_status):
        """Test every other transition out of Expelled raises IllegalTransitionError"""
        student = registry.enroll_student(student_data())
        registry.update_student_status(student.id, StudentStatus.EXPELLED)

        with pytest.raises(IllegalTransitionError) as exc_info:
            registry.update_student_status(student.id, new_status)

        assert exc_info.value.details['current_status'] == "Expelled"
        assert exc_info.value.details['requested_status'] == new_status.value
        assert student.status == StudentStatus.EXPELLED
