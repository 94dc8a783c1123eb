# intake.py
from flask import current_app

from models import db, commit, Personal

SYMPTOM_FIELDS = ("nausea", "swelling", "fatigue", "cramps", "breath", "fetalMovement")
LIFESTYLE_FIELDS = ("diet", "waterIntake", "exercise", "smoking")
LAB_RESULT_FIELDS = ("hemoglobin", "bp", "sugar", "urine", "ultrasound")
DOCTOR_USE_FIELDS = ("risk", "suggestions", "nextAppointment")


INT_MIN, INT_MAX = -(2 ** 63), 2 ** 63 - 1


def _number(value):
    # Convert numbers; blank or unreadable input is stored as empty
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _integer(value):
    # Whole numbers parse exactly; decimals are truncated; out of range is stored as empty
    try:
        number = int(value)
    except (TypeError, ValueError):
        try:
            number = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return None
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def _pick(form, names):
    return {name: form.get(name) for name in names}


def submit_precautions(form):
    """Save the precautions questionnaire as a Personal record and return it.

    Values are accepted as entered; nothing is required and the record is
    not tied to the logged-in user.
    """
    personal = Personal(
        full_name=form.get("fullName"),
        age=_integer(form.get("age")),
        weight=_number(form.get("weight")),
        height=_number(form.get("height")),
        contact=form.get("contact"),
        emergency_contact=form.get("emergencyContact"),
        gestational_age=_integer(form.get("gestationalAge")),
        gravida=_integer(form.get("gravida")),
        para=_integer(form.get("para")),
        previous_complications=form.get("previousComplications"),
        chronic_conditions=form.get("chronicConditions"),
        allergies=form.get("allergies"),
        medications=form.get("medications"),
        symptoms=_pick(form, SYMPTOM_FIELDS),
        lifestyle=_pick(form, LIFESTYLE_FIELDS),
        lab_results=_pick(form, LAB_RESULT_FIELDS),
        doctor_use=_pick(form, DOCTOR_USE_FIELDS),
    )
    db.session.add(personal)
    commit()
    current_app.logger.info("Saved precautions record %s", personal.id)
    return personal
