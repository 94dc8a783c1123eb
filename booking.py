# booking.py
from flask import current_app
from marshmallow import EXCLUDE, Schema, fields, pre_load, validate
from marshmallow import ValidationError as SchemaError

from errors import BookingInvalid, LabNotFound
from models import db, commit, Booking, Lab, User
from notify import dispatch_booking_confirmation

FIELD_ORDER = ("labId", "name", "phone", "email", "date", "time", "notes")


class BookingSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    labId = fields.String(required=True, error_messages={"required": "Please choose a lab."})
    name = fields.String(required=True, error_messages={"required": "Name is required."})
    phone = fields.String(validate=validate.Length(min=7, error="Phone number must be at least {min} characters."))
    email = fields.Email(error_messages={"invalid": "Enter a valid email address."})
    date = fields.Date(
        required=True,
        format="iso",
        error_messages={"required": "Date is required.", "invalid": "Date must be in YYYY-MM-DD format."},
    )
    time = fields.String(required=True, error_messages={"required": "Time is required."})
    notes = fields.String()

    @pre_load
    def strip_blanks(self, data, **kwargs):
        # Trim everything; a blank value counts as not given
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip()
            if value in ("", None):
                continue
            cleaned[key] = value
        return cleaned


booking_schema = BookingSchema()


def flatten_errors(messages):
    """Turn marshmallow's {field: [msg, ...]} into a flat list of sentences."""
    errors = []
    for field in FIELD_ORDER:
        for msg in messages.get(field, []):
            errors.append(msg)
    for field, msgs in messages.items():
        if field not in FIELD_ORDER:
            errors.extend(f"{field}: {m}" for m in msgs)
    return errors


def validate_booking(form):
    """Return the cleaned booking data, or raise BookingInvalid with every problem found."""
    try:
        return booking_schema.load(dict(form))
    except SchemaError as err:
        raise BookingInvalid(flatten_errors(err.messages), fields=err.messages) from err


def list_labs():
    labs = Lab.query.order_by(Lab.id).all()
    return labs, current_app.config["DOCTORS"]


def find_prefill_user(user_id=None, email=None):
    if user_id is not None:
        user = db.session.get(User, user_id)
        if user:
            return user
    if email:
        return User.query.filter_by(email=email.lower().strip()).first()
    return None


def booking_form_context(lab_id, user_id=None, email=None):
    """Look up the lab and the user for pre-fill; either may be None."""
    lab = db.session.get(Lab, lab_id) if lab_id else None
    return lab, find_prefill_user(user_id, email)


def get_lab_booking_form(lab_id, user_id=None, email=None):
    lab, user = booking_form_context(lab_id, user_id, email)
    if lab is None:
        raise LabNotFound()
    return lab, user


def submit_booking(form):
    """Validate and store a slot booking, then fire off the confirmation email.

    Returns (lab, booking). Raises BookingInvalid or LabNotFound.
    """
    data = validate_booking(form)
    lab = db.session.get(Lab, data["labId"])
    if lab is None:
        raise LabNotFound()

    booking = Booking(
        lab_id=lab.id,
        name=data["name"],
        phone=data.get("phone"),
        email=data.get("email"),
        date=data["date"],
        time=data["time"],
        notes=data.get("notes"),
    )
    db.session.add(booking)
    commit()
    current_app.logger.info("Booking %s created for lab %s on %s %s", booking.id, lab.id, booking.date, booking.time)

    dispatch_booking_confirmation(booking, lab)
    return lab, booking


def list_bookings():
    """All bookings, newest first (ties by id), each paired with its lab's name."""
    bookings = Booking.query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()
    lab_names = {lab.id: lab.name for lab in Lab.query.all()}
    return [(b, lab_names.get(b.lab_id, "Unknown lab")) for b in bookings]


def delete_booking(booking_id):
    booking = db.session.get(Booking, booking_id)
    if booking is None:
        return False
    db.session.delete(booking)
    commit()
    current_app.logger.info("Booking %s deleted", booking_id)
    return True
