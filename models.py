# models.py
import uuid
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy
from flask_login import UserMixin
from sqlalchemy.exc import SQLAlchemyError

from errors import StorageError

db = SQLAlchemy()


def new_id():
    return uuid.uuid4().hex


def commit():
    """Commit the current session, turning driver failures into StorageError."""
    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageError() from exc


class User(db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150))
    email = db.Column(db.String(150), unique=True, nullable=False)
    password = db.Column(db.String(200), nullable=False)  # hashed
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class AuthSession(UserMixin, db.Model):
    """Server-side login session; Flask-Login treats it as the current user."""
    __tablename__ = "sessions"
    token = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    user_email = db.Column(db.String(150), nullable=False)
    user_name = db.Column(db.String(150))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    expires_at = db.Column(db.DateTime, nullable=False)

    def get_id(self):
        return self.token

    def is_expired(self, now=None):
        return (now or datetime.utcnow()) >= self.expires_at


class Personal(db.Model):
    __tablename__ = "personals"
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    full_name = db.Column(db.String(200))
    age = db.Column(db.Integer)
    weight = db.Column(db.Float)
    height = db.Column(db.Float)
    contact = db.Column(db.String(50))
    emergency_contact = db.Column(db.String(50))
    gestational_age = db.Column(db.Integer)
    gravida = db.Column(db.Integer)
    para = db.Column(db.Integer)
    previous_complications = db.Column(db.Text)
    chronic_conditions = db.Column(db.Text)
    allergies = db.Column(db.Text)
    medications = db.Column(db.Text)
    symptoms = db.Column(db.JSON)     # {nausea, swelling, fatigue, cramps, breath, fetalMovement}
    lifestyle = db.Column(db.JSON)    # {diet, waterIntake, exercise, smoking}
    lab_results = db.Column(db.JSON)  # {hemoglobin, bp, sugar, urine, ultrasound}
    doctor_use = db.Column(db.JSON)   # {risk, suggestions, nextAppointment}
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "fullName": self.full_name,
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "contact": self.contact,
            "emergencyContact": self.emergency_contact,
            "gestationalAge": self.gestational_age,
            "gravida": self.gravida,
            "para": self.para,
            "previousComplications": self.previous_complications,
            "chronicConditions": self.chronic_conditions,
            "allergies": self.allergies,
            "medications": self.medications,
            "symptoms": self.symptoms or {},
            "lifestyle": self.lifestyle or {},
            "labResults": self.lab_results or {},
            "doctorUse": self.doctor_use or {},
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class Lab(db.Model):
    __tablename__ = "labs"
    id = db.Column(db.String(32), primary_key=True)  # stable id from the reference set
    name = db.Column(db.String(200), nullable=False)
    address = db.Column(db.String(300))
    location = db.Column(db.String(150))
    phone = db.Column(db.String(30))
    email = db.Column(db.String(150))
    rating = db.Column(db.Float, default=0)
    reviews = db.Column(db.JSON, default=list)


class Booking(db.Model):
    __tablename__ = "bookings"
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    lab_id = db.Column(db.String(32), nullable=False)  # soft reference to labs.id
    name = db.Column(db.String(150), nullable=False)
    phone = db.Column(db.String(30))
    email = db.Column(db.String(150))
    date = db.Column(db.Date, nullable=False)
    time = db.Column(db.String(20), nullable=False)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
