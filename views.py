# views.py
from flask import Blueprint, render_template, request, redirect, url_for, flash
from flask_login import login_user, login_required, logout_user, current_user

import auth
import booking as booking_service
import intake
from errors import AuthError, BookingInvalid, ValidationError

bp = Blueprint("main", __name__)


def session_user_id():
    return current_user.user_id if current_user.is_authenticated else None


@bp.route("/")
def index():
    return render_template("index.html")


# Signup
@bp.route("/signup", methods=["GET", "POST"])
def signup():
    if request.method == "POST":
        form = request.form
        try:
            auth.register(form.get("name"), form.get("email"), form.get("password"), form.get("confirm_password"))
        except ValidationError as exc:
            return render_template("signup.html", message=exc.message, values=form)
        flash("Account created. Please log in.", "success")
        return redirect(url_for("main.login"))
    return render_template("signup.html", message="", values={})


# Login
@bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "POST":
        try:
            auth_session = auth.login(request.form.get("email"), request.form.get("password"))
        except AuthError as exc:
            return render_template("login.html", message=exc.message, values=request.form)
        login_user(auth_session)
        return redirect(url_for("main.precautions"))
    return render_template("login.html", message="", values={})


# Logout
@bp.route("/logout")
def logout():
    if current_user.is_authenticated:
        auth.logout(current_user.token)
    logout_user()
    return redirect(url_for("main.index"))


@bp.route("/precautions")
def precautions():
    name = current_user.user_name if current_user.is_authenticated else None
    return render_template("precautions.html", name=name)


# Personal precautions questionnaire
@bp.route("/personalPrecautions", methods=["GET", "POST"])
def personal_precautions():
    if request.method == "POST":
        personal = intake.submit_precautions(request.form)
        return render_template("suggestions.html", personal=personal.to_dict())
    return render_template("personal_precautions.html")


@bp.route("/suggestions")
def suggestions():
    return "Suggestions page coming soon!"


# Labs and doctors
@bp.route("/doctor")
def doctor():
    labs, doctors = booking_service.list_labs()
    name = current_user.user_name if current_user.is_authenticated else request.args.get("name")
    return render_template("doctor.html", labs=labs, doctors=doctors, name=name)


@bp.route("/book-slot/<lab_id>")
def book_slot_form(lab_id):
    lab, user = booking_service.get_lab_booking_form(
        lab_id, user_id=session_user_id(), email=request.args.get("email")
    )
    values = {"labId": lab.id}
    if user:
        values.update(name=user.name, email=user.email)
    return render_template("book_slot.html", lab=lab, user=user, errors=[], values=values)


@bp.route("/book-slot", methods=["POST"])
def book_slot():
    form = request.form.to_dict()
    try:
        lab, booking = booking_service.submit_booking(form)
    except BookingInvalid as exc:
        lab, user = booking_service.booking_form_context(
            form.get("labId"), user_id=session_user_id(), email=form.get("email")
        )
        return render_template("book_slot.html", lab=lab, user=user, errors=exc.errors, values=form)
    return render_template("booking_confirmation.html", lab=lab, booking=booking)


# Admin
@bp.route("/admin/bookings")
@login_required
def admin_bookings():
    rows = booking_service.list_bookings()
    return render_template("admin_bookings.html", rows=rows)


@bp.route("/admin/bookings/delete/<booking_id>")
@login_required
def admin_delete_booking(booking_id):
    if booking_service.delete_booking(booking_id):
        flash("Booking deleted.", "success")
    return redirect(url_for("main.admin_bookings"))
