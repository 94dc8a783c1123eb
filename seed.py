# seed.py
from flask import current_app

from models import db, commit, Lab

LABS = (
    {
        "id": "lab1",
        "name": "Motherhood Diagnostics",
        "address": "12 MG Road, Near City Hospital",
        "location": "Bengaluru",
        "phone": "080-41234567",
        "email": "care@motherhooddiagnostics.in",
        "rating": 4.6,
        "reviews": [
            {"user": "Ritu", "comment": "Quick ultrasound appointment, friendly staff.", "rating": 5},
            {"user": "Meena", "comment": "Reports were ready the same evening.", "rating": 4},
        ],
    },
    {
        "id": "lab2",
        "name": "Janani Pathology Lab",
        "address": "45 Park Street",
        "location": "Kolkata",
        "phone": "033-22456789",
        "email": "info@jananipath.in",
        "rating": 4.3,
        "reviews": [
            {"user": "Sohini", "comment": "Home sample collection was on time.", "rating": 4},
        ],
    },
    {
        "id": "lab3",
        "name": "Sakhi Women's Imaging Centre",
        "address": "3rd Floor, Lotus Plaza, Andheri West",
        "location": "Mumbai",
        "phone": "022-26781234",
        "email": "appointments@sakhiimaging.in",
        "rating": 4.8,
        "reviews": [
            {"user": "Pooja", "comment": "Very gentle sonographer, explained everything.", "rating": 5},
            {"user": "Farah", "comment": "Clean and well organised.", "rating": 5},
        ],
    },
    {
        "id": "lab4",
        "name": "Navjeevan Clinical Labs",
        "address": "B-17 Lajpat Nagar II",
        "location": "New Delhi",
        "phone": "011-29834567",
        "email": None,
        "rating": 4.1,
        "reviews": [],
    },
    {
        "id": "lab5",
        "name": "Aarogya Maternal Care Lab",
        "address": "88 Anna Salai",
        "location": "Chennai",
        "phone": None,
        "email": "hello@aarogyamaternal.in",
        "rating": 4.4,
        "reviews": [
            {"user": "Lakshmi", "comment": "Affordable glucose tolerance test package.", "rating": 4},
        ],
    },
)


def seed_labs(labs=LABS):
    """Upsert the reference labs by id; safe to run on every startup."""
    for data in labs:
        # merge() inserts or overwrites the row with the same primary key
        db.session.merge(Lab(**data))
    commit()
    current_app.logger.info("Seeded %d labs", len(labs))
