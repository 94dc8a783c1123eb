# config.py
import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get("SESSION_SECRET") or os.environ.get("SECRET_KEY", "dev_secret_change_me")

    # Use an absolute path to the database inside the 'instance' folder
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", f"sqlite:///{os.path.join(basedir, 'instance', 'womencare.sqlite')}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SESSION_LIFETIME = timedelta(hours=24)
    SEED_LABS = True

    # Mail is disabled unless every connection setting is present
    MAIL_HOST = os.environ.get("MAIL_HOST")
    MAIL_PORT = os.environ.get("MAIL_PORT")
    MAIL_USER = os.environ.get("MAIL_USER")
    MAIL_PASSWORD = os.environ.get("MAIL_PASSWORD")
    MAIL_FROM = os.environ.get("MAIL_FROM")
    MAIL_USE_TLS = os.environ.get("MAIL_USE_TLS", "1").lower() not in ("0", "false", "no")

    DOCTORS = (
        {"name": "Dr. Anjali Mehta", "specialization": "Obstetrician & Gynecologist", "experience": 14},
        {"name": "Dr. Priya Sharma", "specialization": "Maternal-Fetal Medicine", "experience": 11},
        {"name": "Dr. Kavita Rao", "specialization": "Obstetrician", "experience": 9},
        {"name": "Dr. Sunita Iyer", "specialization": "Perinatologist", "experience": 17},
        {"name": "Dr. Neha Kapoor", "specialization": "Gynecologist & Fertility Specialist", "experience": 7},
    )

    MAIL_SETTINGS = ("MAIL_HOST", "MAIL_PORT", "MAIL_USER", "MAIL_PASSWORD", "MAIL_FROM")

    @classmethod
    def get_mail_config(cls, config):
        """Return the mail connection settings, or None when any is missing."""
        settings = {key: config.get(key) for key in cls.MAIL_SETTINGS}
        if not all(settings.values()):
            return None
        settings["MAIL_PORT"] = int(settings["MAIL_PORT"])
        settings["MAIL_USE_TLS"] = config.get("MAIL_USE_TLS", True)
        return settings
