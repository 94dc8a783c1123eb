from models import db, Lab
from seed import LABS, seed_labs

LAB_IDS = {"lab1", "lab2", "lab3", "lab4", "lab5"}


def test_startup_seeds_five_labs(ctx):
    assert {lab.id for lab in Lab.query.all()} == LAB_IDS


def test_seeding_twice_converges(ctx):
    seed_labs()
    seed_labs()

    labs = Lab.query.all()
    assert len(labs) == 5
    assert {lab.id for lab in labs} == LAB_IDS


def test_reseed_overwrites_edited_fields(ctx):
    lab = db.session.get(Lab, "lab3")
    lab.name = "Renamed"
    lab.reviews = []
    db.session.commit()

    seed_labs()

    lab = db.session.get(Lab, "lab3")
    expected = next(item for item in LABS if item["id"] == "lab3")
    assert lab.name == expected["name"]
    assert lab.reviews == expected["reviews"]
    assert Lab.query.count() == 5


def test_seed_can_be_disabled(unseeded_app):
    with unseeded_app.app_context():
        assert Lab.query.count() == 0

        seed_labs()
        assert Lab.query.count() == 5
