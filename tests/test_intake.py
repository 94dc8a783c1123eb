import intake
from models import Personal

FULL_FORM = {
    "fullName": "Asha Verma",
    "age": "29",
    "weight": "62.5",
    "height": "158",
    "contact": "9876543210",
    "emergencyContact": "9123456780",
    "gestationalAge": "24",
    "gravida": "2",
    "para": "1",
    "previousComplications": "None",
    "chronicConditions": "Mild asthma",
    "allergies": "Penicillin",
    "medications": "Iron, folic acid",
    "nausea": "mild",
    "swelling": "none",
    "fatigue": "moderate",
    "cramps": "none",
    "breath": "mild",
    "fetalMovement": "normal",
    "diet": "vegetarian",
    "waterIntake": "2L",
    "exercise": "walking",
    "smoking": "no",
    "hemoglobin": "10.8",
    "bp": "118/76",
    "sugar": "92",
    "urine": "normal",
    "ultrasound": "normal growth",
    "risk": "low",
    "suggestions": "Increase iron intake",
    "nextAppointment": "2025-07-10",
}


def test_submit_maps_nested_document(ctx):
    personal = intake.submit_precautions(FULL_FORM)
    doc = personal.to_dict()

    assert doc["fullName"] == "Asha Verma"
    assert doc["age"] == 29
    assert doc["weight"] == 62.5
    assert doc["gestationalAge"] == 24
    assert doc["symptoms"] == {
        "nausea": "mild", "swelling": "none", "fatigue": "moderate",
        "cramps": "none", "breath": "mild", "fetalMovement": "normal",
    }
    assert doc["lifestyle"] == {"diet": "vegetarian", "waterIntake": "2L", "exercise": "walking", "smoking": "no"}
    assert doc["labResults"]["bp"] == "118/76"
    assert doc["doctorUse"] == {"risk": "low", "suggestions": "Increase iron intake", "nextAppointment": "2025-07-10"}
    assert doc["createdAt"] is not None
    assert Personal.query.count() == 1


def test_partial_form_is_accepted(ctx):
    personal = intake.submit_precautions({"fullName": "", "age": "", "weight": "about sixty"})

    assert personal.age is None
    assert personal.weight is None
    assert personal.symptoms["nausea"] is None
    assert Personal.query.count() == 1


def test_whole_numbers_keep_full_precision(ctx):
    personal = intake.submit_precautions({"gravida": "9007199254740993", "para": "2.7", "age": " 31 "})

    assert personal.gravida == 9007199254740993
    assert personal.para == 2
    assert personal.age == 31


def test_out_of_range_numbers_are_stored_empty(client, app):
    resp = client.post("/personalPrecautions", data={
        "fullName": "Asha Verma", "age": "99999999999999999999", "gravida": "-1e30", "para": "1e400",
    })

    assert resp.status_code == 200
    with app.app_context():
        stored = Personal.query.one()
        assert stored.age is None
        assert stored.gravida is None
        assert stored.para is None
        assert stored.full_name == "Asha Verma"


def test_precautions_route_renders_saved_record(client, app, login):
    login()
    resp = client.post("/personalPrecautions", data=FULL_FORM)

    assert resp.status_code == 200
    assert b"Thank you, Asha Verma" in resp.data
    with app.app_context():
        stored = Personal.query.one()
        assert stored.id.encode() in resp.data


def test_static_pages(client):
    assert client.get("/").status_code == 200
    assert client.get("/personalPrecautions").status_code == 200
    assert client.get("/precautions").status_code == 200
    resp = client.get("/suggestions")
    assert resp.data == b"Suggestions page coming soon!"
