"""Reading packages from tables created by older versions of the schema."""

from sqlalchemy import text

from travel_admin.services.packages import get_package_by_slug, list_packages

BASE = "https://site.test"


def test_combined_inclusion_table(db):
    db.execute(text("DROP TABLE packages"))
    db.execute(text(
        "CREATE TABLE packages (id INTEGER PRIMARY KEY, name TEXT, slug TEXT, country TEXT, days INTEGER, "
        "image TEXT, inclusion TEXT, summary TEXT, images TEXT, itinerary TEXT, created_at TEXT)"
    ))
    db.execute(text(
        "INSERT INTO packages (id, name, slug, country, days, image, inclusion, created_at) VALUES "
        "(1, 'Kenya', 'kenya', 'Kenya', 6, 'assets/k.jpg', "
        "'{\"included\": [\"Park fees\"], \"booking_information\": \"Deposit 20%\"}', '2024-01-01'),"
        "(2, 'Bali', 'bali', 'Indonesia', 8, NULL, NULL, '2024-02-01')"
    ))
    db.commit()

    bali, kenya = list_packages(db, BASE)
    assert kenya["image"] == "https://site.test/assets/k.jpg"
    assert kenya["inclusion"] == {
        "included": ["Park fees"],
        "excluded": [],
        "booking_information": "Deposit 20%",
        "cancellation_policy": "",
    }
    assert bali["inclusion"]["included"] == []
    assert bali["image"] == ""


def test_title_column_table(db):
    db.execute(text("DROP TABLE packages"))
    db.execute(text(
        "CREATE TABLE packages (id INTEGER PRIMARY KEY, title TEXT, slug TEXT, country TEXT, days INTEGER, "
        "image TEXT, included TEXT, excluded TEXT, created_at TEXT)"
    ))
    db.execute(text(
        "INSERT INTO packages VALUES (1, 'Old Title', 'old', 'Peru', 10, NULL, '[\"Breakfast\"]', '[\"Lunch\"]', '2023-05-05')"
    ))
    db.commit()

    pkg = get_package_by_slug(db, "old", BASE)
    assert pkg["name"] == "Old Title"
    assert pkg["inclusion"] == {
        "included": ["Breakfast"],
        "excluded": ["Lunch"],
        "booking_information": "",
        "cancellation_policy": "",
    }
    assert pkg["summary"] == {"description": "", "activities": [], "locations": []}
    assert pkg["images"] == [] and pkg["itinerary"] == []
