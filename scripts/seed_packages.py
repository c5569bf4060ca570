# scripts/seed_packages.py
from travel_admin.db.mixins import Base
from travel_admin.db.session import SessionLocal, engine
import travel_admin.db.models  # noqa: F401
from travel_admin.services.admin_seed import ensure_default_admin
from travel_admin.services.packages import create_package, get_package_by_slug

PACKAGES = [
    {
        "name": "Sri Lanka Highlights",
        "slug": "sri-lanka-highlights",
        "country": "Sri Lanka",
        "days": 7,
        "image": "/assets/images/packages/sri-lanka.jpg",
        "price": 1299,
        "stars": 4,
        "description": "Tea country, ancient cities and the south coast in one week.",
        "images": ["/assets/images/packages/sigiriya.jpg", {"url": "assets/images/packages/ella.jpg", "alt": "Nine Arch Bridge"}],
        "itinerary": [
            {"day": 1, "title": "Arrival in Negombo", "image": "/assets/images/packages/negombo.jpg"},
            {
                "day": 2,
                "title": "Sigiriya",
                "highlight": [{"title": "Lion Rock", "img": "/assets/images/packages/lion-rock.jpg"}],
            },
        ],
        "inclusion": {"included": ["Breakfast", "Airport transfers"], "excluded": ["Flights"]},
        "summary": {"description": "Culture and coast", "activities": ["Safari"], "locations": ["Kandy", "Galle"]},
    },
    {
        "name": "Maldives Escape",
        "slug": "maldives-escape",
        "country": "Maldives",
        "days": 5,
        "image": "https://images.example.com/maldives.jpg",
        "price": 2199,
        "stars": 5,
        "inclusion": {"included": ["All meals"], "excluded": []},
    },
]


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_admin(db)
        for data in PACKAGES:
            if get_package_by_slug(db, data["slug"], ""):
                continue
            create_package(db, data)
        print(f"Seed complete: {len(PACKAGES)} packages checked.")
    except Exception as e:
        db.rollback()
        print("Seed failed:", e)
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
