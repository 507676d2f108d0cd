# backend/scripts/seed_demo.py
from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker

# Permet de lancer le script depuis backend/ sans souci d'import
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from espace_formation.core.settings import settings
from espace_formation.models.inscription import Inscription
from espace_formation.models.session_formation import SessionFormation, new_id


# ---- Catalogue de démonstration ----
CATALOGUE = [
    ("Introduction à Python", "Développement", "Débutant", 450.0),
    ("SQL pour l’analyse de données", "Data", "Débutant", 390.0),
    ("Docker et conteneurs", "DevOps", "Intermédiaire", 620.0),
    ("Management d’équipe agile", "Management", "Intermédiaire", 880.0),
    ("Sécurité des applications web", "Cybersécurité", "Avancé", 990.0),
    ("React : les fondamentaux", "Développement", "Débutant", 520.0),
    ("Machine learning appliqué", "Data", "Avancé", 1150.0),
    ("Prise de parole en public", "Soft skills", "Débutant", 300.0),
]

LIEUX = ["Paris", "Lyon", "Nantes", "Lille", "Bordeaux", "Distanciel"]

MOIS = ["janvier", "février", "mars", "avril", "mai", "juin", "septembre", "octobre", "novembre"]


def random_dates() -> str:
    # Format libre affiché tel quel par le front
    start = random.randint(1, 24)
    return f"{start}-{start + random.randint(1, 4)} {random.choice(MOIS)} 2026"


def seed(reset: bool, max_inscriptions: int) -> None:
    engine = create_engine(settings.DATABASE_URL_SYNC, future=True)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

    with SessionLocal() as db:
        if reset:
            db.execute(delete(Inscription))
            db.execute(delete(SessionFormation))
            db.commit()
            print("✅ Reset done (all demo data deleted).")

        inscriptions_count = 0

        for title, category, level, price in CATALOGUE:
            places_totales = random.choice([8, 10, 12, 15, 20])
            n_inscrits = random.randint(0, min(max_inscriptions, places_totales))

            session = SessionFormation(
                id=new_id(),
                title=title,
                dates=random_dates(),
                lieu=random.choice(LIEUX),
                price=price,
                level=level,
                category=category,
                desc=f"Session “{title}” : théorie, ateliers pratiques et cas concrets.",
                places_totales=places_totales,
                places_reservees=n_inscrits,
            )
            db.add(session)
            db.flush()

            for _ in range(n_inscrits):
                db.add(Inscription(id=new_id(), session_id=session.id, user_id=f"demo-user-{random.randint(1, 500)}"))
                inscriptions_count += 1

        db.commit()

        print("✅ Seed terminé.")
        print(f"   - Sessions ajoutées: {len(CATALOGUE)}")
        print(f"   - Inscriptions créées: {inscriptions_count}")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--reset", action="store_true", help="Supprime les données demo avant de reseed")
    parser.add_argument("--max-inscriptions", type=int, default=6, help="Nombre max d’inscrits par session")
    parser.add_argument("--seed", type=int, default=42, help="Seed RNG pour reproductibilité")
    args = parser.parse_args()

    random.seed(args.seed)
    seed(reset=args.reset, max_inscriptions=args.max_inscriptions)


if __name__ == "__main__":
    main()
