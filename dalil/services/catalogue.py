"""Demo catalogue of Algerian legal texts, loaded into an empty database."""


import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from dalil.repositories.legal_text import LegalTextRepository

logger = logging.getLogger(__name__)

JORA = "Journal Officiel"
RADP = "République Algérienne"

SEED_TEXTS: list[dict] = [
    {
        "title": "Loi n° 08-09 du 25 février 2008 portant code de procédure civile et administrative",
        "type": "Loi",
        "status": "En vigueur",
        "publication_date": date(2008, 2, 25),
        "source": JORA,
        "author": RADP,
        "insertion_method": "manual",
        "popularity": 1250,
        "reference": "08-09",
        "description": "Code régissant les procédures civiles et administratives en Algérie",
        "extra": {
            "category": "Procédure",
            "authority": "Assemblée Populaire Nationale",
            "joNumber": "J.O. n° 21 du 23 avril 2008",
        },
    },
    {
        "title": "Ordonnance n° 75-58 du 26 septembre 1975 portant code civil",
        "type": "Ordonnance",
        "status": "En vigueur",
        "publication_date": date(1975, 9, 26),
        "source": JORA,
        "author": RADP,
        "insertion_method": "manual",
        "popularity": 2340,
        "reference": "75-58",
        "description": "Code civil algérien régissant les relations entre particuliers",
        "extra": {
            "category": "Civil",
            "authority": "Conseil de la Révolution",
            "joNumber": "J.O. n° 78 du 30 septembre 1975",
        },
    },
    {
        "title": "Loi n° 90-11 du 21 avril 1990 relative aux relations de travail",
        "type": "Loi",
        "status": "En vigueur",
        "publication_date": date(1990, 4, 21),
        "source": JORA,
        "author": RADP,
        "insertion_method": "ocr",
        "popularity": 890,
        "reference": "90-11",
        "description": "Loi régissant les relations de travail en Algérie",
        "extra": {
            "category": "Travail",
            "authority": "Assemblée Populaire Nationale",
            "joNumber": "J.O. n° 17 du 25 avril 1990",
        },
    },
    {
        "title": "Loi n° 18-05 du 10 mai 2018 relative au commerce électronique",
        "type": "Loi",
        "status": "En vigueur",
        "publication_date": date(2018, 5, 10),
        "source": JORA,
        "author": RADP,
        "insertion_method": "manual",
        "popularity": 567,
        "reference": "18-05",
        "description": "Cadre juridique pour le commerce électronique en Algérie",
        "extra": {
            "category": "Commercial",
            "authority": "Assemblée Populaire Nationale",
            "joNumber": "J.O. n° 28 du 16 mai 2018",
        },
    },
    {
        "title": "Décret exécutif n° 20-123 du 15 mars 2020 relatif aux mesures d'urgence",
        "type": "Décret",
        "status": "Suspendu",
        "publication_date": date(2020, 3, 15),
        "source": JORA,
        "author": RADP,
        "insertion_method": "ocr",
        "popularity": 1456,
        "reference": "20-123",
        "description": "Mesures d'urgence sanitaire temporaires",
        "extra": {
            "category": "Administratif",
            "authority": "Gouvernement",
            "joNumber": "J.O. n° 15 du 18 mars 2020",
        },
    },
    {
        "title": "Arrêté ministériel n° 21-45 du 5 juin 2021 relatif aux normes sanitaires",
        "type": "Arrêté",
        "status": "En révision",
        "publication_date": date(2021, 6, 5),
        "source": "Ministère de la Santé",
        "author": "Ministre de la Santé",
        "insertion_method": "manual",
        "popularity": 234,
        "reference": "21-45",
        "description": "Normes sanitaires applicables aux établissements de santé",
        "extra": {
            "category": "Santé",
            "authority": "Ministère de la Santé",
            "joNumber": "J.O. n° 34 du 9 juin 2021",
        },
    },
    {
        "title": "Loi n° 84-11 du 9 juin 1984 portant code de la famille",
        "type": "Loi",
        "status": "Modifié",
        "publication_date": date(1984, 6, 9),
        "source": JORA,
        "author": RADP,
        "insertion_method": "api",
        "popularity": 1980,
        "reference": "84-11",
        "description": "Statut personnel, mariage, divorce et successions",
        "extra": {
            "category": "Famille",
            "authority": "Assemblée Populaire Nationale",
            "joNumber": "J.O. n° 24 du 12 juin 1984",
        },
    },
    {
        "title": "Ordonnance n° 66-156 du 8 juin 1966 portant code pénal",
        "type": "Ordonnance",
        "status": "Modifié",
        "publication_date": date(1966, 6, 8),
        "source": JORA,
        "author": RADP,
        "insertion_method": None,
        "popularity": 2105,
        "reference": "66-156",
        "description": "Infractions et peines applicables",
        "extra": {
            "category": "Pénal",
            "authority": "Gouvernement",
            "joNumber": "J.O. n° 49 du 11 juin 1966",
        },
    },
]


async def seed_catalogue(session: AsyncSession, client_id: str) -> int:
    """Insert :data:`SEED_TEXTS` when the tenant has no legal texts yet.

    Returns the number of rows inserted (0 when the catalogue already exists).
    """
    repo = LegalTextRepository(session, client_id)
    if not await repo.is_empty():
        return 0
    inserted = await repo.add_all([dict(row) for row in SEED_TEXTS])
    logger.info("Seeded %d legal texts for client '%s'", inserted, client_id)
    return inserted
