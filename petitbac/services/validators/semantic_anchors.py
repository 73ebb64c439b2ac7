# petitbac/services/validators/semantic_anchors.py
# Representative French words per category. They will seed the category
# embeddings once a semantic model exists; nothing reads them while the
# semantic validator is disabled.
import threading
from typing import Dict, Set

from petitbac.core.normalization import normalize_input
from petitbac.models.enums import Category

_CATEGORY_ANCHORS: Dict[Category, Set[str]] = {
    Category.PAYS: {"nation", "territoire", "etat", "republique", "royaume", "continent", "frontiere", "capitale"},
    Category.VILLE: {"metropole", "commune", "agglomeration", "banlieue", "centre-ville", "quartier", "avenue", "place"},
    Category.ANIMAL: {"mammifere", "oiseau", "reptile", "poisson", "insecte", "domestique", "sauvage", "predateur", "herbivore"},
    Category.METIER: {"profession", "travail", "emploi", "carriere", "competence", "salaire", "formation", "expertise"},
    Category.PRENOM: {"nom", "identite", "bapteme", "naissance", "masculin", "feminin", "traditionnel", "moderne"},
    Category.FRUIT: {"nutrition", "vitamine", "sucre", "jus", "verger", "recolte", "saveur", "legume", "potager"},
    Category.OBJET: {"materiel", "outil", "utile", "fabrique", "plastique", "metal", "bois", "quotidien", "maison"},
    Category.CELEBRITE: {"celebre", "connu", "personnalite", "star", "artiste", "histoire", "media", "renommee"},
}
_lock = threading.Lock()

def get_anchors(category: Category) -> Set[str]:
    """Returns a copy; mutate through add_anchor/remove_anchor."""
    with _lock:
        return set(_CATEGORY_ANCHORS.get(category, set()))

def add_anchor(category: Category, anchor: str) -> None:
    normalized = normalize_input(anchor)
    if not normalized:
        return
    with _lock:
        _CATEGORY_ANCHORS.setdefault(category, set()).add(normalized)

def remove_anchor(category: Category, anchor: str) -> None:
    with _lock:
        _CATEGORY_ANCHORS.get(category, set()).discard(normalize_input(anchor))

def configured_categories() -> Set[Category]:
    with _lock:
        return {category for category, anchors in _CATEGORY_ANCHORS.items() if anchors}
