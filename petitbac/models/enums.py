from enum import Enum

class ValidationStatus(str, Enum):
    VALID = "VALID"          # Confident acceptance
    INVALID = "INVALID"      # Confident rejection
    UNCERTAIN = "UNCERTAIN"  # No verdict: try the next source or accept provisionally
    ERROR = "ERROR"          # Malformed request (null or unknown category), a caller bug

class Category(Enum):
    PAYS = ("Pays", "🌍", "Un pays du monde")
    VILLE = ("Ville", "🏙️", "Une ville")
    ANIMAL = ("Animal", "🐾", "Un animal")
    METIER = ("Métier", "👔", "Une profession")
    PRENOM = ("Prénom", "👤", "Un prénom")
    FRUIT = ("Fruit/Légume", "🍎", "Un fruit ou légume")
    OBJET = ("Objet", "📦", "Un objet du quotidien")
    CELEBRITE = ("Célébrité", "⭐", "Une personne célèbre")

    def __init__(self, display_name: str, icon: str, hint: str):
        self.display_name = display_name
        self.icon = icon
        self.hint = hint
