# petitbac/data/word_lists.py
# Curated vocabulary per category. Entries are written naturally (accents, capitals)
# and normalized once at import time, so lookups compare normalized forms only.
from typing import Dict, FrozenSet, Iterable

from petitbac.core.normalization import normalize_input
from petitbac.models.enums import Category

_RAW_WORD_LISTS: Dict[Category, Iterable[str]] = {
    Category.PAYS: [
        "France", "Allemagne", "Espagne", "Italie", "Portugal", "Belgique", "Suisse", "Autriche",
        "Pays-Bas", "Luxembourg", "Irlande", "Royaume-Uni", "Angleterre", "Écosse", "Danemark",
        "Suède", "Norvège", "Finlande", "Islande", "Pologne", "Hongrie", "Roumanie", "Bulgarie",
        "Grèce", "Turquie", "Russie", "Ukraine", "Croatie", "Serbie", "Slovénie", "Slovaquie",
        "Tchéquie", "Albanie", "Maroc", "Algérie", "Tunisie", "Égypte", "Libye", "Sénégal", "Mali",
        "Niger", "Nigeria", "Cameroun", "Gabon", "Congo", "Kenya", "Éthiopie", "Madagascar",
        "Afrique du Sud", "Canada", "États-Unis", "Mexique", "Cuba", "Haïti", "Brésil", "Argentine",
        "Chili", "Pérou", "Colombie", "Venezuela", "Bolivie", "Uruguay", "Paraguay", "Équateur",
        "Chine", "Japon", "Corée", "Inde", "Pakistan", "Iran", "Irak", "Israël", "Liban", "Syrie",
        "Jordanie", "Arabie saoudite", "Vietnam", "Thaïlande", "Cambodge", "Laos", "Indonésie",
        "Malaisie", "Philippines", "Népal", "Mongolie", "Australie", "Nouvelle-Zélande",
    ],
    Category.VILLE: [
        "Paris", "Lyon", "Marseille", "Toulouse", "Nice", "Nantes", "Strasbourg", "Montpellier",
        "Bordeaux", "Lille", "Rennes", "Reims", "Le Havre", "Toulon", "Grenoble", "Dijon", "Angers",
        "Nîmes", "Brest", "Limoges", "Tours", "Amiens", "Metz", "Besançon", "Perpignan", "Orléans",
        "Rouen", "Caen", "Nancy", "Avignon", "Poitiers", "Pau", "Bayonne", "Annecy", "Cannes",
        "Londres", "Berlin", "Madrid", "Rome", "Lisbonne", "Bruxelles", "Genève", "Vienne",
        "Amsterdam", "Dublin", "Prague", "Varsovie", "Budapest", "Athènes", "Moscou", "Istanbul",
        "New York", "Montréal", "Québec", "Tokyo", "Pékin", "Shanghai", "Séoul", "Sydney", "Dakar",
        "Casablanca", "Alger", "Tunis", "Le Caire", "Rio de Janeiro", "Buenos Aires", "Mexico",
    ],
    Category.ANIMAL: [
        "chien", "chat", "cheval", "vache", "mouton", "chèvre", "cochon", "poule", "coq", "canard",
        "oie", "lapin", "souris", "rat", "hamster", "lion", "tigre", "léopard", "guépard", "panthère",
        "éléphant", "girafe", "zèbre", "hippopotame", "rhinocéros", "singe", "gorille", "chimpanzé",
        "ours", "loup", "renard", "cerf", "biche", "sanglier", "écureuil", "hérisson", "castor",
        "kangourou", "koala", "panda", "chameau", "dromadaire", "lama", "âne", "mulet", "baleine",
        "dauphin", "requin", "phoque", "morse", "pingouin", "manchot", "aigle", "faucon", "hibou",
        "chouette", "corbeau", "pigeon", "moineau", "perroquet", "cygne", "flamant", "autruche",
        "serpent", "lézard", "crocodile", "tortue", "grenouille", "crapaud", "abeille", "fourmi",
        "papillon", "mouche", "moustique", "araignée", "scorpion", "escargot", "saumon", "truite",
        "thon", "sardine", "pieuvre", "crabe", "homard", "crevette", "méduse", "zébu", "yack",
    ],
    Category.METIER: [
        "médecin", "infirmier", "infirmière", "dentiste", "pharmacien", "vétérinaire", "chirurgien",
        "avocat", "juge", "notaire", "policier", "pompier", "gendarme", "militaire", "soldat",
        "professeur", "enseignant", "instituteur", "boulanger", "boucher", "pâtissier", "cuisinier",
        "serveur", "charcutier", "fromager", "agriculteur", "fermier", "jardinier", "pêcheur",
        "menuisier", "charpentier", "plombier", "électricien", "maçon", "peintre", "architecte",
        "ingénieur", "informaticien", "développeur", "journaliste", "écrivain", "photographe",
        "musicien", "acteur", "chanteur", "danseur", "coiffeur", "couturier", "facteur", "chauffeur",
        "pilote", "mécanicien", "garagiste", "comptable", "banquier", "secrétaire", "vendeur",
        "libraire", "bibliothécaire", "astronaute", "scientifique", "chercheur", "traducteur",
    ],
    Category.PRENOM: [
        "Jean", "Pierre", "Paul", "Jacques", "Michel", "Louis", "Nicolas", "Thomas", "Lucas", "Hugo",
        "Léo", "Gabriel", "Raphaël", "Arthur", "Jules", "Adam", "Nathan", "Théo", "Antoine", "Julien",
        "Alexandre", "Maxime", "Étienne", "François", "Olivier", "Philippe", "Marc", "Luc", "Yves",
        "Marie", "Anne", "Sophie", "Julie", "Camille", "Léa", "Emma", "Chloé", "Manon", "Inès",
        "Jade", "Louise", "Alice", "Lina", "Rose", "Anna", "Zoé", "Clara", "Sarah", "Laura",
        "Céline", "Isabelle", "Nathalie", "Catherine", "Christine", "Hélène", "Élodie", "Aurélie",
        "Margaux", "Juliette", "Charlotte", "Pauline", "Valérie", "Sylvie", "Martine", "Brigitte",
    ],
    Category.FRUIT: [
        "pomme", "poire", "banane", "orange", "citron", "pamplemousse", "mandarine", "clémentine",
        "fraise", "framboise", "cerise", "myrtille", "mûre", "groseille", "cassis", "raisin",
        "pêche", "abricot", "prune", "nectarine", "kiwi", "ananas", "mangue", "papaye", "melon",
        "pastèque", "figue", "datte", "grenade", "litchi", "noix de coco", "avocat", "tomate",
        "carotte", "pomme de terre", "salade", "laitue", "épinard", "chou", "chou-fleur", "brocoli",
        "courgette", "aubergine", "poivron", "concombre", "haricot", "petit pois", "lentille",
        "oignon", "ail", "échalote", "poireau", "navet", "radis", "betterave", "céleri", "potiron",
        "citrouille", "courge", "artichaut", "asperge", "fenouil", "champignon", "maïs",
    ],
    Category.OBJET: [
        "table", "chaise", "lit", "armoire", "lampe", "miroir", "horloge", "montre", "téléphone",
        "ordinateur", "clavier", "écran", "télévision", "radio", "livre", "cahier", "stylo", "crayon",
        "gomme", "règle", "ciseaux", "cartable", "sac", "valise", "parapluie", "lunettes", "clé",
        "porte", "fenêtre", "verre", "tasse", "assiette", "fourchette", "couteau", "cuillère",
        "casserole", "poêle", "bouteille", "brosse", "peigne", "serviette", "savon", "oreiller",
        "couverture", "coussin", "bougie", "vase", "tableau", "balai", "seau", "marteau", "tournevis",
        "vélo", "ballon", "jouet", "chaussure", "chapeau", "gant", "écharpe", "manteau", "bijou",
    ],
    Category.CELEBRITE: [
        "Napoléon", "Molière", "Victor Hugo", "Voltaire", "Zola", "Balzac", "Picasso", "Monet",
        "Renoir", "Rodin", "Mozart", "Beethoven", "Bach", "Chopin", "Einstein", "Newton", "Darwin",
        "Pasteur", "Marie Curie", "Gandhi", "Mandela", "Cléopâtre", "Jeanne d'Arc", "De Gaulle",
        "Zidane", "Mbappé", "Platini", "Pelé", "Maradona", "Messi", "Federer", "Nadal", "Edith Piaf",
        "Johnny Hallyday", "Brel", "Brassens", "Aznavour", "Stromae", "Céline Dion", "Madonna",
        "Michael Jackson", "Elvis Presley", "Shakespeare", "Léonard de Vinci", "Gustave Eiffel",
        "Coco Chanel", "Charlie Chaplin", "Louis de Funès", "Belmondo", "Delon", "Omar Sy",
    ],
}

WORD_LISTS: Dict[Category, FrozenSet[str]] = {
    category: frozenset(normalize_input(word) for word in words)
    for category, words in _RAW_WORD_LISTS.items()
}

def get_word_list(category: Category) -> FrozenSet[str]:
    return WORD_LISTS.get(category, frozenset())
