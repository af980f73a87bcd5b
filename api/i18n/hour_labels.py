"""Display strings for planets, elements and guidance, keyed by language."""

PLANET_NAMES = {
    "en": {
        "Sun": "Sun",
        "Moon": "Moon",
        "Mars": "Mars",
        "Mercury": "Mercury",
        "Jupiter": "Jupiter",
        "Venus": "Venus",
        "Saturn": "Saturn",
    },
    "fr": {
        "Sun": "Soleil",
        "Moon": "Lune",
        "Mars": "Mars",
        "Mercury": "Mercure",
        "Jupiter": "Jupiter",
        "Venus": "Vénus",
        "Saturn": "Saturne",
    },
    "ar": {
        "Sun": "الشمس",
        "Moon": "القمر",
        "Mars": "المريخ",
        "Mercury": "عطارد",
        "Jupiter": "المشتري",
        "Venus": "الزهرة",
        "Saturn": "زحل",
    },
}

ELEMENT_NAMES = {
    "en": {"fire": "Fire", "water": "Water", "air": "Air", "earth": "Earth"},
    "fr": {"fire": "Feu", "water": "Eau", "air": "Air", "earth": "Terre"},
    "ar": {"fire": "نار", "water": "ماء", "air": "هواء", "earth": "تراب"},
}

PLANET_MEANINGS = {
    "en": {
        "Sun": "Vitality & Leadership",
        "Moon": "Emotion & Intuition",
        "Mars": "Action & Courage",
        "Mercury": "Communication & Learning",
        "Jupiter": "Growth & Expansion",
        "Venus": "Love & Harmony",
        "Saturn": "Structure & Discipline",
    },
    "fr": {
        "Sun": "Vitalité & Leadership",
        "Moon": "Émotion & Intuition",
        "Mars": "Action & Courage",
        "Mercury": "Communication & Apprentissage",
        "Jupiter": "Croissance & Expansion",
        "Venus": "Amour & Harmonie",
        "Saturn": "Structure & Discipline",
    },
}

QUALITY_LABELS = {
    "en": {
        "perfect": "Perfect Match",
        "strong": "Strong Energy",
        "moderate": "Moderate Energy",
        "weak": "Low Energy",
        "opposing": "Rest Time",
    },
    "fr": {
        "perfect": "Parfait",
        "strong": "Énergie Forte",
        "moderate": "Énergie Modérée",
        "weak": "Énergie Faible",
        "opposing": "Temps de Repos",
    },
}

# "rest" covers the weak and opposing tiers.
ENERGY_LEVELS = {
    "en": {
        "perfect": ("Perfect Energy", "Perfect time to act with confidence"),
        "strong": ("Strong Energy", "Excellent time to make progress"),
        "moderate": ("Moderate Energy", "Good for steady, consistent work"),
        "rest": ("Rest Recommended", "Time for reflection and rest"),
    },
    "fr": {
        "perfect": ("Énergie Parfaite", "Moment idéal pour agir avec confiance"),
        "strong": ("Forte Énergie", "Excellente période pour progresser"),
        "moderate": ("Énergie Modérée", "Bon pour le travail constant et régulier"),
        "rest": ("Repos Recommandé", "Temps de réflexion et de repos"),
    },
}

QUICK_ACTIONS = {
    "en": {
        "perfect": [
            "Start important projects",
            "Make key decisions",
            "Have crucial conversations",
            "Take bold action",
        ],
        "strong": [
            "Push forward on goals",
            "Tackle challenging tasks",
            "Communicate clearly",
            "Build momentum",
        ],
        "moderate": [
            "Handle routine tasks",
            "Continue ongoing work",
            "Prepare and organize",
            "Low-stakes activities",
        ],
        "rest": [
            "Rest and reflect",
            "Plan for later",
            "Gentle activities",
            "Spiritual practice",
        ],
    },
    "fr": {
        "perfect": [
            "Lancer des projets importants",
            "Prendre des décisions clés",
            "Avoir des conversations cruciales",
            "Prendre des actions audacieuses",
        ],
        "strong": [
            "Progresser sur vos objectifs",
            "S'attaquer aux tâches difficiles",
            "Communiquer clairement",
            "Créer de l'élan",
        ],
        "moderate": [
            "Gérer les tâches routinières",
            "Continuer le travail en cours",
            "Préparer et organiser",
            "Activités à faible enjeu",
        ],
        "rest": [
            "Se reposer et réfléchir",
            "Planifier pour plus tard",
            "Activités douces",
            "Pratique spirituelle",
        ],
    },
}

HOUR_GUIDANCE = {
    "en": {
        "active": ["Take important actions", "Start new projects", "Crucial conversations"],
        "moderate": ["Routine work", "Continue ongoing projects", "Organize and prepare"],
        "rest": ["Rest", "Reflect and plan", "Spiritual practice"],
    },
    "fr": {
        "active": ["Prendre des actions importantes", "Commencer de nouveaux projets", "Conversations cruciales"],
        "moderate": ["Travail de routine", "Continuer les projets en cours", "Organiser et préparer"],
        "rest": ["Se reposer", "Réfléchir et planifier", "Pratique spirituelle"],
    },
}

PURPOSE_TITLES = {
    "en": {
        "work": "Work & Projects",
        "prayer": "Reflection & Prayer",
        "conversation": "Important Conversations",
        "learning": "Learning & Study",
        "finance": "Financial Decisions",
        "relationships": "Relationships",
    },
    "fr": {
        "work": "Travail & Projets",
        "prayer": "Réflexion & Prière",
        "conversation": "Conversations Importantes",
        "learning": "Apprentissage & Étude",
        "finance": "Décisions Financières",
        "relationships": "Relations",
    },
}

# (advice when the timing is good, advice otherwise)
PURPOSE_ADVICE = {
    "en": {
        "work": (
            ["Start important tasks", "Make decisions", "Contact clients"],
            ["Routine work only", "Avoid new initiatives", "Prepare for later"],
        ),
        "prayer": (
            ["Good time for meditation", "Recommended dhikr below", "Quiet reflection"],
            ["Good time for meditation", "Recommended dhikr below", "Quiet reflection"],
        ),
        "conversation": (
            ["Good time to talk", "Energy supports communication", "Be direct and honest"],
            ["Wait for better timing", "Emotions may cloud things", "Prepare your key points"],
        ),
        "learning": (
            ["Good for learning", "Focus is possible", "Take notes"],
            ["Low energy for study", "Review what you know", "Organize materials"],
        ),
        "finance": (
            ["Excellent timing", "Energy supports stability", "Do your calculations"],
            ["Wait for Earth hour", "Prepare your analysis", "No hasty decisions"],
        ),
        "relationships": (
            ["Good time to connect", "Emotions are balanced", "Express your heart"],
            ["Neutral timing", "Be patient", "Listen more than speak"],
        ),
    },
    "fr": {
        "work": (
            ["Lancez des tâches importantes", "Prenez des décisions", "Contactez des clients"],
            ["Travail de routine uniquement", "Évitez les nouvelles initiatives", "Préparez pour plus tard"],
        ),
        "prayer": (
            ["Moment propice à la méditation", "Dhikr recommandé ci-dessous", "Réflexion tranquille"],
            ["Moment propice à la méditation", "Dhikr recommandé ci-dessous", "Réflexion tranquille"],
        ),
        "conversation": (
            ["Bon moment pour discuter", "L'énergie soutient la communication", "Soyez direct et honnête"],
            ["Attendez un meilleur moment", "Les émotions peuvent troubler", "Préparez vos points clés"],
        ),
        "learning": (
            ["Bon pour apprendre", "Concentration possible", "Prenez des notes"],
            ["Énergie faible pour étudier", "Révisez ce que vous connaissez", "Organisez vos matériaux"],
        ),
        "finance": (
            ["Excellent moment", "L'énergie soutient la stabilité", "Faites vos calculs"],
            ["Attendez un moment Terre", "Préparez votre analyse", "Pas de décisions hâtives"],
        ),
        "relationships": (
            ["Bon moment pour se connecter", "Les émotions sont équilibrées", "Exprimez votre cœur"],
            ["Moment neutre", "Soyez patient", "Écoutez plus que vous ne parlez"],
        ),
    },
}

REST_DAY = {
    "en": {
        "title": "Rest Day",
        "subtitle": "Today, cosmic harmony suggests slowing down",
        "body": (
            "Your {element} element finds little harmony with today's planetary energies. "
            "Rather than a difficult period, consider this a sacred invitation to rest."
        ),
    },
    "fr": {
        "title": "Jour de Repos",
        "subtitle": "Aujourd'hui, l'harmonie cosmique suggère de ralentir",
        "body": (
            "Votre élément {element} trouve peu d'harmonie avec les énergies planétaires d'aujourd'hui. "
            "Plutôt qu'une période difficile, considérez cela comme une invitation sacrée au repos."
        ),
    },
}
