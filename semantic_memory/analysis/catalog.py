"""Static reference data: topic clusters, intent patterns, context clues.

Keyword lists are matched as lower-case substrings, so stems like
"вектор" also match inflected forms.
"""

from semantic_memory.analysis.types import IntentPattern, IntentType, SemanticCluster

# Declaration order breaks classification ties.
CLUSTERS: tuple[SemanticCluster, ...] = (
    SemanticCluster(
        name="branding",
        core=("логотип", "бренд", "фирменный стиль", "айдентика"),
        related=("визитка", "фирменные цвета", "шрифт", "слоган", "эмблема"),
        implications=("масштабируемость", "узнаваемость", "профессионализм"),
        typical_next_steps=(
            "векторизация", "цветовые варианты", "монохромная версия", "применение на носителях",
        ),
    ),
    SemanticCluster(
        name="image_creation",
        core=("изображение", "картинка", "рисунок", "панда", "кибер", "персонаж", "создай", "нарисуй"),
        related=("фото", "иллюстрация", "арт", "дизайн", "животное", "робот", "техно", "футуристический"),
        implications=("визуализация", "творчество", "стилизация"),
        typical_next_steps=("выбор стиля", "детализация", "цветокоррекция", "оптимизация"),
    ),
    SemanticCluster(
        name="apparel_design",
        core=("принт", "футболка", "одежда", "тишарт"),
        related=("печать", "ткань", "краски", "размер", "позиционирование"),
        implications=("читаемость на расстоянии", "долговечность печати", "простота форм"),
        typical_next_steps=("оптимизация для печати", "адаптация размеров", "цветокоррекция"),
    ),
    SemanticCluster(
        name="embroidery_design",
        core=("вышивка", "машинная вышивка", "dst", "pes", "jef"),
        related=("нитки", "плотность", "стежки", "детализация"),
        implications=("ограничение мелких деталей", "максимум 15 цветов", "толщина линий"),
        typical_next_steps=("упрощение деталей", "конвертация в формат вышивки", "подбор ниток"),
    ),
    SemanticCluster(
        name="character_design",
        core=("персонаж", "герой", "character", "mascot"),
        related=("эмоции", "позы", "выражения", "стиль", "пропорции"),
        implications=("узнаваемость", "эмоциональная связь", "масштабируемость использования"),
        typical_next_steps=("вариации эмоций", "разные позы", "стилизация"),
    ),
    SemanticCluster(
        name="signage_design",
        core=("вывеска", "баннер", "указатель", "реклама"),
        related=("читаемость", "контрастность", "размер шрифта", "расстояние просмотра"),
        implications=("видимость издалека", "погодная стойкость", "простота восприятия"),
        typical_next_steps=("увеличение контрастности", "упрощение деталей", "векторизация"),
    ),
)

CORE_KEYWORD_WEIGHT = 10
RELATED_KEYWORD_WEIGHT = 5
CONFIDENCE_MULTIPLIER = 8
MAX_CLUSTER_CONFIDENCE = 100

INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    IntentPattern(
        name="continuation",
        type=IntentType.MODIFY_EXISTING,
        patterns=("теперь", "а теперь", "сделай его", "измени его", "добавь к нему", "и еще"),
        confidence=0.9,
    ),
    IntentPattern(
        name="new_project",
        type=IntentType.CREATE_NEW,
        patterns=("создай новый", "другой", "еще один", "давай сделаем", "хочу создать", "создай"),
        confidence=0.85,
    ),
    IntentPattern(
        name="improvement",
        type=IntentType.ENHANCE_EXISTING,
        patterns=("улучши", "сделай лучше", "доработай", "оптимизируй", "исправь"),
        confidence=0.8,
    ),
    IntentPattern(
        name="variation",
        type=IntentType.CREATE_VARIATION,
        patterns=("вариант", "версия", "альтернатива", "по-другому", "в другом стиле"),
        confidence=0.75,
    ),
    IntentPattern(
        name="format_conversion",
        type=IntentType.FORMAT_CONVERSION,
        patterns=("векторизуй", "в svg", "для печати", "для вышивки", "конвертируй"),
        confidence=0.95,
    ),
)

# Concepts that may share one project. Holds both cluster names and the
# short concept words older projects were stored under.
RELATED_CONCEPT_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"logo", "логотип", "branding"}),
    frozenset({"print", "принт", "apparel_design"}),
    frozenset({"character", "персонаж", "character_design"}),
    frozenset({"embroidery", "вышивка", "embroidery_design"}),
)

BUSINESS_TYPES = {
    "кофейня": {
        "typical_colors": ["коричневый", "бежевый", "темно-зеленый", "кремовый"],
        "typical_elements": ["зерна кофе", "чашка", "пар", "листья"],
        "style_preferences": ["уютный", "теплый", "натуральный"],
    },
    "пиццерия": {
        "typical_colors": ["красный", "зеленый", "белый", "желтый"],
        "typical_elements": ["пицца", "итальянский флаг", "повар", "печь"],
        "style_preferences": ["итальянский", "традиционный", "аппетитный"],
    },
    "магазин": {
        "typical_colors": ["синий", "красный", "зеленый", "оранжевый"],
        "typical_elements": ["корзина", "сумка", "тележка", "здание"],
        "style_preferences": ["доступный", "дружелюбный", "современный"],
    },
}

# Stems, so "кофейни" and "пиццерию" still match
BUSINESS_STEMS = {
    "кофейн": "кофейня",
    "пиццери": "пиццерия",
    "магазин": "магазин",
}

USAGE_CONTEXTS = {
    "печать": {"medium": "print", "requirements": ["высокое разрешение", "CMYK цвета"]},
    "веб": {"medium": "digital", "requirements": ["RGB цвета", "оптимизация размера"]},
    "вывеска": {"medium": "large_format", "requirements": ["высокий контраст", "простые формы"]},
    "вышивка": {"medium": "embroidery", "requirements": ["упрощение деталей", "ограничение цветов"]},
}

LOGICAL_CHAINS = {
    ("логотип", "печать"): ["векторизация", "цветовая оптимизация", "масштабирование"],
    ("персонаж", "вышивка"): ["упрощение деталей", "сокращение цветов", "увеличение толщины линий"],
    ("принт", "футболка"): ["адаптация размера", "центрирование", "учет ткани"],
    ("эмблема", "вывеска"): ["увеличение контрастности", "упрощение мелких деталей", "читаемость"],
}


def get_cluster(name: str):
    """Look up a catalog cluster by name, or None."""
    for cluster in CLUSTERS:
        if cluster.name == name:
            return cluster
    return None


def are_related_concepts(first: str, second: str) -> bool:
    """True when both concepts are equal or share a related-concept group."""
    if not first or not second:
        return False
    if first == second:
        return True
    return any(first in group and second in group for group in RELATED_CONCEPT_GROUPS)
