import pytest

from recetas_utils.recipes.classification import (
    ContentClassifier,
    Section,
    looks_like_ingredient,
    match_ingredient_rule,
    next_section,
)
from recetas_utils.recipes.config import HeuristicConfig


@pytest.mark.parametrize(
    "line, expected",
    [
        # Leading digit, bullet, dash or asterisk
        ("2 tazas de harina", True),
        ("• sal", True),
        ("- 1 cebolla", True),
        ("* pimienta negra molida al gusto, o un poco más si se desea.", True),
        # Number or fraction glyph followed by a unit
        ("Harina, 250 gramos", True),
        ("Leche ½ taza, tibia y sin grasa, de preferencia entera.", True),
        ("Ajo, 3 dientes machacados, o al gusto del cocinero aquí.", True),
        # Short line without a period
        ("Sal y pimienta", True),
        ("Aceite de oliva extra virgen", True),
        # Cooking verbs always win
        ("2 cucharadas de aceite para freír", False),
        ("Mezclar todo", False),
        ("BATIR las claras", False),
        # Long sentences without quantities
        ("Se deja reposar la masa durante una hora en un lugar tibio.", False),
        ("Pan.", False),
        ("", False),
        ("   ", False),
        ("1 " + "x" * 80, False),
    ],
)
def test_looks_like_ingredient(line, expected):
    """Test the ordered ingredient line heuristics."""
    assert looks_like_ingredient(line) is expected


def test_cooking_verb_matches_whole_words_only():
    # "unir" inside "reunir" is not a verb match
    assert looks_like_ingredient("Queso para reunir")
    assert not looks_like_ingredient("Unir con cuidado")


@pytest.mark.parametrize(
    "line, expected_rule",
    [
        ("Picar 2 cebollas", "cooking_verb"),
        ("3 huevos", "bullet"),
        ("Harina 200 gramos para la masa, tamizada con anticipación.", "measurement"),
        ("Sal", "short_fragment"),
    ],
)
def test_match_ingredient_rule_precedence(line, expected_rule):
    """Test that the first matching rule decides."""
    assert match_ingredient_rule(line).name == expected_rule


def test_match_ingredient_rule_none():
    assert match_ingredient_rule("Se deja reposar la masa durante una hora.") is None


def test_short_line_threshold_is_configurable():
    line = "Queso rallado fino de buena calidad"  # 35 characters
    assert looks_like_ingredient(line)
    assert not looks_like_ingredient(line, HeuristicConfig(short_line_length=20))


def test_next_section_is_one_way():
    """Test that the method section never reverts to ingredients."""
    assert next_section(Section.INGREDIENTS, True) is Section.INGREDIENTS
    assert next_section(Section.INGREDIENTS, False) is Section.METHOD
    assert next_section(Section.METHOD, True) is Section.METHOD
    assert next_section(Section.METHOD, False) is Section.METHOD


@pytest.fixture
def classifier():
    return ContentClassifier()


def test_classify_splits_ingredients_and_method(classifier):
    body = (
        "2 tazas de harina\n"
        "1 taza de azúcar\n"
        "\n"
        "Mezclar los ingredientes secos.\n"
        "Hornear a 180 grados.\n"
    )
    assert classifier.classify(body) == {
        "ingredientes": "2 tazas de harina\n1 taza de azúcar",
        "metodo": "Mezclar los ingredientes secos.\n\nHornear a 180 grados.",
    }


def test_method_lines_stay_method(classifier):
    """Test that ingredient-looking lines after the method starts stay method."""
    body = "3 huevos\n1 taza de leche\nBatir los huevos.\n2 minutos\nSal\n"
    ingredients, method = classifier.split_lines(body)
    assert ingredients == ["3 huevos", "1 taza de leche"]
    assert method == ["Batir los huevos.", "2 minutos", "Sal"]


def test_lines_are_trimmed_and_blanks_dropped(classifier):
    body = "  3 huevos  \n\n  1 taza de leche\n\n\n   Batir los huevos.   \n\n"
    ingredients, method = classifier.split_lines(body)
    assert ingredients == ["3 huevos", "1 taza de leche"]
    assert method == ["Batir los huevos."]


def test_body_starting_with_method_is_content(classifier):
    body = "Se cocina todo junto durante una hora a fuego lento.\n2 tazas de agua\n"
    ingredients, method = classifier.split_lines(body)
    assert ingredients == []
    assert len(method) == 2
    assert classifier.classify(body) == {"content": body.strip()}


def test_single_ingredient_is_content(classifier):
    body = "1 pollo\nHornear el pollo durante una hora.\n"
    assert classifier.classify(body) == {"content": body.strip()}


def test_ingredients_without_method_is_content(classifier):
    body = "\n2 tazas de harina\n1 taza de azúcar\n3 huevos\n"
    assert classifier.classify(body) == {"content": body.strip()}


def test_split_thresholds_are_configurable():
    body = "1 pollo\nHornear el pollo durante una hora.\n"
    classifier = ContentClassifier(HeuristicConfig(min_ingredient_lines=1))
    assert classifier.classify(body) == {
        "ingredientes": "1 pollo",
        "metodo": "Hornear el pollo durante una hora.",
    }
