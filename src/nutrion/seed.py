"""Built-in food list used to populate an empty store.

Values are per 100 g: (name, glycemic index, carbohydrates, kcal[, density g/ml]).
"""

from __future__ import annotations

from nutrion.models.catalog import CatalogRecord

_SEED_ROWS: list[tuple] = [
    # Breads and cereals
    ("Pan blanco", 75, 49, 265),
    ("Pan integral", 65, 41, 247),
    ("Pan centeno", 50, 41, 259),
    ("Tostada", 70, 50, 480),
    ("Bagel", 72, 56, 300),
    ("Pan pita", 57, 56, 275),
    # Rice and pasta
    ("Arroz blanco cocido", 73, 28, 130),
    ("Arroz integral cocido", 50, 23, 111),
    ("Arroz basmati", 58, 25, 120),
    ("Pasta cocida", 51, 25, 131),
    ("Pasta integral", 42, 25, 124),
    ("Quinoa cocida", 53, 21, 120),
    ("Cuscus", 65, 23, 112),
    ("Pizza", 80, 26, 266),
    # Potatoes
    ("Patata cocida", 78, 17, 87),
    ("Patata asada", 85, 20, 95),
    ("Pure patatas", 87, 12, 88),
    ("Patatas fritas", 75, 49, 536),
    ("Tortilla de patatas", 60, 12, 150),
    # Biscuits and breakfast cereals
    ("Galletas", 75, 65, 450),
    ("Muesli", 50, 64, 450),
    ("Avena copos", 55, 66, 389),
    ("Avena instantanea", 79, 66, 380),
    ("Harina trigo", 85, 76, 364),
    ("Cornflakes", 81, 84, 357),
    # Sweets and sugars
    ("Miel", 58, 82, 304),
    ("Azúcar blanca", 65, 100, 387),
    ("Sirope agave", 20, 76, 310),
    ("Chocolate negro", 23, 46, 598),
    ("Chocolate con leche", 45, 52, 535),
    ("Helado", 61, 23, 207),
    ("Magdalena", 70, 55, 450),
    ("Croissant", 67, 45, 406),
    ("Donut", 76, 50, 452),
    ("Arroz con leche", 70, 20, 150),
    # Legumes
    ("Lentejas cocidas", 32, 20, 116),
    ("Garbanzos cocidos", 28, 27, 164),
    ("Frijoles negros", 30, 23, 132),
    ("Alubias blancas", 31, 24, 140),
    ("Edamame", 18, 8.9, 121),
    ("Tofu", 15, 1.9, 76),
    ("Hummus", 6, 14.3, 166),
    ("Falafel", 43, 30, 333),
    # Meat and fish
    ("Pollo pechuga", 0, 0, 165),
    ("Ternera", 0, 0, 250),
    ("Cerdo", 0, 0, 290),
    ("Salmón", 0, 0, 208),
    ("Atún", 0, 0, 132),
    # Dairy and eggs
    ("Huevos", 0, 1.1, 155),
    ("Queso fresco", 0, 1.3, 98),
    ("Queso curado", 0, 1.3, 402),
    ("Yogur natural", 36, 4.7, 61),
    ("Yogur griego", 35, 3.6, 120),
    ("Leche entera", 41, 5, 61, 1.03),
    ("Leche desnatada", 32, 5, 35, 1.03),
    ("Leche soja", 30, 3, 54, 1.03),
    ("Leche almendra", 30, 0.5, 15, 1.02),
    ("Kéfir", 33, 4, 59),
    # Fruit
    ("Aguacate", 15, 8.5, 160),
    ("Manzana", 36, 14, 52),
    ("Pera", 38, 15, 57),
    ("Plátano", 51, 23, 96),
    ("Fresas", 40, 8, 33),
    ("Uvas", 46, 17, 69),
    ("Naranja", 43, 8.3, 47),
    ("Kiwi", 52, 15, 61),
    ("Mango", 51, 15, 60),
    ("Piña", 59, 13, 50),
    ("Melón", 65, 8, 34),
    ("Sandía", 76, 8, 30),
    # Vegetables
    ("Tomate", 30, 3.9, 18),
    ("Zanahoria", 35, 10, 41),
    ("Cebolla", 10, 9, 40),
    ("Pimiento", 15, 6, 31),
    ("Lechuga", 15, 2.9, 15),
    ("Espinacas", 15, 1.1, 23),
    ("Brócoli", 10, 7, 34),
    ("Champiñones", 10, 3.3, 22),
    ("Calabacín", 15, 3, 17),
    ("Maíz dulce", 52, 19, 86),
    ("Guisantes", 51, 14, 81),
    # Nuts and seeds
    ("Semillas chía", 1, 42, 486),
    ("Almendras", 10, 22, 579),
    ("Nueces", 15, 14, 654),
    # Fats and condiments
    ("Mantequilla", 0, 0.1, 717),
    ("Aceite oliva", 0, 0, 884, 0.91),
    ("Ketchup", 55, 22, 112),
    ("Mermelada", 55, 65, 250),
    # Drinks
    ("Zumo manzana", 40, 11, 46, 1.04),
    ("Refresco cola", 63, 10.6, 42, 1.04),
    ("Vino tinto", 50, 2.6, 85, 0.99),
    ("Café", 0, 0, 1, 1.0),
    ("Gazpacho", 25, 6, 48, 1.02),
    # Prepared dishes
    ("Paella", 65, 30, 280),
    ("Pure manzana", 70, 18, 68),
    ("Lasaña", 66, 28, 300),
    ("Sushi", 55, 28, 200),
    ("Ramen", 70, 40, 430),
    ("Croquetas", 70, 25, 250),
]


def _to_record(row: tuple) -> CatalogRecord:
    name, gi, carbs, kcal, *rest = row
    return CatalogRecord(
        name=name,
        glycemic_index=gi,
        carbs_per_100=carbs,
        kcal_per_100=kcal,
        density_g_per_ml=rest[0] if rest else None,
    )


SEED_FOODS: tuple[CatalogRecord, ...] = tuple(_to_record(row) for row in _SEED_ROWS)
