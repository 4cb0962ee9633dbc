# Menu the in-memory provider starts with, and that `seed_menu` writes into an
# empty database. Keys follow the snake_case domain attributes of MenuItem.
DEFAULT_MENU_ITEMS = [
    {
        "name": "Seblak Original",
        "description": "Kerupuk basah dengan kuah kencur pedas, telur, dan sayuran.",
        "price": 15000,
        "category": "seblak",
        "image": "/images/seblak-original.jpg",
        "spicy_level": "level 1-5",
        "stock_quantity": 50,
        "low_stock_threshold": 10,
        "unit": "porsi",
        "is_available": 1,
        "rating": 48,
        "review_count": 124,
    },
    {
        "name": "Seblak Ceker",
        "description": "Seblak dengan ceker ayam empuk dan bumbu kencur khas.",
        "price": 18000,
        "category": "seblak",
        "image": "/images/seblak-ceker.jpg",
        "spicy_level": "level 1-5",
        "stock_quantity": 30,
        "low_stock_threshold": 8,
        "unit": "porsi",
        "is_available": 1,
        "rating": 47,
        "review_count": 89,
    },
    {
        "name": "Seblak Seafood",
        "description": "Seblak dengan udang, cumi, dan bakso ikan.",
        "price": 25000,
        "category": "seblak",
        "image": "/images/seblak-seafood.jpg",
        "spicy_level": "level 1-5",
        "stock_quantity": 20,
        "low_stock_threshold": 5,
        "unit": "porsi",
        "is_available": 1,
        "rating": 49,
        "review_count": 67,
    },
    {
        "name": "Seblak Komplit",
        "description": "Semua topping: ceker, sosis, bakso, makaroni, dan telur.",
        "price": 28000,
        "category": "seblak",
        "image": "/images/seblak-komplit.jpg",
        "spicy_level": "level 1-5",
        "stock_quantity": 15,
        "low_stock_threshold": 5,
        "unit": "porsi",
        "is_available": 1,
        "rating": 48,
        "review_count": 52,
    },
    {
        "name": "Prasmanan Ayam Geprek",
        "description": "Nasi, ayam geprek sambal bawang, lalapan, dan tempe.",
        "price": 20000,
        "category": "prasmanan",
        "image": "/images/prasmanan-geprek.jpg",
        "spicy_level": None,
        "stock_quantity": 25,
        "low_stock_threshold": 5,
        "unit": "porsi",
        "is_available": 1,
        "rating": 46,
        "review_count": 41,
    },
    {
        "name": "Mie Goreng Jawa",
        "description": "Mie goreng kecap dengan sayuran dan telur.",
        "price": 16000,
        "category": "makanan",
        "image": "/images/mie-goreng.jpg",
        "spicy_level": None,
        "stock_quantity": 20,
        "low_stock_threshold": 5,
        "unit": "porsi",
        "is_available": 1,
        "rating": 45,
        "review_count": 33,
    },
    {
        "name": "Es Teh Manis",
        "description": "Teh manis dingin yang menyegarkan.",
        "price": 5000,
        "category": "minuman",
        "image": "/images/es-teh.jpg",
        "spicy_level": None,
        "stock_quantity": 100,
        "low_stock_threshold": 20,
        "unit": "gelas",
        "is_available": 1,
        "rating": 47,
        "review_count": 210,
    },
    {
        "name": "Es Jeruk",
        "description": "Perasan jeruk segar dengan es batu.",
        "price": 7000,
        "category": "minuman",
        "image": "/images/es-jeruk.jpg",
        "spicy_level": None,
        "stock_quantity": 60,
        "low_stock_threshold": 15,
        "unit": "gelas",
        "is_available": 1,
        "rating": 46,
        "review_count": 98,
    },
    {
        "name": "Cireng Rujak",
        "description": "Cireng renyah dengan bumbu rujak pedas manis.",
        "price": 10000,
        "category": "cemilan",
        "image": "/images/cireng.jpg",
        "spicy_level": "sedang",
        "stock_quantity": 40,
        "low_stock_threshold": 10,
        "unit": "pcs",
        "is_available": 1,
        "rating": 45,
        "review_count": 57,
    },
    {
        "name": "Basreng Pedas",
        "description": "Bakso goreng iris dengan bubuk cabai dan daun jeruk.",
        "price": 12000,
        "category": "cemilan",
        "image": "/images/basreng.jpg",
        "spicy_level": "pedas",
        "stock_quantity": 35,
        "low_stock_threshold": 10,
        "unit": "pcs",
        "is_available": 1,
        "rating": 46,
        "review_count": 44,
    },
]
