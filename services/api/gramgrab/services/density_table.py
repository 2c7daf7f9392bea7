"""
Ingredient density table.

Grams per 1 US cup (236.588 ml) for common ingredients, with the ingredient
kind used to decide weight vs volume display:
  dry, powder, fat -> shown by weight
  wet              -> stays a volume
"""

# name -> (grams_per_cup, kind, aliases)
INGREDIENT_DENSITIES = {
    # Flours & starches
    "all-purpose flour": (125, "dry", ("flour", "ap flour", "plain flour", "white flour", "unbleached flour")),
    "bread flour": (127, "dry", ("strong flour", "high gluten flour")),
    "cake flour": (114, "dry", ("pastry flour", "soft flour")),
    "whole wheat flour": (128, "dry", ("wholemeal flour", "whole grain flour", "graham flour")),
    "self-rising flour": (125, "dry", ("self raising flour",)),
    "almond flour": (96, "dry", ("almond meal", "ground almonds", "blanched almond flour")),
    "coconut flour": (112, "dry", ()),
    "oat flour": (92, "dry", ("ground oats",)),
    "rye flour": (102, "dry", ("dark rye flour", "light rye flour")),
    "rice flour": (158, "dry", ("white rice flour",)),
    "chickpea flour": (92, "dry", ("gram flour", "besan", "garbanzo flour")),
    "semolina": (167, "dry", ("semolina flour", "durum semolina")),
    "cornmeal": (138, "dry", ("yellow cornmeal", "white cornmeal")),
    "cornstarch": (128, "powder", ("corn starch", "cornflour", "maize starch")),
    "tapioca flour": (120, "powder", ("tapioca starch", "cassava flour")),
    "potato starch": (150, "powder", ()),

    # Sugars & sweeteners
    "granulated sugar": (200, "dry", ("sugar", "white sugar", "caster sugar", "castor sugar", "table sugar")),
    "brown sugar": (220, "dry", ("light brown sugar", "dark brown sugar", "packed brown sugar")),
    "powdered sugar": (120, "powder", ("confectioners sugar", "icing sugar", "confectioner's sugar")),
    "turbinado sugar": (200, "dry", ("raw sugar", "demerara sugar")),
    "coconut sugar": (180, "dry", ("coconut palm sugar",)),
    "honey": (340, "wet", ("raw honey", "clover honey")),
    "maple syrup": (322, "wet", ("pure maple syrup",)),
    "molasses": (328, "wet", ("treacle", "blackstrap molasses")),
    "corn syrup": (328, "wet", ("light corn syrup", "dark corn syrup")),
    "agave": (336, "wet", ("agave nectar", "agave syrup")),

    # Dairy
    "butter": (227, "fat", ("unsalted butter", "salted butter", "softened butter", "melted butter")),
    "clarified butter": (220, "fat", ("ghee",)),
    "milk": (245, "wet", ("whole milk", "2% milk", "skim milk", "low fat milk")),
    "heavy cream": (238, "wet", ("whipping cream", "double cream", "heavy whipping cream")),
    "half and half": (242, "wet", ("half & half",)),
    "sour cream": (242, "wet", ("creme fraiche",)),
    "yogurt": (245, "wet", ("plain yogurt", "yoghurt")),
    "greek yogurt": (280, "wet", ("strained yogurt",)),
    "cream cheese": (232, "fat", ("softened cream cheese",)),
    "ricotta": (246, "wet", ("ricotta cheese",)),
    "buttermilk": (245, "wet", ("cultured buttermilk",)),
    "condensed milk": (306, "wet", ("sweetened condensed milk",)),
    "dry milk powder": (68, "powder", ("milk powder", "powdered milk", "nonfat dry milk")),
    "coconut milk": (230, "wet", ("canned coconut milk", "full fat coconut milk")),
    "almond milk": (240, "wet", ("unsweetened almond milk",)),
    "oat milk": (245, "wet", ()),

    # Oils & fats
    "vegetable oil": (218, "wet", ("oil", "canola oil", "sunflower oil", "neutral oil")),
    "olive oil": (216, "wet", ("extra virgin olive oil", "evoo", "light olive oil")),
    "coconut oil": (218, "fat", ("virgin coconut oil", "refined coconut oil")),
    "sesame oil": (218, "wet", ("toasted sesame oil",)),
    "shortening": (205, "fat", ("vegetable shortening", "crisco")),
    "lard": (205, "fat", ("pork fat",)),
    "margarine": (227, "fat", ()),

    # Grains & pasta
    "rice": (185, "dry", ("white rice", "basmati rice", "jasmine rice", "long grain rice")),
    "brown rice": (190, "dry", ("whole grain rice",)),
    "arborio rice": (200, "dry", ("risotto rice", "carnaroli")),
    "oats": (90, "dry", ("rolled oats", "old fashioned oats")),
    "quick oats": (80, "dry", ("instant oats",)),
    "steel cut oats": (160, "dry", ("irish oats",)),
    "quinoa": (170, "dry", ("white quinoa", "red quinoa")),
    "couscous": (173, "dry", ("israeli couscous", "pearl couscous")),
    "bulgur": (140, "dry", ("bulgur wheat", "cracked wheat")),
    "barley": (184, "dry", ("pearl barley",)),
    "breadcrumbs": (108, "dry", ("bread crumbs", "dry breadcrumbs")),
    "panko": (60, "dry", ("panko breadcrumbs",)),
    "pasta": (100, "dry", ("dry pasta", "macaroni", "penne", "fusilli")),
    "orzo": (170, "dry", ("risoni",)),
    "polenta": (163, "dry", ("coarse cornmeal",)),

    # Nuts, seeds & butters
    "almonds": (143, "dry", ("whole almonds", "raw almonds")),
    "sliced almonds": (92, "dry", ("flaked almonds",)),
    "walnuts": (120, "dry", ("walnut pieces", "walnut halves")),
    "pecans": (109, "dry", ("pecan pieces", "pecan halves")),
    "cashews": (137, "dry", ("raw cashews",)),
    "peanuts": (146, "dry", ("roasted peanuts",)),
    "pine nuts": (135, "dry", ("pignoli",)),
    "sunflower seeds": (140, "dry", ()),
    "pumpkin seeds": (129, "dry", ("pepitas",)),
    "chia seeds": (170, "dry", ()),
    "sesame seeds": (144, "dry", ()),
    "peanut butter": (258, "fat", ("smooth peanut butter", "chunky peanut butter", "creamy peanut butter")),
    "almond butter": (250, "fat", ()),
    "tahini": (238, "fat", ("sesame paste",)),

    # Chocolate
    "cocoa powder": (85, "powder", ("cocoa", "unsweetened cocoa", "dutch process cocoa")),
    "chocolate chips": (170, "dry", ("chocolate morsels", "semi-sweet chips", "dark chocolate chips")),
    "cacao nibs": (120, "dry", ("cocoa nibs",)),

    # Dried fruit
    "raisins": (145, "dry", ("golden raisins", "sultanas")),
    "dried cranberries": (120, "dry", ("craisins",)),
    "dates": (147, "dry", ("chopped dates", "medjool dates", "pitted dates")),
    "dried coconut": (85, "dry", ("shredded coconut", "desiccated coconut", "coconut flakes")),

    # Fresh produce
    "blueberries": (148, "wet", ("fresh blueberries",)),
    "strawberries": (152, "wet", ("sliced strawberries",)),
    "mashed banana": (225, "wet", ("banana", "ripe banana")),
    "pumpkin puree": (245, "wet", ("canned pumpkin",)),
    "spinach": (30, "dry", ("fresh spinach", "baby spinach")),
    "kale": (67, "dry", ("chopped kale",)),
    "cabbage": (89, "dry", ("shredded cabbage",)),
    "broccoli": (91, "dry", ("broccoli florets",)),
    "peas": (145, "wet", ("green peas",)),
    "corn": (164, "wet", ("corn kernels", "sweet corn")),
    "carrots": (128, "dry", ("shredded carrots", "chopped carrots", "diced carrots")),
    "celery": (101, "dry", ("diced celery", "chopped celery")),
    "onion": (160, "dry", ("diced onion", "chopped onion", "minced onion")),
    "garlic": (136, "dry", ("minced garlic", "chopped garlic")),
    "bell pepper": (149, "dry", ("diced bell pepper", "capsicum")),
    "mushrooms": (70, "dry", ("sliced mushrooms", "cremini")),
    "tomatoes": (180, "wet", ("diced tomatoes", "chopped tomatoes")),

    # Liquids
    "water": (237, "wet", ()),
    "orange juice": (248, "wet", ("fresh orange juice",)),
    "lemon juice": (244, "wet", ("fresh lemon juice",)),
    "lime juice": (244, "wet", ("fresh lime juice",)),
    "broth": (240, "wet", ("stock", "chicken broth", "beef broth", "vegetable broth")),
    "wine": (235, "wet", ("white wine", "red wine")),
    "coffee": (237, "wet", ("brewed coffee", "espresso")),
    "soy sauce": (255, "wet", ("shoyu", "tamari")),
    "vinegar": (238, "wet", ("white vinegar", "distilled vinegar")),
    "apple cider vinegar": (239, "wet", ()),

    # Leavening, salt & spices
    "baking powder": (230, "powder", ()),
    "baking soda": (220, "powder", ("bicarbonate of soda",)),
    "yeast": (150, "dry", ("active dry yeast", "instant yeast")),
    "salt": (288, "dry", ("table salt",)),
    "kosher salt": (240, "dry", ("coarse salt",)),
    "sea salt": (227, "dry", ()),
    "black pepper": (116, "dry", ("ground black pepper",)),
    "cinnamon": (125, "powder", ("ground cinnamon",)),
    "cumin": (120, "powder", ("ground cumin",)),
    "paprika": (109, "powder", ("sweet paprika", "smoked paprika")),
    "vanilla extract": (208, "wet", ("vanilla", "pure vanilla extract")),

    # Cheese
    "shredded cheese": (113, "dry", ("grated cheese",)),
    "shredded cheddar": (113, "dry", ("cheddar", "grated cheddar")),
    "shredded mozzarella": (113, "dry", ("mozzarella", "grated mozzarella")),
    "shredded parmesan": (100, "dry", ("parmesan", "grated parmesan", "parmigiano reggiano")),
    "crumbled feta": (150, "dry", ("feta", "feta cheese")),

    # Beans & legumes
    "black beans": (172, "dry", ("canned black beans",)),
    "chickpeas": (164, "dry", ("garbanzo beans",)),
    "lentils": (192, "dry", ("brown lentils", "green lentils")),
    "tofu": (252, "wet", ("firm tofu", "silken tofu")),

    # Condiments
    "mayonnaise": (220, "wet", ("mayo",)),
    "ketchup": (274, "wet", ("catsup",)),
    "dijon mustard": (250, "wet", ("dijon",)),
    "tomato paste": (262, "wet", ()),
    "tomato sauce": (245, "wet", ("marinara sauce", "pasta sauce")),
    "miso paste": (275, "wet", ("miso", "white miso")),

    # Meat
    "ground beef": (226, "wet", ("minced beef",)),
    "shredded chicken": (140, "dry", ("pulled chicken",)),
}

# Nothing-matched fallback: these stay as volumes
WET_KEYWORDS = (
    "juice", "milk", "cream", "water", "broth", "stock", "sauce",
    "oil", "syrup", "wine", "beer", "coffee", "tea",
)

# Category fallbacks: (keyword, excluded words, table entry)
CATEGORY_FALLBACKS = (
    ("flour", (), "all-purpose flour"),
    ("sugar", ("brown",), "granulated sugar"),
    ("oil", (), "vegetable oil"),
    ("milk", ("coconut",), "milk"),
    ("cream", ("ice",), "heavy cream"),
    ("butter", ("peanut", "almond"), "butter"),
    ("cheese", (), "shredded cheese"),
)
