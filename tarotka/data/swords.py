# -*- coding: utf-8 -*-
"""Swords (Meče): mind, truth, conflict."""

SWORDS = [
    {"id": "minor_swords_ace", "number": 1, "name": "Ace of Swords", "nameCzech": "Eso mečů",
     "suit": "Swords", "keywords": ["jasnost", "pravda", "průlom"],
     "meaningUpright": "Jasná myšlenka, která prořízne zmatek.",
     "meaningReversed": "Zmatek v hlavě nebo pravda použitá jako zbraň.",
     "imageName": "swords_01"},
    {"id": "minor_swords_2", "number": 2, "name": "Two of Swords", "nameCzech": "Dvojka mečů",
     "suit": "Swords", "keywords": ["patová situace", "váhání", "blokace"],
     "meaningUpright": "Odkládáš rozhodnutí a zavíráš oči před jednou stranou.",
     "meaningReversed": "Informace se vyjasňují a rozhodnutí už nejde odkládat.",
     "imageName": "swords_02"},
    {"id": "minor_swords_3", "number": 3, "name": "Three of Swords", "nameCzech": "Trojka mečů",
     "suit": "Swords", "keywords": ["bolest", "zklamání", "pravda"],
     "meaningUpright": "Bolest ze slov nebo zjištění, která je potřeba prožít.",
     "meaningReversed": "Rány se hojí, i když jizva ještě pálí.",
     "imageName": "swords_03"},
    {"id": "minor_swords_4", "number": 4, "name": "Four of Swords", "nameCzech": "Čtyřka mečů",
     "suit": "Swords", "keywords": ["odpočinek", "zotavení", "ticho"],
     "meaningUpright": "Potřebuješ pauzu a klid, aby ses mohla zotavit.",
     "meaningReversed": "Neklid a vyhoření z toho, že si odpočinek nedopřeješ.",
     "imageName": "swords_04"},
    {"id": "minor_swords_5", "number": 5, "name": "Five of Swords", "nameCzech": "Pětka mečů",
     "suit": "Swords", "keywords": ["konflikt", "ego", "prohra"],
     "meaningUpright": "Vítězství, které stojí víc, než kolik přináší.",
     "meaningReversed": "Chuť se usmířit nebo nechat spor odeznít.",
     "imageName": "swords_05"},
    {"id": "minor_swords_6", "number": 6, "name": "Six of Swords", "nameCzech": "Šestka mečů",
     "suit": "Swords", "keywords": ["přechod", "odchod", "úleva"],
     "meaningUpright": "Pomalu odplouváš od těžkých časů ke klidnějším vodám.",
     "meaningReversed": "Zavazadla z minulosti, která táhneš s sebou.",
     "imageName": "swords_06"},
    {"id": "minor_swords_7", "number": 7, "name": "Seven of Swords", "nameCzech": "Sedmička mečů",
     "suit": "Swords", "keywords": ["lest", "strategie", "tajnost"],
     "meaningUpright": "Něco se děje za zády; hraj chytře, ale poctivě.",
     "meaningReversed": "Přiznání, odhalení nebo návrat k upřímnosti.",
     "imageName": "swords_07"},
    {"id": "minor_swords_8", "number": 8, "name": "Eight of Swords", "nameCzech": "Osmička mečů",
     "suit": "Swords", "keywords": ["omezení", "strach", "bezmoc"],
     "meaningUpright": "Cítíš se uvězněná, ale pouta jsou hlavně v hlavě.",
     "meaningReversed": "Vidíš cestu ven a začínáš se vymotávat.",
     "imageName": "swords_08"},
    {"id": "minor_swords_9", "number": 9, "name": "Nine of Swords", "nameCzech": "Devítka mečů",
     "suit": "Swords", "keywords": ["úzkost", "obavy", "bezesné noci"],
     "meaningUpright": "Noční obavy, které vypadají větší, než ve skutečnosti jsou.",
     "meaningReversed": "Úzkost polevuje, když ji vyslovíš nahlas.",
     "imageName": "swords_09"},
    {"id": "minor_swords_10", "number": 10, "name": "Ten of Swords", "nameCzech": "Desítka mečů",
     "suit": "Swords", "keywords": ["konec", "dno", "úleva"],
     "meaningUpright": "Bolestivý konec, po kterém už může přijít jen úsvit.",
     "meaningReversed": "Zotavování a pomalé zvedání se ze dna.",
     "imageName": "swords_10"},
    {"id": "minor_swords_page", "number": 11, "name": "Page of Swords", "nameCzech": "Páže mečů",
     "suit": "Swords", "keywords": ["zvídavost", "bdělost", "otázky"],
     "meaningUpright": "Ostrý rozum a chuť všemu přijít na kloub.",
     "meaningReversed": "Klepy, ukvapené závěry nebo slova bez obsahu.",
     "imageName": "swords_11"},
    {"id": "minor_swords_knight", "number": 12, "name": "Knight of Swords", "nameCzech": "Rytíř mečů",
     "suit": "Swords", "keywords": ["rychlost", "ambice", "přímost"],
     "meaningUpright": "Rychlá akce a přímost, která nebere ohledy.",
     "meaningReversed": "Bezohlednost nebo spěch, který končí v cestě nikam.",
     "imageName": "swords_12"},
    {"id": "minor_swords_queen", "number": 13, "name": "Queen of Swords", "nameCzech": "Královna mečů",
     "suit": "Swords", "keywords": ["nezávislost", "upřímnost", "nadhled"],
     "meaningUpright": "Jasný úsudek a upřímnost, která nepotřebuje přikrášlovat.",
     "meaningReversed": "Chlad nebo ostrá slova vyvěrající z bolesti.",
     "imageName": "swords_13"},
    {"id": "minor_swords_king", "number": 14, "name": "King of Swords", "nameCzech": "Král mečů",
     "suit": "Swords", "keywords": ["autorita", "logika", "spravedlnost"],
     "meaningUpright": "Rozhodnutí postavené na logice a férovosti.",
     "meaningReversed": "Zneužití autority nebo rozum, který přehluší cit.",
     "imageName": "swords_14"},
]
