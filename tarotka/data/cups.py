# -*- coding: utf-8 -*-
"""Cups (Poháry): emotions, relationships, intuition."""

CUPS = [
    {"id": "minor_cups_ace", "number": 1, "name": "Ace of Cups", "czechName": "Eso pohárů",
     "keywords": ["láska", "nový cit", "otevřenost"],
     "meaningUpright": "Nový citový začátek a srdce, které se otevírá.",
     "meaningReversed": "Zadržované emoce nebo láska, kterou si sama nedovolíš.",
     "imageName": "cups_01"},
    {"id": "minor_cups_2", "number": 2, "name": "Two of Cups", "czechName": "Dvojka pohárů",
     "keywords": ["partnerství", "souznění", "přitažlivost"],
     "meaningUpright": "Vzájemné porozumění a spojení dvou lidí na stejné vlně.",
     "meaningReversed": "Nerovnováha ve vztahu nebo odcizení, které se vkrádá potichu.",
     "imageName": "cups_02"},
    {"id": "minor_cups_3", "number": 3, "name": "Three of Cups", "czechName": "Trojka pohárů",
     "keywords": ["přátelství", "oslava", "komunita"],
     "meaningUpright": "Radost sdílená s přáteli a pocit sounáležitosti.",
     "meaningReversed": "Přetížení společností nebo drby, které kazí atmosféru.",
     "imageName": "cups_03"},
    {"id": "minor_cups_4", "number": 4, "name": "Four of Cups", "czechName": "Čtyřka pohárů",
     "keywords": ["apatie", "nuda", "přehlížení"],
     "meaningUpright": "Nespokojenost a nezájem, kvůli kterým přehlížíš nabízené možnosti.",
     "meaningReversed": "Probouzíš se z letargie a znovu vidíš, co máš před sebou.",
     "imageName": "cups_04"},
    {"id": "minor_cups_5", "number": 5, "name": "Five of Cups", "czechName": "Pětka pohárů",
     "keywords": ["smutek", "ztráta", "lítost"],
     "meaningUpright": "Smutek nad tím, co se rozlilo, zakrývá to, co zůstalo.",
     "meaningReversed": "Pomalé smíření a návrat k tomu, co ještě stojí.",
     "imageName": "cups_05"},
    {"id": "minor_cups_6", "number": 6, "name": "Six of Cups", "czechName": "Šestka pohárů",
     "keywords": ["nostalgie", "vzpomínky", "nevinnost"],
     "meaningUpright": "Vzpomínky a jemnost, které ti připomínají, odkud jdeš.",
     "imageName": "cups_06"},
    {"id": "minor_cups_7", "number": 7, "name": "Seven of Cups", "czechName": "Sedmička pohárů",
     "keywords": ["možnosti", "iluze", "snění"],
     "meaningUpright": "Spousta lákavých možností, ale ne všechny jsou skutečné.",
     "meaningReversed": "Rozhodnutí se vyjasňuje a fantazie ustupuje realitě.",
     "imageName": "cups_07"},
    {"id": "minor_cups_8", "number": 8, "name": "Eight of Cups", "czechName": "Osmička pohárů",
     "keywords": ["odchod", "hledání", "zklamání"],
     "meaningUpright": "Odcházíš od něčeho, co už tě nenaplňuje, i když to bolí.",
     "meaningReversed": "Strach odejít nebo přešlapování na místě.",
     "imageName": "cups_08"},
    {"id": "minor_cups_9", "number": 9, "name": "Nine of Cups", "czechName": "Devítka pohárů",
     "keywords": ["spokojenost", "přání", "požitek"],
     "meaningUpright": "Splněné přání a spokojenost, kterou si můžeš užít.",
     "imageName": "cups_09"},
    {"id": "minor_cups_10", "number": 10, "name": "Ten of Cups", "czechName": "Desítka pohárů",
     "keywords": ["harmonie", "rodina", "naplnění"],
     "meaningUpright": "Citové naplnění a domov, kde je ti dobře.",
     "meaningReversed": "Ideál rodinné pohody naráží na každodenní realitu.",
     "imageName": "cups_10"},
    {"id": "minor_cups_page", "number": 11, "name": "Page of Cups", "czechName": "Páže pohárů",
     "keywords": ["citlivost", "zpráva", "hravost"],
     "meaningUpright": "Něžná zpráva nebo nečekaný citový impuls.",
     "meaningReversed": "Citová nezralost nebo přecitlivělost na maličkosti.",
     "imageName": "cups_11"},
    {"id": "minor_cups_knight", "number": 12, "name": "Knight of Cups", "czechName": "Rytíř pohárů",
     "keywords": ["romantika", "nabídka", "idealismus"],
     "meaningUpright": "Romantické gesto a nabídka, která přichází od srdce.",
     "meaningReversed": "Sliby, které zní krásně, ale chybí jim činy.",
     "imageName": "cups_12"},
    {"id": "minor_cups_queen", "number": 13, "name": "Queen of Cups", "czechName": "Královna pohárů",
     "keywords": ["empatie", "intuice", "péče"],
     "meaningUpright": "Hluboká empatie a citová moudrost, která druhé uklidňuje.",
     "meaningReversed": "Přebíráš emoce ostatních a ztrácíš ty svoje.",
     "imageName": "cups_13"},
    {"id": "minor_cups_king", "number": 14, "name": "King of Cups", "czechName": "Král pohárů",
     "keywords": ["vyrovnanost", "diplomacie", "klid"],
     "meaningUpright": "Citová zralost a klid i ve chvílích, kdy se vlny zvedají.",
     "meaningReversed": "Potlačené emoce nebo nálady, které ovlivňují okolí.",
     "imageName": "cups_14"},
]
