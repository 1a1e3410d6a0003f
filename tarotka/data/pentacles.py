# -*- coding: utf-8 -*-
"""Pentacles (Pentakly): money, body, work, material world."""

PENTACLES = [
    {"id": "minor_pentacles_ace", "number": 1, "name": "Ace of Pentacles", "nameCzech": "Eso pentaklů",
     "suit": "Pentacles", "keywords": ["příležitost", "prosperita", "základ"],
     "meaningUpright": "Konkrétní příležitost, která může vyrůst v něco stabilního.",
     "meaningReversed": "Promarněná šance nebo plán bez pevných základů.",
     "imageName": "pentacles_01"},
    {"id": "minor_pentacles_2", "number": 2, "name": "Two of Pentacles", "nameCzech": "Dvojka pentaklů",
     "suit": "Pentacles", "keywords": ["žonglování", "priority", "pružnost"],
     "meaningUpright": "Balancuješ víc věcí najednou a zatím to zvládáš.",
     "meaningReversed": "Příliš mnoho míčků ve vzduchu; něco spadne.",
     "imageName": "pentacles_02"},
    {"id": "minor_pentacles_3", "number": 3, "name": "Three of Pentacles", "nameCzech": "Trojka pentaklů",
     "suit": "Pentacles", "keywords": ["spolupráce", "řemeslo", "uznání"],
     "meaningUpright": "Týmová práce a dovednost, které si ostatní všímají.",
     "meaningReversed": "Nesoulad v týmu nebo práce odvedená napůl.",
     "imageName": "pentacles_03"},
    {"id": "minor_pentacles_4", "number": 4, "name": "Four of Pentacles", "nameCzech": "Čtyřka pentaklů",
     "suit": "Pentacles", "keywords": ["jistota", "kontrola", "lpění"],
     "meaningUpright": "Držíš si své jistoty pevně, možná až moc.",
     "meaningReversed": "Uvolňuješ sevření, nebo naopak utrácíš bez rozmyslu.",
     "imageName": "pentacles_04"},
    {"id": "minor_pentacles_5", "number": 5, "name": "Five of Pentacles", "nameCzech": "Pětka pentaklů",
     "suit": "Pentacles", "keywords": ["nedostatek", "vyloučení", "nouze"],
     "meaningUpright": "Pocit nedostatku a osamění, i když pomoc může být blízko.",
     "meaningReversed": "Nejtěžší chvíle pomíjí a objevuje se podpora.",
     "imageName": "pentacles_05"},
    {"id": "minor_pentacles_6", "number": 6, "name": "Six of Pentacles", "nameCzech": "Šestka pentaklů",
     "suit": "Pentacles", "keywords": ["štědrost", "sdílení", "rovnováha"],
     "meaningUpright": "Dávání a přijímání, které je v rovnováze.",
     "meaningReversed": "Pomoc se závazky nebo nerovný vztah dávání a braní.",
     "imageName": "pentacles_06"},
    {"id": "minor_pentacles_7", "number": 7, "name": "Seven of Pentacles", "nameCzech": "Sedmička pentaklů",
     "suit": "Pentacles", "keywords": ["trpělivost", "investice", "hodnocení"],
     "meaningUpright": "Úroda ještě dozrává; vyplatí se vytrvat.",
     "meaningReversed": "Netrpělivost nebo úsilí vložené do špatného pole.",
     "imageName": "pentacles_07"},
    {"id": "minor_pentacles_8", "number": 8, "name": "Eight of Pentacles", "nameCzech": "Osmička pentaklů",
     "suit": "Pentacles", "keywords": ["píle", "zdokonalování", "učení"],
     "meaningUpright": "Poctivá práce a postupné zlepšování v tom, co děláš.",
     "meaningReversed": "Perfekcionismus nebo rutina bez radosti.",
     "imageName": "pentacles_08"},
    {"id": "minor_pentacles_9", "number": 9, "name": "Nine of Pentacles", "nameCzech": "Devítka pentaklů",
     "suit": "Pentacles", "keywords": ["nezávislost", "pohodlí", "sebehodnota"],
     "meaningUpright": "Užíváš si plody vlastní práce a nezávislosti.",
     "meaningReversed": "Závislost na druhých nebo pocit, že si úspěch nezasloužíš.",
     "imageName": "pentacles_09"},
    {"id": "minor_pentacles_10", "number": 10, "name": "Ten of Pentacles", "nameCzech": "Desítka pentaklů",
     "suit": "Pentacles", "keywords": ["dědictví", "stabilita", "rodina"],
     "meaningUpright": "Dlouhodobá stabilita a hodnoty předávané dál.",
     "meaningReversed": "Rodinné napětí kolem peněz nebo ztráta jistoty.",
     "imageName": "pentacles_10"},
    {"id": "minor_pentacles_page", "number": 11, "name": "Page of Pentacles", "nameCzech": "Páže pentaklů",
     "suit": "Pentacles", "keywords": ["studium", "plán", "zvídavost"],
     "meaningUpright": "Začínáš se učit něco praktického a jdeš na to pečlivě.",
     "meaningReversed": "Plány bez akce nebo ztráta motivace.",
     "imageName": "pentacles_11"},
    {"id": "minor_pentacles_knight", "number": 12, "name": "Knight of Pentacles", "nameCzech": "Rytíř pentaklů",
     "suit": "Pentacles", "keywords": ["spolehlivost", "vytrvalost", "rutina"],
     "meaningUpright": "Pomalé, ale jisté tempo, které dovede věci do konce.",
     "meaningReversed": "Stagnace nebo tvrdohlavé lpění na jednom postupu.",
     "imageName": "pentacles_12"},
    {"id": "minor_pentacles_queen", "number": 13, "name": "Queen of Pentacles", "nameCzech": "Královna pentaklů",
     "suit": "Pentacles", "keywords": ["péče", "praktičnost", "domov"],
     "meaningUpright": "Praktická péče o sebe i druhé a útulné zázemí.",
     "meaningReversed": "Zanedbáváš sebe na úkor práce nebo domácnosti.",
     "imageName": "pentacles_13"},
    {"id": "minor_pentacles_king", "number": 14, "name": "King of Pentacles", "nameCzech": "Král pentaklů",
     "suit": "Pentacles", "keywords": ["bohatství", "zodpovědnost", "úspěch"],
     "meaningUpright": "Materiální jistota a zodpovědné vedení.",
     "meaningReversed": "Posedlost výkonem nebo penězi na úkor vztahů.",
     "imageName": "pentacles_14"},
]
